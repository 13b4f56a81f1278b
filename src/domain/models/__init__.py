"""Domain models package."""

from .problem import Difficulty, ProblemMetadata, Site, SubmissionType
from .progress import ProgressLedger, rating_tier
from .sync import (
    FileWriteRequest,
    GitHubSettings,
    PushResult,
    PushStatus,
    SyncOutcome,
    SyncRequest,
)

__all__ = [
    "Difficulty",
    "FileWriteRequest",
    "GitHubSettings",
    "ProblemMetadata",
    "ProgressLedger",
    "PushResult",
    "PushStatus",
    "Site",
    "SubmissionType",
    "SyncOutcome",
    "SyncRequest",
    "rating_tier",
]
