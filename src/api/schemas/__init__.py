from api.schemas.sync import (
    GitHubSettingsSchema,
    ProblemMetadataSchema,
    PushResultResponse,
    SyncRequestSchema,
    SyncResponse,
)

__all__ = [
    "GitHubSettingsSchema",
    "ProblemMetadataSchema",
    "PushResultResponse",
    "SyncRequestSchema",
    "SyncResponse",
]
