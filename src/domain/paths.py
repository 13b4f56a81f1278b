"""Mapping of problem metadata to stable repository paths."""

from dataclasses import dataclass
from datetime import datetime, timezone

from loguru import logger

from domain.exceptions import PathResolutionError
from domain.models.problem import ProblemMetadata, SubmissionType
from domain.models.progress import progress_bucket
from domain.sanitize import sanitize_name, sanitize_path

UNKNOWN_CONTEST = "Unknown_Contest"
DEFAULT_EXTENSION = "txt"
META_FILENAME = "meta.json"

# Matched as substrings of the lower-cased language name, first hit wins.
# Order matters: "javascript" resolves to "java" and "c#" to "c".
LANGUAGE_EXTENSIONS: list[tuple[str, str]] = [
    ("cpp", "cpp"),
    ("c++", "cpp"),
    ("gnu c++17", "cpp"),
    ("gnu c++14", "cpp"),
    ("gnu c++20", "cpp"),
    ("java", "java"),
    ("openjdk 17", "java"),
    ("java 8", "java"),
    ("python", "py"),
    ("python3", "py"),
    ("pypy 3", "py"),
    ("pypy3", "py"),
    ("javascript", "js"),
    ("typescript", "ts"),
    ("c", "c"),
    ("gnu c11", "c"),
    ("c#", "cs"),
    ("mono c#", "cs"),
    ("ruby", "rb"),
    ("swift", "swift"),
    ("go", "go"),
    ("kotlin", "kt"),
    ("rust", "rs"),
    ("php", "php"),
    ("scala", "scala"),
]


@dataclass(frozen=True)
class ResolvedPaths:
    """Where a solution and its metadata live in the archive repository."""

    solution_path: str
    meta_path: str

    @property
    def solution_dir(self) -> str:
        return self.solution_path.rpartition("/")[0]


def file_extension(language: str | None) -> str:
    """Guess a source file extension from a judge's language name."""
    lang = (language or "").lower()
    for key, extension in LANGUAGE_EXTENSIONS:
        if key in lang:
            return extension
    return DEFAULT_EXTENSION


def submission_date(timestamp: str) -> str:
    """Calendar date (UTC) of an ISO-8601 timestamp as YYYY-MM-DD."""
    try:
        moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as e:
        raise PathResolutionError(f"Invalid submission timestamp: {timestamp!r}") from e

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).date().isoformat()


def resolve_paths(meta: ProblemMetadata) -> ResolvedPaths:
    """
    Resolve solution and meta.json paths for a problem.

    Contest submissions share one meta.json per contest folder:
        contests/{site}/{date}_{contest}/{problem}.{ext}
    Practice submissions get a folder per problem:
        practice/{site}/{bucket}/{problem}/solution.{ext}
    """
    site = meta.site.value
    problem = sanitize_name(meta.problem_name)
    ext = file_extension(meta.language)

    if meta.type is SubmissionType.CONTEST:
        contest = sanitize_name(meta.contest_name, fallback=UNKNOWN_CONTEST)
        folder = f"contests/{site}/{submission_date(meta.timestamp)}_{contest}"
        paths = ResolvedPaths(
            solution_path=sanitize_path(f"{folder}/{problem}.{ext}"),
            meta_path=sanitize_path(f"{folder}/{META_FILENAME}"),
        )
    else:
        folder = f"practice/{site}/{progress_bucket(meta)}/{problem}"
        paths = ResolvedPaths(
            solution_path=sanitize_path(f"{folder}/solution.{ext}"),
            meta_path=sanitize_path(f"{folder}/{META_FILENAME}"),
        )

    logger.debug(f"Resolved paths: {paths.solution_path}, {paths.meta_path}")
    return paths
