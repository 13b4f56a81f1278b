"""Value objects exchanged with the remote content store."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from domain.sanitize import sanitize_path

from .problem import ProblemMetadata

FileEncoding = Literal["utf-8", "base64"]


@dataclass(frozen=True)
class GitHubSettings:
    """Credentials and target repository for a sync."""

    token: str = field(repr=False)
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class FileWriteRequest:
    """One file to commit. Text content is encoded on write; base64 content is sent as is."""

    path: str
    content: str
    encoding: FileEncoding = "utf-8"

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", sanitize_path(self.path))


class PushStatus(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class PushResult:
    path: str
    status: PushStatus

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "status": self.status.value}


@dataclass(frozen=True)
class SyncRequest:
    """Inbound request to archive one solution."""

    metadata: ProblemMetadata
    settings: GitHubSettings
    include_screenshot: bool = False
    screenshot_source: Any = None


@dataclass
class SyncOutcome:
    """Consolidated result of a sync. On failure ``result`` holds the files already written."""

    success: bool
    result: list[PushResult] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "success": self.success,
            "result": [r.to_dict() for r in self.result],
        }
        if not self.success:
            data["error"] = self.error
        return data
