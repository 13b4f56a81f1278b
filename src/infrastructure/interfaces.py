"""Protocol interfaces for infrastructure collaborators."""

from typing import Any, Protocol

from domain.models import GitHubSettings


class ContentsClientProtocol(Protocol):
    """Protocol for a path addressed content store with version tokens."""

    async def get_file(self, settings: GitHubSettings, path: str) -> Any:
        """Return the stored object (with ``sha`` and ``content``) or None."""
        ...

    async def put_file(
        self,
        settings: GitHubSettings,
        path: str,
        content: str,
        message: str,
        sha: str | None = None,
    ) -> dict[str, Any]:
        """Write base64 content, conditional on sha when given."""
        ...


class ScreenshotCaptureProtocol(Protocol):
    """Protocol for producing an accepted-verdict screenshot."""

    async def capture(self, source: Any) -> str:
        """Return the PNG image as base64."""
        ...
