"""Client for the GitHub repository contents API."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from loguru import logger

from domain.models import GitHubSettings
from infrastructure.errors import (
    AuthError,
    ConflictError,
    GitHubError,
    RemoteError,
    TransientError,
)
from infrastructure.http_client import AsyncHTTPClient, HTTPResponse, NetworkError

GITHUB_API = "https://api.github.com"


@dataclass(frozen=True)
class RemoteFile:
    """An object currently stored at a path, identified by its version token."""

    path: str
    sha: str
    content: str = ""


class GitHubContentsClient:
    """Get and conditional put of single files via /repos/{owner}/{repo}/contents.

    All writes go to the repository default branch.
    """

    def __init__(
        self,
        http_client: AsyncHTTPClient | None = None,
        api_url: str = GITHUB_API,
    ):
        """
        Initialize contents client.

        Args:
            http_client: Async HTTP client
            api_url: Base URL of the REST API
        """
        self.http_client = http_client or AsyncHTTPClient()
        self.api_url = api_url.rstrip("/")

    def build_url(self, settings: GitHubSettings, path: str) -> str:
        return f"{self.api_url}/repos/{settings.owner}/{settings.repo}/contents/{quote(path)}"

    @staticmethod
    def _headers(settings: GitHubSettings) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {settings.token}",
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
        }

    async def get_file(self, settings: GitHubSettings, path: str) -> RemoteFile | None:
        """
        Fetch the object at path.

        Returns:
            RemoteFile with its sha, or None if nothing is stored there

        Raises:
            AuthError: Credentials rejected
            TransientError: Network failure or 5xx
            RemoteError: Any other error response
        """
        response = await self._send("GET", settings, path)

        if response.status_code == 404:
            logger.debug(f"No remote object at {path}")
            return None
        if not response.ok:
            raise self._error_for(response)

        data = response.json()
        if not isinstance(data, dict) or "sha" not in data:
            raise RemoteError(f"Unexpected contents response for {path}", response.status_code)

        return RemoteFile(path=path, sha=data["sha"], content=data.get("content") or "")

    async def put_file(
        self,
        settings: GitHubSettings,
        path: str,
        content: str,
        message: str,
        sha: str | None = None,
    ) -> dict[str, Any]:
        """
        Create or replace the object at path.

        Args:
            content: Base64 encoded file content
            sha: Version token the write is conditional on (None to create)

        Raises:
            ConflictError: sha no longer matches the stored object
        """
        body: dict[str, Any] = {"message": message, "content": content}
        if sha:
            body["sha"] = sha

        response = await self._send("PUT", settings, path, body)
        if not response.ok:
            raise self._error_for(response)

        return response.json() or {}

    async def _send(
        self,
        method: str,
        settings: GitHubSettings,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> HTTPResponse:
        url = self.build_url(settings, path)

        try:
            return await self.http_client.request(
                method, url, headers=self._headers(settings), json_body=body
            )
        except NetworkError as e:
            raise TransientError(str(e)) from e

    @staticmethod
    def _error_for(response: HTTPResponse) -> GitHubError:
        data = response.json()
        message = data.get("message") if isinstance(data, dict) else None
        message = message or response.text or "Unknown error"
        status = response.status_code

        if status in (401, 403):
            return AuthError(
                f"GitHub Authorization Failed. Check Token/Scopes. ({message})", status
            )
        if status == 409:
            return ConflictError(message, status)
        if status >= 500:
            return TransientError(message, status)
        return RemoteError(message, status)
