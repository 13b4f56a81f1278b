"""Shared fixtures: an in-memory contents store standing in for the GitHub API."""

import hashlib
from typing import Any

import pytest

from domain.encoding import decode_transport, encode_transport
from domain.models import GitHubSettings, ProblemMetadata
from infrastructure.errors import ConflictError
from infrastructure.github_client import RemoteFile


class FakeContentsStore:
    """Behaves like the contents API: sha per object, conditional writes."""

    def __init__(self):
        self.files: dict[str, tuple[str, str]] = {}
        self.get_calls: list[str] = []
        self.put_calls: list[dict[str, Any]] = []
        # Exceptions (or None for "behave normally") consumed one per call
        self.get_errors: list[Exception | None] = []
        self.put_errors: list[Exception | None] = []
        self._version = 0

    def seed(self, path: str, text: str) -> str:
        self._version += 1
        sha = hashlib.sha1(f"{path}:{self._version}".encode()).hexdigest()
        self.files[path] = (sha, encode_transport(text))
        return sha

    def text(self, path: str) -> str:
        return decode_transport(self.files[path][1])

    async def get_file(self, settings: GitHubSettings, path: str) -> RemoteFile | None:
        self.get_calls.append(path)
        if self.get_errors:
            error = self.get_errors.pop(0)
            if error is not None:
                raise error

        if path not in self.files:
            return None
        sha, content = self.files[path]
        return RemoteFile(path=path, sha=sha, content=content)

    async def put_file(
        self,
        settings: GitHubSettings,
        path: str,
        content: str,
        message: str,
        sha: str | None = None,
    ) -> dict[str, Any]:
        self.put_calls.append({"path": path, "content": content, "message": message, "sha": sha})
        if self.put_errors:
            error = self.put_errors.pop(0)
            if error is not None:
                raise error

        current = self.files.get(path)
        if (current and current[0] != sha) or (not current and sha):
            raise ConflictError(f"{path} does not match {sha}", 409)

        self._version += 1
        new_sha = hashlib.sha1(f"{path}:{self._version}".encode()).hexdigest()
        self.files[path] = (new_sha, content)
        return {"content": {"path": path, "sha": new_sha}}


@pytest.fixture
def store():
    return FakeContentsStore()


@pytest.fixture
def settings():
    return GitHubSettings(token="ghp_secret", owner="alice", repo="dsa-archive")


@pytest.fixture
def leetcode_meta():
    return ProblemMetadata.from_dict(
        {
            "site": "leetcode",
            "type": "practice",
            "problemName": "Two Sum",
            "problemId": "1",
            "url": "https://leetcode.com/problems/two-sum/",
            "difficulty": "Easy",
            "language": "cpp",
            "timestamp": "2024-03-01T10:00:00Z",
            "code": "class Solution {};",
            "solveTimeMinutes": 12,
            "isAccepted": True,
        }
    )


@pytest.fixture
def codeforces_contest_meta():
    return ProblemMetadata.from_dict(
        {
            "site": "codeforces",
            "type": "contest",
            "problemName": "A. Watermelon",
            "url": "https://codeforces.com/contest/123/problem/A",
            "rating": 1350,
            "language": "GNU C++17",
            "timestamp": "2024-03-01T10:00:00Z",
            "contestName": "Round #123",
            "code": "int main() {}",
        }
    )
