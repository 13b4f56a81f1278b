"""Infrastructure: HTTP transport, contents API client and capture adapters."""

from .errors import (
    AuthError,
    ConflictError,
    GitHubError,
    LedgerWriteError,
    RemoteError,
    SyncError,
    TransientError,
)
from .github_client import GitHubContentsClient, RemoteFile
from .http_client import AsyncHTTPClient, HTTPResponse, NetworkError

__all__ = [
    "AsyncHTTPClient",
    "AuthError",
    "ConflictError",
    "GitHubContentsClient",
    "GitHubError",
    "HTTPResponse",
    "LedgerWriteError",
    "NetworkError",
    "RemoteError",
    "RemoteFile",
    "SyncError",
    "TransientError",
]
