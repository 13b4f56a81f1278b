"""Errors raised while talking to the remote content store."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.models import PushResult


class GitHubError(Exception):
    """Base error for contents API failures."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"GitHub Error {self.status_code}: {self.message}"


class AuthError(GitHubError):
    """Credentials rejected (401/403). Never retried."""

    pass


class ConflictError(GitHubError):
    """Remote object changed between read and write (409)."""

    pass


class TransientError(GitHubError):
    """Network failure or server side (5xx) error."""

    pass


class RemoteError(GitHubError):
    """Any other non-success response."""

    pass


RETRYABLE_ERRORS = (ConflictError, TransientError)


class SyncError(Exception):
    """A file push failed fatally; earlier files in the batch may already be written."""

    def __init__(self, cause: GitHubError, path: str, partial_results: list["PushResult"]):
        self.cause = cause
        self.path = path
        self.partial_results = list(partial_results)
        super().__init__(str(cause))


class LedgerWriteError(Exception):
    """Progress ledger could not be read or written back."""

    pass
