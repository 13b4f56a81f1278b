"""Sequential multi-file commit against the contents API."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Awaitable, Callable

from loguru import logger

from domain.encoding import encode_transport
from domain.models import FileWriteRequest, GitHubSettings, PushResult, PushStatus
from infrastructure.errors import (
    RETRYABLE_ERRORS,
    ConflictError,
    GitHubError,
    SyncError,
)
from infrastructure.interfaces import ContentsClientProtocol

if TYPE_CHECKING:
    from loguru import Logger


class SyncState(str, Enum):
    IDLE = "idle"
    READING = "reading"
    WRITING = "writing"
    RETRYING = "retrying"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATES = (SyncState.DONE, SyncState.FAILED)


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded attempts with a fixed delay between them.

    One attempt is a read followed by a write; read and write failures share
    the same attempt counter.
    """

    max_attempts: int = 3
    delay_seconds: float = 1.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.delay_seconds < 0:
            raise ValueError(f"delay_seconds must not be negative, got {self.delay_seconds}")

    def should_retry(self, attempt: int, error: Exception) -> bool:
        return isinstance(error, RETRYABLE_ERRORS) and attempt < self.max_attempts

    @property
    def max_transitions(self) -> int:
        # READING, WRITING and DONE/RETRYING/FAILED per attempt
        return 3 * self.max_attempts


class FilePush:
    """State machine for pushing a single file."""

    def __init__(self, file: FileWriteRequest, policy: RetryPolicy):
        self.file = file
        self.policy = policy
        self.state = SyncState.IDLE
        self.attempt = 0
        self.transitions = 0
        self.sha: str | None = None
        self.error: GitHubError | None = None
        self.result: PushResult | None = None

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def _move(self, state: SyncState) -> None:
        self.transitions += 1
        if self.transitions > self.policy.max_transitions:
            raise RuntimeError(f"Push of {self.file.path} exceeded {self.policy.max_transitions} transitions")
        self.state = state

    def begin_attempt(self) -> None:
        if self.state not in (SyncState.IDLE, SyncState.RETRYING):
            raise RuntimeError(f"Cannot start an attempt from state {self.state.value}")
        self.attempt += 1
        self.sha = None
        self._move(SyncState.READING)

    def read_done(self, sha: str | None) -> None:
        self.sha = sha
        self._move(SyncState.WRITING)

    def write_done(self) -> None:
        status = PushStatus.UPDATED if self.sha else PushStatus.CREATED
        self.result = PushResult(path=self.file.path, status=status)
        self._move(SyncState.DONE)

    def fail(self, error: GitHubError) -> None:
        self.error = error
        if self.policy.should_retry(self.attempt, error):
            self._move(SyncState.RETRYING)
        else:
            self._move(SyncState.FAILED)


class SyncClient:
    """Pushes files one at a time with read-then-conditional-write per file."""

    def __init__(
        self,
        contents_client: ContentsClientProtocol,
        retry_policy: RetryPolicy | None = None,
        log: "Logger | None" = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize sync client.

        Args:
            contents_client: Remote content store client
            retry_policy: Attempt bound and delay for conflicts and transient errors
            log: Logger to use (defaults to a bound loguru logger)
            sleep: Coroutine used for the delay between attempts
        """
        self.contents_client = contents_client
        self.retry_policy = retry_policy or RetryPolicy()
        self.log = log or logger.bind(component="sync")
        self.sleep = sleep

    async def push(
        self,
        settings: GitHubSettings,
        files: list[FileWriteRequest],
        commit_message: str,
    ) -> list[PushResult]:
        """
        Push files in order, stopping at the first fatal error.

        Not atomic: files before the failing one stay written.

        Raises:
            SyncError: Wrapping the fatal GitHubError and the partial results
        """
        results: list[PushResult] = []

        for file in files:
            try:
                result = await self._push_file(settings, file, commit_message)
            except GitHubError as e:
                self.log.error(f"Push failed for {file.path}: {e}")
                raise SyncError(e, file.path, results) from e

            self.log.info(f"{result.status.value}: {file.path}")
            results.append(result)

        return results

    async def _push_file(
        self, settings: GitHubSettings, file: FileWriteRequest, message: str
    ) -> PushResult:
        push = FilePush(file, self.retry_policy)
        content = file.content if file.encoding == "base64" else encode_transport(file.content)

        while not push.finished:
            if push.state is SyncState.RETRYING:
                await self.sleep(self.retry_policy.delay_seconds)
                push.begin_attempt()
            elif push.state is SyncState.IDLE:
                push.begin_attempt()
            elif push.state is SyncState.READING:
                try:
                    remote = await self.contents_client.get_file(settings, file.path)
                except GitHubError as e:
                    self._on_failure(push, e)
                else:
                    push.read_done(remote.sha if remote else None)
            elif push.state is SyncState.WRITING:
                try:
                    await self.contents_client.put_file(
                        settings, file.path, content, message, sha=push.sha
                    )
                except GitHubError as e:
                    self._on_failure(push, e)
                else:
                    push.write_done()

        if push.error is not None and push.state is SyncState.FAILED:
            raise push.error
        if push.result is None:
            raise RuntimeError(
                f"Push of {file.path} ended in state {push.state.value} without a result"
            )
        return push.result

    def _on_failure(self, push: FilePush, error: GitHubError) -> None:
        push.fail(error)
        if push.state is not SyncState.RETRYING:
            return

        if isinstance(error, ConflictError):
            self.log.warning(f"409 Conflict on {push.file.path} - Retrying...")
        else:
            self.log.warning(
                f"Attempt {push.attempt}/{self.retry_policy.max_attempts} for {push.file.path} failed: {error}"
            )
