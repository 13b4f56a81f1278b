"""Read-modify-write of the aggregate progress ledger."""

import json
from typing import TYPE_CHECKING

from loguru import logger

from domain.encoding import decode_transport, encode_transport
from domain.models import GitHubSettings, ProblemMetadata, ProgressLedger
from infrastructure.errors import GitHubError, LedgerWriteError
from infrastructure.interfaces import ContentsClientProtocol

if TYPE_CHECKING:
    from loguru import Logger

PROGRESS_PATH = "metadata/progress.json"


class ProgressLedgerUpdater:
    """Counts newly solved problems in metadata/progress.json."""

    def __init__(
        self,
        contents_client: ContentsClientProtocol,
        path: str = PROGRESS_PATH,
        log: "Logger | None" = None,
    ):
        self.contents_client = contents_client
        self.path = path
        self.log = log or logger.bind(component="progress")

    async def increment_progress(
        self,
        settings: GitHubSettings,
        meta: ProblemMetadata,
        was_newly_created: bool,
    ) -> None:
        """
        Add one solved problem to the ledger.

        Does nothing when the solution file already existed, so re-pushing a
        solution never counts twice. The write is a single conditional put
        without retries.

        Raises:
            LedgerWriteError: If the ledger could not be read, decoded or written
        """
        if not was_newly_created:
            self.log.info("Solution updated from existing. Skipping progress increment.")
            return

        ledger, sha = await self._load(settings)
        bucket = ledger.increment(meta)

        content = encode_transport(json.dumps(ledger.to_dict(), indent=2))
        try:
            await self.contents_client.put_file(
                settings,
                self.path,
                content,
                f"Update progress: {meta.problem_name}",
                sha=sha,
            )
        except GitHubError as e:
            raise LedgerWriteError(f"Failed to update {self.path}: {e}") from e

        self.log.info(
            f"Progress updated: {meta.site.value}/{bucket}, total solved {ledger.total_solved}"
        )

    async def _load(self, settings: GitHubSettings) -> tuple[ProgressLedger, str | None]:
        try:
            remote = await self.contents_client.get_file(settings, self.path)
        except GitHubError as e:
            raise LedgerWriteError(f"Failed to fetch {self.path}: {e}") from e

        if remote is None:
            self.log.warning("Progress file not found, creating new.")
            return ProgressLedger.empty(), None

        try:
            ledger = ProgressLedger.from_dict(json.loads(decode_transport(remote.content)))
        except (TypeError, ValueError) as e:
            raise LedgerWriteError(f"Cannot decode {self.path}: {e}") from e

        return ledger, remote.sha
