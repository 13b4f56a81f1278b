"""Async orchestrator for archiving one solution."""

import json
from typing import TYPE_CHECKING

from loguru import logger

from domain.models import (
    FileWriteRequest,
    ProblemMetadata,
    PushStatus,
    SubmissionType,
    SyncOutcome,
    SyncRequest,
)
from domain.paths import ResolvedPaths, resolve_paths
from infrastructure.errors import LedgerWriteError, SyncError
from infrastructure.interfaces import ScreenshotCaptureProtocol
from services.progress import ProgressLedgerUpdater
from services.sync import SyncClient

if TYPE_CHECKING:
    from loguru import Logger

SCREENSHOT_FILENAME = "accepted.png"


def build_commit_message(meta: ProblemMetadata) -> str:
    """
    Commit message for a solution push.

    Examples:
        "[codeforces 1350] A. Watermelon (12m) - Practice"
        "[leetcode Contest] Two Sum - Contest"
    """
    site = meta.site.value
    if meta.type is SubmissionType.CONTEST:
        prefix = f"[{site} Contest]"
    else:
        prefix = f"[{site} {meta.classification}]".replace(" ]", "]")

    parts = [prefix, meta.problem_name]
    if meta.solve_time_minutes:
        parts.append(f"({meta.solve_time_minutes}m)")

    label = "Practice" if meta.type is SubmissionType.PRACTICE else "Contest"
    return f"{' '.join(parts)} - {label}"


class SyncOrchestrator:
    """Resolves paths, pushes the files and updates the progress ledger."""

    def __init__(
        self,
        sync_client: SyncClient,
        progress_updater: ProgressLedgerUpdater,
        screenshot_capture: ScreenshotCaptureProtocol | None = None,
        log: "Logger | None" = None,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            sync_client: Pushes the solution files
            progress_updater: Updates metadata/progress.json
            screenshot_capture: Optional screenshot adapter
            log: Logger to use
        """
        self.sync_client = sync_client
        self.progress_updater = progress_updater
        self.screenshot_capture = screenshot_capture
        self.log = log or logger.bind(component="orchestrator")

    async def sync(self, request: SyncRequest) -> SyncOutcome:
        """Archive a solution and report success or the first fatal error."""
        meta = request.metadata
        self.log.info(f"Received push request: {meta.site.value} {meta.problem_name!r}")

        try:
            paths = resolve_paths(meta)
            files = await self._build_files(request, paths)
            message = build_commit_message(meta)

            results = await self.sync_client.push(request.settings, files, message)
            self.log.info(f"Push success: {len(results)} file(s)")

        except SyncError as e:
            return SyncOutcome(success=False, result=e.partial_results, error=str(e))
        except Exception as e:
            self.log.exception(f"Push failed: {e}")
            return SyncOutcome(success=False, error=str(e) or "Unknown sync error")

        was_created = any(
            r.path == paths.solution_path and r.status is PushStatus.CREATED for r in results
        )
        try:
            await self.progress_updater.increment_progress(request.settings, meta, was_created)
        except LedgerWriteError as e:
            self.log.warning(f"Progress update failed: {e}")

        return SyncOutcome(success=True, result=results)

    async def _build_files(
        self, request: SyncRequest, paths: ResolvedPaths
    ) -> list[FileWriteRequest]:
        meta = request.metadata
        files = [
            FileWriteRequest(path=paths.solution_path, content=meta.code),
            FileWriteRequest(path=paths.meta_path, content=json.dumps(meta.to_dict(), indent=2, ensure_ascii=False)),
        ]

        if request.include_screenshot and meta.is_accepted:
            screenshot = await self._capture_screenshot(request)
            if screenshot:
                files.append(
                    FileWriteRequest(
                        path=f"{paths.solution_dir}/{SCREENSHOT_FILENAME}",
                        content=screenshot,
                        encoding="base64",
                    )
                )

        return files

    async def _capture_screenshot(self, request: SyncRequest) -> str | None:
        if not self.screenshot_capture or request.screenshot_source is None:
            self.log.debug("No screenshot source available, skipping screenshot")
            return None

        try:
            return await self.screenshot_capture.capture(request.screenshot_source)
        except Exception as e:
            self.log.warning(f"Screenshot capture failed: {e}")
            return None
