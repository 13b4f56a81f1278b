"""API routes for archiving solutions."""

from litestar import Controller, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.sync import PushResultResponse, SyncRequestSchema, SyncResponse
from application.orchestrator import SyncOrchestrator


class SyncController(Controller):
    """Controller for the push-to-repository endpoint."""

    path = "/sync"

    @post("/", status_code=HTTP_200_OK)
    async def sync(self, data: SyncRequestSchema, orchestrator: SyncOrchestrator) -> SyncResponse:
        """
        Archive a solution into the configured repository.

        Always answers 200; a failed sync is reported with ``success: false``
        and the error message.
        """
        logger.debug(
            f"API request for sync: site={data.metadata.site.value}, "
            f"repo={data.settings.owner}/{data.settings.repo}"
        )

        outcome = await orchestrator.sync(data.to_domain())

        return SyncResponse(
            success=outcome.success,
            result=[
                PushResultResponse(path=r.path, status=r.status.value) for r in outcome.result
            ],
            error=outcome.error,
        )
