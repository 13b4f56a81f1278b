from typing import TYPE_CHECKING

from loguru import logger

from application.orchestrator import SyncOrchestrator
from services import create_orchestrator

if TYPE_CHECKING:
    from litestar.datastructures import State


async def provide_orchestrator(state: "State") -> SyncOrchestrator:
    """Build a fresh orchestrator per request; nothing is shared between syncs."""
    logger.debug("Creating sync orchestrator for request")
    return create_orchestrator(state.get("config"))
