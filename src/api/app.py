"""Litestar application factory."""

import sys
from typing import Any

from litestar import Litestar
from litestar.datastructures import State
from litestar.di import Provide
from loguru import logger

from api.dependencies import provide_orchestrator
from api.routes import SyncController, health
from config import AppConfig, load_config


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def create_app(
    config: AppConfig | None = None,
    dependencies: dict[str, Any] | None = None,
) -> Litestar:
    """
    Create the API application.

    Args:
        config: Runtime configuration (loaded from the environment when omitted)
        dependencies: Overrides for the default dependency providers
    """
    config = config or load_config()
    configure_logging(config["log_level"])

    providers: dict[str, Any] = {"orchestrator": Provide(provide_orchestrator)}
    providers.update(dependencies or {})

    return Litestar(
        route_handlers=[SyncController, health],
        dependencies=providers,
        state=State({"config": config}),
    )
