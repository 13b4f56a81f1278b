from api.routes.health import health
from api.routes.sync import SyncController

__all__ = ["SyncController", "health"]
