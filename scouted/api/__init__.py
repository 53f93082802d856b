from scouted.api.data import router as data_router
from scouted.api.health import router as health_router

__all__ = [
    "data_router",
    "health_router",
]
