"""FastAPI routers for the Beacon HTTP server."""

from .health import router as health_router
from .query import router as query_router
from .resources import router as resources_router
from .tools import router as tools_router

__all__ = [
    "health_router",
    "query_router",
    "resources_router",
    "tools_router",
]
