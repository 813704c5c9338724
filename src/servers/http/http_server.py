"""FastAPI application exposing a Beacon server over HTTP.

Endpoints: ``GET /resource``, ``POST /tool``, ``POST /query``, plus the
``/api/resources`` and ``/api/tools`` listings and the health checks.
"""

from contextlib import asynccontextmanager
from logging import getLogger
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beacon import BeaconServer, __version__, create_server
from beacon.constants import HTTP_ENDPOINTS
from servers.http.routes import (
    health_router,
    query_router,
    resources_router,
    tools_router,
)

logger = getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the startup banner and release the generator client on shutdown."""
    server: BeaconServer = app.state.beacon
    config = server.config
    logger.info(f"🚀 Beacon HTTP server starting on port {config.port}")
    logger.info(f"📁 Available resources: {', '.join(server.list_resource_names())}")
    logger.info(f"🛠️ Available tools: {', '.join(server.list_tool_names())}")
    logger.info(f"🌐 HTTP available at http://{config.host}:{config.port}")
    logger.info(f"📡 Endpoints: {', '.join(HTTP_ENDPOINTS)}")
    try:
        yield
    finally:
        await server.aclose()
        logger.info("Beacon server stopped")


def create_app(server: Optional[BeaconServer] = None) -> FastAPI:
    """Build the HTTP application.

    Args:
        server: Server to expose; built from the environment when omitted

    Returns:
        The FastAPI application
    """
    server = server or create_server()

    app = FastAPI(title="Beacon MCP Server", version=__version__, lifespan=lifespan)
    app.state.beacon = server

    if server.config.cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[server.config.cors_origin],
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )

    app.include_router(health_router)
    app.include_router(resources_router)
    app.include_router(tools_router)
    app.include_router(query_router)

    return app
