"""Health check API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from beacon import BeaconServer
from beacon.constants import SERVICE_NAME
from models import now_ms

from ..dependencies import get_server

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    llm_provider: Optional[str] = None


@router.get("/")
async def root():
    """Liveness message for quick manual checks."""
    return {"message": "Beacon MCP server running", "timestamp": now_ms(), "test": True}


@router.get("/health", response_model=HealthResponse)
async def health_check(server: BeaconServer = Depends(get_server)):
    """
    Health check endpoint for container orchestration.

    Returns:
        HealthResponse with service status
    """
    llm = server.config.llm
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        llm_provider=llm.provider if llm else None,
    )
