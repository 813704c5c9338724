"""Resource API endpoints."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from beacon import BeaconServer, NotFoundError

from ..dependencies import get_server

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resources"])


class ResourceInfo(BaseModel):
    """Resource information response model."""

    name: str
    uri: str
    description: str | None
    metadata: Dict[str, Any]


@router.get("/resource")
async def read_resource(
    uri: Optional[str] = Query(None, description="URI of the resource to read"),
    server: BeaconServer = Depends(get_server),
):
    """
    Read a registered resource by URI.

    Returns:
        The resource envelope
    """
    if not uri:
        raise HTTPException(status_code=400, detail="URI required")

    logger.debug(f"📨 /resource uri={uri}")
    try:
        response = await server.read_resource(uri)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Error reading resource {uri}")
        raise HTTPException(status_code=500, detail=f"Error reading resource: {e}")

    return response.to_dict()


@router.get("/api/resources", response_model=List[ResourceInfo])
async def list_resources(server: BeaconServer = Depends(get_server)):
    """
    List the registered resources in registration order.

    Returns:
        List of available resources with name, URI and description
    """
    return [
        ResourceInfo(
            name=resource.name,
            uri=resource.uri,
            description=resource.description,
            metadata=resource.metadata,
        )
        for resource in server.registry.iter_resources()
    ]
