"""Tool API endpoints."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pydantic import BaseModel

from beacon import BeaconServer, NotFoundError
from models import ToolCallRequest

from ..dependencies import get_server

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tools"])


class ToolInfo(BaseModel):
    """Tool information response model."""

    name: str
    description: str | None
    metadata: Dict[str, Any]


@router.post("/tool")
async def call_tool(
    request: Optional[ToolCallRequest] = Body(None),
    name: Optional[str] = Query(None, description="Tool name, if not in the body"),
    server: BeaconServer = Depends(get_server),
):
    """
    Call a registered tool.

    The tool name comes from the body's ``tool`` field, or the ``name`` query
    parameter.

    Returns:
        The tool envelope
    """
    tool_name = (request.tool if request else None) or name
    if not tool_name:
        raise HTTPException(status_code=400, detail="Tool name required")

    params = request.params if request else None
    logger.debug(f"📨 /tool name={tool_name} params={params}")
    try:
        response = await server.call_tool(tool_name, params)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Error running tool {tool_name}")
        raise HTTPException(status_code=500, detail=f"Error running tool: {e}")

    return response.to_dict()


@router.get("/api/tools", response_model=List[ToolInfo])
async def list_tools(server: BeaconServer = Depends(get_server)):
    """
    List the registered tools in registration order.

    Returns:
        List of available tools with name and description
    """
    return [
        ToolInfo(name=tool.name, description=tool.description, metadata=tool.metadata)
        for tool in server.registry.iter_tools()
    ]
