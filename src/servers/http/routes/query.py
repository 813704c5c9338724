"""Free-text query endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from beacon import BeaconServer
from models import QueryRequest

from ..dependencies import get_server

logger = logging.getLogger(__name__)

router = APIRouter(tags=["query"])


@router.post("/query")
async def process_query(
    request: Optional[QueryRequest] = Body(None),
    query: Optional[str] = Query(None, description="Query text, if not in the body"),
    server: BeaconServer = Depends(get_server),
):
    """
    Route a free-text query to a canned or generated reply.

    A malformed calculation still answers 200, with ``success: false`` in the
    envelope.
    """
    text = (request.query if request else None) or query
    if not text:
        raise HTTPException(status_code=400, detail="Query required")

    context = request.context if request else None
    logger.debug(f"📨 /query {text!r}")
    try:
        response = await server.process_user_query(text, context)
    except Exception as e:
        logger.exception("Error processing query")
        raise HTTPException(status_code=500, detail=f"Error processing query: {e}")

    return response.to_dict()
