"""Request bodies accepted by the HTTP transport."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ToolCallRequest(BaseModel):
    """Body of ``POST /tool``."""

    tool: Optional[str] = Field(None, description="Name of the tool to call")
    params: Optional[Dict[str, Any]] = Field(
        None, description="Parameters passed to the tool handler"
    )


class QueryRequest(BaseModel):
    """Body of ``POST /query``."""

    query: Optional[str] = Field(None, description="Free-text user input")
    context: Optional[Dict[str, Any]] = Field(
        None, description="Optional caller context"
    )
