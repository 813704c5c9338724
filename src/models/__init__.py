"""Centralized Pydantic models for Beacon."""

# Enums
from models.enums import ContentType, MessageRole, ProviderName

# Envelope models
from models.envelope import (
    ContentItem,
    Envelope,
    QueryData,
    QueryResponse,
    ResourceData,
    ResourceResponse,
    ToolData,
    ToolResponse,
    now_ms,
)

# Request models
from models.requests import QueryRequest, ToolCallRequest

__all__ = [
    # Enums
    "ContentType",
    "MessageRole",
    "ProviderName",
    # Envelope models
    "ContentItem",
    "Envelope",
    "QueryData",
    "QueryResponse",
    "ResourceData",
    "ResourceResponse",
    "ToolData",
    "ToolResponse",
    "now_ms",
    # Request models
    "QueryRequest",
    "ToolCallRequest",
]
