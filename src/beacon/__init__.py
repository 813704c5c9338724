"""Beacon - a small MCP-style server for resources, tools and free-text queries."""

__version__ = "0.1.0"

from .dispatcher import Dispatcher
from .errors import (
    BeaconError,
    ExpressionError,
    GenerationError,
    NotFoundError,
    UnsupportedProviderError,
)
from .query_router import QueryRouter, QueryRule
from .registry import Registry, ResourceDescriptor, ToolDescriptor
from .server import BeaconServer, create_server

__all__ = [
    "BeaconServer",
    "BeaconError",
    "Dispatcher",
    "ExpressionError",
    "GenerationError",
    "NotFoundError",
    "QueryRouter",
    "QueryRule",
    "Registry",
    "ResourceDescriptor",
    "ToolDescriptor",
    "UnsupportedProviderError",
    "create_server",
    "__version__",
]
