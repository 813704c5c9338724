"""Dispatch of resource reads and tool calls to registered handlers."""

import inspect
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from models import Envelope, ResourceData, ResourceResponse, ToolData, ToolResponse

from .errors import NotFoundError
from .registry import Registry

logger = logging.getLogger(__name__)


async def _invoke(handler, *args) -> Any:
    """Call a handler, awaiting the result when it is awaitable."""
    result = handler(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def _as_resource_response(value: Any) -> ResourceResponse:
    """Normalise a resource handler's return value into an envelope."""
    if isinstance(value, ResourceResponse):
        return value
    if isinstance(value, Envelope):
        return ResourceResponse.model_validate(value.model_dump(by_alias=True))
    if isinstance(value, ResourceData):
        return ResourceResponse.ok(value)
    if isinstance(value, Mapping):
        if "success" in value:
            return ResourceResponse.model_validate(dict(value))
        return ResourceResponse.ok(ResourceData.model_validate(dict(value)))
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return ResourceResponse.ok(ResourceData(content=value, mime_type="text/plain"))
    raise TypeError(
        f"Resource handler returned unsupported type {type(value).__name__}"
    )


def _as_tool_response(value: Any) -> ToolResponse:
    """Normalise a tool handler's return value into an envelope."""
    if isinstance(value, ToolResponse):
        return value
    if isinstance(value, Envelope):
        return ToolResponse.model_validate(value.model_dump(by_alias=True))
    if isinstance(value, ToolData):
        return ToolResponse.ok(value)
    if isinstance(value, Mapping):
        if "success" in value:
            return ToolResponse.model_validate(dict(value))
        if "result" in value:
            return ToolResponse.ok(ToolData.model_validate(dict(value)))
    if isinstance(value, BaseModel):
        value = value.model_dump()
    return ToolResponse.ok(ToolData(result=value))


class Dispatcher:
    """Finds descriptors in a registry and invokes their handlers.

    Lookup misses raise ``NotFoundError``. Anything a handler raises is
    logged and re-raised unchanged; deciding the final shape is up to the
    caller.
    """

    def __init__(self, registry: Registry):
        self.registry = registry

    async def read_resource(self, uri: str) -> ResourceResponse:
        """Read the resource registered at ``uri``.

        Args:
            uri: Resource URI

        Returns:
            The handler's result as a resource envelope

        Raises:
            NotFoundError: If no resource has this URI
        """
        descriptor = self.registry.find_resource_by_uri(uri)
        if descriptor is None:
            raise NotFoundError("resource", uri)

        logger.debug(f"Reading resource {descriptor.name} ({uri})")
        try:
            value = await _invoke(descriptor.handler)
        except Exception as e:
            logger.error(f"Error reading resource {descriptor.name}: {e}")
            raise
        return _as_resource_response(value)

    async def call_tool(
        self, name: str, params: Optional[Dict[str, Any]] = None
    ) -> ToolResponse:
        """Call the tool registered as ``name``.

        Args:
            name: Tool name
            params: Optional parameter mapping, passed through as-is

        Returns:
            The handler's result as a tool envelope

        Raises:
            NotFoundError: If no tool has this name
        """
        descriptor = self.registry.find_tool_by_name(name)
        if descriptor is None:
            raise NotFoundError("tool", name)

        logger.debug(f"Calling tool {name} with params={params}")
        try:
            value = await _invoke(descriptor.handler, params)
        except Exception as e:
            logger.error(f"Error running tool {name}: {e}")
            raise
        return _as_tool_response(value)
