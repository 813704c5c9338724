"""In-memory catalog of resources and tools.

Resources are keyed by name and addressed by URI; tools are keyed by name.
The two mappings are independent namespaces, so a resource and a tool may
share a name. Both keep registration order, which is the order used whenever
names are listed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)

# Handlers may be plain callables or coroutine functions.
ResourceHandler = Callable[[], Union[Any, Awaitable[Any]]]
ToolHandler = Callable[[Optional[Dict[str, Any]]], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class ResourceDescriptor:
    """A registered resource.

    Attributes:
        name: Unique resource name
        uri: URI the resource is read by (not required to be unique)
        metadata: Arbitrary descriptive attributes
        handler: Zero-argument callable producing the resource result
    """

    name: str
    uri: str
    handler: ResourceHandler
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def description(self) -> Optional[str]:
        return self.metadata.get("description")


@dataclass(frozen=True)
class ToolDescriptor:
    """A registered tool.

    Attributes:
        name: Unique tool name
        metadata: Arbitrary descriptive attributes
        handler: Callable taking an optional parameter mapping
    """

    name: str
    handler: ToolHandler
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def description(self) -> Optional[str]:
        return self.metadata.get("description")


class Registry:
    """Owns the name → descriptor mappings for resources and tools.

    The registry is meant to be populated during setup, before request
    traffic starts. It does no locking of its own.

    Example:
        registry = Registry()
        registry.register_resource("hello", "file:///hello.txt", {}, read_hello)
        registry.register_tool("echo", {"description": "Echo"}, echo)

        registry.find_resource_by_uri("file:///hello.txt")
        registry.list_tool_names()  # ["echo"]
    """

    def __init__(self):
        self._resources: Dict[str, ResourceDescriptor] = {}
        self._tools: Dict[str, ToolDescriptor] = {}

    def register_resource(
        self,
        name: str,
        uri: str,
        metadata: Optional[Dict[str, Any]],
        handler: ResourceHandler,
    ) -> ResourceDescriptor:
        """Insert or replace the resource registered under ``name``.

        Args:
            name: Unique resource name
            uri: URI the resource is read by
            metadata: Descriptive attributes, may be None
            handler: Zero-argument callable producing the resource result

        Returns:
            The stored descriptor

        Raises:
            ValueError: If name is empty or handler is not callable
        """
        if not name:
            raise ValueError("Resource name must not be empty")
        if not callable(handler):
            raise ValueError(f"Handler for resource {name!r} is not callable")

        descriptor = ResourceDescriptor(
            name=name, uri=uri, handler=handler, metadata=dict(metadata or {})
        )
        if name in self._resources:
            logger.info(f"Replacing resource: {name} -> {uri}")
        else:
            logger.info(f"Registered resource: {name} -> {uri}")
        self._resources[name] = descriptor
        return descriptor

    def register_tool(
        self,
        name: str,
        metadata: Optional[Dict[str, Any]],
        handler: ToolHandler,
    ) -> ToolDescriptor:
        """Insert or replace the tool registered under ``name``.

        Args:
            name: Unique tool name
            metadata: Descriptive attributes, may be None
            handler: Callable taking an optional parameter mapping

        Returns:
            The stored descriptor

        Raises:
            ValueError: If name is empty or handler is not callable
        """
        if not name:
            raise ValueError("Tool name must not be empty")
        if not callable(handler):
            raise ValueError(f"Handler for tool {name!r} is not callable")

        descriptor = ToolDescriptor(
            name=name, handler=handler, metadata=dict(metadata or {})
        )
        if name in self._tools:
            logger.info(f"Replacing tool: {name}")
        else:
            logger.info(f"Registered tool: {name}")
        self._tools[name] = descriptor
        return descriptor

    def unregister_resource(self, name: str) -> bool:
        """Remove a resource. Returns True if one was registered."""
        removed = self._resources.pop(name, None) is not None
        if removed:
            logger.info(f"Unregistered resource: {name}")
        return removed

    def unregister_tool(self, name: str) -> bool:
        """Remove a tool. Returns True if one was registered."""
        removed = self._tools.pop(name, None) is not None
        if removed:
            logger.info(f"Unregistered tool: {name}")
        return removed

    def find_resource_by_uri(self, uri: str) -> Optional[ResourceDescriptor]:
        """Return the first resource, in registration order, with this URI."""
        for descriptor in self._resources.values():
            if descriptor.uri == uri:
                return descriptor
        return None

    def find_tool_by_name(self, name: str) -> Optional[ToolDescriptor]:
        return self._tools.get(name)

    def list_resource_names(self) -> List[str]:
        return list(self._resources)

    def list_tool_names(self) -> List[str]:
        return list(self._tools)

    def iter_resources(self) -> Iterator[ResourceDescriptor]:
        return iter(list(self._resources.values()))

    def iter_tools(self) -> Iterator[ToolDescriptor]:
        return iter(list(self._tools.values()))

    def __len__(self) -> int:
        return len(self._resources) + len(self._tools)
