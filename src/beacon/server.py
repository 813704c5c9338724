"""Beacon server: the registry, dispatcher and query router wired together.

The transport layer (HTTP, CLI) only talks to ``BeaconServer``. Each server
owns its own registry, so several independent servers can live in one
process.
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from models import QueryResponse, ResourceResponse, ToolResponse

from .config import ServerConfig, load_config
from .defaults import register_defaults
from .dispatcher import Dispatcher
from .providers import GeneratorProvider, create_provider
from .query_router import QueryRouter
from .registry import Registry, ResourceHandler, ToolHandler

logger = logging.getLogger(__name__)


class BeaconServer:
    """Request/response core exposing resources, tools and free-text queries.

    Example:
        server = BeaconServer()
        server.register_tool("echo", {}, lambda params: {"result": params})
        await server.call_tool("echo", {"x": 1})
        await server.process_user_query("hello")
    """

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        registry: Optional[Registry] = None,
        provider: Optional[GeneratorProvider] = None,
    ):
        """Initialize the server.

        Args:
            config: Server configuration; defaults are used when omitted
            registry: Registry to serve from; a new empty one when omitted
            provider: Optional external generator for unmatched queries
        """
        self.config = config or ServerConfig()
        self.registry = registry if registry is not None else Registry()
        self.provider = provider
        self.dispatcher = Dispatcher(self.registry)
        self.router = QueryRouter(self.registry, provider=provider)

    def register_resource(
        self,
        name: str,
        uri: str,
        metadata: Optional[Dict[str, Any]] = None,
        handler: Optional[ResourceHandler] = None,
    ):
        """Register (or replace) a resource. See ``Registry.register_resource``."""
        return self.registry.register_resource(name, uri, metadata, handler)

    def register_tool(
        self,
        name: str,
        metadata: Optional[Dict[str, Any]] = None,
        handler: Optional[ToolHandler] = None,
    ):
        """Register (or replace) a tool. See ``Registry.register_tool``."""
        return self.registry.register_tool(name, metadata, handler)

    async def read_resource(self, uri: str) -> ResourceResponse:
        return await self.dispatcher.read_resource(uri)

    async def call_tool(
        self, name: str, params: Optional[Dict[str, Any]] = None
    ) -> ToolResponse:
        return await self.dispatcher.call_tool(name, params)

    async def process_user_query(
        self, query: str, context: Optional[Dict[str, Any]] = None
    ) -> QueryResponse:
        return await self.router.process_user_query(query, context)

    def list_resource_names(self) -> List[str]:
        return self.registry.list_resource_names()

    def list_tool_names(self) -> List[str]:
        return self.registry.list_tool_names()

    def get_config(self) -> Dict[str, Any]:
        """Return a copy of the configuration with the API key masked."""
        config = asdict(self.config)
        if config.get("llm") and config["llm"].get("api_key"):
            config["llm"]["api_key"] = "***"
        return config

    async def aclose(self) -> None:
        """Release the generator's HTTP client."""
        if self.provider is not None:
            await self.provider.aclose()


def create_server(
    config: Optional[ServerConfig] = None, with_defaults: bool = True
) -> BeaconServer:
    """Build a server from configuration.

    Args:
        config: Server configuration; loaded from the environment when omitted
        with_defaults: Register the demo resources and tools

    Returns:
        The configured server

    Raises:
        UnsupportedProviderError: If ``config.llm`` names an unknown provider
    """
    config = config or load_config()

    provider = None
    if config.llm is not None:
        provider = create_provider(config.llm)
        logger.info(
            f"🤖 LLM integrated: {config.llm.provider} ({provider.model})"
        )
    else:
        logger.info("📝 Using simulated replies (no LLM configured)")

    server = BeaconServer(config, provider=provider)
    if with_defaults:
        register_defaults(server.registry)
    return server
