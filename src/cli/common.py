"""Shared utilities and helpers for the Beacon CLI."""

import asyncio
import logging
from dataclasses import replace
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console

from beacon import BeaconServer, UnsupportedProviderError, create_server
from beacon.config import ServerConfig, load_config
from beacon.providers import LLMConfig

# Shared console and logger
console = Console(record=True)
logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_config(
    host: Optional[str] = None,
    port: Optional[int] = None,
    provider: Optional[str] = None,
    model: Optional[str] = None,
) -> ServerConfig:
    """Load the environment configuration and apply command-line overrides."""
    try:
        config = load_config()
    except ValueError as e:
        logger.error(f"❌ Invalid configuration: {e}")
        raise typer.Exit(1)

    if host:
        config = replace(config, host=host)
    if port:
        config = replace(config, port=port)
    if provider:
        llm = config.llm if config.llm and config.llm.provider == provider else None
        config = config.with_llm(llm or LLMConfig(provider=provider))
    if model and config.llm is not None:
        config = config.with_llm(replace(config.llm, model=model))
    return config


def build_server(config: ServerConfig, with_defaults: bool = True) -> BeaconServer:
    """Create a server, exiting cleanly on an unsupported provider."""
    try:
        return create_server(config, with_defaults=with_defaults)
    except UnsupportedProviderError as e:
        logger.error(f"❌ {e}")
        raise typer.Exit(1)


def run_with_server(
    server: BeaconServer, action: Callable[[BeaconServer], Awaitable[T]]
) -> T:
    """Run an async action against ``server`` and release it afterwards."""

    async def _run():
        try:
            return await action(server)
        finally:
            await server.aclose()

    return asyncio.run(_run())
