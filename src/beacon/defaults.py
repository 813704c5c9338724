"""Demo resources and tools registered on a fresh server."""

import os
import platform
import sys
import time
from datetime import datetime, timezone

from models import ResourceData, ResourceResponse, ToolData, ToolResponse

from .constants import SERVICE_NAME
from .registry import Registry

HELLO_URI = "file:///hello.txt"

_started_at = time.monotonic()


def read_hello() -> ResourceResponse:
    """Example greeting file."""
    return ResourceResponse.ok(
        ResourceData(
            content="Hello from the Beacon MCP server! This is an example resource.",
            mime_type="text/plain",
        )
    )


def explore(params=None) -> ToolResponse:
    """Example tool that reports what it was called with."""
    return ToolResponse.ok(
        ToolData(
            result={
                "message": "🔍 Exploring... found something interesting!",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "params": params,
            }
        )
    )


def server_info(params=None) -> ToolResponse:
    """Basic information about the running server process."""
    from . import __version__

    return ToolResponse.ok(
        ToolData(
            result={
                "server": SERVICE_NAME,
                "version": __version__,
                "uptime": round(time.monotonic() - _started_at, 3),
                "pid": os.getpid(),
                "python": sys.version.split()[0],
                "platform": platform.platform(),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )
    )


def register_defaults(registry: Registry) -> None:
    """Register the demo catalog on ``registry``."""
    registry.register_resource(
        "hello", HELLO_URI, {"description": "Example greeting file"}, read_hello
    )
    registry.register_tool(
        "tool-explore", {"description": "Example tool for exploring"}, explore
    )
    registry.register_tool(
        "tool-info", {"description": "Gets information about the server"}, server_info
    )
