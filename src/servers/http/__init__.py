"""HTTP transport for Beacon."""

from .http_server import create_app

__all__ = ["create_app"]
