"""Server management commands for Beacon CLI."""

import sys
from typing import Optional

import typer
import uvicorn

from cli.common import build_config, build_server, logger
from servers.http import create_app

server = typer.Typer(name="server", help="Server management commands")


def run_server(app, host, port, log_level="info"):
    """Helper function to run the server."""
    try:
        uvicorn.run(app, host=host, port=port, log_level=log_level)
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        return sys.exit(1)


@server.command("start")
def start_server(
    host: Optional[str] = typer.Option(
        None, "--host", help="Host to bind the server to (default: BEACON_HOST or localhost)."
    ),
    port: Optional[int] = typer.Option(
        None, "--port", help="Port to bind the server to (default: BEACON_PORT or 3001)."
    ),
    provider: Optional[str] = typer.Option(
        None, "--provider", help="LLM provider for unmatched queries (openai, ollama)."
    ),
    model: Optional[str] = typer.Option(None, "--model", help="LLM model name."),
):
    """Launch the Beacon HTTP server."""
    config = build_config(host=host, port=port, provider=provider, model=model)
    app = create_app(build_server(config))

    try:
        logger.info(f"Starting Beacon server on http://{config.host}:{config.port}")
        logger.info("Press Ctrl+C to stop.")
        log_level = config.log_level.lower()
        if log_level == "warn":
            log_level = "warning"
        run_server(app, config.host, config.port, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("\nServer stopped by user.")
    finally:
        logger.info("✓ Server stopped.")
