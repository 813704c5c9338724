"""Beacon CLI - Modular command-line interface."""

from typing import Optional

import typer
from dotenv import load_dotenv

from beacon.logging_config import setup_logging
from cli import client
from cli.server import server
from cli.utils import app as utils_app

# Create the main app
app = typer.Typer(
    name="beacon",
    help="📡 Beacon - serve MCP resources, tools and queries over HTTP",
    add_completion=False,
)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: LOG_LEVEL or INFO)."
    ),
):
    """Load environment variables and setup logging."""
    load_dotenv()
    setup_logging(level=log_level)


# Add command groups
app.add_typer(server, name="server")

# Add single commands as subcommands
app.command("query", help="Run one query through a local server")(client.query)
app.command("read", help="Read a resource from a local server")(client.read)
app.command("call", help="Call a tool on a local server")(client.call)
app.command("list", help="List registered resources and tools")(
    utils_app.registered_commands[0].callback
)
app.command("version", help="Show Beacon version")(
    utils_app.registered_commands[1].callback
)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
