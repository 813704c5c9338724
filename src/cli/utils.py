"""Utility commands for Beacon CLI."""

import typer
from rich.table import Table

from cli.common import build_config, build_server, console

app = typer.Typer(name="utils", help="Utility commands")


@app.command("list")
def list_capabilities():
    """List the resources and tools a default server registers."""
    server = build_server(build_config())

    table = Table(title="Beacon capabilities")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("URI", no_wrap=True)
    table.add_column("Description")

    for resource in server.registry.iter_resources():
        table.add_row("resource", resource.name, resource.uri, resource.description or "")
    for tool in server.registry.iter_tools():
        table.add_row("tool", tool.name, "", tool.description or "")

    console.print(table)


@app.command("version")
def version():
    """Show Beacon version."""
    from beacon import __version__

    console.print(f"Beacon version {__version__}")
