"""Local request commands for Beacon CLI.

These run a request against an in-process server, without going through
HTTP, which is handy for checking handlers and the query rules.
"""

import json
from typing import Optional

import typer

from beacon import NotFoundError
from cli.common import build_config, build_server, console, logger, run_with_server

client = typer.Typer(name="client", help="Run requests against a local server")


def _print_envelope(envelope) -> None:
    console.print_json(json.dumps(envelope.to_dict(), default=str))


@client.command("query")
def query(
    text: str = typer.Argument(..., help="Free-text query, e.g. 'calculate 2 + 2'"),
    provider: Optional[str] = typer.Option(
        None, "--provider", help="LLM provider for unmatched queries (openai, ollama)."
    ),
    model: Optional[str] = typer.Option(None, "--model", help="LLM model name."),
    raw: bool = typer.Option(False, "--json", help="Print the full envelope as JSON."),
):
    """Send a free-text query and print the reply."""
    server = build_server(build_config(provider=provider, model=model))
    response = run_with_server(
        server, lambda s: s.process_user_query(text)
    )

    if raw:
        _print_envelope(response)
    elif response.success:
        console.print(response.data.text, markup=False)
    else:
        console.print(response.error, style="red", markup=False)

    if not response.success:
        raise typer.Exit(1)


@client.command("read")
def read(uri: str = typer.Argument(..., help="Resource URI, e.g. file:///hello.txt")):
    """Read a resource and print its envelope."""
    server = build_server(build_config())
    try:
        response = run_with_server(server, lambda s: s.read_resource(uri))
    except NotFoundError as e:
        logger.error(f"❌ {e}")
        raise typer.Exit(1)
    _print_envelope(response)


@client.command("call")
def call(
    name: str = typer.Argument(..., help="Tool name, e.g. tool-info"),
    params: Optional[str] = typer.Option(
        None, "--params", "-p", help="Tool parameters as a JSON object."
    ),
):
    """Call a tool and print its envelope."""
    parsed = None
    if params:
        try:
            parsed = json.loads(params)
        except ValueError as e:
            logger.error(f"❌ --params is not valid JSON: {e}")
            raise typer.Exit(1)
        if not isinstance(parsed, dict):
            logger.error("❌ --params must be a JSON object")
            raise typer.Exit(1)

    server = build_server(build_config())
    try:
        response = run_with_server(server, lambda s: s.call_tool(name, parsed))
    except NotFoundError as e:
        logger.error(f"❌ {e}")
        raise typer.Exit(1)
    _print_envelope(response)
