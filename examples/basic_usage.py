"""Start a Beacon server with a few extra resources and tools.

Usage:
    python examples/basic_usage.py [basic|openai|ollama]

``basic`` uses the keyword replies only. ``openai`` needs OPENAI_API_KEY and
``ollama`` expects a local Ollama instance on port 11434.
"""

import json
import sys
from dataclasses import replace
from datetime import datetime, timezone

import uvicorn

from beacon import create_server
from beacon.config import EXAMPLE_CONFIGS
from beacon.logging_config import setup_logging
from servers.http import create_app


def add_examples(server):
    """Register the example catalog on top of the defaults."""
    server.register_resource(
        "config",
        "file:///config.json",
        {"description": "Current server configuration"},
        lambda: {
            "content": json.dumps(server.get_config()),
            "mimeType": "application/json",
        },
    )

    def echo(params=None):
        return {"result": params}

    def clock(params=None):
        return {"now": datetime.now(timezone.utc).isoformat()}

    server.register_tool("echo", {"description": "Returns its parameters"}, echo)
    server.register_tool("clock", {"description": "Current UTC time"}, clock)


def main():
    mode = sys.argv[1] if len(sys.argv) > 1 else "basic"
    if mode == "basic":
        mode = "simulated"
    if mode not in EXAMPLE_CONFIGS:
        print(f"Unknown mode {sys.argv[1]!r}. Use basic, openai or ollama.")
        sys.exit(1)

    setup_logging()
    config = replace(EXAMPLE_CONFIGS[mode], port=3001)
    server = create_server(config)
    add_examples(server)

    print(f"Server running on http://{config.host}:{config.port}")
    print('Try: curl -X POST "http://localhost:3001/query?query=calculate%202%2B2"')
    uvicorn.run(create_app(server), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
