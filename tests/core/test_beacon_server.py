"""Tests for the Beacon server facade."""

import pytest

from beacon import BeaconServer, UnsupportedProviderError, create_server
from beacon.config import ServerConfig
from beacon.defaults import HELLO_URI
from beacon.providers import LLMConfig, OllamaProvider


def test_create_server_registers_defaults():
    server = create_server(ServerConfig())

    assert server.list_resource_names() == ["hello"]
    assert server.list_tool_names() == ["tool-explore", "tool-info"]
    assert server.provider is None


def test_create_server_without_defaults():
    server = create_server(ServerConfig(), with_defaults=False)

    assert len(server.registry) == 0


def test_create_server_with_provider():
    server = create_server(ServerConfig(llm=LLMConfig(provider="ollama")))

    assert isinstance(server.provider, OllamaProvider)
    assert server.router.provider is server.provider


def test_create_server_unsupported_provider():
    with pytest.raises(UnsupportedProviderError, match="Unsupported LLM provider: 'gemini'"):
        create_server(ServerConfig(llm=LLMConfig(provider="gemini")))


def test_servers_are_independent():
    first = BeaconServer()
    second = BeaconServer()
    first.register_tool("echo", handler=lambda params: {"result": params})

    assert first.list_tool_names() == ["echo"]
    assert second.list_tool_names() == []


def test_get_config_masks_api_key():
    server = BeaconServer(ServerConfig(llm=LLMConfig(provider="openai", api_key="sk-secret")))

    config = server.get_config()

    assert config["llm"]["api_key"] == "***"
    assert server.config.llm.api_key == "sk-secret"


@pytest.mark.asyncio
async def test_default_hello_resource(server):
    response = await server.read_resource(HELLO_URI)

    assert response.success is True
    assert response.data.mime_type == "text/plain"
    assert "Hello" in response.data.content


@pytest.mark.asyncio
async def test_default_tools(server):
    explore = await server.call_tool("tool-explore", {"path": "/"})
    info = await server.call_tool("tool-info")

    assert explore.data.result["params"] == {"path": "/"}
    assert info.data.result["server"] == "beacon-mcp"
    assert info.data.result["uptime"] >= 0


@pytest.mark.asyncio
async def test_end_to_end_query(server):
    response = await server.process_user_query("help")

    assert "tool-explore, tool-info" in response.data.text
    assert "Resources: hello" in response.data.text


@pytest.mark.asyncio
async def test_aclose_without_provider(server):
    await server.aclose()
