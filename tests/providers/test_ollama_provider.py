"""Tests for the Ollama provider."""

import json

import httpx
import pytest

from beacon.errors import GenerationError
from beacon.providers import ChatMessage, LLMConfig, OllamaProvider
from models import MessageRole

MESSAGES = [ChatMessage(MessageRole.USER, "Hi")]


def make_provider(handler, **config):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OllamaProvider(LLMConfig(provider="ollama", **config), client=client)


@pytest.mark.asyncio
async def test_available_when_tags_answer():
    urls = []

    def handler(request):
        urls.append(str(request.url))
        return httpx.Response(200, json={"models": []})

    provider = make_provider(handler)

    assert await provider.is_available() is True
    assert urls == ["http://localhost:11434/api/tags"]


@pytest.mark.asyncio
async def test_unavailable_on_error_status():
    provider = make_provider(lambda request: httpx.Response(503))

    assert await provider.is_available() is False


@pytest.mark.asyncio
async def test_unavailable_on_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    provider = make_provider(handler)

    assert await provider.is_available() is False


@pytest.mark.asyncio
async def test_chat_request_and_reply():
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(
            200, json={"message": {"role": "assistant", "content": "Hola!"}, "done": True}
        )

    provider = make_provider(
        handler, base_url="http://ollama:11434", model="mistral", max_tokens=64
    )

    reply = await provider.chat(MESSAGES)

    assert reply.content == "Hola!"
    (body,) = bodies
    assert body["model"] == "mistral"
    assert body["stream"] is False
    assert body["messages"] == [{"role": "user", "content": "Hi"}]
    assert body["options"] == {"temperature": 0.7, "num_predict": 64}


@pytest.mark.asyncio
async def test_default_model():
    provider = make_provider(lambda request: httpx.Response(200))

    assert provider.model == "llama2"


@pytest.mark.asyncio
async def test_tool_calls_are_parsed():
    message = {
        "role": "assistant",
        "content": "",
        "tool_calls": [{"function": {"name": "tool-info", "arguments": {"verbose": True}}}],
    }
    provider = make_provider(lambda request: httpx.Response(200, json={"message": message}))

    reply = await provider.chat(MESSAGES)

    assert reply.tool_calls[0].name == "tool-info"
    assert reply.tool_calls[0].arguments == {"verbose": True}


@pytest.mark.asyncio
async def test_http_error_status():
    provider = make_provider(lambda request: httpx.Response(404, json={"error": "model not found"}))

    with pytest.raises(GenerationError, match="Ollama API error: 404"):
        await provider.chat(MESSAGES)


@pytest.mark.asyncio
async def test_invalid_json():
    provider = make_provider(lambda request: httpx.Response(200, content=b"not json"))

    with pytest.raises(GenerationError, match="invalid JSON"):
        await provider.chat(MESSAGES)
