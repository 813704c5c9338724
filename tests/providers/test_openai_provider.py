"""Tests for the OpenAI provider."""

import json

import httpx
import pytest

from beacon.errors import GenerationError
from beacon.providers import ChatMessage, LLMConfig, OpenAIProvider, ToolDefinition
from models import MessageRole

MESSAGES = [
    ChatMessage(MessageRole.SYSTEM, "You are helpful."),
    ChatMessage(MessageRole.USER, "Hi"),
]


def make_provider(handler, **config):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenAIProvider(LLMConfig(provider="openai", **config), client=client)


def completion(content="Hello!", tool_calls=None):
    message = {"role": "assistant", "content": content}
    if tool_calls is not None:
        message["tool_calls"] = tool_calls
    return {"choices": [{"index": 0, "message": message}]}


@pytest.mark.asyncio
async def test_availability_depends_on_api_key():
    assert await OpenAIProvider(LLMConfig(provider="openai")).is_available() is False
    assert await OpenAIProvider(LLMConfig(provider="openai", api_key="sk")).is_available() is True


@pytest.mark.asyncio
async def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

    provider = OpenAIProvider(LLMConfig(provider="openai"))

    assert provider.api_key == "sk-env"
    assert await provider.is_available() is True


@pytest.mark.asyncio
async def test_chat_request_and_reply():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=completion("Hello!"))

    provider = make_provider(handler, api_key="sk-test", max_tokens=50)
    tools = [ToolDefinition(name="echo", description="Echo")]

    reply = await provider.chat(MESSAGES, tools)

    assert reply.content == "Hello!"
    assert reply.tool_calls == []

    (request,) = requests
    assert str(request.url) == "https://api.openai.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["model"] == "gpt-3.5-turbo"
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 50
    assert body["messages"] == [
        {"role": "system", "content": "You are helpful."},
        {"role": "user", "content": "Hi"},
    ]
    assert body["tools"] == [
        {
            "type": "function",
            "function": {
                "name": "echo",
                "description": "Echo",
                "parameters": {"type": "object", "properties": {}, "required": []},
            },
        }
    ]


@pytest.mark.asyncio
async def test_zero_temperature_is_kept():
    seen = {}

    def handler(request):
        seen.update(json.loads(request.content))
        return httpx.Response(200, json=completion())

    provider = make_provider(handler, api_key="sk", temperature=0.0)
    await provider.chat(MESSAGES)

    assert seen["temperature"] == 0.0
    assert "tools" not in seen


@pytest.mark.asyncio
async def test_custom_base_url_and_model():
    urls = []

    def handler(request):
        urls.append(str(request.url))
        return httpx.Response(200, json=completion())

    provider = make_provider(
        handler, api_key="sk", base_url="http://proxy.local/v1/", model="gpt-4o"
    )
    await provider.chat(MESSAGES)

    assert urls == ["http://proxy.local/v1/chat/completions"]
    assert provider.model == "gpt-4o"


@pytest.mark.asyncio
async def test_tool_calls_are_parsed():
    tool_calls = [
        {
            "id": "call_1",
            "type": "function",
            "function": {"name": "echo", "arguments": '{"x": 1}'},
        }
    ]
    provider = make_provider(
        lambda request: httpx.Response(200, json=completion(None, tool_calls)),
        api_key="sk",
    )

    reply = await provider.chat(MESSAGES)

    assert reply.content == ""
    assert reply.tool_calls[0].name == "echo"
    assert reply.tool_calls[0].arguments == {"x": 1}


@pytest.mark.asyncio
async def test_http_error_status():
    provider = make_provider(
        lambda request: httpx.Response(401, json={"error": "bad key"}), api_key="sk"
    )

    with pytest.raises(GenerationError, match="OpenAI API error: 401"):
        await provider.chat(MESSAGES)


@pytest.mark.asyncio
async def test_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    provider = make_provider(handler, api_key="sk")

    with pytest.raises(GenerationError, match="Error calling OpenAI"):
        await provider.chat(MESSAGES)


@pytest.mark.asyncio
async def test_unexpected_response_shape():
    provider = make_provider(
        lambda request: httpx.Response(200, json={"choices": []}), api_key="sk"
    )

    with pytest.raises(GenerationError, match="Unexpected OpenAI response shape"):
        await provider.chat(MESSAGES)


@pytest.mark.asyncio
async def test_aclose_keeps_injected_client():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    provider = OpenAIProvider(LLMConfig(provider="openai"), client=client)

    await provider.aclose()

    assert client.is_closed is False
    await client.aclose()
