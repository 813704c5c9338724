"""OpenAI chat-completions provider."""

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from ..errors import GenerationError
from .base import (
    ChatMessage,
    GeneratedReply,
    GeneratorProvider,
    ToolCall,
    ToolDefinition,
    parse_tool_arguments,
)

logger = logging.getLogger(__name__)

OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MAX_TOKENS = 1000


class OpenAIProvider(GeneratorProvider):
    """OpenAI (ChatGPT) generator.

    Availability only checks that an API key is configured, either in the
    config or through the ``OPENAI_API_KEY`` environment variable; no request
    is made.
    """

    name = "openai"

    def __init__(self, config, client: Optional[httpx.AsyncClient] = None):
        super().__init__(config, client)
        self.api_key = config.api_key or os.getenv("OPENAI_API_KEY")

    @property
    def default_model(self) -> str:
        return "gpt-3.5-turbo"

    @property
    def base_url(self) -> str:
        return (self.config.base_url or OPENAI_BASE_URL).rstrip("/")

    async def is_available(self) -> bool:
        return bool(self.api_key)

    async def chat(
        self,
        messages: List[ChatMessage],
        tools: Optional[List[ToolDefinition]] = None,
    ) -> GeneratedReply:
        payload = {
            "model": self.model,
            "messages": [message.to_dict() for message in messages],
            "temperature": self.temperature,
            "max_tokens": self.config.max_tokens or DEFAULT_MAX_TOKENS,
        }
        if tools:
            payload["tools"] = self.prepare_tools(tools)

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await self.client.post(
                f"{self.base_url}/chat/completions", headers=headers, json=payload
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise GenerationError(
                f"OpenAI API error: {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise GenerationError(f"Error calling OpenAI: {e}") from e
        except ValueError as e:
            raise GenerationError(f"OpenAI returned invalid JSON: {e}") from e

        return self.parse_response(data)

    def parse_response(self, data: Dict[str, Any]) -> GeneratedReply:
        """Extract text and tool calls from a chat-completions payload."""
        try:
            message = data["choices"][0]["message"]
        except (KeyError, IndexError, TypeError) as e:
            raise GenerationError(f"Unexpected OpenAI response shape: {e!r}") from e

        tool_calls = []
        for call in message.get("tool_calls") or []:
            function = call.get("function") or {}
            if not function.get("name"):
                logger.warning(f"Skipping OpenAI tool call without a name: {call}")
                continue
            tool_calls.append(
                ToolCall(
                    name=function["name"],
                    arguments=parse_tool_arguments(function.get("arguments")),
                )
            )

        return GeneratedReply(content=message.get("content") or "", tool_calls=tool_calls)
