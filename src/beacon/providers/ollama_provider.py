"""Ollama provider for locally-run models."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..errors import GenerationError
from .base import (
    AVAILABILITY_TIMEOUT_SECONDS,
    ChatMessage,
    GeneratedReply,
    GeneratorProvider,
    ToolCall,
    ToolDefinition,
    parse_tool_arguments,
)

logger = logging.getLogger(__name__)

OLLAMA_BASE_URL = "http://localhost:11434"


class OllamaProvider(GeneratorProvider):
    """Ollama generator.

    Availability is probed with ``GET /api/tags``, which answers quickly on a
    running server and needs no model to be loaded.
    """

    name = "ollama"

    @property
    def default_model(self) -> str:
        return "llama2"

    @property
    def base_url(self) -> str:
        return (self.config.base_url or OLLAMA_BASE_URL).rstrip("/")

    async def is_available(self) -> bool:
        try:
            response = await self.client.get(
                f"{self.base_url}/api/tags", timeout=AVAILABILITY_TIMEOUT_SECONDS
            )
        except Exception as e:
            logger.debug(f"Ollama availability probe failed: {e}")
            return False
        return response.is_success

    async def chat(
        self,
        messages: List[ChatMessage],
        tools: Optional[List[ToolDefinition]] = None,
    ) -> GeneratedReply:
        options: Dict[str, Any] = {"temperature": self.temperature}
        if self.config.max_tokens:
            options["num_predict"] = self.config.max_tokens

        payload = {
            "model": self.model,
            "messages": [message.to_dict() for message in messages],
            "stream": False,
            "options": options,
        }
        if tools:
            payload["tools"] = self.prepare_tools(tools)

        try:
            response = await self.client.post(f"{self.base_url}/api/chat", json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise GenerationError(
                f"Ollama API error: {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise GenerationError(f"Error calling Ollama: {e}") from e
        except ValueError as e:
            raise GenerationError(f"Ollama returned invalid JSON: {e}") from e

        try:
            message = data["message"]
        except (KeyError, TypeError) as e:
            raise GenerationError(f"Unexpected Ollama response shape: {e!r}") from e

        tool_calls = [
            ToolCall(
                name=call["function"]["name"],
                arguments=parse_tool_arguments(call["function"].get("arguments")),
            )
            for call in message.get("tool_calls") or []
            if (call.get("function") or {}).get("name")
        ]
        return GeneratedReply(content=message.get("content") or "", tool_calls=tool_calls)
