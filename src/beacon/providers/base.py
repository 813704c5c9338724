"""Base abstract class for external text-generation providers."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from models import MessageRole, ProviderName

DEFAULT_TEMPERATURE = 0.7
DEFAULT_TIMEOUT_SECONDS = 30.0
AVAILABILITY_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for an external generator.

    Attributes:
        provider: Backend identifier ("openai" or "ollama")
        api_key: API key for authentication
        model: Name of the model to use
        base_url: Override for the backend's base URL
        temperature: Sampling temperature (0.0 to 1.0+)
        max_tokens: Maximum tokens in the response
    """

    provider: str
    api_key: Optional[str] = None
    model: Optional[str] = None
    base_url: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    def __post_init__(self):
        # Accept ProviderName members as well as plain strings
        if isinstance(self.provider, ProviderName):
            object.__setattr__(self, "provider", self.provider.value)


@dataclass(frozen=True)
class ChatMessage:
    """One message in a generator conversation."""

    role: MessageRole
    content: str

    def to_dict(self) -> Dict[str, str]:
        role = self.role.value if hasattr(self.role, "value") else str(self.role)
        return {"role": role, "content": self.content}


@dataclass(frozen=True)
class ToolDefinition:
    """A tool advertised to the generator."""

    name: str
    description: str
    parameters: Dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []}
    )


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation requested by the generator."""

    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GeneratedReply:
    """Text produced by a generator, plus any tool invocations it asked for."""

    content: str
    tool_calls: List[ToolCall] = field(default_factory=list)


def parse_tool_arguments(raw: Any) -> Dict[str, Any]:
    """Normalise tool call arguments, which may arrive as a JSON string or a dict."""
    if isinstance(raw, dict):
        return raw
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        return {"raw": raw}
    return parsed if isinstance(parsed, dict) else {"value": parsed}


class GeneratorProvider(ABC):
    """Abstract base class for external generators.

    Each provider implements two operations: a cheap availability probe and a
    chat-style completion. Providers own an ``httpx.AsyncClient`` unless one
    is injected, in which case the caller keeps ownership of it.
    """

    name: str = ""

    def __init__(self, config: LLMConfig, client: Optional[httpx.AsyncClient] = None):
        """Initialize the provider with configuration.

        Args:
            config: Generator configuration
            client: Optional HTTP client (used by tests to inject a transport)
        """
        self.config = config
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT_SECONDS)
        return self._client

    @property
    def model(self) -> str:
        return self.config.model or self.default_model

    @property
    def temperature(self) -> float:
        if self.config.temperature is None:
            return DEFAULT_TEMPERATURE
        return self.config.temperature

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used when the configuration does not name one."""

    @abstractmethod
    async def is_available(self) -> bool:
        """Check whether the backend can be used right now.

        Must not raise: any probe failure is reported as False.
        """

    @abstractmethod
    async def chat(
        self,
        messages: List[ChatMessage],
        tools: Optional[List[ToolDefinition]] = None,
    ) -> GeneratedReply:
        """Send a conversation and return the generated reply.

        Args:
            messages: Conversation, usually a system prompt and the user's text
            tools: Optional tools the backend may ask to invoke

        Returns:
            The generated reply

        Raises:
            GenerationError: On transport errors, non-success status codes or
                malformed responses
        """

    def prepare_tools(self, tools: List[ToolDefinition]) -> List[Dict[str, Any]]:
        """Transform tool definitions to the function-calling format."""
        return [
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.parameters,
                },
            }
            for tool in tools
        ]

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
