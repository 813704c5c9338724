"""External generator providers for Beacon.

This module provides a common interface over the text-generation backends
(OpenAI, Ollama) the query router can fall back to when no keyword rule
matches.
"""

from .base import (
    ChatMessage,
    GeneratedReply,
    GeneratorProvider,
    LLMConfig,
    ToolCall,
    ToolDefinition,
)
from .factory import PROVIDERS, create_provider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider

__all__ = [
    "ChatMessage",
    "GeneratedReply",
    "GeneratorProvider",
    "LLMConfig",
    "ToolCall",
    "ToolDefinition",
    "PROVIDERS",
    "create_provider",
    "OllamaProvider",
    "OpenAIProvider",
]
