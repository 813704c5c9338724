"""Enums for Beacon models."""

from enum import Enum


class ContentType(str, Enum):
    """Kinds of content items carried in a query reply."""

    TEXT = "text"
    IMAGE = "image"
    FILE = "file"


class MessageRole(str, Enum):
    """Roles of the messages sent to an external generator."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ProviderName(str, Enum):
    """External generator backends Beacon knows how to build."""

    OPENAI = "openai"
    OLLAMA = "ollama"
