"""Standard response envelope shared by every Beacon operation.

Every outcome is reported as ``{success, data | error, timestamp}``. Exactly
one of ``data`` and ``error`` is present, depending on ``success``.
"""

import time
from typing import Any, ClassVar, Dict, FrozenSet, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from models.enums import ContentType

T = TypeVar("T")


def now_ms() -> int:
    """Current time as integer epoch milliseconds."""
    return int(time.time() * 1000)


class WireModel(BaseModel):
    """Base for payload models; unset optional fields are left off the wire."""

    model_config = ConfigDict(populate_by_name=True)

    # Keys that are serialized even when their value is None
    _always_keys: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_empty_optionals(self, handler):
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in self._always_keys
        }


class ContentItem(WireModel):
    """A single piece of reply content."""

    type: ContentType = ContentType.TEXT
    text: Optional[str] = None
    url: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class QueryData(WireModel):
    """Payload of a query reply."""

    content: List[ContentItem] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "QueryData":
        """Build a payload holding a single text item."""
        return cls(content=[ContentItem(type=ContentType.TEXT, text=text)])

    @property
    def text(self) -> str:
        """All text items joined by newlines."""
        return "\n".join(item.text for item in self.content if item.text)


class ResourceData(WireModel):
    """Payload of a resource read."""

    content: str
    mime_type: Optional[str] = Field(None, alias="mimeType")
    metadata: Optional[Dict[str, Any]] = None


class ToolData(WireModel):
    """Payload of a tool call."""

    _always_keys: ClassVar[FrozenSet[str]] = frozenset({"result"})

    result: Any = None
    metadata: Optional[Dict[str, Any]] = None


class Envelope(BaseModel, Generic[T]):
    """Uniform success/error/timestamp wrapper.

    Attributes:
        success: Whether the operation succeeded
        data: The payload, present only when ``success`` is true
        error: Human-readable message, present only when ``success`` is false
        timestamp: Creation time in epoch milliseconds
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    timestamp: int = Field(default_factory=now_ms)

    @model_validator(mode="after")
    def _check_outcome(self) -> "Envelope":
        if self.success:
            if self.data is None:
                raise ValueError("a successful envelope must carry data")
            if self.error is not None:
                raise ValueError("a successful envelope cannot carry an error")
        else:
            if not self.error:
                raise ValueError("a failed envelope must carry a non-empty error")
            if self.data is not None:
                raise ValueError("a failed envelope cannot carry data")
        return self

    @classmethod
    def ok(cls, data: Any) -> "Envelope":
        """Create a success envelope."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "Envelope":
        """Create a failure envelope."""
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire dictionary.

        The absent side of ``data``/``error`` is omitted rather than sent as null.
        """
        response = {"success": self.success}
        if self.success:
            data = self.data
            if isinstance(data, BaseModel):
                data = data.model_dump(by_alias=True)
            response["data"] = data
        else:
            response["error"] = self.error
        response["timestamp"] = self.timestamp
        return response


QueryResponse = Envelope[QueryData]
ResourceResponse = Envelope[ResourceData]
ToolResponse = Envelope[ToolData]
