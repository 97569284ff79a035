"""
Domain Entity: ToolResult

The only shape handed back to the MCP layer. Conversion to the SDK's
``CallToolResult`` happens at the presentation boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union


@dataclass(frozen=True)
class TextItem:
    body: str
    kind: Literal["text"] = "text"


@dataclass(frozen=True)
class ResourceLinkItem:
    name: str
    uri: str
    kind: Literal["resourceLink"] = "resourceLink"


ContentItem = Union[TextItem, ResourceLinkItem]


@dataclass
class ToolResult:
    """Ordered content items plus an optional error flag."""

    content: list[ContentItem] = field(default_factory=list)
    is_error: bool | None = None

    @classmethod
    def text(cls, body: str) -> ToolResult:
        return cls(content=[TextItem(body=body)])

    @classmethod
    def error(cls, message: str) -> ToolResult:
        return cls(content=[TextItem(body=message)], is_error=True)

    @property
    def texts(self) -> list[str]:
        return [item.body for item in self.content if isinstance(item, TextItem)]
