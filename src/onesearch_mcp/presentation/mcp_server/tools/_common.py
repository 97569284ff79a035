"""
Common utilities for MCP tools.

- ToolResult -> CallToolResult conversion
- Tool annotations shared by all read-only OneSearch tools
- ContextName, the journal-name enum used in tool schemas
"""

from __future__ import annotations

from typing import Literal

from mcp.types import CallToolResult, ResourceLink, TextContent, ToolAnnotations

from onesearch_mcp.domain.entities import ResourceLinkItem, TextItem, ToolResult
from onesearch_mcp.infrastructure.onesearch.context import CONTEXT_ALIASES

# Every journal name the resolver accepts, advertised as the schema enum
ContextName = Literal[tuple(CONTEXT_ALIASES)]  # type: ignore[valid-type]


def read_only_annotations(title: str, open_world: bool) -> ToolAnnotations:
    """Annotations for a tool that only reads from OneSearch."""
    return ToolAnnotations(
        title=title,
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=open_world,
    )


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    """Convert a domain ToolResult into the MCP SDK result type."""
    content: list[TextContent | ResourceLink] = []
    for item in result.content:
        if isinstance(item, TextItem):
            content.append(TextContent(type="text", text=item.body))
        elif isinstance(item, ResourceLinkItem):
            content.append(ResourceLink(type="resource_link", name=item.name, uri=item.uri))
    return CallToolResult(content=content, isError=bool(result.is_error))


__all__ = ["ContextName", "read_only_annotations", "to_call_tool_result"]
