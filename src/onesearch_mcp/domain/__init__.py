"""
Domain Layer - business entities independent of transport and upstream API.
"""

from __future__ import annotations

from .entities import (
    ArticleReference,
    ContentItem,
    ContextCode,
    QueryEnvelope,
    ResourceLinkItem,
    TextItem,
    ToolResult,
)

__all__ = [
    "ArticleReference",
    "ContextCode",
    "QueryEnvelope",
    "ToolResult",
    "TextItem",
    "ResourceLinkItem",
    "ContentItem",
]
