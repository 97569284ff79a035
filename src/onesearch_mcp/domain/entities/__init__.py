"""
Domain Entities

Core business objects for journal search.
"""

from __future__ import annotations

from .article import ArticleReference, ContextCode, QueryEnvelope
from .tool_result import ContentItem, ResourceLinkItem, TextItem, ToolResult

__all__ = [
    # Article entities
    "ArticleReference",
    "ContextCode",
    "QueryEnvelope",
    # Tool output
    "ToolResult",
    "TextItem",
    "ResourceLinkItem",
    "ContentItem",
]
