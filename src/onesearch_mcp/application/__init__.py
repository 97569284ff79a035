"""
Application Layer - use cases built on the OneSearch client.

- article_service: one coroutine per tool operation
- projection: QueryEnvelope -> ToolResult
"""

from .article_service import ERROR_PREFIXES, ArticleService
from .projection import OutputStyle, ProjectionMode, format_article_text, project

__all__ = [
    "ArticleService",
    "ERROR_PREFIXES",
    "OutputStyle",
    "ProjectionMode",
    "format_article_text",
    "project",
]
