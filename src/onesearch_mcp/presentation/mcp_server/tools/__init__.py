"""
OneSearch MCP Tools

Search (2):
- simple_query, browse_article_type

Articles (2):
- fetch_by_doi, more_like_this

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, service)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .articles import register_article_tools
from .search import register_search_tools

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from onesearch_mcp.application import ArticleService


def register_all_tools(mcp: FastMCP, service: ArticleService):
    """Register every OneSearch tool on ``mcp``."""
    register_search_tools(mcp, service)  # simple_query, browse_article_type
    register_article_tools(mcp, service)  # fetch_by_doi, more_like_this


__all__ = [
    "register_all_tools",
    "register_article_tools",
    "register_search_tools",
]
