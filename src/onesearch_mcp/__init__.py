"""
OneSearch MCP - NEJM Group journal search for MCP clients

A thin Model Context Protocol adapter over the OneSearch API. Tools:
fetch_by_doi, simple_query, more_like_this, browse_article_type.

Usage:
    from onesearch_mcp import OneSearchClient, load_settings

    settings = load_settings()
    async with OneSearchClient.from_settings(settings.api) as client:
        envelope = await client.simple_query("NEJM", "diabetes")
        for article in envelope.displayable_results:
            print(f"{article.doi}: {article.title}")

Run as a server:
    onesearch-mcp --transport stdio
"""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .core.exceptions import (
    ConfigurationError,
    InvalidContextError,
    MissingParameterError,
    OneSearchError,
    UnknownError,
    UpstreamHttpError,
    UpstreamTransportError,
)
from .domain.entities import ArticleReference, ContextCode, QueryEnvelope, ToolResult
from .infrastructure.onesearch import OneSearchClient, resolve_context

__all__ = [
    "__version__",
    # Config
    "Settings",
    "load_settings",
    # Client
    "OneSearchClient",
    "resolve_context",
    # Entities
    "ArticleReference",
    "ContextCode",
    "QueryEnvelope",
    "ToolResult",
    # Errors
    "OneSearchError",
    "ConfigurationError",
    "InvalidContextError",
    "MissingParameterError",
    "UnknownError",
    "UpstreamHttpError",
    "UpstreamTransportError",
]
