"""
Article Service - one coroutine per tool operation.

Each method resolves/validates input, issues a single OneSearch request and
projects the response into a ToolResult. Failures never escape: they are
classified and returned as ``ToolResult(is_error=True)``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from onesearch_mcp.core.error_classifier import classify_error
from onesearch_mcp.domain.entities import ToolResult
from onesearch_mcp.infrastructure.onesearch.requests import Operation

from .projection import OutputStyle, ProjectionMode, project

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from onesearch_mcp.domain.entities import QueryEnvelope
    from onesearch_mcp.infrastructure.onesearch import OneSearchClient

# Text prefixed to the error message returned by each tool
ERROR_PREFIXES: dict[Operation, str] = {
    Operation.FETCH_BY_DOI: "Error fetching article",
    Operation.SIMPLE_QUERY: "Error querying articles",
    Operation.MORE_LIKE_THIS: "Error finding similar articles",
    Operation.BROWSE_ARTICLE_TYPE: "Error browsing articles",
}


class ArticleService:
    """
    Stateless facade over OneSearchClient used by the MCP tools.

    Args:
        client: Shared OneSearch client (read-only configuration)
        logger: Optional logger; defaults to this module's logger
    """

    def __init__(self, client: OneSearchClient, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    async def fetch_by_doi(self, doi: str) -> ToolResult:
        """Raw JATS XML document of one article."""
        return await self._run(
            Operation.FETCH_BY_DOI,
            {"doi": doi},
            lambda: self._client.fetch_by_doi(doi),
            mode="doi",
        )

    async def simple_query(self, context: str, query: str, style: OutputStyle = "text") -> ToolResult:
        return await self._run(
            Operation.SIMPLE_QUERY,
            {"context": context, "query": query},
            lambda: self._client.simple_query(context, query),
            style=style,
        )

    async def more_like_this(
        self,
        doi: str,
        context: str | None = None,
        style: OutputStyle = "text",
    ) -> ToolResult:
        return await self._run(
            Operation.MORE_LIKE_THIS,
            {"doi": doi, "context": context},
            lambda: self._client.more_like_this(doi, context),
            style=style,
        )

    async def browse_article_type(
        self,
        context: str,
        article_type: str,
        style: OutputStyle = "text",
    ) -> ToolResult:
        return await self._run(
            Operation.BROWSE_ARTICLE_TYPE,
            {"context": context, "article_type": article_type},
            lambda: self._client.browse_article_type(context, article_type),
            style=style,
        )

    async def read_doi_document(self, doi: str) -> str:
        """
        Document payload for the DOI resource.

        Unlike the tool methods this raises the classified exception, since
        MCP resources report failures as protocol errors.
        """
        self._logger.debug(f"Reading DOI resource {doi}")
        envelope = await self._client.fetch_by_doi(doi)
        return envelope.document or ""

    async def _run(
        self,
        operation: Operation,
        params: dict[str, Any],
        call: Callable[[], Awaitable[QueryEnvelope]],
        mode: ProjectionMode = "list",
        style: OutputStyle = "text",
    ) -> ToolResult:
        self._logger.info(f"{operation.value} called with {params}")
        try:
            envelope = await call()
        except Exception as e:
            classified = classify_error(e)
            self._logger.error(f"{operation.value} failed [{classified.kind.value}]: {classified.message}")
            return ToolResult.error(f"{ERROR_PREFIXES[operation]}: {classified.message}")

        result = project(envelope, mode=mode, style=style)
        self._logger.info(f"{operation.value} returned {len(result.content)} items")
        return result


__all__ = ["ERROR_PREFIXES", "ArticleService"]
