"""
MCP Resources - article documents and reference data

Resources:
- doi://{prefix}/{suffix}    raw JATS XML of one article
- onesearch://contexts       journal contexts and accepted names
- onesearch://article-types  article types accepted by browse_article_type
"""

import json
import logging

from mcp.server.fastmcp import FastMCP

from onesearch_mcp.application import ArticleService
from onesearch_mcp.infrastructure.onesearch import ARTICLE_TYPES, get_context_reference

logger = logging.getLogger(__name__)


# ============================================================================
# Reference Data
# ============================================================================

ARTICLE_TYPE_REFERENCE = {
    "description": "Article types accepted by browse_article_type (exact spelling)",
    "types": list(ARTICLE_TYPES),
    "usage_example": 'browse_article_type(context="nejm", article_type="Review Article")',
}


def doi_from_resource(prefix: str, suffix: str) -> str:
    """Rebuild a DOI from the two halves of a doi:// resource URI."""
    return f"{prefix}/{suffix}"


# ============================================================================
# Resource Registration
# ============================================================================


def register_resources(mcp: FastMCP, service: ArticleService):
    """Register DOI and reference resources."""

    @mcp.resource(
        "doi://{prefix}/{suffix}",
        name="article_document",
        description="Raw JATS XML of the article with this DOI",
        mime_type="application/xml",
    )
    async def get_article_document(prefix: str, suffix: str) -> str:
        """Article document, e.g. doi://10.1056/NEJMoa2502866"""
        return await service.read_doi_document(doi_from_resource(prefix, suffix))

    @mcp.resource("onesearch://contexts", mime_type="application/json")
    def get_contexts() -> str:
        """Journal context codes and the names accepted for each."""
        return json.dumps(get_context_reference(), indent=2, ensure_ascii=False)

    @mcp.resource("onesearch://article-types", mime_type="application/json")
    def get_article_types() -> str:
        """Article types accepted by browse_article_type."""
        return json.dumps(ARTICLE_TYPE_REFERENCE, indent=2, ensure_ascii=False)

    logger.info("Registered MCP resources: doi template, contexts, article types")


__all__ = ["ARTICLE_TYPE_REFERENCE", "doi_from_resource", "register_resources"]
