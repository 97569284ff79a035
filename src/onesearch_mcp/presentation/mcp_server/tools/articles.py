"""
Article Tools - start from a known DOI.

Tools:
- fetch_by_doi: full document of one article
- more_like_this: articles similar to a DOI
"""

import logging
from typing import Annotated, Literal, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from onesearch_mcp.application import ArticleService

from ._common import ContextName, read_only_annotations, to_call_tool_result

logger = logging.getLogger(__name__)


def register_article_tools(mcp: FastMCP, service: ArticleService):
    """Register DOI-based tools."""

    @mcp.tool(annotations=read_only_annotations("Fetch Article by DOI", open_world=False))
    async def fetch_by_doi(
        doi: Annotated[str, Field(description="DOI of the article to fetch, e.g. 10.1056/NEJMoa2502866")],
    ):
        """
        Fetch an article by its DOI (Digital Object Identifier).

        Works for the New England Journal of Medicine, NEJM Catalyst, NEJM
        Evidence, NEJM AI, NEJM Journal Watch and NEJM Clinician. DOIs start
        with 10.1056/. The journal is inferred from the DOI.

        Returns:
            The raw JATS XML document as a single text item.
        """
        result = await service.fetch_by_doi(doi)
        return to_call_tool_result(result)

    @mcp.tool(annotations=read_only_annotations("Find Similar Articles", open_world=True))
    async def more_like_this(
        doi: Annotated[str, Field(description="DOI of the article to find similar ones for")],
        context: Annotated[
            Optional[ContextName],
            Field(description="Restrict to one journal (e.g. 'NEJM AI'); all journals when omitted"),
        ] = None,
        output_style: Annotated[
            Literal["text", "links"],
            Field(description="'text' for summaries, 'links' for doi: resource links"),
        ] = "text",
    ):
        """
        Find articles similar to the one identified by a DOI.

        Searches all NEJM Group publications unless a context is given.
        """
        result = await service.more_like_this(doi, context, style=output_style)
        return to_call_tool_result(result)

    logger.info("Registered article tools (2 tools)")


__all__ = ["register_article_tools"]
