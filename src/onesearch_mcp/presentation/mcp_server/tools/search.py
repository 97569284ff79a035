"""
Search Tools - keyword query and browse by article type.

Tools:
- simple_query: keyword search in one journal or all journals
- browse_article_type: newest articles of a given type in one journal
"""

import logging
from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from onesearch_mcp.application import ArticleService
from onesearch_mcp.infrastructure.onesearch.requests import ARTICLE_TYPES

from ._common import ContextName, read_only_annotations, to_call_tool_result

logger = logging.getLogger(__name__)

JournalCode = Literal["nejm", "catalyst", "evidence", "clinician", "nejm-ai"]
ArticleTypeName = Literal[ARTICLE_TYPES]  # type: ignore[valid-type]


def register_search_tools(mcp: FastMCP, service: ArticleService):
    """Register query tools."""

    @mcp.tool(annotations=read_only_annotations("Query Articles", open_world=True))
    async def simple_query(
        context: Annotated[
            ContextName,
            Field(
                description=(
                    "Journal to query: 'NEJM', 'NEJM Catalyst', 'NEJM Evidence', 'NEJM AI', "
                    "'NEJM Clinician' / 'Journal Watch', or 'All' for every journal"
                )
            ),
        ],
        query: Annotated[str, Field(description="Keywords; articles must match all of them")],
        output_style: Annotated[
            Literal["text", "links"],
            Field(description="'text' for summaries, 'links' for doi: resource links"),
        ] = "text",
    ):
        """
        Query articles by journal and keywords.

        Returns one item per matching article (Title, DOI, Journal,
        Publication Date), in the order the search API ranks them.

        Example:
            simple_query(context="NEJM Catalyst", query="diabetes")
        """
        result = await service.simple_query(context, query, style=output_style)
        return to_call_tool_result(result)

    @mcp.tool(annotations=read_only_annotations("Browse Articles by Type", open_world=True))
    async def browse_article_type(
        context: Annotated[JournalCode, Field(description="The journal to browse")],
        article_type: Annotated[ArticleTypeName, Field(description="Which article type to browse")],
        output_style: Annotated[
            Literal["text", "links"],
            Field(description="'text' for summaries, 'links' for doi: resource links"),
        ] = "text",
    ):
        """
        List the newest articles of one type in one journal.

        Results are sorted by publication date, newest first.

        Example:
            browse_article_type(context="nejm", article_type="Review Article")
        """
        result = await service.browse_article_type(context, article_type, style=output_style)
        return to_call_tool_result(result)

    logger.info("Registered search tools (2 tools)")


__all__ = ["register_search_tools"]
