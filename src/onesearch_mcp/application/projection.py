"""
Result Projection - QueryEnvelope -> ToolResult.

Modes:
- "doi":  one text item with the raw document payload ("" when absent)
- "list": one item per displayable result, API order preserved

List styles:
- "text":  Title / DOI / Journal / Publication Date block
- "links": resource link named after the title, uri ``doi:<doi>``
"""

from __future__ import annotations

from typing import Literal

from onesearch_mcp.domain.entities import (
    ArticleReference,
    QueryEnvelope,
    ResourceLinkItem,
    TextItem,
    ToolResult,
)

ProjectionMode = Literal["doi", "list"]
OutputStyle = Literal["text", "links"]


def format_article_text(article: ArticleReference) -> str:
    """Plain-text block for one article."""
    lines = [
        f"Title: {article.title}",
        f"DOI: {article.doi}",
        f"Journal: {article.journal or 'N/A'}",
        f"Publication Date: {article.pub_date or 'N/A'}",
    ]
    if article.snippet:
        lines.append(f"Snippet: {article.snippet}")
    return "\n".join(lines)


def article_link(article: ArticleReference) -> ResourceLinkItem:
    return ResourceLinkItem(name=article.title or article.doi, uri=f"doi:{article.doi}")


def project(
    envelope: QueryEnvelope,
    mode: ProjectionMode = "list",
    style: OutputStyle = "text",
) -> ToolResult:
    """Convert an envelope into tool output. Empty results are not an error."""
    if mode == "doi":
        return ToolResult.text(envelope.document or "")

    if mode != "list":
        raise ValueError(f"Unknown projection mode: {mode}")

    if style == "links":
        content = [article_link(ref) for ref in envelope.displayable_results]
    else:
        content = [TextItem(body=format_article_text(ref)) for ref in envelope.displayable_results]
    return ToolResult(content=content)


__all__ = ["OutputStyle", "ProjectionMode", "article_link", "format_article_text", "project"]
