"""
OneSearch wire format -> domain entities.

The API is loose about field names (``pubdate`` vs ``pubDate``, ``text`` vs
``snippet``) and about nulls, so every field is read defensively.
"""

from __future__ import annotations

from typing import Any

from onesearch_mcp.domain.entities import ArticleReference, QueryEnvelope


def _first(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


def article_from_api(data: dict[str, Any]) -> ArticleReference:
    """Map one entry of ``results`` onto an ArticleReference."""
    return ArticleReference(
        doi=str(data.get("doi") or ""),
        title=_optional_str(data.get("title")),
        journal=_optional_str(_first(data, "journal", "context")),
        pub_date=_optional_str(_first(data, "pubdate", "pubDate")),
        snippet=_optional_str(_first(data, "text", "snippet")),
        article_type=_str_list(data.get("articleType")),
        is_free=bool(data.get("isFree", False)),
        media_type=_optional_str(data.get("mediaType")),
        media_title=_optional_str(data.get("mediaTitle")),
        thumbnail=_optional_str(data.get("thumbnail")),
    )


def envelope_from_api(data: dict[str, Any]) -> QueryEnvelope:
    """Coerce a response body into a QueryEnvelope; null results become []."""
    results = data.get("results")
    if not isinstance(results, list):
        results = []
    total = data.get("total")
    try:
        total = max(int(total), 0) if total is not None else len(results)
    except (TypeError, ValueError):
        total = len(results)

    document = data.get("document")
    return QueryEnvelope(
        total=total,
        results=[article_from_api(item) for item in results if isinstance(item, dict)],
        document=None if document is None else str(document),
        raw=data,
    )


__all__ = ["article_from_api", "envelope_from_api"]
