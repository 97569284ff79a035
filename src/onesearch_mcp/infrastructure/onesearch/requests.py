"""
Request Builder - maps an operation and its parameters onto a OneSearch
endpoint path and query-string parameters.

Endpoints:
- /content       fetch a single article by DOI
- /simple        keyword query, also used for browse-by-article-type
- /morelikethis  articles similar to a DOI

No I/O happens here; validation failures are raised before any request is
issued.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from onesearch_mcp.core.exceptions import InvalidContextError, MissingParameterError
from onesearch_mcp.domain.entities import ContextCode

from .context import FEDERATED_OBJECT_TYPE, infer_context_from_doi, object_type_for, resolve_context

CONTENT_PATH = "/content"
SIMPLE_PATH = "/simple"
MORE_LIKE_THIS_PATH = "/morelikethis"

# /morelikethis takes the federated union without the trailing semicolon
MORE_LIKE_THIS_FEDERATED_OBJECT_TYPE = FEDERATED_OBJECT_TYPE.rstrip(";")

# Article types the /simple endpoint can browse by
ARTICLE_TYPES: tuple[str, ...] = (
    "NEJM Images in Clinical Medicine",
    "Audio",
    "Video",
    "Review Article",
    "Case Study",
    "Journal Watch",
    "Guideline Watch",
    "Clinical Conversations",
    "Drug Watch",
    "Graphical Research Summary",
    "NEJM Quick Take",
    "Year in Review",
    "Letter to Readers",
    "AIDS Watch",
    "Antiretroviral Rounds",
    "Case History",
    "Clinical Practice Guideline Watch",
    "Clinical Spotlight",
    "Correction",
    "Editor's Choice",
    "Editorial",
    "Feature",
    "From the Blogs",
    "General Medicine",
    "Landmark Article",
    "Medical News",
    "Meeting Notes",
    "Meeting Report",
    "News in Context",
    "Patient Information",
    "Practice Watch",
    "Research Notes",
    "Top General Medicine Stories",
    "Top Story",
    "Vaccine Watch",
    "Question of the Week",
    "NEJM Image Challenge",
    "NEJM Research Summary",
)


class Operation(str, Enum):
    """Operations exposed as MCP tools."""

    FETCH_BY_DOI = "fetch_by_doi"
    SIMPLE_QUERY = "simple_query"
    MORE_LIKE_THIS = "more_like_this"
    BROWSE_ARTICLE_TYPE = "browse_article_type"


@dataclass(frozen=True)
class OneSearchRequest:
    """Target path and query-string parameters for one outbound GET."""

    operation: Operation
    path: str
    params: dict[str, str] = field(default_factory=dict)


def _require(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MissingParameterError(name)
    return value.strip()


def build_fetch_by_doi(doi: str) -> OneSearchRequest:
    """GET /content?doi=...&context=<inferred>&format=json"""
    doi = _require("doi", doi)
    context = infer_context_from_doi(doi)
    return OneSearchRequest(
        operation=Operation.FETCH_BY_DOI,
        path=CONTENT_PATH,
        params={"doi": doi, "context": context.value, "format": "json"},
    )


def build_simple_query(context: str, query: str) -> OneSearchRequest:
    """GET /simple?context=...&query=...&objectType=...&showResults=full"""
    if context is None:
        raise MissingParameterError("context")
    resolved = resolve_context(context)
    query = _require("query", query)
    return OneSearchRequest(
        operation=Operation.SIMPLE_QUERY,
        path=SIMPLE_PATH,
        params={
            "context": resolved.normalized_context.value,
            "query": query,
            "objectType": resolved.object_type,
            "showResults": "full",
        },
    )


def build_more_like_this(doi: str, context: str | None = None) -> OneSearchRequest:
    """GET /morelikethis; searches every journal unless a context is given."""
    doi = _require("doi", doi)
    if context is None:
        code = ContextCode.FEDERATED
    else:
        code = resolve_context(context).normalized_context
    return OneSearchRequest(
        operation=Operation.MORE_LIKE_THIS,
        path=MORE_LIKE_THIS_PATH,
        params={
            "doi": doi,
            "context": code.value,
            "objectType": MORE_LIKE_THIS_FEDERATED_OBJECT_TYPE if code.is_federated else object_type_for(code),
            "showResults": "full",
        },
    )


def build_browse_article_type(context: str, article_type: str) -> OneSearchRequest:
    """GET /simple?context=...&articleType=...&objectType=...&sortBy=pubdate-descending"""
    if context is None:
        raise MissingParameterError("context")
    code = resolve_context(context).normalized_context
    if code.is_federated:
        raise InvalidContextError(context, "browsing requires a single journal")
    article_type = _require("articleType", article_type)
    return OneSearchRequest(
        operation=Operation.BROWSE_ARTICLE_TYPE,
        path=SIMPLE_PATH,
        params={
            "context": code.value,
            "articleType": article_type,
            "objectType": object_type_for(code),
            "sortBy": "pubdate-descending",
        },
    )


_BUILDERS = {
    Operation.FETCH_BY_DOI: build_fetch_by_doi,
    Operation.SIMPLE_QUERY: build_simple_query,
    Operation.MORE_LIKE_THIS: build_more_like_this,
    Operation.BROWSE_ARTICLE_TYPE: build_browse_article_type,
}


def build_request(operation: Operation | str, **params: Any) -> OneSearchRequest:
    """
    Build the request for an operation.

    Example:
        build_request("simple_query", context="NEJM Catalyst", query="diabetes")
    """
    return _BUILDERS[Operation(operation)](**params)


__all__ = [
    "ARTICLE_TYPES",
    "CONTENT_PATH",
    "SIMPLE_PATH",
    "MORE_LIKE_THIS_PATH",
    "MORE_LIKE_THIS_FEDERATED_OBJECT_TYPE",
    "Operation",
    "OneSearchRequest",
    "build_request",
    "build_fetch_by_doi",
    "build_simple_query",
    "build_more_like_this",
    "build_browse_article_type",
]
