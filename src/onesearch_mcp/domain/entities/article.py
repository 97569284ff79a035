"""
Domain Entities: ContextCode, ArticleReference, QueryEnvelope

Pure domain entities. Mapping from the OneSearch wire format is handled by
the infrastructure layer (infrastructure/onesearch/mappers.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ContextCode(str, Enum):
    """Journal scope a query is restricted to."""

    NEJM = "nejm"
    CATALYST = "catalyst"
    EVIDENCE = "evidence"
    CLINICIAN = "clinician"
    NEJM_AI = "nejm-ai"
    FEDERATED = "federated"

    @property
    def is_federated(self) -> bool:
        return self is ContextCode.FEDERATED


@dataclass
class ArticleReference:
    """
    One search hit.

    Only references carrying both a DOI and a title are shown to callers
    (see ``is_displayable``).
    """

    doi: str = ""
    title: str | None = None
    journal: str | None = None
    pub_date: str | None = None
    snippet: str | None = None
    article_type: list[str] = field(default_factory=list)
    is_free: bool = False
    media_type: str | None = None
    media_title: str | None = None
    thumbnail: str | None = None

    @property
    def is_displayable(self) -> bool:
        """Whether both doi and title are present."""
        return bool(self.doi) and bool(self.title)


@dataclass
class QueryEnvelope:
    """
    Response wrapper returned by every OneSearch endpoint.

    ``document`` only appears on /content responses (raw JATS XML);
    facets and diagnostics are kept in ``raw`` and otherwise ignored.
    """

    total: int = 0
    results: list[ArticleReference] = field(default_factory=list)
    document: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def displayable_results(self) -> list[ArticleReference]:
        """Results passing the doi+title filter, in API order."""
        return [ref for ref in self.results if ref.is_displayable]
