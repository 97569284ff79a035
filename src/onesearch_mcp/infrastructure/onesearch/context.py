"""
Context Resolution - journal names/aliases to OneSearch context codes.

- resolve_context(): exact alias lookup for caller-supplied journal names
- infer_context_from_doi(): substring heuristic used by fetch-by-doi

The two are deliberately separate: fetch-by-doi takes no context parameter,
so its context is guessed from the DOI itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from onesearch_mcp.core.exceptions import InvalidContextError
from onesearch_mcp.domain.entities import ContextCode

# ============================================================================
# Alias Table (case-sensitive, exact match after trimming)
# ============================================================================

CONTEXT_ALIASES: dict[str, ContextCode] = {
    "New England Journal of Medicine": ContextCode.NEJM,
    "The New England Journal of Medicine": ContextCode.NEJM,
    "NEJM": ContextCode.NEJM,
    "nejm": ContextCode.NEJM,
    "NEJM Catalyst": ContextCode.CATALYST,
    "Catalyst": ContextCode.CATALYST,
    "catalyst": ContextCode.CATALYST,
    "NEJM Evidence": ContextCode.EVIDENCE,
    "Evidence": ContextCode.EVIDENCE,
    "evidence": ContextCode.EVIDENCE,
    "NEJM AI": ContextCode.NEJM_AI,
    "AI": ContextCode.NEJM_AI,
    "nejm-ai": ContextCode.NEJM_AI,
    "NEJM Clinician": ContextCode.CLINICIAN,
    "Clinician": ContextCode.CLINICIAN,
    "NEJM Journal Watch": ContextCode.CLINICIAN,
    "Journal Watch": ContextCode.CLINICIAN,
    "clinician": ContextCode.CLINICIAN,
    "All": ContextCode.FEDERATED,
    "all": ContextCode.FEDERATED,
    "Federated": ContextCode.FEDERATED,
    "federated": ContextCode.FEDERATED,
}

# Single-journal contexts in the order used for the federated union
JOURNAL_CONTEXTS: tuple[ContextCode, ...] = (
    ContextCode.NEJM,
    ContextCode.CATALYST,
    ContextCode.EVIDENCE,
    ContextCode.CLINICIAN,
    ContextCode.NEJM_AI,
)

# The upstream expects the trailing semicolon
FEDERATED_OBJECT_TYPE = "".join(f"{code.value}-article;" for code in JOURNAL_CONTEXTS)

# First match wins
DOI_CONTEXT_MARKERS: tuple[tuple[str, ContextCode], ...] = (
    ("NEJM", ContextCode.NEJM),
    ("CAT", ContextCode.CATALYST),
    ("EVID", ContextCode.EVIDENCE),
    ("AI", ContextCode.NEJM_AI),
)
DOI_DEFAULT_CONTEXT = ContextCode.CLINICIAN


@dataclass(frozen=True, slots=True)
class ContextConfig:
    """Normalized context plus the objectType filter that goes with it."""

    normalized_context: ContextCode
    object_type: str


def object_type_for(code: ContextCode) -> str:
    """objectType filter string for a context code."""
    if code.is_federated:
        return FEDERATED_OBJECT_TYPE
    return f"{code.value}-article"


def resolve_context(value: str) -> ContextConfig:
    """
    Map a free-form journal name to its context code and objectType.

    Raises:
        InvalidContextError: If the trimmed value is not a known alias.
    """
    code = CONTEXT_ALIASES.get(value.strip()) if isinstance(value, str) else None
    if code is None:
        raise InvalidContextError(value)
    return ContextConfig(normalized_context=code, object_type=object_type_for(code))


def infer_context_from_doi(doi: str) -> ContextCode:
    """Guess the journal of a DOI from marker substrings; clinician is the catchall."""
    for marker, code in DOI_CONTEXT_MARKERS:
        if marker in doi:
            return code
    return DOI_DEFAULT_CONTEXT


def get_context_reference() -> dict:
    """Context codes, their aliases and objectType filters."""
    aliases: dict[str, list[str]] = {code.value: [] for code in ContextCode}
    for alias, code in CONTEXT_ALIASES.items():
        aliases[code.value].append(alias)
    return {
        "description": "OneSearch journal contexts",
        "contexts": {
            code.value: {
                "aliases": aliases[code.value],
                "object_type": object_type_for(code),
            }
            for code in ContextCode
        },
        "doi_inference": {
            "order": [marker for marker, _ in DOI_CONTEXT_MARKERS],
            "default": DOI_DEFAULT_CONTEXT.value,
        },
    }


__all__ = [
    "CONTEXT_ALIASES",
    "JOURNAL_CONTEXTS",
    "FEDERATED_OBJECT_TYPE",
    "ContextConfig",
    "object_type_for",
    "resolve_context",
    "infer_context_from_doi",
    "get_context_reference",
]
