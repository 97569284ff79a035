"""OneSearch API integration: context resolution, request building, HTTP client."""

from .client import DEFAULT_TIMEOUT, OneSearchClient
from .context import (
    CONTEXT_ALIASES,
    FEDERATED_OBJECT_TYPE,
    ContextConfig,
    get_context_reference,
    infer_context_from_doi,
    object_type_for,
    resolve_context,
)
from .mappers import article_from_api, envelope_from_api
from .requests import ARTICLE_TYPES, OneSearchRequest, Operation, build_request

__all__ = [
    # Client
    "OneSearchClient",
    "DEFAULT_TIMEOUT",
    # Context resolution
    "CONTEXT_ALIASES",
    "FEDERATED_OBJECT_TYPE",
    "ContextConfig",
    "resolve_context",
    "infer_context_from_doi",
    "object_type_for",
    "get_context_reference",
    # Requests
    "ARTICLE_TYPES",
    "Operation",
    "OneSearchRequest",
    "build_request",
    # Mapping
    "article_from_api",
    "envelope_from_api",
]
