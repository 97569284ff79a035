"""
Unified Exception Hierarchy for OneSearch MCP.

Exception Hierarchy:
    OneSearchError (base)
    ├── ValidationError
    │   ├── InvalidContextError
    │   └── MissingParameterError
    ├── UpstreamError
    │   ├── UpstreamHttpError
    │   └── UpstreamTransportError
    ├── UnknownError
    └── ConfigurationError

Nothing here is retried: every error is surfaced to the caller on the first
failed attempt.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Taxonomy of failures a tool invocation can report."""

    INVALID_CONTEXT = "InvalidContext"
    MISSING_PARAMETER = "MissingParameter"
    UPSTREAM_HTTP = "UpstreamHttpError"
    UPSTREAM_TRANSPORT = "UpstreamTransportError"
    UNKNOWN = "UnknownError"


class ErrorCategory(Enum):
    """Categories for error classification."""

    VALIDATION = "validation"
    UPSTREAM = "upstream"
    CONFIGURATION = "config"
    UNKNOWN = "unknown"


class OneSearchError(Exception):
    """
    Base exception for all OneSearch errors.

    ``kind`` is the tool-facing taxonomy entry (see ErrorKind); ``message`` is
    the text shown after the per-tool error prefix.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, *, category: ErrorCategory = ErrorCategory.UNKNOWN) -> None:
        super().__init__(message)
        self.message = message
        self.category = category


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(OneSearchError):
    """Base class for input errors detected before any request is issued."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.VALIDATION)


class InvalidContextError(ValidationError):
    """Raised when a journal name/alias does not match the alias table."""

    kind = ErrorKind.INVALID_CONTEXT

    def __init__(self, value: Any, reason: str | None = None) -> None:
        message = f"Invalid context: {value}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.value = value


class MissingParameterError(ValidationError):
    """Raised when a required parameter is absent or blank."""

    kind = ErrorKind.MISSING_PARAMETER

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing required parameter: {param_name}")
        self.param_name = param_name


# =============================================================================
# Upstream Errors
# =============================================================================


class UpstreamError(OneSearchError):
    """Base class for failures talking to the OneSearch API."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.UPSTREAM)


class UpstreamHttpError(UpstreamError):
    """The API answered with a non-2xx status."""

    kind = ErrorKind.UPSTREAM_HTTP

    def __init__(self, status: int, body: Any = None) -> None:
        self.status = status
        self.body = body
        detail = _body_detail(body)
        message = f"OneSearch API error {status}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UpstreamTransportError(UpstreamError):
    """No HTTP response: connection failure, DNS failure or timeout."""

    kind = ErrorKind.UPSTREAM_TRANSPORT

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"OneSearch request failed: {reason}")


class UnknownError(OneSearchError):
    """Any failure that fits none of the other kinds; message kept verbatim."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.UNKNOWN)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(OneSearchError):
    """Raised at startup when required configuration is missing or malformed."""

    def __init__(self, message: str, *, missing: list[str] | None = None) -> None:
        super().__init__(message, category=ErrorCategory.CONFIGURATION)
        self.missing = missing or []


def _body_detail(body: Any) -> str:
    """Pick the most useful text out of an error response body."""
    if body is None:
        return ""
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
        return json.dumps(body, ensure_ascii=False)
    return str(body).strip()
