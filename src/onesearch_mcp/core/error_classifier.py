"""
Error classifier - maps any failure raised during a tool call onto ErrorKind.

Pure mapping, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from .exceptions import (
    ErrorKind,
    OneSearchError,
    UpstreamHttpError,
    UpstreamTransportError,
)


@dataclass(frozen=True, slots=True)
class ClassifiedError:
    """A failure reduced to its taxonomy kind and a human-readable message."""

    kind: ErrorKind
    message: str


def transport_reason(error: BaseException) -> str:
    """Message of a transport exception, or its class name when it has none."""
    return str(error) or type(error).__name__


def classify_error(error: BaseException) -> ClassifiedError:
    """
    Classify an exception.

    - OneSearchError subclasses keep their own kind and message
    - httpx.HTTPStatusError -> UpstreamHttpError
    - httpx.RequestError (connect, DNS, timeout) -> UpstreamTransportError
    - anything else -> UnknownError, message verbatim
    """
    if isinstance(error, OneSearchError):
        return ClassifiedError(kind=error.kind, message=error.message)

    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        try:
            body = response.json()
        except ValueError:
            body = response.text
        converted = UpstreamHttpError(response.status_code, body)
        return ClassifiedError(kind=converted.kind, message=converted.message)

    if isinstance(error, httpx.RequestError):
        converted = UpstreamTransportError(transport_reason(error))
        return ClassifiedError(kind=converted.kind, message=converted.message)

    return ClassifiedError(kind=ErrorKind.UNKNOWN, message=str(error))


__all__ = ["ClassifiedError", "classify_error", "transport_reason"]
