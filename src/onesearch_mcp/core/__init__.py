"""
Core module for OneSearch MCP.

Provides:
- Unified exception hierarchy
- Error classification into the tool-facing taxonomy
"""

from .error_classifier import ClassifiedError, classify_error
from .exceptions import (
    # Base
    OneSearchError,
    ErrorCategory,
    ErrorKind,
    # Validation errors
    ValidationError,
    InvalidContextError,
    MissingParameterError,
    # Upstream errors
    UpstreamError,
    UpstreamHttpError,
    UpstreamTransportError,
    UnknownError,
    # Configuration errors
    ConfigurationError,
)

__all__ = [
    # Exceptions
    "OneSearchError",
    "ErrorCategory",
    "ErrorKind",
    "ValidationError",
    "InvalidContextError",
    "MissingParameterError",
    "UpstreamError",
    "UpstreamHttpError",
    "UpstreamTransportError",
    "UnknownError",
    "ConfigurationError",
    # Classification
    "ClassifiedError",
    "classify_error",
]
