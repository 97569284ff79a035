"""Shared utilities used across layers."""

from .logging_setup import LOG_FORMAT, configure_logging

__all__ = ["LOG_FORMAT", "configure_logging"]
