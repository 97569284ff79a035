"""
Logging configuration for the server process.

Console output goes to stderr because stdout carries the stdio MCP transport.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from onesearch_mcp.config import LoggingSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: LoggingSettings) -> Path | None:
    """
    Install console (and optionally file) handlers on the root logger.

    Returns:
        Path of the log file, or None when file logging is off or failed.
    """
    level = logging.DEBUG if settings.debug_console else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if not settings.enable_file_logging:
        return None

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S")
    log_path = Path(settings.log_directory) / f"mcp-server-{timestamp}.log"
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        sys.stderr.write(f"Failed to initialize file logging: {e}\n")
        return None

    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    logging.getLogger(__name__).info(f"File logging enabled, writing to: {log_path}")
    return log_path


__all__ = ["LOG_FORMAT", "configure_logging"]
