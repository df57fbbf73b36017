"""Centralized logging helpers.

The CLI writes its result to stdout, so every handler configured here targets
stderr or a file.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional

from constants import Constants

_HANDLER_NAME = "metadep-console"


def _resolve_level(level: Optional[str] = None) -> int:
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger once.

    Args:
        level: Level name; falls back to METADEP_LOG_LEVEL, then INFO.
        log_file: Optional path for an additional file handler.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        root.addHandler(file_handler)
        logging.getLogger(__name__).info("Logging to file: %s", log_file)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when the logger would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for structured debug records.

    None values are dropped so formatters only see populated keys.
    """
    return {k: v for k, v in fields.items() if v is not None}
