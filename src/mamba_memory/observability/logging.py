"""Logging setup for mamba-memory."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from mamba_memory.config.logging_config import LoggingConfig

PACKAGE_LOGGER = "mamba_memory"

# LogRecord attributes that are not user-supplied extras
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Format records as single-line JSON objects.

    Extra attributes passed via ``extra=`` are included as top-level keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure the package logger.

    Replaces handlers previously installed by this function, so calling it
    again reconfigures rather than duplicates output.

    Args:
        config: Logging configuration. Defaults to ``LoggingConfig()``.

    Returns:
        The configured ``mamba_memory`` logger.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level)

    for handler in list(logger.handlers):
        if getattr(handler, "_mamba_memory", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._mamba_memory = True  # type: ignore[attr-defined]
    if config.structured:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    return logger
