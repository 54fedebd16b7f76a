"""Logging configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Log level for the ``mamba_memory`` logger.
        structured: Emit one JSON object per line instead of plain text.
        format: Format string used when ``structured`` is False.
    """

    level: LogLevel = Field(
        default="INFO",
        description="Log level for the mamba_memory logger",
    )
    structured: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )
    format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Format string for plain-text logs",
    )
