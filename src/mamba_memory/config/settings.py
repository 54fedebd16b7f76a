"""Root settings loaded from the environment."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mamba_memory.config.logging_config import LoggingConfig
from mamba_memory.window.config import WindowConfig


class MemorySettings(BaseSettings):
    """Root configuration for mamba-memory.

    Values are read from ``MAMBA_MEMORY_*`` environment variables and a
    ``.env`` file. Nested fields use ``__`` as delimiter, e.g.
    ``MAMBA_MEMORY_WINDOW__CAPACITY=8000``.

    Attributes:
        window: Token window settings.
        logging: Logging settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="MAMBA_MEMORY_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    window: WindowConfig = Field(
        default_factory=WindowConfig,
        description="Token window settings",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings",
    )
