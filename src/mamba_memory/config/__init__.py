"""Configuration system for mamba-memory.

Main exports:
- MemorySettings: Root configuration class
- WindowConfig: Token window settings
- LoggingConfig: Logging configuration
"""

from mamba_memory.config.logging_config import LoggingConfig
from mamba_memory.config.settings import MemorySettings
from mamba_memory.window.config import WindowConfig

__all__ = [
    "LoggingConfig",
    "MemorySettings",
    "WindowConfig",
]
