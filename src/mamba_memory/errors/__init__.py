"""Error types for the chat memory layer."""

from mamba_memory.errors.exceptions import ChatMemoryError, InvalidConfigurationError

__all__ = [
    "ChatMemoryError",
    "InvalidConfigurationError",
]
