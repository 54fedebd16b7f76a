"""
Mamba Memory - token-windowed chat memory for LLM conversations.

Quick Start:
    >>> from mamba_memory import WindowedMessageBuffer, TokenCounter
    >>> from mamba_memory.messages import system_message, user_message
    >>> memory = WindowedMessageBuffer(capacity=4000, estimator=TokenCounter())
    >>> memory.add(system_message("You are a helpful assistant."))
    >>> memory.add(user_message("Hello!"))
    >>> [m.to_dict() for m in memory.messages()]

With Settings:
    >>> from mamba_memory import MemorySettings, WindowedMessageBuffer
    >>> settings = MemorySettings()  # Loads from env and .env
    >>> memory = WindowedMessageBuffer.from_config(settings.window)

Key Features:
    - Sliding token window with whole-message eviction
    - System message kept at the front, replaced rather than duplicated
    - Tool results evicted together with their tool call request
    - Pluggable message stores and cost estimators
"""

from importlib.metadata import PackageNotFoundError, version

from mamba_memory.config import LoggingConfig, MemorySettings
from mamba_memory.errors import ChatMemoryError, InvalidConfigurationError
from mamba_memory.messages import ChatMessage, MessageKind, ToolCall
from mamba_memory.observability import setup_logging
from mamba_memory.store import InMemoryMessageStore, MessageStore, SingleSlotMessageStore
from mamba_memory.tokens import CostEstimator, TokenCounter, TokenizerConfig
from mamba_memory.window import (
    EvictionResult,
    WindowConfig,
    WindowedMessageBuffer,
    WindowState,
    enforce_capacity,
)

__all__ = [
    # Core
    "WindowConfig",
    "WindowState",
    "WindowedMessageBuffer",
    "EvictionResult",
    "enforce_capacity",
    # Messages
    "ChatMessage",
    "MessageKind",
    "ToolCall",
    # Collaborators
    "CostEstimator",
    "InMemoryMessageStore",
    "MessageStore",
    "SingleSlotMessageStore",
    "TokenCounter",
    "TokenizerConfig",
    # Config
    "LoggingConfig",
    "MemorySettings",
    "setup_logging",
    # Errors
    "ChatMemoryError",
    "InvalidConfigurationError",
    # Version
    "__version__",
]

try:
    __version__ = version("mamba-memory")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
