"""Token-windowed chat memory.

Keeps the most recent messages of a conversation within a token budget,
evicting the oldest first while keeping the system message and never
leaving tool results without their request.

Standalone Usage:
    >>> from mamba_memory.window import WindowedMessageBuffer
    >>> from mamba_memory.tokens import TokenCounter
    >>> memory = WindowedMessageBuffer(capacity=4000, estimator=TokenCounter())
    >>> memory.add(...)
    >>> history = memory.messages()

Pure eviction, without a store:
    >>> from mamba_memory.window import enforce_capacity
    >>> result = enforce_capacity(messages, capacity=4000, estimator=TokenCounter())
    >>> result.removed_count
"""

from mamba_memory.window.buffer import WindowedMessageBuffer
from mamba_memory.window.config import WindowConfig
from mamba_memory.window.eviction import EvictionResult, enforce_capacity
from mamba_memory.window.state import WindowState

__all__ = [
    "EvictionResult",
    "WindowConfig",
    "WindowState",
    "WindowedMessageBuffer",
    "enforce_capacity",
]
