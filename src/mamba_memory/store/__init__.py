"""Message stores backing the windowed memory.

A store is keyed persistence of an ordered message sequence per conversation
identity. The memory treats the store as the source of truth and reloads it
on every operation.

- SingleSlotMessageStore: default store, one sequence for one identity
- InMemoryMessageStore: process-local store keyed by identity
"""

from mamba_memory.store.base import MessageStore
from mamba_memory.store.memory import InMemoryMessageStore, SingleSlotMessageStore

__all__ = ["InMemoryMessageStore", "MessageStore", "SingleSlotMessageStore"]
