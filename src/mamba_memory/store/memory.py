"""Process-local message stores."""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Sequence

from mamba_memory.messages import ChatMessage
from mamba_memory.store.base import MessageStore

logger = logging.getLogger(__name__)


class SingleSlotMessageStore(MessageStore):
    """Holds a single message sequence for one identity.

    Used by default when a memory is built without a store. Nothing
    survives a process restart. Reads for any other identity return an
    empty list; writes and deletes for one raise ``ValueError``.
    """

    def __init__(self, identity: Hashable) -> None:
        self._identity = identity
        self._messages: list[ChatMessage] = []

    @property
    def identity(self) -> Hashable:
        return self._identity

    def get_messages(self, identity: Hashable) -> list[ChatMessage]:
        if identity != self._identity:
            logger.warning(
                "Store for identity %r ignored read for identity %r", self._identity, identity
            )
            return []
        return list(self._messages)

    def update_messages(self, identity: Hashable, messages: Sequence[ChatMessage]) -> None:
        self._check_identity(identity)
        self._messages = list(messages)

    def delete_messages(self, identity: Hashable) -> None:
        self._check_identity(identity)
        self._messages = []

    def _check_identity(self, identity: Hashable) -> None:
        if identity != self._identity:
            raise ValueError(f"Store holds identity {self._identity!r}, got {identity!r}")


class InMemoryMessageStore(MessageStore):
    """Thread-safe process-local store keyed by identity.

    The lock protects the mapping itself; it does not serialize the
    load-modify-store cycle of a memory sharing this store.
    """

    def __init__(self) -> None:
        self._messages: dict[Hashable, list[ChatMessage]] = {}
        self._lock = threading.Lock()

    def get_messages(self, identity: Hashable) -> list[ChatMessage]:
        with self._lock:
            return list(self._messages.get(identity, []))

    def update_messages(self, identity: Hashable, messages: Sequence[ChatMessage]) -> None:
        with self._lock:
            self._messages[identity] = list(messages)

    def delete_messages(self, identity: Hashable) -> None:
        with self._lock:
            self._messages.pop(identity, None)

    def identities(self) -> list[Hashable]:
        """Return the identities that currently have stored messages."""
        with self._lock:
            return list(self._messages)
