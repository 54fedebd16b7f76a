"""Base class for message stores."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence

from mamba_memory.messages import ChatMessage


class MessageStore(ABC):
    """Abstract keyed storage of ordered message sequences.

    Stores are responsible for any serialization needed when the same
    identity is used from several callers at once. The memory performs an
    unlocked load-modify-store cycle per operation.
    """

    @abstractmethod
    def get_messages(self, identity: Hashable) -> list[ChatMessage]:
        """Load the stored sequence.

        Args:
            identity: Conversation identity.

        Returns:
            The stored messages, oldest first. Empty for an unknown identity.
        """
        ...

    @abstractmethod
    def update_messages(self, identity: Hashable, messages: Sequence[ChatMessage]) -> None:
        """Replace the stored sequence.

        Args:
            identity: Conversation identity.
            messages: The complete new sequence.
        """
        ...

    @abstractmethod
    def delete_messages(self, identity: Hashable) -> None:
        """Remove everything stored for an identity.

        Safe to call when nothing is stored.

        Args:
            identity: Conversation identity.
        """
        ...
