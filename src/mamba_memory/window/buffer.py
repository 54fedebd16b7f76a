"""Token-windowed message buffer."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable

from mamba_memory.errors import InvalidConfigurationError
from mamba_memory.messages import ChatMessage, MessageKind
from mamba_memory.store.base import MessageStore
from mamba_memory.store.memory import SingleSlotMessageStore
from mamba_memory.tokens.counter import TokenCounter
from mamba_memory.tokens.estimator import CostEstimator
from mamba_memory.window.config import WindowConfig
from mamba_memory.window.eviction import EvictionResult, enforce_capacity
from mamba_memory.window.state import WindowState

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY = "default"


class WindowedMessageBuffer:
    """Chat memory that keeps the most recent messages within a token budget.

    The buffer is a sliding window over recency: when the stored messages
    cost more than ``capacity`` tokens, the oldest ones are evicted whole.

    - A system message is kept at the front and never evicted by capacity
      pressure. Adding a system message with the same content is ignored;
      adding one with different content replaces the previous one.
    - Evicting an assistant turn with tool calls also evicts the tool
      results that directly follow it.

    State lives in the ``MessageStore``; every call reloads it, so the
    buffer holds nothing between calls. There is no locking: concurrent
    calls for the same identity may lose updates unless the store
    serializes them.

    Example:
        >>> from mamba_memory import WindowedMessageBuffer, TokenCounter
        >>> from mamba_memory.messages import system_message, user_message
        >>> memory = WindowedMessageBuffer(capacity=1000, estimator=TokenCounter())
        >>> memory.add(system_message("You are terse."))
        >>> memory.add(user_message("Hi"))
        >>> [m.role for m in memory.messages()]
        ['system', 'user']
    """

    def __init__(
        self,
        capacity: int,
        estimator: CostEstimator,
        identity: Hashable = DEFAULT_IDENTITY,
        store: MessageStore | None = None,
        keep_system_first: bool = True,
    ) -> None:
        """Initialize the buffer.

        Args:
            capacity: Token budget; must be a positive integer.
            estimator: Cost estimator for messages.
            identity: Conversation identity used as the store key.
            store: Message store. Defaults to a ``SingleSlotMessageStore``
                bound to ``identity``.
            keep_system_first: Place an added system message at index 0.
                When False it is appended like any other message.

        Raises:
            InvalidConfigurationError: If any argument is unusable.
        """
        if identity is None:
            raise InvalidConfigurationError(
                "identity must not be None", config_key="identity", expected="non-null"
            )
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidConfigurationError(
                f"capacity must be a positive integer, got {capacity!r}",
                config_key="capacity",
                expected="int > 0",
                actual=capacity,
            )
        if estimator is None:
            raise InvalidConfigurationError(
                "estimator must not be None", config_key="estimator", expected="CostEstimator"
            )

        self._identity = identity
        self._capacity = capacity
        self._estimator = estimator
        self._store = store if store is not None else SingleSlotMessageStore(identity)
        self._keep_system_first = keep_system_first

    @classmethod
    def from_config(
        cls,
        config: WindowConfig,
        estimator: CostEstimator | None = None,
        store: MessageStore | None = None,
    ) -> WindowedMessageBuffer:
        """Build a buffer from a ``WindowConfig``.

        Args:
            config: Window configuration.
            estimator: Cost estimator. Defaults to a ``TokenCounter`` built
                from ``config.tokenizer``.
            store: Message store.

        Returns:
            The configured buffer.
        """
        if estimator is None:
            estimator = TokenCounter(config=config.tokenizer)
        return cls(
            capacity=config.capacity,
            estimator=estimator,
            identity=config.identity,
            store=store,
            keep_system_first=config.keep_system_first,
        )

    @property
    def identity(self) -> Hashable:
        return self._identity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def estimator(self) -> CostEstimator:
        return self._estimator

    @property
    def store(self) -> MessageStore:
        return self._store

    @property
    def keep_system_first(self) -> bool:
        return self._keep_system_first

    def add(self, message: ChatMessage) -> None:
        """Add a message, evict as needed, and persist the window.

        Args:
            message: Message to add.
        """
        messages = list(self._store.get_messages(self._identity))

        if message.kind is MessageKind.SYSTEM:
            existing = _find_system_message(messages)
            if existing is not None:
                if existing.content == message.content:
                    logger.debug("Ignoring duplicate system message for %r", self._identity)
                    return
                logger.debug("Replacing system message for %r", self._identity)
                messages.remove(existing)

        if message.kind is MessageKind.SYSTEM and self._keep_system_first:
            messages.insert(0, message)
        else:
            messages.append(message)

        result = self._enforce(messages)
        self._store.update_messages(self._identity, result.messages)

    def add_all(self, messages: Iterable[ChatMessage]) -> None:
        """Add messages one at a time, in order.

        Args:
            messages: Messages to append.
        """
        for message in messages:
            self.add(message)

    def messages(self) -> list[ChatMessage]:
        """Return the window's messages without persisting.

        Capacity is enforced on read too, so a store changed externally or
        a smaller capacity is reconciled here.

        Returns:
            Retained messages, oldest first.
        """
        return self._enforce(self._store.get_messages(self._identity)).messages

    def clear(self) -> None:
        """Delete all stored messages for this identity."""
        self._store.delete_messages(self._identity)

    def get_state(self) -> WindowState:
        """Summarize the current window.

        Returns:
            WindowState with message and token counts.
        """
        result = self._enforce(self._store.get_messages(self._identity))
        retained = result.messages
        return WindowState(
            identity=self._identity,
            capacity=self._capacity,
            message_count=len(retained),
            token_count=result.tokens_after,
            has_system_message=bool(retained) and retained[0].kind is MessageKind.SYSTEM,
        )

    def _enforce(self, messages: list[ChatMessage]) -> EvictionResult:
        result = enforce_capacity(messages, self._capacity, self._estimator)
        if result.removed_count:
            logger.debug(
                "Evicted %d message(s) from %r: %d -> %d tokens",
                result.removed_count,
                self._identity,
                result.tokens_before,
                result.tokens_after,
            )
        return result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(identity={self._identity!r}, capacity={self._capacity}, "
            f"store={type(self._store).__name__})"
        )


def _find_system_message(messages: list[ChatMessage]) -> ChatMessage | None:
    for message in messages:
        if message.kind is MessageKind.SYSTEM:
            return message
    return None
