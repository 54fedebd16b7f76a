"""Token-budget eviction for a message window."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from mamba_memory.messages import ChatMessage, MessageKind
from mamba_memory.tokens.estimator import CostEstimator

logger = logging.getLogger(__name__)


@dataclass
class EvictionResult:
    """Result of enforcing a capacity on a message sequence.

    Attributes:
        messages: Retained messages, in their original order.
        evicted: Removed messages, in eviction order.
        tokens_before: Sequence cost before eviction.
        tokens_after: Running cost after eviction.
    """

    messages: list[ChatMessage]
    evicted: list[ChatMessage] = field(default_factory=list)
    tokens_before: int = 0
    tokens_after: int = 0

    @property
    def removed_count(self) -> int:
        return len(self.evicted)


def _pop_at(window: deque[ChatMessage], index: int) -> ChatMessage:
    if index == 0:
        return window.popleft()
    message = window[index]
    del window[index]
    return message


def enforce_capacity(
    messages: Iterable[ChatMessage],
    capacity: int,
    estimator: CostEstimator,
) -> EvictionResult:
    """Evict the oldest messages until the sequence fits the capacity.

    A system message at index 0 is never evicted; the oldest message after
    it goes instead. A lone system message over capacity is kept. When an
    assistant turn with tool calls is evicted, the tool results directly
    following it are evicted with it, since providers reject tool results
    without their request. Only that contiguous run is removed.

    The total is computed once with ``cost_of_sequence`` and then reduced
    by ``cost_of`` for each evicted message.

    Args:
        messages: Messages, oldest first.
        capacity: Token budget.
        estimator: Cost estimator.

    Returns:
        EvictionResult with the retained and evicted messages.
    """
    window: deque[ChatMessage] = deque(messages)
    if not window:
        return EvictionResult(messages=[])

    tokens_before = estimator.cost_of_sequence(window)
    current = tokens_before
    evicted: list[ChatMessage] = []

    while current > capacity and window:
        index = 0
        if window[0].kind is MessageKind.SYSTEM:
            if len(window) == 1:
                logger.debug(
                    "Keeping lone system message (%d tokens) over capacity %d",
                    current,
                    capacity,
                )
                break
            index = 1

        message = _pop_at(window, index)
        cost = estimator.cost_of(message)
        logger.debug(
            "Evicting %s message (%d tokens) to fit capacity %d", message.role, cost, capacity
        )
        current -= cost
        evicted.append(message)

        if message.kind is MessageKind.REQUEST_BEARING and message.has_outstanding_requests:
            while index < len(window) and window[index].kind is MessageKind.RESULT_BEARING:
                orphan = _pop_at(window, index)
                orphan_cost = estimator.cost_of(orphan)
                logger.debug(
                    "Evicting orphan tool result %s (%d tokens)", orphan.tool_call_id, orphan_cost
                )
                current -= orphan_cost
                evicted.append(orphan)

    return EvictionResult(
        messages=list(window),
        evicted=evicted,
        tokens_before=tokens_before,
        tokens_after=current,
    )
