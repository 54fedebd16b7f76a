"""Cost estimator protocol consumed by the windowed memory."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mamba_memory.messages import ChatMessage


@runtime_checkable
class CostEstimator(Protocol):
    """Computes the token cost of messages.

    Implementations must be deterministic and side-effect free, and must
    keep both methods consistent: the cost of a sequence equals the sum of
    the costs of its messages. The memory maintains its running total by
    subtracting ``cost_of`` for each evicted message, so an inconsistent
    estimator makes eviction under- or over-correct.
    """

    def cost_of(self, message: ChatMessage) -> int:
        """Return the non-negative token cost of one message."""
        ...

    def cost_of_sequence(self, messages: Iterable[ChatMessage]) -> int:
        """Return the non-negative token cost of an ordered sequence."""
        ...
