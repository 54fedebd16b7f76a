"""Message and collaborator builders shared by the tests."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from mamba_memory.messages import (
    ChatMessage,
    ToolCall,
    assistant_message,
    system_message,
    tool_result_message,
    user_message,
)
from mamba_memory.store import InMemoryMessageStore


class StubEstimator:
    """Cost estimator reading a fixed cost from message content.

    Content is written as ``"<label>|<cost>"``; see the ``make_*`` helpers.
    """

    def __init__(self) -> None:
        self.sequence_calls = 0

    def cost_of(self, message: ChatMessage) -> int:
        return int((message.content or "|0").rsplit("|", 1)[1])

    def cost_of_sequence(self, messages: Iterable[ChatMessage]) -> int:
        self.sequence_calls += 1
        return sum(self.cost_of(m) for m in messages)


class RecordingStore(InMemoryMessageStore):
    """In-memory store that counts writes and deletes."""

    def __init__(self) -> None:
        super().__init__()
        self.update_count = 0
        self.delete_count = 0

    def update_messages(self, identity: Hashable, messages: Sequence[ChatMessage]) -> None:
        self.update_count += 1
        super().update_messages(identity, messages)

    def delete_messages(self, identity: Hashable) -> None:
        self.delete_count += 1
        super().delete_messages(identity)


def make_system(label: str, cost: int) -> ChatMessage:
    return system_message(f"{label}|{cost}")


def make_user(label: str, cost: int) -> ChatMessage:
    return user_message(f"{label}|{cost}")


def make_request(label: str, cost: int, *call_ids: str) -> ChatMessage:
    calls = [ToolCall(id=call_id, name="read_file") for call_id in call_ids]
    return assistant_message(f"{label}|{cost}", tool_calls=calls)


def make_result(call_id: str, cost: int) -> ChatMessage:
    return tool_result_message(call_id, f"{call_id}|{cost}")


def labels(messages: Iterable[ChatMessage]) -> list[str]:
    return [(m.content or "").rsplit("|", 1)[0] for m in messages]
