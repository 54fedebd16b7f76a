"""Chat message model used by the windowed memory.

Messages follow the OpenAI chat shape (``role``/``content``/``tool_calls``/
``tool_call_id``). The memory only cares about a message's *kind*:

    - ``SYSTEM``: standing instructions, kept once at the front.
    - ``REQUEST_BEARING``: an assistant turn, possibly issuing tool calls.
    - ``RESULT_BEARING``: a tool result answering one prior tool call.
    - ``OTHER``: everything else (user turns).

Example:
    >>> from mamba_memory.messages import assistant_message, ToolCall
    >>> msg = assistant_message(tool_calls=[ToolCall(id="call_1", name="read_file")])
    >>> msg.kind, msg.has_outstanding_requests
    (<MessageKind.REQUEST_BEARING: 'request_bearing'>, True)
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Role = Literal["system", "user", "assistant", "tool"]


class MessageKind(str, Enum):
    """Policy-relevant kind of a chat message."""

    SYSTEM = "system"
    REQUEST_BEARING = "request_bearing"
    RESULT_BEARING = "result_bearing"
    OTHER = "other"


_KIND_BY_ROLE: dict[str, MessageKind] = {
    "system": MessageKind.SYSTEM,
    "assistant": MessageKind.REQUEST_BEARING,
    "tool": MessageKind.RESULT_BEARING,
    "user": MessageKind.OTHER,
}


class ToolCall(BaseModel):
    """A single tool call request issued by an assistant turn.

    Attributes:
        id: Identifier that the matching tool result refers to.
        name: Name of the requested tool.
        arguments: JSON-encoded arguments.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Tool call identifier")
    name: str = Field(description="Requested tool name")
    arguments: str = Field(default="{}", description="JSON-encoded arguments")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ToolCall:
        function = data.get("function", {})
        arguments = function.get("arguments", "{}")
        if not isinstance(arguments, str):
            arguments = json.dumps(arguments)
        return cls(id=data["id"], name=function.get("name", "unknown"), arguments=arguments)


class ChatMessage(BaseModel):
    """An immutable chat message.

    Attributes:
        role: Message role.
        content: Text content, if any.
        tool_calls: Tool calls requested by an assistant turn.
        tool_call_id: Tool call a ``tool`` message answers.
        name: Optional participant name.
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Message role")
    content: str | None = Field(default=None, description="Text content")
    tool_calls: tuple[ToolCall, ...] = Field(
        default=(),
        description="Tool calls requested by an assistant turn",
    )
    tool_call_id: str | None = Field(
        default=None,
        description="Tool call answered by a tool message",
    )
    name: str | None = Field(default=None, description="Optional participant name")

    @model_validator(mode="after")
    def _check_role_fields(self) -> ChatMessage:
        if self.role == "tool" and not self.tool_call_id:
            raise ValueError("tool messages require a tool_call_id")
        if self.tool_calls and self.role != "assistant":
            raise ValueError("only assistant messages may carry tool_calls")
        return self

    @property
    def kind(self) -> MessageKind:
        """Policy kind derived from the role."""
        return _KIND_BY_ROLE[self.role]

    @property
    def has_outstanding_requests(self) -> bool:
        """Whether this is an assistant turn that issued tool calls."""
        return self.kind is MessageKind.REQUEST_BEARING and bool(self.tool_calls)

    def to_dict(self) -> dict[str, Any]:
        """Convert to an OpenAI-style message dict."""
        data: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.tool_calls:
            data["tool_calls"] = [tc.to_dict() for tc in self.tool_calls]
        if self.tool_call_id is not None:
            data["tool_call_id"] = self.tool_call_id
        if self.name is not None:
            data["name"] = self.name
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatMessage:
        """Build a message from an OpenAI-style message dict.

        Args:
            data: Dict with at least a ``role`` key.

        Returns:
            The parsed message.
        """
        tool_calls = tuple(
            ToolCall.from_dict(tc) if isinstance(tc, dict) else tc
            for tc in data.get("tool_calls") or []
        )
        return cls(
            role=data["role"],
            content=data.get("content"),
            tool_calls=tool_calls,
            tool_call_id=data.get("tool_call_id"),
            name=data.get("name"),
        )


def system_message(content: str) -> ChatMessage:
    return ChatMessage(role="system", content=content)


def user_message(content: str, name: str | None = None) -> ChatMessage:
    return ChatMessage(role="user", content=content, name=name)


def assistant_message(
    content: str | None = None,
    tool_calls: Iterable[ToolCall] = (),
) -> ChatMessage:
    return ChatMessage(role="assistant", content=content, tool_calls=tuple(tool_calls))


def tool_result_message(tool_call_id: str, content: str, name: str | None = None) -> ChatMessage:
    return ChatMessage(role="tool", content=content, tool_call_id=tool_call_id, name=name)
