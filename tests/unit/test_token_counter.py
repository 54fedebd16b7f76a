"""Tests for the tiktoken-backed TokenCounter."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from mamba_memory.messages import (
    ToolCall,
    assistant_message,
    system_message,
    tool_result_message,
    user_message,
)
from mamba_memory.tokens import CostEstimator, TokenCounter, TokenizerConfig


class _WhitespaceEncoding:
    """Stand-in encoding: one token per whitespace-separated word."""

    def encode(self, text: str) -> list[str]:
        return text.split()


@pytest.fixture
def get_encoding(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace tiktoken.get_encoding so no encoding files are fetched."""
    mock = MagicMock(return_value=_WhitespaceEncoding())
    monkeypatch.setattr("tiktoken.get_encoding", mock)
    return mock


class TestTokenCounter:
    """Tests for TokenCounter."""

    def test_satisfies_cost_estimator_protocol(self) -> None:
        """TokenCounter is a CostEstimator."""
        assert isinstance(TokenCounter(), CostEstimator)

    def test_encoding_loaded_lazily_once(self, get_encoding: MagicMock) -> None:
        """The encoding is fetched on first use and reused."""
        counter = TokenCounter()
        get_encoding.assert_not_called()

        counter.count("one two")
        counter.count("three")

        get_encoding.assert_called_once_with("cl100k_base")

    def test_encoding_override(self, get_encoding: MagicMock) -> None:
        """An explicit encoding wins over the config."""
        counter = TokenCounter(encoding="o200k_base", config=TokenizerConfig(encoding="p50k_base"))
        counter.count("x")
        get_encoding.assert_called_once_with("o200k_base")

    def test_count_empty_text(self, get_encoding: MagicMock) -> None:
        """Empty text costs nothing and does not load the encoding."""
        assert TokenCounter().count("") == 0
        get_encoding.assert_not_called()

    def test_cost_of_user_message(self, get_encoding: MagicMock) -> None:
        """Overhead + role + content."""
        assert TokenCounter().cost_of(user_message("hello there world")) == 3 + 1 + 3

    def test_cost_includes_name(self, get_encoding: MagicMock) -> None:
        """A name adds its tokens plus tokens_per_name."""
        assert TokenCounter().cost_of(user_message("hi", name="alice")) == 3 + 1 + 1 + 1 + 1

    def test_cost_includes_tool_calls(self, get_encoding: MagicMock) -> None:
        """Tool call names and arguments are counted."""
        message = assistant_message(
            tool_calls=[ToolCall(id="c1", name="search", arguments='{"q": "cats"}')]
        )
        assert TokenCounter().cost_of(message) == 3 + 1 + 1 + 2

    def test_cost_includes_tool_call_id(self, get_encoding: MagicMock) -> None:
        """A tool result counts its call id."""
        assert TokenCounter().cost_of(tool_result_message("c1", "42")) == 3 + 1 + 1 + 1

    def test_custom_overhead(self, get_encoding: MagicMock) -> None:
        """tokens_per_message comes from the config."""
        counter = TokenCounter(config=TokenizerConfig(tokens_per_message=0))
        assert counter.cost_of(system_message("be brief")) == 1 + 2

    def test_sequence_cost_is_sum_of_messages(self, get_encoding: MagicMock) -> None:
        """Sequence cost is consistent with per-message cost."""
        counter = TokenCounter()
        messages = [system_message("be brief"), user_message("hi"), assistant_message("hello")]

        assert counter.cost_of_sequence(messages) == sum(counter.cost_of(m) for m in messages)
        assert counter.cost_of_sequence([]) == 0
