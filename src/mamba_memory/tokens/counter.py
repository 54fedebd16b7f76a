"""tiktoken-backed token counter."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import tiktoken

from mamba_memory.tokens.config import TokenizerConfig

if TYPE_CHECKING:
    from mamba_memory.messages import ChatMessage


class TokenCounter:
    """Count tokens in text and chat messages using tiktoken.

    Message cost covers the role, content, name, tool call names and
    arguments, the answered tool call id, and a fixed per-message overhead.
    The cost of a sequence is the sum of its message costs, so this counter
    satisfies the ``CostEstimator`` consistency contract.
    """

    def __init__(
        self,
        encoding: str | None = None,
        config: TokenizerConfig | None = None,
    ) -> None:
        """Initialize the counter.

        Args:
            encoding: tiktoken encoding name. Overrides ``config.encoding``.
            config: Tokenizer configuration.
        """
        self._config = config or TokenizerConfig()
        self._encoding_name = encoding or self._config.encoding
        self._encoding: tiktoken.Encoding | None = None

    @property
    def encoding_name(self) -> str:
        return self._encoding_name

    def _get_encoding(self) -> tiktoken.Encoding:
        if self._encoding is None:
            self._encoding = tiktoken.get_encoding(self._encoding_name)
        return self._encoding

    def count(self, text: str) -> int:
        """Count tokens in raw text.

        Args:
            text: Text to count.

        Returns:
            Number of tokens.
        """
        if not text:
            return 0
        return len(self._get_encoding().encode(text))

    def cost_of(self, message: ChatMessage) -> int:
        """Count tokens for one message, including overhead.

        Args:
            message: Message to count.

        Returns:
            Token count.
        """
        tokens = self._config.tokens_per_message
        tokens += self.count(message.role)
        tokens += self.count(message.content or "")
        if message.name:
            tokens += self.count(message.name) + self._config.tokens_per_name
        for call in message.tool_calls:
            tokens += self.count(call.name)
            tokens += self.count(call.arguments)
        if message.tool_call_id:
            tokens += self.count(message.tool_call_id)
        return tokens

    def cost_of_sequence(self, messages: Iterable[ChatMessage]) -> int:
        """Count tokens for an ordered sequence of messages.

        Args:
            messages: Messages to count.

        Returns:
            Sum of the per-message costs.
        """
        return sum(self.cost_of(message) for message in messages)
