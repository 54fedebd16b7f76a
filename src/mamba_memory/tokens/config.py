"""Tokenizer configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TokenizerConfig(BaseModel):
    """Configuration for token counting.

    Attributes:
        encoding: tiktoken encoding name.
        tokens_per_message: Fixed overhead added for every message.
        tokens_per_name: Extra tokens when a message carries a name.
    """

    encoding: str = Field(
        default="cl100k_base",
        description="tiktoken encoding name",
    )
    tokens_per_message: int = Field(
        default=3,
        ge=0,
        description="Fixed overhead added for every message",
    )
    tokens_per_name: int = Field(
        default=1,
        ge=0,
        description="Extra tokens when a message carries a name",
    )
