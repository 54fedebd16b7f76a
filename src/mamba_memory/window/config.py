"""Windowed memory configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mamba_memory.tokens.config import TokenizerConfig


class WindowConfig(BaseModel):
    """Configuration for a token-windowed memory.

    Attributes:
        capacity: Token budget of the window.
        identity: Conversation identity the memory is bound to.
        keep_system_first: Place an added system message at index 0.
        tokenizer: Settings for the default token counter.
    """

    capacity: int = Field(
        default=4096,
        gt=0,
        description="Token budget of the window",
    )
    identity: str = Field(
        default="default",
        description="Conversation identity the memory is bound to",
    )
    keep_system_first: bool = Field(
        default=True,
        description="Place an added system message at index 0",
    )
    tokenizer: TokenizerConfig = Field(
        default_factory=TokenizerConfig,
        description="Settings for the default token counter",
    )
