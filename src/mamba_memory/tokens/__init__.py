"""Token cost estimation.

The windowed memory measures capacity in tokens through a ``CostEstimator``.
``TokenCounter`` is the default estimator and uses tiktoken for counts.

Standalone Usage:
    >>> from mamba_memory.tokens import TokenCounter
    >>> counter = TokenCounter()
    >>> counter.count("Hello, world!")
    4
"""

from mamba_memory.tokens.config import TokenizerConfig
from mamba_memory.tokens.counter import TokenCounter
from mamba_memory.tokens.estimator import CostEstimator

__all__ = ["CostEstimator", "TokenCounter", "TokenizerConfig"]
