"""Logging utilities."""

from mamba_memory.observability.logging import StructuredFormatter, setup_logging

__all__ = ["StructuredFormatter", "setup_logging"]
