"""Custom exception hierarchy for the chat memory layer."""

from __future__ import annotations

from typing import Any, ClassVar


class ChatMemoryError(Exception):
    """Base exception raised by the windowed chat memory.

    Only the memory's own checks raise it, such as rejected buffer
    configuration. Failures from a store or cost estimator reach the caller
    as they were raised and are never wrapped in this type.

    Attributes:
        message: Human-readable error message.
        cause: Original exception that caused this error.
        details: Additional error context as key-value pairs.

    Details can be accessed as attributes (e.g., error.config_key).
    """

    _defaults: ClassVar[dict[str, Any]] = {}

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        **details: Any,
    ) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error message.
            cause: Original exception that caused this error.
            **details: Additional error context.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details

    def __getattr__(self, name: str) -> Any:
        """Access details as attributes."""
        # details may not exist yet while unpickling
        details = self.__dict__.get("details", {})
        if name in details:
            return details[name]
        if name in self._defaults:
            return self._defaults[name]
        raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


class InvalidConfigurationError(ChatMemoryError):
    """A memory was constructed with an unusable configuration.

    Raised at construction time, before any usable object exists, when the
    capacity is not a positive integer or a required collaborator is missing.

    Attributes from details: config_key, expected, actual.
    """

    _defaults: ClassVar[dict[str, Any]] = {"expected": None, "actual": None}
