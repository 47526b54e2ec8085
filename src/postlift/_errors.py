"""User-facing errors."""

from __future__ import annotations

from postlift.llm._types import Operation


class ServiceError(Exception):
    """A failed extraction or analysis, carrying a message safe to show users.

    The underlying transport error is chained as ``__cause__``.
    """

    def __init__(self, operation: Operation) -> None:
        self.operation = operation
        super().__init__(operation.failure_message)


class FileReadError(OSError):
    """Raised when an input file cannot be read."""
