"""Exceptions for streamed LLM requests."""

from __future__ import annotations

from typing import Any


class TransportError(Exception):
    """Raised when the LLM endpoint answers with a non-success HTTP status."""

    def __init__(self, status_code: int, body: dict[str, Any] | str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class UnreadableStreamError(Exception):
    """Raised when the response body cannot be read as a byte stream."""

    def __init__(self, message: str = "Response body is not readable") -> None:
        super().__init__(message)
