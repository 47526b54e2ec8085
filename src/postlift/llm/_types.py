"""Request payload types for the generateContent wire format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

# --- Content parts ---


@dataclass(frozen=True, slots=True)
class TextPart:
    """A plain text content part."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True, slots=True)
class InlineDataPart:
    """Inline binary data (image, PDF) as raw base64 without a data-URL prefix."""

    mime_type: str
    data: str

    def to_dict(self) -> dict[str, Any]:
        return {"inlineData": {"mimeType": self.mime_type, "data": self.data}}


Part: TypeAlias = TextPart | InlineDataPart


@dataclass(frozen=True, slots=True)
class Content:
    """One turn of the request, made of ordered parts."""

    parts: tuple[Part, ...]
    role: str = "user"

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValueError("Content requires at least one part")

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "parts": [p.to_dict() for p in self.parts]}


@dataclass(frozen=True, slots=True)
class RequestPayload:
    """The JSON body posted to the streaming endpoint."""

    contents: tuple[Content, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"contents": [c.to_dict() for c in self.contents]}


# --- Operations ---


class Operation(StrEnum):
    """The three request kinds, each with its own fallback and failure text."""

    EXTRACT_IMAGE = "extract_image"
    EXTRACT_PDF = "extract_pdf"
    ANALYZE_TEXT = "analyze_text"

    @property
    def fallback(self) -> str:
        """Returned instead of an empty result."""
        return _FALLBACKS[self]

    @property
    def failure_message(self) -> str:
        """User-safe message shown when the request fails."""
        return _FAILURES[self]


_FALLBACKS = {
    Operation.EXTRACT_IMAGE: "No text could be extracted from the image.",
    Operation.EXTRACT_PDF: "No text could be extracted from the PDF.",
    Operation.ANALYZE_TEXT: "Unable to generate suggestions at this time.",
}

_FAILURES = {
    Operation.EXTRACT_IMAGE: "Failed to extract text from image. Please try again.",
    Operation.EXTRACT_PDF: "Failed to extract text from PDF. Please try again.",
    Operation.ANALYZE_TEXT: "Failed to analyze content. Please try again.",
}
