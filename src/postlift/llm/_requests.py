"""Builders for the request payload of each operation."""

from __future__ import annotations

from postlift.llm._prompts import (
    ANALYSIS_PROMPT_TEMPLATE,
    IMAGE_EXTRACTION_PROMPT,
    PDF_EXTRACTION_PROMPT,
)
from postlift.llm._types import Content, InlineDataPart, Operation, RequestPayload, TextPart

PDF_MIME_TYPE = "application/pdf"


def _single_turn(*parts: TextPart | InlineDataPart) -> RequestPayload:
    return RequestPayload(contents=(Content(parts=parts),))


def build_image_request(base64_image: str, mime_type: str) -> RequestPayload:
    """Ask for every piece of text visible in an image.

    ``base64_image`` must already be stripped of any ``data:...;base64,`` prefix.
    """
    return _single_turn(
        TextPart(IMAGE_EXTRACTION_PROMPT),
        InlineDataPart(mime_type=mime_type, data=base64_image),
    )


def build_pdf_request(base64_pdf: str) -> RequestPayload:
    """Ask for the text of a PDF document, keeping paragraph breaks."""
    return _single_turn(
        TextPart(PDF_EXTRACTION_PROMPT),
        InlineDataPart(mime_type=PDF_MIME_TYPE, data=base64_pdf),
    )


def build_analysis_request(text: str) -> RequestPayload:
    """Ask for engagement suggestions on ``text`` treated as a social media post."""
    return _single_turn(TextPart(ANALYSIS_PROMPT_TEMPLATE.format(text=text)))


def build_request(
    operation: Operation,
    *,
    data: str = "",
    mime_type: str = "",
    text: str = "",
) -> RequestPayload:
    """Build the payload for ``operation`` from its kind-specific input."""
    if operation is Operation.EXTRACT_IMAGE:
        return build_image_request(data, mime_type)
    if operation is Operation.EXTRACT_PDF:
        return build_pdf_request(data)
    return build_analysis_request(text)
