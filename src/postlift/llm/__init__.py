"""Streamed generateContent protocol client."""

from postlift.llm._aggregator import (
    StreamAggregator,
    aaccumulate_text,
    accumulate_text,
    aiter_text_deltas,
    finalize_text,
    iter_text_deltas,
)
from postlift.llm._exceptions import TransportError, UnreadableStreamError
from postlift.llm._requests import (
    build_analysis_request,
    build_image_request,
    build_pdf_request,
    build_request,
)
from postlift.llm._sse import SSEDecoder, decode_frames, extract_text_delta
from postlift.llm._types import Content, InlineDataPart, Operation, RequestPayload, TextPart

__all__ = [
    "Content",
    "InlineDataPart",
    "Operation",
    "RequestPayload",
    "SSEDecoder",
    "StreamAggregator",
    "TextPart",
    "TransportError",
    "UnreadableStreamError",
    "aaccumulate_text",
    "accumulate_text",
    "aiter_text_deltas",
    "build_analysis_request",
    "build_image_request",
    "build_pdf_request",
    "build_request",
    "decode_frames",
    "extract_text_delta",
    "finalize_text",
    "iter_text_deltas",
]
