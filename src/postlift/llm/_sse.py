"""Incremental decoding of an SSE byte stream into ``data:`` frame payloads."""

from __future__ import annotations

import codecs
import json
import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "


class SSEDecoder:
    """Turns raw body chunks into complete ``data:`` payloads.

    Chunks may split a line anywhere, including inside a multi-byte UTF-8
    character. Only newline-terminated lines are ever emitted; the unfinished
    tail stays buffered until the next :meth:`feed`. One instance serves one
    response and cannot be reused after :meth:`close`.
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending: list[str] = []
        self._closed = False

    def feed(self, chunk: bytes) -> list[str]:
        """Append ``chunk`` and return the payloads of every line it completed."""
        if self._closed:
            raise RuntimeError("SSEDecoder is closed")
        text = self._decoder.decode(chunk)
        # Only the new text can complete a line.
        if "\n" not in text:
            if text:
                self._pending.append(text)
            return []

        *lines, tail = ("".join(self._pending) + text).split("\n")
        self._pending = [tail] if tail else []
        payloads: list[str] = []
        for line in lines:
            payload = _frame_payload(line)
            if payload is not None:
                payloads.append(payload)
        return payloads

    def close(self) -> None:
        """Signal end of stream. A dangling partial line is dropped, not parsed."""
        if self._closed:
            return
        self._closed = True
        leftover = "".join(self._pending) + self._decoder.decode(b"", final=True)
        if leftover:
            logger.debug("Dropping unterminated line at end of stream: %.200r", leftover)
        self._pending = []


def _frame_payload(line: str) -> str | None:
    line = line.removesuffix("\r")
    if not line.startswith(DATA_PREFIX):
        return None
    payload = line[len(DATA_PREFIX) :]
    # Whitespace-only payloads are keep-alives.
    if not payload.strip():
        return None
    return payload


def decode_frames(chunks: Iterable[bytes]) -> Iterator[str]:
    """Yield ``data:`` payloads from an iterable of raw chunks."""
    decoder = SSEDecoder()
    for chunk in chunks:
        yield from decoder.feed(chunk)
    decoder.close()


def extract_text_delta(payload: str) -> str | None:
    """Return ``candidates[0].content.parts[0].text`` of a frame, if any.

    Malformed JSON and missing keys yield ``None`` so a bad frame never ends
    the stream. The text is returned untouched.
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, RecursionError) as exc:
        logger.debug("Skipping non-JSON SSE payload %.200r: %s", payload, exc)
        return None

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text
