"""Stream aggregation: raw body chunks → text deltas → final text."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from contextlib import aclosing, closing

from postlift.llm._async_http import async_stream_bytes
from postlift.llm._http import stream_bytes
from postlift.llm._sse import SSEDecoder, decode_frames, extract_text_delta
from postlift.llm._types import RequestPayload

logger = logging.getLogger(__name__)


def iter_text_deltas(chunks: Iterable[bytes]) -> Iterator[str]:
    """Yield text deltas, in stream order, from raw SSE body chunks."""
    for payload in decode_frames(chunks):
        delta = extract_text_delta(payload)
        if delta is not None:
            yield delta


async def aiter_text_deltas(chunks: AsyncIterable[bytes]) -> AsyncIterator[str]:
    """Async counterpart of :func:`iter_text_deltas`."""
    decoder = SSEDecoder()
    async for chunk in chunks:
        for payload in decoder.feed(chunk):
            delta = extract_text_delta(payload)
            if delta is not None:
                yield delta
    decoder.close()


def accumulate_text(chunks: Iterable[bytes]) -> str:
    """Concatenate every delta carried by ``chunks``, untrimmed."""
    return "".join(iter_text_deltas(chunks))


async def aaccumulate_text(chunks: AsyncIterable[bytes]) -> str:
    """Async counterpart of :func:`accumulate_text`."""
    parts: list[str] = []
    async with aclosing(aiter_text_deltas(chunks)) as deltas:
        async for delta in deltas:
            parts.append(delta)
    return "".join(parts)


def finalize_text(accumulated: str, fallback: str) -> str:
    """Trim the accumulated text, substituting ``fallback`` when nothing is left."""
    return accumulated.strip() or fallback


class StreamAggregator:
    """Runs streamed requests against a fixed endpoint.

    All per-request state (decoder buffer, accumulator) lives inside each
    call, so one instance can serve concurrent requests.

    Usage::

        aggregator = StreamAggregator(url, {"X-App-Id": app_id})
        text = await aggregator.arun(build_pdf_request(data), fallback="(empty)")
    """

    def __init__(self, url: str, headers: dict[str, str], *, timeout: int = 120) -> None:
        self._url = url
        self._headers = headers
        self._timeout = timeout

    def stream(self, payload: RequestPayload) -> Iterator[str]:
        """Yield text deltas as they arrive."""
        chunks = stream_bytes(self._url, self._headers, payload.to_dict(), timeout=self._timeout)
        with closing(chunks):
            yield from iter_text_deltas(chunks)

    def run(self, payload: RequestPayload, *, fallback: str) -> str:
        """Send ``payload`` and return the trimmed accumulated text."""
        chunks = stream_bytes(self._url, self._headers, payload.to_dict(), timeout=self._timeout)
        with closing(chunks):
            text = accumulate_text(chunks)
        logger.debug("Stream from %s finished with %d characters", self._url, len(text))
        return finalize_text(text, fallback)

    async def astream(self, payload: RequestPayload) -> AsyncIterator[str]:
        """Yield text deltas as they arrive, asynchronously."""
        chunks = async_stream_bytes(
            self._url, self._headers, payload.to_dict(), timeout=self._timeout
        )
        async with aclosing(chunks):
            async for delta in aiter_text_deltas(chunks):
                yield delta

    async def arun(self, payload: RequestPayload, *, fallback: str) -> str:
        """Send ``payload`` and return the trimmed accumulated text, asynchronously.

        Cancelling the awaiting task stops further reads and closes the
        response; no partial result is returned.
        """
        chunks = async_stream_bytes(
            self._url, self._headers, payload.to_dict(), timeout=self._timeout
        )
        async with aclosing(chunks):
            text = await aaccumulate_text(chunks)
        logger.debug("Stream from %s finished with %d characters", self._url, len(text))
        return finalize_text(text, fallback)
