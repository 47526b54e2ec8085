"""Async streaming HTTP helper using ``httpx``."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import httpx

from postlift.llm._exceptions import TransportError, UnreadableStreamError


def _raise_for_status_httpx(r: httpx.Response) -> None:
    if r.is_success:
        return
    try:
        body: dict[str, Any] | str = r.json()
    except Exception:
        body = r.text
    raise TransportError(r.status_code, body)


async def async_stream_bytes(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: int = 120,
) -> AsyncIterator[bytes]:
    """POST ``payload`` and yield the response body as raw chunks asynchronously.

    Each read is a suspension point. Closing the generator (or cancelling the
    task awaiting it) closes the response. A single attempt is made.
    """
    async with (
        httpx.AsyncClient() as client,
        client.stream("POST", url, headers=headers, json=payload, timeout=timeout) as r,
    ):
        if not r.is_success:
            await r.aread()
            _raise_for_status_httpx(r)
        try:
            async for chunk in r.aiter_bytes():
                if chunk:
                    yield chunk
        except httpx.StreamError as exc:
            raise UnreadableStreamError(str(exc) or "Response body is not readable") from exc
