"""Thin streaming HTTP helper around ``requests``."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import requests

from postlift.llm._exceptions import TransportError, UnreadableStreamError


def _raise_for_status(r: requests.Response) -> None:
    if not r.ok:
        try:
            body: dict[str, Any] | str = r.json()
        except Exception:
            body = r.text
        raise TransportError(r.status_code, body)


def stream_bytes(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: int = 120,
) -> Iterator[bytes]:
    """POST ``payload`` and yield the response body as raw chunks.

    Chunks are yielded as they arrive, so their boundaries are arbitrary.
    A single attempt is made.
    """
    with requests.post(url, headers=headers, json=payload, stream=True, timeout=timeout) as r:
        _raise_for_status(r)
        if r.raw is None:
            raise UnreadableStreamError()
        for chunk in r.iter_content(chunk_size=None):
            if chunk:
                yield chunk
