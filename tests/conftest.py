"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable, Iterable
from typing import Any, TypeAlias
from unittest.mock import MagicMock

import httpx
import pytest

from postlift._config import Settings


def sse_frame(text: str) -> str:
    """One ``data:`` line carrying ``text`` as a generateContent delta."""
    body = {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}
    return f"data: {json.dumps(body, ensure_ascii=False)}\n"


def sse_body(*texts: str) -> bytes:
    """A complete SSE body with one frame per text, blank-line separated."""
    return "\n".join(sse_frame(t) for t in texts).encode()


def split_every(data: bytes, size: int) -> list[bytes]:
    return [data[i : i + size] for i in range(0, len(data), size)]


class MockResponse:
    """Mimics a streamed ``requests.Response`` for testing stream_bytes."""

    def __init__(
        self,
        json_data: dict[str, Any] | None = None,
        status_code: int = 200,
        text: str = "",
        chunks: list[bytes] | None = None,
        headers: dict[str, str] | None = None,
        raw: object | None = None,
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data
        self.text = text or ""
        self.ok = 200 <= status_code < 300
        self._chunks = chunks or []
        self.headers: dict[str, str] = headers or {}
        self.raw = raw if raw is not None else object()
        self.closed = False

    def json(self) -> dict[str, Any]:
        if self._json_data is None:
            raise ValueError("No JSON")
        return self._json_data

    def iter_content(self, chunk_size: int | None = 1, **_kwargs: object) -> Iterable[bytes]:
        return iter(self._chunks)

    def __enter__(self) -> MockResponse:
        return self

    def __exit__(self, *args: object) -> None:
        self.closed = True


@pytest.fixture
def mock_post(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.post`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.post", mock)
    return mock


class ChunkedStream(httpx.AsyncByteStream):
    """An async response body delivered in exactly the given chunks."""

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self._chunks = list(chunks)
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


Handler: TypeAlias = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_transport(monkeypatch: pytest.MonkeyPatch) -> Callable[[Handler], list[httpx.Request]]:
    """Route ``httpx.AsyncClient`` through a ``MockTransport``.

    Call the returned function with a request handler; it returns the list
    that collects every request sent.
    """
    real_client = httpx.AsyncClient

    def install(handler: Handler) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        def _factory(*_args: object, **_kwargs: object) -> httpx.AsyncClient:
            return real_client(transport=httpx.MockTransport(_record))

        monkeypatch.setattr("postlift.llm._async_http.httpx.AsyncClient", _factory)
        return seen

    return install


@pytest.fixture
def settings() -> Settings:
    return Settings(app_id="test-app", base_url="https://llm.example.com/v1beta/models")
