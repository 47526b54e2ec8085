"""Tests for the requests-based streaming helper."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from postlift.llm._exceptions import TransportError, UnreadableStreamError
from postlift.llm._http import stream_bytes
from tests.conftest import MockResponse


def test_stream_bytes_yields_chunks(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(chunks=[b"data: a", b"", b"\n"])
    chunks = list(stream_bytes("https://example.com", {"X-App-Id": "id"}, {"q": 1}))
    assert chunks == [b"data: a", b"\n"]

    call = mock_post.call_args
    assert call[1]["json"] == {"q": 1}
    assert call[1]["stream"] is True
    assert call[1]["timeout"] == 120


def test_stream_bytes_error_json_body(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data={"error": "unauthorized"}, status_code=401)
    with pytest.raises(TransportError) as exc_info:
        list(stream_bytes("https://example.com", {}, {}))
    assert exc_info.value.status_code == 401
    assert exc_info.value.body == {"error": "unauthorized"}


def test_stream_bytes_error_text_body(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(status_code=503, text="Service Unavailable")
    with pytest.raises(TransportError) as exc_info:
        list(stream_bytes("https://example.com", {}, {}))
    assert exc_info.value.status_code == 503
    assert exc_info.value.body == "Service Unavailable"
    assert "HTTP 503" in str(exc_info.value)


def test_stream_bytes_single_attempt(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(status_code=500, text="boom")
    with pytest.raises(TransportError):
        list(stream_bytes("https://example.com", {}, {}))
    assert mock_post.call_count == 1


def test_stream_bytes_unreadable_body(mock_post: MagicMock) -> None:
    response = MockResponse(chunks=[b"data: x\n"])
    response.raw = None
    mock_post.return_value = response
    with pytest.raises(UnreadableStreamError):
        list(stream_bytes("https://example.com", {}, {}))
    assert response.closed
