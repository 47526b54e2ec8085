"""Client — the synchronous user-facing entry point."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import requests

from postlift._config import Settings
from postlift._errors import ServiceError
from postlift._files import operation_for, read_file_base64
from postlift.llm._aggregator import StreamAggregator
from postlift.llm._exceptions import TransportError, UnreadableStreamError
from postlift.llm._requests import build_request
from postlift.llm._types import Operation, RequestPayload

logger = logging.getLogger(__name__)


class Client:
    """Extracts text from images and PDFs and suggests engagement improvements.

    Usage::

        from postlift import Client

        client = Client(app_id="my-app")
        text = client.extract_text_from_file("flyer.png")
        print(client.analyze_social_media_content(text))
    """

    def __init__(
        self,
        app_id: str | None = None,
        *,
        model: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings.from_env(
            app_id, base_url=base_url, model=model, timeout=timeout
        )
        self._aggregator = StreamAggregator(
            self._settings.stream_url, self._settings.headers, timeout=self._settings.timeout
        )

    def _run(self, operation: Operation, payload: RequestPayload) -> str:
        try:
            return self._aggregator.run(payload, fallback=operation.fallback)
        except TransportError as exc:
            logger.error("%s request failed with status %s", operation, exc.status_code)
            raise ServiceError(operation) from exc
        except (UnreadableStreamError, requests.RequestException) as exc:
            logger.error("%s request failed: %s", operation, exc)
            raise ServiceError(operation) from exc

    def extract_text_from_image(self, base64_image: str, mime_type: str) -> str:
        """Return the text found in a base64-encoded image."""
        payload = build_request(Operation.EXTRACT_IMAGE, data=base64_image, mime_type=mime_type)
        return self._run(Operation.EXTRACT_IMAGE, payload)

    def extract_text_from_pdf(self, base64_pdf: str) -> str:
        """Return the text of a base64-encoded PDF."""
        payload = build_request(Operation.EXTRACT_PDF, data=base64_pdf)
        return self._run(Operation.EXTRACT_PDF, payload)

    def analyze_social_media_content(self, text: str) -> str:
        """Return engagement suggestions for ``text``."""
        if not text.strip():
            raise ValueError("No text to analyze")
        payload = build_request(Operation.ANALYZE_TEXT, text=text)
        return self._run(Operation.ANALYZE_TEXT, payload)

    def extract_text_from_file(self, path: str | Path, *, mime_type: str | None = None) -> str:
        """Read a PDF or image from disk and return its text."""
        encoded = read_file_base64(path, mime_type)
        operation = operation_for(encoded)
        payload = build_request(operation, data=encoded.data, mime_type=encoded.mime_type)
        return self._run(operation, payload)

    def stream(
        self,
        operation: Operation,
        *,
        data: str = "",
        mime_type: str = "",
        text: str = "",
    ) -> Iterator[str]:
        """Yield raw text deltas for ``operation`` as they arrive."""
        payload = build_request(operation, data=data, mime_type=mime_type, text=text)
        try:
            yield from self._aggregator.stream(payload)
        except TransportError as exc:
            logger.error("%s stream failed with status %s", operation, exc.status_code)
            raise ServiceError(operation) from exc
        except (UnreadableStreamError, requests.RequestException) as exc:
            logger.error("%s stream failed: %s", operation, exc)
            raise ServiceError(operation) from exc
