"""Turning user files into base64 payload data."""

from __future__ import annotations

import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from postlift._errors import FileReadError
from postlift.llm._requests import PDF_MIME_TYPE
from postlift.llm._types import Operation


@dataclass(frozen=True, slots=True)
class EncodedFile:
    """File contents as raw base64 (no data-URL prefix) plus their MIME type."""

    data: str
    mime_type: str


def strip_data_url(value: str) -> str:
    """Drop a leading ``data:...;base64,`` prefix, if present."""
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value


def parse_data_url(url: str) -> EncodedFile:
    """Split a ``data:<mime>;base64,<data>`` URL into an :class:`EncodedFile`."""
    header, sep, data = url.partition(",")
    if not header.startswith("data:") or not sep or not header.endswith(";base64"):
        raise ValueError("Expected a base64 data URL")
    mime_type = header[len("data:") : -len(";base64")] or "application/octet-stream"
    return EncodedFile(data=data, mime_type=mime_type)


def read_file_base64(path: str | Path, mime_type: str | None = None) -> EncodedFile:
    """Read ``path`` and return its base64 contents and MIME type.

    The MIME type is guessed from the file name unless given explicitly.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileReadError(f"Failed to read file {path}: {exc.strerror or exc}") from exc
    guessed = mime_type or mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return EncodedFile(data=base64.b64encode(raw).decode("ascii"), mime_type=guessed)


def operation_for(encoded: EncodedFile) -> Operation:
    """Pick the extraction operation for a file, by MIME type."""
    if encoded.mime_type == PDF_MIME_TYPE:
        return Operation.EXTRACT_PDF
    if encoded.mime_type.startswith("image/"):
        return Operation.EXTRACT_IMAGE
    raise ValueError(f"Unsupported file type {encoded.mime_type!r}; expected a PDF or an image")
