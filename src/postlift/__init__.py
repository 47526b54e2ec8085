"""postlift — text extraction and engagement suggestions over a streamed LLM API."""

from postlift._async_client import (
    AsyncClient,
    analyze_social_media_content,
    extract_text_from_image,
    extract_text_from_pdf,
)
from postlift._client import Client
from postlift._config import Settings
from postlift._errors import FileReadError, ServiceError
from postlift._files import EncodedFile, parse_data_url, read_file_base64, strip_data_url
from postlift.llm import Operation, TransportError, UnreadableStreamError

__all__ = [
    "AsyncClient",
    "Client",
    "EncodedFile",
    "FileReadError",
    "Operation",
    "ServiceError",
    "Settings",
    "TransportError",
    "UnreadableStreamError",
    "analyze_social_media_content",
    "extract_text_from_image",
    "extract_text_from_pdf",
    "parse_data_url",
    "read_file_base64",
    "strip_data_url",
]
