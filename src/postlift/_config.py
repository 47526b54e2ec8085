"""Endpoint and credential settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT = 120

APP_ID_ENV = "POSTLIFT_APP_ID"
BASE_URL_ENV = "POSTLIFT_BASE_URL"
MODEL_ENV = "POSTLIFT_MODEL"


def _resolve_app_id(app_id: str | None) -> str:
    value = app_id or os.environ.get(APP_ID_ENV, "")
    if not value:
        raise ValueError(
            f"No app id provided. Pass app_id= or set the {APP_ID_ENV} environment variable."
        )
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    """Where to send streamed requests and which credential to send along."""

    app_id: str
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout: int = DEFAULT_TIMEOUT

    @property
    def stream_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.model}:streamGenerateContent?alt=sse"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-App-Id": self.app_id,
        }

    @classmethod
    def from_env(
        cls,
        app_id: str | None = None,
        *,
        base_url: str | None = None,
        model: str | None = None,
        timeout: int | None = None,
    ) -> Settings:
        """Build settings, letting explicit arguments override the environment."""
        return cls(
            app_id=_resolve_app_id(app_id),
            base_url=base_url or os.environ.get(BASE_URL_ENV, "") or DEFAULT_BASE_URL,
            model=model or os.environ.get(MODEL_ENV, "") or DEFAULT_MODEL,
            timeout=timeout or DEFAULT_TIMEOUT,
        )
