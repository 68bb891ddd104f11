"""Gemini backend: calls the Generative Language REST API via httpx."""

import logging
from typing import Any

import httpx

from ..constants import GEMINI_API_BASE, GEMINI_GENERATION_CONFIG, HTTP_TIMEOUT_SECONDS
from .base import ErrorKind, ProviderBackend, ProviderError, classify_status

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str:
    """Best-effort extraction of the upstream error message."""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.reason_phrase or "unknown error"


class GeminiBackend(ProviderBackend):
    """Generates feedback with Gemini models; the API key travels as a query parameter."""

    def __init__(self, api_base: str = GEMINI_API_BASE, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "gemini"

    def generate(self, model: str, prompt: str, credential: str | None) -> Any:
        url = f"{self.api_base}/models/{model}:generateContent"
        logger.debug("Calling Gemini model %s", model)
        try:
            response = httpx.post(
                url,
                params={"key": credential},
                json={
                    "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                    "generationConfig": GEMINI_GENERATION_CONFIG,
                },
                timeout=self.timeout,
            )
        except httpx.TimeoutException as exc:
            raise ProviderError(
                f"Gemini request timed out after {self.timeout}s",
                ErrorKind.transient, model=model,
            ) from exc
        except httpx.TransportError as exc:
            raise ProviderError(
                f"Could not reach Gemini: {exc}", ErrorKind.transient, model=model,
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(
                f"Gemini request failed: {exc}", ErrorKind.fatal, model=model,
            ) from exc

        if response.is_error:
            raise ProviderError(
                f"Gemini returned {response.status_code}: {_error_detail(response)}",
                classify_status(response.status_code),
                status_code=response.status_code,
                model=model,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(
                "Gemini returned a non-JSON body", ErrorKind.fatal,
                status_code=response.status_code, model=model,
            ) from exc

    def list_models(self, credential: str) -> list[dict]:
        """Return the models this key may call ``generateContent`` on."""
        response = httpx.get(
            f"{self.api_base}/models",
            headers={"x-goog-api-key": credential},
            timeout=self.timeout,
        )
        response.raise_for_status()
        models = response.json().get("models", [])
        return [
            m for m in models
            if "generateContent" in m.get("supportedGenerationMethods", [])
        ]
