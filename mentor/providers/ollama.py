"""Ollama backend: free local generation, no credential needed."""

import logging
from typing import Any

import httpx

from ..constants import HEALTH_CHECK_TIMEOUT_SECONDS, HTTP_TIMEOUT_SECONDS, OLLAMA_OPTIONS, OLLAMA_URL
from .base import ErrorKind, ProviderBackend, ProviderError, classify_status

logger = logging.getLogger(__name__)


class OllamaBackend(ProviderBackend):
    requires_credential = False

    def __init__(self, ollama_url: str = OLLAMA_URL, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.ollama_url = ollama_url.rstrip("/")
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "ollama"

    def check_reachable(self) -> bool:
        try:
            response = httpx.get(f"{self.ollama_url}/api/tags", timeout=HEALTH_CHECK_TIMEOUT_SECONDS)
        except httpx.HTTPError as exc:
            logger.warning("Ollama not reachable at %s: %s", self.ollama_url, exc)
            return False
        return response.is_success

    def generate(self, model: str, prompt: str, credential: str | None) -> Any:
        logger.debug("Calling Ollama model %s at %s", model, self.ollama_url)
        try:
            response = httpx.post(
                f"{self.ollama_url}/api/generate",
                json={
                    "model": model,
                    "prompt": prompt,
                    "stream": False,
                    "options": OLLAMA_OPTIONS,
                },
                timeout=self.timeout,
            )
        except httpx.TimeoutException as exc:
            raise ProviderError(
                f"Ollama request timed out after {self.timeout}s",
                ErrorKind.transient, model=model,
            ) from exc
        except httpx.TransportError as exc:
            raise ProviderError(
                f"Could not reach Ollama at {self.ollama_url}: {exc}",
                ErrorKind.transient, model=model,
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(
                f"Ollama request failed: {exc}", ErrorKind.fatal, model=model,
            ) from exc

        if response.is_error:
            raise ProviderError(
                f"Ollama returned {response.status_code}",
                classify_status(response.status_code),
                status_code=response.status_code,
                model=model,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(
                "Ollama returned a non-JSON body", ErrorKind.fatal,
                status_code=response.status_code, model=model,
            ) from exc
