"""Anthropic backend: generates feedback via the Anthropic SDK."""

import logging
from typing import Any

import anthropic

from ..constants import ANTHROPIC_MAX_TOKENS, ANTHROPIC_TEMPERATURE, HTTP_TIMEOUT_SECONDS
from .base import ErrorKind, ProviderBackend, ProviderError, classify_status

logger = logging.getLogger(__name__)


class AnthropicBackend(ProviderBackend):
    def __init__(self, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "anthropic"

    def generate(self, model: str, prompt: str, credential: str | None) -> Any:
        # The chain owns retries; the SDK's own retry loop is disabled.
        logger.debug("Calling Anthropic model %s", model)
        client = anthropic.Anthropic(api_key=credential, timeout=self.timeout, max_retries=0)
        try:
            message = client.messages.create(
                model=model,
                max_tokens=ANTHROPIC_MAX_TOKENS,
                temperature=ANTHROPIC_TEMPERATURE,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APITimeoutError as exc:
            raise ProviderError(
                f"Anthropic request timed out after {self.timeout}s",
                ErrorKind.transient, model=model,
            ) from exc
        except anthropic.APIConnectionError as exc:
            raise ProviderError(
                f"Could not reach Anthropic: {exc}", ErrorKind.transient, model=model,
            ) from exc
        except anthropic.APIStatusError as exc:
            raise ProviderError(
                f"Anthropic returned {exc.status_code}: {exc.message}",
                classify_status(exc.status_code),
                status_code=exc.status_code,
                model=model,
            ) from exc
        except anthropic.APIError as exc:
            raise ProviderError(
                f"Anthropic API error: {exc}", ErrorKind.fatal, model=model,
            ) from exc

        return message.model_dump()
