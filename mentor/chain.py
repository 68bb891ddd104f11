"""Provider resolution chain: tries models in order until one answers."""

import logging
from dataclasses import dataclass, field

from .extractors import extract_text
from .providers.base import ErrorKind, ProviderBackend, ProviderError

logger = logging.getLogger(__name__)


@dataclass
class ChainOutcome:
    """Result of one pass through the chain."""

    text: str | None = None
    model: str | None = None  # the model that produced ``text``
    attempts: list[str] = field(default_factory=list)
    error: ProviderError | None = None  # last error when nothing succeeded

    @property
    def success(self) -> bool:
        return bool(self.text)


class ProviderChain:
    """An ordered list of models served by one backend.

    Each model gets exactly one attempt with its own timeout.  Transient
    errors and empty answers move on to the next model; a fatal error ends
    the pass immediately.
    """

    def __init__(self, backend: ProviderBackend, models: list[str] | tuple[str, ...]):
        if not models:
            raise ValueError("A provider chain needs at least one model")
        self.backend = backend
        self.models = list(models)

    def run(self, prompt: str, credential: str | None) -> ChainOutcome:
        outcome = ChainOutcome()

        for model in self.models:
            outcome.attempts.append(model)
            logger.info("Trying %s model %s", self.backend.name, model)
            try:
                payload = self.backend.generate(model, prompt, credential)
            except ProviderError as exc:
                exc.model = exc.model or model
                outcome.error = exc
                if exc.transient:
                    logger.warning("Model %s unavailable (%s), trying next", model, exc.message)
                    continue
                logger.warning("Model %s failed (%s), stopping chain", model, exc.message)
                break

            text = extract_text(payload)
            if text:
                outcome.text = text
                outcome.model = model
                outcome.error = None
                logger.info("Model %s produced %d characters", model, len(text))
                break

            outcome.error = ProviderError(
                "Empty response", ErrorKind.transient, model=model,
            )
            logger.warning("Model %s returned an empty response, trying next", model)

        return outcome
