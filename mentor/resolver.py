"""Feedback resolver: turns a student's goal into mentor-style feedback.

Flow: validate input → resolve a credential → format context → build the
prompt → run the provider chain → fall back to rule-based feedback if the
chain produced nothing.  Only caller mistakes (a missing goal, or a missing
credential when one is mandatory) escape as exceptions; every provider-side
failure ends in usable fallback text.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from .chain import ProviderChain
from .config import ResolverConfig
from .constants import FALLBACK_PROVIDER, SERVICE_UNAVAILABLE_NOTE, VALIDATION_PROMPT
from .context import format_context
from .fallback import generate_fallback_feedback
from .prompt import build_prompt
from .providers.base import ProviderBackend

logger = logging.getLogger(__name__)

# Looks up a user's stored API key; returns None when the user has none.
CredentialStore = Callable[[str], str | None]


class MissingInputError(ValueError):
    """The request carried no goal text."""


class NoCredentialError(LookupError):
    """No API key could be found and the deployment requires one."""


@dataclass
class FeedbackRequest:
    goal_text: str | None
    api_key: str | None = None
    user_id: str | None = None
    context: Any = None  # JSON string, dict or None


@dataclass
class FeedbackResult:
    feedback_text: str
    provider: str  # model id that answered, or "fallback"
    error_note: str | None = None
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    key_source: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.provider == FALLBACK_PROVIDER


class FeedbackResolver:
    """Resolves feedback requests against one provider backend."""

    def __init__(
        self,
        config: ResolverConfig,
        backend: ProviderBackend,
        credential_store: CredentialStore | None = None,
    ):
        self.config = config
        self.backend = backend
        self.credential_store = credential_store
        self.chain = ProviderChain(backend, config.models)

    # ── credentials ──────────────────────────────────────────────────

    def _stored_credential(self, user_id: str | None) -> str | None:
        if not user_id or self.credential_store is None:
            return None
        try:
            return self.credential_store(user_id) or None
        except Exception:
            logger.warning("Failed to read stored API key for user %s", user_id, exc_info=True)
            return None

    def resolve_credential(
        self,
        api_key: str | None = None,
        user_id: str | None = None,
        use_default: bool = True,
    ) -> tuple[str | None, str | None]:
        """Return ``(credential, source)``.

        Precedence: explicit key, then the user's stored key, then the
        configured default.  Both values are None when nothing is found.
        """
        if api_key:
            return api_key, "client-provided"
        stored = self._stored_credential(user_id)
        if stored:
            return stored, "user-profile"
        if use_default and self.config.default_api_key:
            return self.config.default_api_key, "default"
        return None, None

    # ── resolution ───────────────────────────────────────────────────

    def _fallback(self, goal_text: str, error_note: str | None = None) -> FeedbackResult:
        return FeedbackResult(
            feedback_text=generate_fallback_feedback(goal_text),
            provider=FALLBACK_PROVIDER,
            error_note=error_note,
        )

    def resolve(self, request: FeedbackRequest) -> FeedbackResult:
        goal_text = request.goal_text
        if not goal_text or not goal_text.strip():
            raise MissingInputError("Missing goalText")

        credential, key_source = self.resolve_credential(request.api_key, request.user_id)
        if credential is None and self.backend.requires_credential:
            if self.config.require_credential:
                raise NoCredentialError(
                    "No API key available for this user. Add one to your profile "
                    "or configure a default key."
                )
            logger.info("No API key available, using rule-based feedback")
            return self._fallback(goal_text)

        logger.info("Resolving feedback via %s (key source: %s)", self.backend.name, key_source)
        try:
            prompt = build_prompt(goal_text, format_context(request.context), self.config.prompt_style)
            outcome = self.chain.run(prompt, credential)
        except Exception:
            logger.exception("Unexpected error while generating feedback")
            return self._fallback(goal_text, error_note=SERVICE_UNAVAILABLE_NOTE)

        if outcome.success:
            return FeedbackResult(
                feedback_text=outcome.text,
                provider=outcome.model,
                key_source=key_source,
            )

        logger.warning(
            "All providers failed after %d attempt(s): %s",
            len(outcome.attempts), outcome.error.message if outcome.error else "no answer",
        )
        return self._fallback(goal_text, error_note=SERVICE_UNAVAILABLE_NOTE)

    def validate_key(self, user_id: str | None = None, api_key: str | None = None) -> bool:
        """Check that a user's key can reach at least one configured model.

        Only the explicit or stored key is checked, never the default.
        """
        credential, _ = self.resolve_credential(api_key, user_id, use_default=False)
        if credential is None and self.backend.requires_credential:
            raise NoCredentialError("No stored API key found")

        try:
            outcome = self.chain.run(VALIDATION_PROMPT, credential)
        except Exception:
            logger.exception("Unexpected error while validating API key")
            return False
        if not outcome.success:
            logger.info("Key validation failed: %s", outcome.error.message if outcome.error else "no answer")
        return outcome.success
