"""Centralised constants for the mentor package.

Fixed strings, generation parameters and timeouts used across the
providers, the chain and the resolver live here.  Individual modules
should import from this file rather than defining their own copies.
"""

from .config import MENTOR_CONFIG

# ── Network ───────────────────────────────────────────────────────────

GEMINI_API_BASE: str = MENTOR_CONFIG["gemini_api_base"]
OLLAMA_URL: str = MENTOR_CONFIG["ollama_url"]

# Per-call timeout; there is no deadline for the chain as a whole.
HTTP_TIMEOUT_SECONDS: float = MENTOR_CONFIG["timeout_seconds"]
HEALTH_CHECK_TIMEOUT_SECONDS: float = 5.0

# Status codes that mean "this model is unavailable, try the next one".
TRANSIENT_STATUS_CODES: frozenset[int] = frozenset({404, 503})

# ── Generation parameters ─────────────────────────────────────────────

GEMINI_GENERATION_CONFIG: dict = {
    "temperature": 0.7,
    "maxOutputTokens": 600,
    "topP": 0.8,
    "topK": 10,
}

OLLAMA_OPTIONS: dict = {
    "temperature": 0.7,
    "top_p": 0.9,
    "num_predict": 200,
}

ANTHROPIC_MAX_TOKENS: int = 600
ANTHROPIC_TEMPERATURE: float = 0.7

# ── Fixed strings ─────────────────────────────────────────────────────

NO_CONTEXT_PLACEHOLDER: str = "No additional context provided."
FALLBACK_PROVIDER: str = "fallback"
SERVICE_UNAVAILABLE_NOTE: str = "AI service temporarily unavailable"
VALIDATION_PROMPT: str = 'Say "OK" if you can read this.'
