"""Feedback configuration: all tuneable values in one place."""

import os
from dataclasses import dataclass, field
from typing import Mapping

MENTOR_CONFIG = {
    "backend": "gemini",
    "gemini_models": ["gemini-2.5-flash", "gemini-pro-latest", "gemini-flash-latest"],
    "ollama_models": ["llama3.1:8b"],
    "anthropic_models": ["claude-sonnet-4-20250514"],
    "gemini_api_base": "https://generativelanguage.googleapis.com/v1beta",
    "ollama_url": "http://localhost:11434",
    "timeout_seconds": 15.0,
    "prompt_style": "concise",
    "db_url": "sqlite:///./campus_dashboard.db",
}

_TRUTHY = {"1", "true", "yes"}


@dataclass(frozen=True)
class ResolverConfig:
    """Everything the feedback resolver needs, resolved once at startup."""

    backend: str = MENTOR_CONFIG["backend"]
    models: tuple[str, ...] = tuple(MENTOR_CONFIG["gemini_models"])
    default_api_key: str | None = field(default=None, repr=False)
    timeout_seconds: float = MENTOR_CONFIG["timeout_seconds"]
    prompt_style: str = MENTOR_CONFIG["prompt_style"]
    require_credential: bool = False
    gemini_api_base: str = MENTOR_CONFIG["gemini_api_base"]
    ollama_url: str = MENTOR_CONFIG["ollama_url"]


def _default_models(backend: str) -> list[str]:
    return list(MENTOR_CONFIG.get(f"{backend}_models", []))


def load_resolver_config(env: Mapping[str, str] | None = None) -> ResolverConfig:
    """Build a ResolverConfig from environment variables.

    Unknown backends and prompt styles are rejected here so that a bad
    deployment fails at startup rather than on the first request.
    """
    if env is None:
        env = os.environ

    backend = env.get("MENTOR_BACKEND", MENTOR_CONFIG["backend"]).strip().lower()
    if backend not in {"gemini", "ollama", "anthropic"}:
        raise ValueError(f"Unknown MENTOR_BACKEND: {backend!r}")

    raw_models = env.get("MENTOR_MODELS", "")
    models = [m.strip() for m in raw_models.split(",") if m.strip()]
    if not models:
        models = _default_models(backend)

    if backend == "anthropic":
        api_key = env.get("ANTHROPIC_API_KEY") or None
    else:
        api_key = env.get("GEMINI_API_KEY") or None

    prompt_style = env.get("MENTOR_PROMPT_STYLE", MENTOR_CONFIG["prompt_style"]).strip().lower()
    if prompt_style not in {"concise", "detailed"}:
        raise ValueError(f"Unknown MENTOR_PROMPT_STYLE: {prompt_style!r}")

    return ResolverConfig(
        backend=backend,
        models=tuple(models),
        default_api_key=api_key,
        timeout_seconds=float(env.get("MENTOR_TIMEOUT_SECONDS", MENTOR_CONFIG["timeout_seconds"])),
        prompt_style=prompt_style,
        require_credential=env.get("MENTOR_REQUIRE_CREDENTIAL", "false").strip().lower() in _TRUTHY,
        gemini_api_base=env.get("GEMINI_API_BASE", MENTOR_CONFIG["gemini_api_base"]).rstrip("/"),
        ollama_url=env.get("OLLAMA_URL", MENTOR_CONFIG["ollama_url"]).rstrip("/"),
    )
