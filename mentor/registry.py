"""Backend registry: maps backend names to provider factories."""

from typing import Callable

from .config import ResolverConfig
from .providers.anthropic_backend import AnthropicBackend
from .providers.base import ProviderBackend
from .providers.gemini import GeminiBackend
from .providers.ollama import OllamaBackend
from .resolver import CredentialStore, FeedbackResolver

BACKENDS: dict[str, Callable[[ResolverConfig], ProviderBackend]] = {
    "gemini": lambda cfg: GeminiBackend(api_base=cfg.gemini_api_base, timeout=cfg.timeout_seconds),
    "ollama": lambda cfg: OllamaBackend(ollama_url=cfg.ollama_url, timeout=cfg.timeout_seconds),
    "anthropic": lambda cfg: AnthropicBackend(timeout=cfg.timeout_seconds),
}


def build_backend(config: ResolverConfig) -> ProviderBackend:
    """Instantiate the backend named in *config*."""
    try:
        factory = BACKENDS[config.backend]
    except KeyError:
        raise ValueError(f"Unknown backend: {config.backend!r}") from None
    return factory(config)


def build_resolver(
    config: ResolverConfig,
    credential_store: CredentialStore | None = None,
) -> FeedbackResolver:
    return FeedbackResolver(config, build_backend(config), credential_store=credential_store)
