"""Tests for the backend registry and resolver factory."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from mentor.config import ResolverConfig  # noqa: E402
from mentor.providers.base import ProviderBackend  # noqa: E402
from mentor.providers.gemini import GeminiBackend  # noqa: E402
from mentor.providers.ollama import OllamaBackend  # noqa: E402
from mentor.registry import BACKENDS, build_backend, build_resolver  # noqa: E402
from mentor.resolver import FeedbackResolver  # noqa: E402

EXPECTED_KEYS = {"gemini", "ollama", "anthropic"}


class TestRegistryCompleteness:
    def test_all_expected_backends_are_registered(self):
        assert set(BACKENDS.keys()) == EXPECTED_KEYS

    @pytest.mark.parametrize("name", sorted(EXPECTED_KEYS))
    def test_backend_name_matches_registry_key(self, name):
        backend = build_backend(ResolverConfig(backend=name))
        assert isinstance(backend, ProviderBackend)
        assert backend.name == name

    @pytest.mark.parametrize("name", sorted(EXPECTED_KEYS))
    def test_generate_is_callable(self, name):
        assert callable(build_backend(ResolverConfig(backend=name)).generate)


class TestBuildBackend:
    def test_config_values_reach_the_backend(self):
        backend = build_backend(ResolverConfig(
            backend="gemini", gemini_api_base="http://fake/v1", timeout_seconds=3,
        ))
        assert isinstance(backend, GeminiBackend)
        assert backend.api_base == "http://fake/v1"
        assert backend.timeout == 3

    def test_ollama_url(self):
        backend = build_backend(ResolverConfig(backend="ollama", ollama_url="http://box:1"))
        assert isinstance(backend, OllamaBackend)
        assert backend.ollama_url == "http://box:1"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_backend(ResolverConfig(backend="nope"))


class TestBuildResolver:
    def test_resolver_chain_uses_configured_models(self):
        config = ResolverConfig(models=("m1", "m2"))
        store = lambda user_id: None  # noqa: E731
        resolver = build_resolver(config, credential_store=store)

        assert isinstance(resolver, FeedbackResolver)
        assert resolver.chain.models == ["m1", "m2"]
        assert resolver.credential_store is store
