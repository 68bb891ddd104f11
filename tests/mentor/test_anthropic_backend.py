"""Tests for the Anthropic backend with a mocked SDK client."""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import anthropic
import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from mentor.providers.anthropic_backend import AnthropicBackend  # noqa: E402
from mentor.providers.base import ErrorKind, ProviderError  # noqa: E402

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


@pytest.fixture()
def backend():
    return AnthropicBackend(timeout=15)


def _status_error(status):
    return anthropic.APIStatusError(
        f"Error code: {status}",
        response=httpx.Response(status, request=_REQUEST),
        body=None,
    )


class TestAnthropicBackend:
    def test_returns_dumped_message(self, backend):
        message = MagicMock()
        message.model_dump.return_value = {"content": [{"type": "text", "text": "Hi"}]}
        with patch("mentor.providers.anthropic_backend.anthropic.Anthropic") as mock_cls:
            mock_cls.return_value.messages.create.return_value = message
            payload = backend.generate("claude-sonnet-4-20250514", "prompt", "sk-test")

        assert payload == {"content": [{"type": "text", "text": "Hi"}]}
        mock_cls.assert_called_once_with(api_key="sk-test", timeout=15, max_retries=0)
        kwargs = mock_cls.return_value.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-sonnet-4-20250514"
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]

    @pytest.mark.parametrize("status,kind", [
        (503, ErrorKind.transient),
        (404, ErrorKind.transient),
        (401, ErrorKind.fatal),
        (500, ErrorKind.fatal),
    ])
    def test_status_errors_are_classified(self, backend, status, kind):
        with patch("mentor.providers.anthropic_backend.anthropic.Anthropic") as mock_cls:
            mock_cls.return_value.messages.create.side_effect = _status_error(status)
            with pytest.raises(ProviderError) as info:
                backend.generate("m", "p", "k")

        assert info.value.kind is kind
        assert info.value.status_code == status

    def test_timeout_is_transient(self, backend):
        with patch("mentor.providers.anthropic_backend.anthropic.Anthropic") as mock_cls:
            mock_cls.return_value.messages.create.side_effect = anthropic.APITimeoutError(
                request=_REQUEST
            )
            with pytest.raises(ProviderError) as info:
                backend.generate("m", "p", "k")

        assert info.value.kind is ErrorKind.transient

    def test_connection_error_is_transient(self, backend):
        with patch("mentor.providers.anthropic_backend.anthropic.Anthropic") as mock_cls:
            mock_cls.return_value.messages.create.side_effect = anthropic.APIConnectionError(
                request=_REQUEST
            )
            with pytest.raises(ProviderError) as info:
                backend.generate("m", "p", "k")

        assert info.value.kind is ErrorKind.transient
