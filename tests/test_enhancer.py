# tests/test_enhancer.py
"""
Tests for prompt enhancement.

No test talks to the real API: the Gemini client is exercised through
httpx.MockTransport and the enhancer through stub clients.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import httpx
import pytest

from wpai.config.schema import EnhancementSettings
from wpai.core.exceptions import EnhancementError
from wpai.enhance.client import GeminiClient, TextCompletionClient
from wpai.enhance.credentials import CredentialError, resolve_api_key
from wpai.enhance.enhancer import PromptEnhancer, build_enhancement_prompt
from wpai.plugin_gen.types import PluginType

pytestmark = pytest.mark.tier1


def _gemini_response(text: str) -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def _transport(status_code: int = 200, body=None, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


# =============================================================================
# Credentials Tests
# =============================================================================


class TestResolveApiKey:
    """Tests for resolve_api_key()."""

    def test_explicit_key_wins(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        assert resolve_api_key(provider="gemini", api_key="explicit") == "explicit"

    def test_provider_env(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_API_KEY", "google")
        monkeypatch.setenv("API_KEY", "plain")
        assert resolve_api_key(provider="gemini") == "google"

    def test_generic_env(self, monkeypatch):
        monkeypatch.setenv("WPAI_LLM_API_KEY", "generic")
        assert resolve_api_key(provider="gemini") == "generic"

    def test_missing(self):
        with pytest.raises(CredentialError, match="GEMINI_API_KEY"):
            resolve_api_key(provider="gemini")


# =============================================================================
# GeminiClient Tests
# =============================================================================


class TestGeminiClient:
    """Tests for GeminiClient."""

    def test_implements_protocol(self):
        assert isinstance(GeminiClient(), TextCompletionClient)

    def test_complete(self):
        seen: list = []
        client = GeminiClient(
            api_key="test-key",
            transport=_transport(body=_gemini_response("Improved"), seen=seen),
        )

        assert client.complete("Make it better") == "Improved"

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/v1beta/models/gemini-3-flash-preview:generateContent"
        assert request.headers["x-goog-api-key"] == "test-key"
        assert "authorization" not in request.headers
        assert json.loads(request.content) == {
            "contents": [{"role": "user", "parts": [{"text": "Make it better"}]}]
        }

    def test_joins_parts(self):
        body = {"candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}]}
        client = GeminiClient(api_key="k", transport=_transport(body=body))

        assert client.complete("x") == "ab"

    def test_from_settings(self):
        settings = EnhancementSettings(model="gemini-3-pro-preview", api_key="k", timeout=5)
        client = GeminiClient.from_settings(settings)

        assert client.model == "gemini-3-pro-preview"
        assert client.api_key == "k"
        assert client.timeout == 5

    def test_missing_key(self):
        client = GeminiClient(transport=_transport(body=_gemini_response("x")))

        with pytest.raises(EnhancementError, match="not found"):
            client.complete("x")

    def test_env_key(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        seen: list = []
        client = GeminiClient(transport=_transport(body=_gemini_response("x"), seen=seen))

        client.complete("x")
        assert seen[0].headers["x-goog-api-key"] == "env-key"

    @pytest.mark.parametrize(
        "status_code,message",
        [
            (401, "authentication failed"),
            (404, "not found"),
            (429, "rate limit"),
            (500, "API request failed"),
        ],
    )
    def test_http_errors(self, status_code, message):
        body = {"error": {"message": "boom"}}
        client = GeminiClient(api_key="k", transport=_transport(status_code, body))

        with pytest.raises(EnhancementError, match=message):
            client.complete("x")

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = GeminiClient(api_key="k", transport=httpx.MockTransport(handler))

        with pytest.raises(EnhancementError, match="Failed to connect"):
            client.complete("x")

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"candidates": []},
            {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
        ],
    )
    def test_unusable_response(self, body):
        client = GeminiClient(api_key="k", transport=_transport(body=body))

        with pytest.raises(EnhancementError):
            client.complete("x")

    def test_invalid_json(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="not json"))
        client = GeminiClient(api_key="k", transport=transport)

        with pytest.raises(EnhancementError, match="invalid JSON"):
            client.complete("x")


# =============================================================================
# PromptEnhancer Tests
# =============================================================================


class TestBuildEnhancementPrompt:
    """Tests for the instruction sent to the model."""

    def test_mentions_type_and_prompt(self):
        prompt = build_enhancement_prompt("Be nice", PluginType.SEO_OPTIMIZER)

        assert "building a seo_optimizer plugin" in prompt
        assert 'Their initial prompt is: "Be nice".' in prompt
        assert "Return ONLY the improved prompt text." in prompt


class TestPromptEnhancer:
    """Tests for PromptEnhancer."""

    def test_returns_enhanced_text(self):
        client = MagicMock()
        client.complete.return_value = "  Be nice and concise.  \n"

        enhancer = PromptEnhancer(client=client)

        assert enhancer.enhance("Be nice", PluginType.CHATBOT) == "Be nice and concise."
        sent = client.complete.call_args[0][0]
        assert "Be nice" in sent

    def test_failure_returns_original(self, caplog):
        """Test any client failure falls back to the original prompt."""
        client = MagicMock()
        client.complete.side_effect = EnhancementError("service down")

        enhancer = PromptEnhancer(client=client)

        assert enhancer.enhance("Be nice", PluginType.CHATBOT) == "Be nice"
        assert "service down" in caplog.text

    def test_unexpected_error_returns_original(self):
        client = MagicMock()
        client.complete.side_effect = RuntimeError("bug")

        assert PromptEnhancer(client=client).enhance("Be nice", "chatbot") == "Be nice"

    @pytest.mark.parametrize("result", ["", "   ", None])
    def test_empty_result_returns_original(self, result):
        client = MagicMock()
        client.complete.return_value = result

        assert PromptEnhancer(client=client).enhance("Be nice", "chatbot") == "Be nice"

    def test_disabled(self):
        client = MagicMock()
        enhancer = PromptEnhancer(client=client, settings=EnhancementSettings(enabled=False))

        assert enhancer.enhance("Be nice", "chatbot") == "Be nice"
        client.complete.assert_not_called()

    def test_missing_key_returns_original(self):
        """Test the default Gemini client without credentials falls back cleanly."""
        assert PromptEnhancer().enhance("Be nice", "chatbot") == "Be nice"

    def test_unsupported_provider_returns_original(self):
        enhancer = PromptEnhancer(settings=EnhancementSettings(provider="other"))
        assert enhancer.enhance("Be nice", "chatbot") == "Be nice"
