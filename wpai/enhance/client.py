# wpai/enhance/client.py
"""
Text-completion clients used for prompt enhancement.

Any object with ``complete(prompt) -> str`` can stand in for the Gemini
client, which is how tests and alternative providers plug in.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

import httpx

from wpai.config.schema import EnhancementSettings
from wpai.core.exceptions import EnhancementError
from wpai.core.http import APIError, create_api_client, handle_api_error, raise_for_status
from wpai.enhance.credentials import CredentialError, resolve_api_key
from wpai.logging.logger import get_logger
from wpai.logging.tags import ENHANCE

logger = get_logger(__name__)


@runtime_checkable
class TextCompletionClient(Protocol):
    """Anything that turns a prompt into generated text."""

    def complete(self, prompt: str) -> str:
        """
        Return generated text for ``prompt``.

        Raises:
            EnhancementError: On any failure
        """
        ...


class GeminiClient:
    """
    Google Gemini ``generateContent`` client.

    Args:
        model: Model id (e.g. "gemini-3-flash-preview")
        api_key: Explicit key; resolved from the environment when None
        base_url: API base URL
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    provider = "gemini"

    def __init__(
        self,
        model: str = "gemini-3-flash-preview",
        api_key: Optional[str] = None,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.model = model
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: EnhancementSettings, **kwargs: Any) -> "GeminiClient":
        return cls(
            model=settings.model,
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            **kwargs,
        )

    @property
    def endpoint(self) -> str:
        return f"/models/{self.model}:generateContent"

    def complete(self, prompt: str) -> str:
        try:
            api_key = resolve_api_key(provider=self.provider, api_key=self.api_key)
        except CredentialError as e:
            raise EnhancementError(str(e)) from e

        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        client_kwargs: dict[str, Any] = {}
        if self.transport is not None:
            client_kwargs["transport"] = self.transport

        try:
            with create_api_client(
                self.base_url,
                api_key=api_key,
                timeout=self.timeout,
                auth_header="x-goog-api-key",
                auth_scheme="",
                **client_kwargs,
            ) as client:
                response = client.post(self.endpoint, json=payload)
                raise_for_status(response, provider=self.provider, endpoint=self.endpoint)
                data = response.json()
        except APIError as e:
            raise EnhancementError(str(e)) from e
        except httpx.HTTPError as e:
            raise EnhancementError(
                str(handle_api_error(e, provider=self.provider, endpoint=self.endpoint))
            ) from e
        except ValueError as e:
            raise EnhancementError(f"{self.provider} returned invalid JSON: {e}") from e

        text = _extract_text(data)
        logger.debug(f"{ENHANCE} {self.provider} returned {len(text)} chars")
        return text


def _extract_text(data: Any) -> str:
    """Pull ``candidates[0].content.parts[*].text`` out of a Gemini response."""
    try:
        parts = data["candidates"][0]["content"]["parts"]
        text = "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise EnhancementError(f"Unexpected response shape: {e!r}") from e

    if not text.strip():
        raise EnhancementError("Empty completion")
    return text


__all__ = ["TextCompletionClient", "GeminiClient"]
