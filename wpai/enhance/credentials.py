# wpai/enhance/credentials.py
"""
API key resolution for the enhancement provider.

Resolution order:
  1. Explicit config value
  2. Provider-specific env var
  3. Generic fallback env var
"""

from __future__ import annotations

import os
from typing import Optional

from wpai.logging.logger import get_logger
from wpai.logging.tags import ENHANCE

logger = get_logger(__name__)

GENERIC_API_KEY_ENV = "WPAI_LLM_API_KEY"

PROVIDER_ENV_MAP: dict[str, list[str]] = {
    "gemini": ["GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"],
}


class CredentialError(RuntimeError):
    """Raised when credentials cannot be resolved."""

    pass


def resolve_api_key(*, provider: str, api_key: Optional[str] = None) -> str:
    """
    Resolve the API key for ``provider``.

    Raises:
        CredentialError: If no API key could be resolved
    """
    if api_key:
        logger.debug(f"{ENHANCE} Using API key from explicit config for '{provider}'")
        return api_key

    env_vars = PROVIDER_ENV_MAP.get(provider, [])
    for env_name in env_vars:
        value = os.getenv(env_name)
        if value:
            logger.debug(f"{ENHANCE} Using API key from env '{env_name}' for '{provider}'")
            return value

    fallback = os.getenv(GENERIC_API_KEY_ENV)
    if fallback:
        logger.debug(f"{ENHANCE} Using API key from env '{GENERIC_API_KEY_ENV}' for '{provider}'")
        return fallback

    expected = ", ".join(env_vars + [GENERIC_API_KEY_ENV])
    raise CredentialError(
        f"API key for provider '{provider}' not found. "
        f"Set one of: {expected}, or enhancement.api_key in .wpai/config.yaml."
    )


__all__ = ["CredentialError", "resolve_api_key", "GENERIC_API_KEY_ENV"]
