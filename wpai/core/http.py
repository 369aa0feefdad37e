# wpai/core/http.py
"""
HTTP client factory for outbound API calls.

Used by the prompt enhancement client so timeouts, headers and error
mapping live in one place.

Usage:
    from wpai.core.http import create_api_client, raise_for_status

    with create_api_client(base_url, api_key=key, auth_header="x-goog-api-key") as client:
        response = client.post("/models/x:generateContent", json=payload)
        raise_for_status(response, provider="gemini", endpoint="/models/x")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================


@dataclass
class APIError(Exception):
    """
    Structured API error with details.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if available)
        provider: API provider name (e.g., "gemini")
        endpoint: API endpoint that failed
        details: Additional error details from the API response
        original_error: The original exception that caused this error
    """

    message: str
    status_code: Optional[int] = None
    provider: Optional[str] = None
    endpoint: Optional[str] = None
    details: Optional[str] = None
    original_error: Optional[Exception] = None

    def __str__(self) -> str:
        parts = [self.message]

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        if self.details:
            parts.append(f"- {self.details}")

        return " ".join(parts)


class RateLimitError(APIError):
    """Raised when API rate limit or quota is exceeded."""

    pass


class AuthenticationError(APIError):
    """Raised when API authentication fails."""

    pass


class ModelNotFoundError(APIError):
    """Raised when requested model doesn't exist."""

    pass


# =============================================================================
# Default Configuration
# =============================================================================

DEFAULT_TIMEOUTS = {
    "default": 30.0,
    "completion": 60.0,
}

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


# =============================================================================
# Client Factory
# =============================================================================


def create_api_client(
    base_url: str,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
    timeout_type: str = "default",
    headers: Optional[Dict[str, str]] = None,
    auth_header: str = "Authorization",
    auth_scheme: str = "Bearer",
    **kwargs: Any,
) -> httpx.Client:
    """
    Create a configured HTTP client for API calls.

    Args:
        base_url: Base URL for the API
        api_key: API key for authentication (optional)
        timeout: Request timeout in seconds (or use timeout_type)
        timeout_type: Preset timeout type ("default", "completion")
        headers: Additional headers to include
        auth_header: Header name for authentication
        auth_scheme: Authentication scheme; empty sends the bare key
        **kwargs: Additional arguments passed to httpx.Client

    Returns:
        Configured httpx.Client instance
    """
    if timeout is None:
        timeout = DEFAULT_TIMEOUTS.get(timeout_type, DEFAULT_TIMEOUTS["default"])

    final_headers = dict(DEFAULT_HEADERS)

    if api_key:
        final_headers[auth_header] = f"{auth_scheme} {api_key}" if auth_scheme else api_key

    if headers:
        final_headers.update(headers)

    client = httpx.Client(
        base_url=base_url,
        headers=final_headers,
        timeout=timeout,
        **kwargs,
    )

    logger.debug(f"Created HTTP client for {base_url} (timeout={timeout}s)")

    return client


# =============================================================================
# Error Handling
# =============================================================================


def handle_api_error(
    exc: Exception,
    provider: str = "unknown",
    endpoint: str = "",
) -> APIError:
    """
    Convert an httpx exception to a structured APIError.

    Args:
        exc: The original exception
        provider: Name of the API provider
        endpoint: The endpoint that was called

    Returns:
        Appropriate APIError subclass
    """
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code

        details = None
        try:
            error_data = exc.response.json()
            error = error_data.get("error")
            if isinstance(error, dict):
                details = error.get("message")
            else:
                details = error_data.get("message") or error
        except ValueError:
            details = exc.response.text[:200] if exc.response.text else None

        error_cls = {
            401: AuthenticationError,
            403: AuthenticationError,
            404: ModelNotFoundError,
            429: RateLimitError,
        }.get(status_code, APIError)

        messages = {
            AuthenticationError: f"{provider} authentication failed",
            ModelNotFoundError: f"{provider} resource not found",
            RateLimitError: f"{provider} rate limit exceeded",
            APIError: f"{provider} API request failed",
        }

        return error_cls(
            message=messages[error_cls],
            status_code=status_code,
            provider=provider,
            endpoint=endpoint,
            details=details,
            original_error=exc,
        )

    if isinstance(exc, httpx.ConnectError):
        return APIError(
            message=f"Failed to connect to {provider}",
            provider=provider,
            endpoint=endpoint,
            details=str(exc),
            original_error=exc,
        )

    if isinstance(exc, httpx.TimeoutException):
        return APIError(
            message=f"{provider} request timed out",
            provider=provider,
            endpoint=endpoint,
            details="Consider increasing enhancement.timeout",
            original_error=exc,
        )

    return APIError(
        message=f"{provider} request failed: {exc}",
        provider=provider,
        endpoint=endpoint,
        original_error=exc,
    )


def raise_for_status(
    response: httpx.Response,
    provider: str = "unknown",
    endpoint: str = "",
) -> None:
    """
    Check response status and raise appropriate APIError if failed.

    Raises:
        APIError: If the response indicates an error
    """
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise handle_api_error(exc, provider=provider, endpoint=endpoint) from exc


__all__ = [
    "APIError",
    "RateLimitError",
    "AuthenticationError",
    "ModelNotFoundError",
    "DEFAULT_TIMEOUTS",
    "create_api_client",
    "handle_api_error",
    "raise_for_status",
]
