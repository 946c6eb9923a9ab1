"""ABOUTME: HTTP client utilities for MCP tools - async HTTP operations with standard error handling."""

from typing import Optional, Dict, Any
import httpx

from .error_handling import HTTPStatusCodes, FailureKind, ProviderFailure

# Constants
DEFAULT_HTTP_TIMEOUT = 10.0
MIN_HTTP_TIMEOUT = 1.0
MAX_HTTP_TIMEOUT = 300.0


async def safe_http_get(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    follow_redirects: bool = True,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Perform async HTTP GET with standard error handling.

    A fresh client is opened per call, so no connection outlives the request.
    ``transport`` lets callers substitute the network layer (e.g. httpx.MockTransport).
    """
    timeout = max(MIN_HTTP_TIMEOUT, min(MAX_HTTP_TIMEOUT, timeout))
    async with httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=follow_redirects,
        transport=transport,
    ) as client:
        response = await client.get(url, headers=headers, params=params)
        response.raise_for_status()
        return response


def extract_provider_message(response: httpx.Response) -> Optional[str]:
    """Pull the provider's ``Message`` field out of an error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("Message")
        if message:
            return str(message)
    return None


def classify_http_error(error: Exception, stage: str) -> ProviderFailure:
    """Classify a failed provider call into a ProviderFailure.

    Args:
        error: Exception raised while calling the provider or decoding its body
        stage: Which call failed ("location_search" or "forecast")

    Returns:
        ProviderFailure tagged with the matching FailureKind

    Mapping:
        401 -> UNAUTHORIZED, 404 -> NOT_FOUND, other status -> HTTP_ERROR,
        no response at all -> UNREACHABLE, undecodable body -> MALFORMED
    """
    if isinstance(error, httpx.HTTPStatusError):
        status_code = error.response.status_code
        if HTTPStatusCodes.is_unauthorized(status_code):
            return ProviderFailure(FailureKind.UNAUTHORIZED, stage, status_code=status_code)
        if HTTPStatusCodes.is_not_found(status_code):
            return ProviderFailure(FailureKind.NOT_FOUND, stage, status_code=status_code)
        return ProviderFailure(
            FailureKind.HTTP_ERROR,
            stage,
            status_code=status_code,
            provider_message=extract_provider_message(error.response),
        )
    if isinstance(error, httpx.RequestError):
        return ProviderFailure(FailureKind.UNREACHABLE, stage)
    return ProviderFailure(FailureKind.MALFORMED, stage)


__all__ = [
    "DEFAULT_HTTP_TIMEOUT",
    "MIN_HTTP_TIMEOUT",
    "MAX_HTTP_TIMEOUT",
    "safe_http_get",
    "extract_provider_message",
    "classify_http_error",
    "HTTPStatusCodes",
]
