"""Typed exceptions raised by the Auth0 clients and the error translation helper."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

import httpx

logger = logging.getLogger(__name__)

_ERROR_CODE_KEYS = ("errorCode", "code", "error")
_MESSAGE_KEYS = ("message", "error_description", "description")


class Auth0Error(Exception):
    """Base exception for all Auth0 client operations."""
    pass


class ValidationError(Auth0Error, ValueError):
    """Caller input was rejected before any request was sent.

    Attributes:
        fields: Names of the offending fields, when known
    """

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        self.fields: List[str] = list(fields or [])
        super().__init__(message)


class TransportError(Auth0Error):
    """The request never produced an HTTP response (DNS, TLS, connection reset...)."""
    pass


class RequestTimeoutError(TransportError):
    """The transport timeout elapsed before a response arrived."""
    pass


class DeserializationError(Auth0Error):
    """A successful response did not have the expected shape."""
    pass


@dataclass(frozen=True)
class RateLimit:
    """Rate limit counters reported by Auth0 in ``x-ratelimit-*`` headers."""

    limit: Optional[int] = None
    remaining: Optional[int] = None
    reset: Optional[int] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimit":
        return cls(
            limit=_int_header(headers, "x-ratelimit-limit"),
            remaining=_int_header(headers, "x-ratelimit-remaining"),
            reset=_int_header(headers, "x-ratelimit-reset"),
        )


class ApiError(Auth0Error):
    """Non-2xx response from the Auth0 API.

    Attributes:
        status_code: HTTP status code
        error_code: Provider error code (e.g. ``inexistent_user``), if the body carried one
        message: Human readable message from the body, if any
        endpoint: API path that failed
        body: Decoded JSON error body, when it was a JSON object
    """

    def __init__(
        self,
        status_code: int,
        error_code: Optional[str] = None,
        message: Optional[str] = None,
        endpoint: str = "",
        body: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.endpoint = endpoint
        self.body = body
        super().__init__(self._describe())

    def _describe(self) -> str:
        text = f"[{self.status_code}]"
        if self.endpoint:
            text += f" {self.endpoint}"
        if self.error_code:
            text += f" {self.error_code}"
        if self.message:
            text += f": {self.message}"
        return text


class RateLimitApiError(ApiError):
    """429 Too Many Requests, with the rate limit counters from the response."""

    def __init__(self, *args: Any, rate_limit: Optional[RateLimit] = None, **kwargs: Any):
        self.rate_limit = rate_limit or RateLimit()
        super().__init__(*args, **kwargs)


def _int_header(headers: Mapping[str, str], name: str) -> Optional[int]:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _first_string(body: Mapping[str, Any], keys: Iterable[str]) -> Optional[str]:
    for key in keys:
        value = body.get(key)
        if value not in (None, ""):
            return str(value)
    return None


def api_error_from_response(response: httpx.Response, endpoint: str = "") -> ApiError:
    """Translate an error response into an ``ApiError``.

    Management API bodies look like
    ``{"statusCode": 404, "error": "Not Found", "errorCode": "inexistent_user", "message": ...}``,
    Authentication API bodies like ``{"error": "invalid_grant", "error_description": ...}``
    or ``{"code": "user_exists", "description": ...}``. Anything that is not a JSON
    object with at least one of those keys yields an error carrying only the status.
    """
    status = response.status_code
    error_cls = RateLimitApiError if status == 429 else ApiError
    extra: Dict[str, Any] = {}
    if error_cls is RateLimitApiError:
        extra["rate_limit"] = RateLimit.from_headers(response.headers)

    try:
        body = response.json()
    except ValueError:
        body = None

    if not isinstance(body, dict):
        logger.debug("Error response from %s had no JSON object body", endpoint)
        return error_cls(status, endpoint=endpoint, **extra)

    error_code = _first_string(body, _ERROR_CODE_KEYS)
    message = _first_string(body, _MESSAGE_KEYS)
    if error_code is None and message is None:
        return error_cls(status, endpoint=endpoint, **extra)

    return error_cls(status, error_code, message, endpoint=endpoint, body=body, **extra)


__all__ = [
    "Auth0Error",
    "ValidationError",
    "TransportError",
    "RequestTimeoutError",
    "DeserializationError",
    "ApiError",
    "RateLimitApiError",
    "RateLimit",
    "api_error_from_response",
]
