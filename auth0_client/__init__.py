"""Async Python client for the Auth0 Authentication and Management APIs."""

__version__ = "0.1.0"

from .authentication import AuthenticationApiClient
from .builders import AuthorizationUrlBuilder, LogoutUrlBuilder, SamlUrlBuilder, WsFedUrlBuilder
from .config import Settings, get_settings
from .exceptions import (
    ApiError,
    Auth0Error,
    DeserializationError,
    RateLimit,
    RateLimitApiError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from .management import ManagementApiClient

__all__ = [
    "__version__",
    "AuthenticationApiClient",
    "ManagementApiClient",
    "AuthorizationUrlBuilder",
    "LogoutUrlBuilder",
    "SamlUrlBuilder",
    "WsFedUrlBuilder",
    "Settings",
    "get_settings",
    "Auth0Error",
    "ApiError",
    "RateLimitApiError",
    "RateLimit",
    "ValidationError",
    "TransportError",
    "RequestTimeoutError",
    "DeserializationError",
]
