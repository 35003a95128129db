"""Async HTTP connection shared by the Authentication and Management API clients."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import httpx
from opentelemetry.trace import get_tracer

from . import __version__
from .exceptions import (
    DeserializationError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
    api_error_from_response,
)

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

DEFAULT_TIMEOUT = 10.0
USER_AGENT = f"auth0-client-python/{__version__}"


def path_segment(value: str) -> str:
    """Percent-encode a single path segment (user ids look like ``auth0|123``)."""

    return quote(value, safe="")


def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if not params:
        return None
    cleaned = {key: value for key, value in params.items() if value is not None}
    return cleaned or None


class ApiConnection:
    """Thin async client around ``httpx.AsyncClient``.

    Holds the base URL and the default bearer token; both are read-only once the
    connection is built, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not base_url:
            raise ValidationError("base_url is required", fields=["base_url"])

        self._base_url = base_url.rstrip("/")
        self._token = token
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> Optional[str]:
        return self._token

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _headers(self, token: Optional[str]) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        bearer = token or self._token
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"
        return headers

    def url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}{path}"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        token: Optional[str] = None,
    ) -> httpx.Response:
        """Issue one request and return the 2xx response.

        Raises:
            ApiError: On a non-2xx response
            RequestTimeoutError: When the transport timeout elapses
            TransportError: When no response was received
        """
        url = self.url(path)
        with tracer.start_as_current_span("auth0.request") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.route", path)
            try:
                response = await self._client.request(
                    method,
                    url,
                    headers=self._headers(token),
                    params=_clean_params(params),
                    json=json,
                    data=data,
                )
            except httpx.TimeoutException as exc:
                logger.error("%s %s timed out: %s", method, path, exc)
                raise RequestTimeoutError(f"{method} {path} timed out") from exc
            except httpx.RequestError as exc:
                logger.error("%s %s failed: %s", method, path, exc)
                raise TransportError(f"{method} {path} failed: {exc}") from exc

            span.set_attribute("http.status_code", response.status_code)

        logger.debug("%s %s -> %s", method, path, response.status_code)
        if not response.is_success:
            error = api_error_from_response(response, endpoint=path)
            logger.warning("Auth0 API error: %s", error)
            raise error
        return response

    async def request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self.send(method, path, **kwargs)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise DeserializationError(f"{method} {path} returned a non-JSON body") from exc

    async def request_text(self, method: str, path: str, **kwargs: Any) -> str:
        response = await self.send(method, path, **kwargs)
        return response.text
