"""Fluent builders for the browser-facing Auth0 URLs.

Every builder is single use: ``build()`` returns the URL string and any later call
on the same builder raises ``ValidationError``.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple
from urllib.parse import quote, urlencode

from .connection import path_segment
from .exceptions import ValidationError

NONCE_RESPONSE_TYPES = {"id_token", "token id_token", "id_token token", "code id_token"}


class UrlBuilder:
    """Accumulates query parameters for a single URL."""

    path = ""
    # parameters owned by a dedicated ``with_*`` method
    reserved: Tuple[str, ...] = ()

    def __init__(self, base_url: str) -> None:
        if not base_url:
            raise ValidationError("base_url is required", fields=["base_url"])
        self._base_url = base_url.rstrip("/")
        self._params: Dict[str, str] = {}
        self._flags: List[str] = []
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise ValidationError(f"{type(self).__name__} has already been built")

    def _set(self, key: str, value: Optional[str]):
        self._ensure_open()
        if value is None:
            self._params.pop(key, None)
        else:
            self._params[key] = str(value)
        return self

    def with_value(self, key: str, value: str):
        """Add an arbitrary query parameter."""
        if key in self.reserved:
            raise ValidationError(f"'{key}' must be set with its dedicated method", fields=[key])
        return self._set(key, value)

    def _resolve_path(self) -> str:
        return self.path

    def validate(self) -> None:
        """Raise ``ValidationError`` when the accumulated parameters are inconsistent."""

    def build(self) -> str:
        self._ensure_open()
        self.validate()
        url = f"{self._base_url}{self._resolve_path()}"
        parts = []
        if self._params:
            parts.append(urlencode(self._params, quote_via=quote))
        parts.extend(quote(flag, safe="") for flag in self._flags)
        self._built = True
        if parts:
            url = f"{url}?{'&'.join(parts)}"
        return url


class AuthorizationUrlBuilder(UrlBuilder):
    path = "/authorize"
    reserved = (
        "client_id",
        "connection",
        "redirect_uri",
        "response_type",
        "scope",
        "state",
        "nonce",
        "audience",
    )

    def __init__(self, base_url: str) -> None:
        super().__init__(base_url)
        self._params["response_type"] = "code"

    def with_client_id(self, client_id: str) -> "AuthorizationUrlBuilder":
        return self._set("client_id", client_id)

    def with_connection(self, connection: str) -> "AuthorizationUrlBuilder":
        return self._set("connection", connection)

    def with_redirect_url(self, redirect_url: str) -> "AuthorizationUrlBuilder":
        return self._set("redirect_uri", redirect_url)

    def with_response_type(self, response_type: str) -> "AuthorizationUrlBuilder":
        return self._set("response_type", response_type)

    def with_scope(self, scope: str) -> "AuthorizationUrlBuilder":
        return self._set("scope", scope)

    def with_state(self, state: str) -> "AuthorizationUrlBuilder":
        return self._set("state", state)

    def with_nonce(self, nonce: str) -> "AuthorizationUrlBuilder":
        return self._set("nonce", nonce)

    def with_audience(self, audience: str) -> "AuthorizationUrlBuilder":
        return self._set("audience", audience)

    def validate(self) -> None:
        if not self._params.get("client_id"):
            raise ValidationError("client_id is required to build an authorization URL", fields=["client_id"])
        if not self._params.get("response_type"):
            raise ValidationError("response_type cannot be empty", fields=["response_type"])
        if self._params["response_type"] in NONCE_RESPONSE_TYPES and not self._params.get("nonce"):
            raise ValidationError(
                f"response_type '{self._params['response_type']}' requires a nonce",
                fields=["nonce"],
            )


class LogoutUrlBuilder(UrlBuilder):
    path = "/v2/logout"
    reserved = ("returnTo", "client_id", "federated")

    def with_return_url(self, return_url: str) -> "LogoutUrlBuilder":
        return self._set("returnTo", return_url)

    def with_client_id(self, client_id: str) -> "LogoutUrlBuilder":
        return self._set("client_id", client_id)

    def federated(self) -> "LogoutUrlBuilder":
        """Also log the user out of the upstream identity provider."""
        self._ensure_open()
        if "federated" not in self._flags:
            self._flags.append("federated")
        return self


class SamlUrlBuilder(UrlBuilder):
    reserved = ("connection",)

    def __init__(self, base_url: str, client: str) -> None:
        super().__init__(base_url)
        self._client = client

    def with_connection(self, connection: str) -> "SamlUrlBuilder":
        return self._set("connection", connection)

    def validate(self) -> None:
        if not self._client or not self._client.strip():
            raise ValidationError("client is required to build a SAML URL", fields=["client"])

    def _resolve_path(self) -> str:
        return f"/samlp/{path_segment(self._client)}"


class WsFedUrlBuilder(UrlBuilder):
    reserved = ("wtrealm", "whr", "wctx", "wreply")

    def __init__(self, base_url: str) -> None:
        super().__init__(base_url)
        self._client: Optional[str] = None

    def with_client(self, client: str) -> "WsFedUrlBuilder":
        self._ensure_open()
        self._client = client
        return self

    def with_realm(self, realm: str) -> "WsFedUrlBuilder":
        return self._set("wtrealm", realm)

    def with_connection(self, connection: str) -> "WsFedUrlBuilder":
        return self._set("whr", connection)

    def with_state(self, state: str) -> "WsFedUrlBuilder":
        return self._set("wctx", state)

    def with_reply_url(self, reply_url: str) -> "WsFedUrlBuilder":
        return self._set("wreply", reply_url)

    def validate(self) -> None:
        if self._client and self._params.get("wtrealm"):
            raise ValidationError(
                "A WS-Fed URL takes either a client or a wtrealm, not both",
                fields=["client", "wtrealm"],
            )

    def _resolve_path(self) -> str:
        if self._client:
            return f"/wsfed/{path_segment(self._client)}"
        return "/wsfed"


__all__ = [
    "UrlBuilder",
    "AuthorizationUrlBuilder",
    "LogoutUrlBuilder",
    "SamlUrlBuilder",
    "WsFedUrlBuilder",
]
