"""Client for the Auth0 Authentication API.

Full endpoint documentation: https://auth0.com/docs/auth-api
"""
from __future__ import annotations

from typing import Optional

import httpx

from .builders import AuthorizationUrlBuilder, LogoutUrlBuilder, SamlUrlBuilder, WsFedUrlBuilder
from .config.settings import Settings, get_settings
from .connection import DEFAULT_TIMEOUT, ApiConnection, path_segment
from .exceptions import ValidationError
from .models import (
    AccessToken,
    AccessTokenRequest,
    AuthenticationRequest,
    AuthenticationResponse,
    ChangePasswordRequest,
    DelegationRequest,
    ExchangeCodeRequest,
    ImpersonationRequest,
    PasswordlessEmailRequest,
    PasswordlessEmailResponse,
    PasswordlessSmsRequest,
    PasswordlessSmsResponse,
    SignupUserRequest,
    SignupUserResponse,
    UnlinkUserRequest,
    User,
    deserialize,
)
from .models.base import require


WSFED_METADATA_PATH = "/wsfed/FederationMetadata/2007-06/FederationMetadata.xml"


class AuthenticationApiClient:
    """Async client for the Authentication API of one Auth0 tenant.

    Usage:
        async with AuthenticationApiClient("https://tenant.auth0.com") as auth:
            url = auth.build_authorization_url().with_client_id("abc").build()
            user = await auth.get_user_info(access_token)
    """

    def __init__(
        self,
        base_url: str,
        *,
        client_id: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.connection = ApiConnection(base_url, timeout=timeout, http_client=http_client)
        self.client_id = client_id

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "AuthenticationApiClient":
        settings = settings or get_settings()
        if not settings.domain:
            raise ValidationError("AUTH0_DOMAIN is required", fields=["domain"])
        return cls(
            settings.authentication_api_url,
            client_id=settings.client_id or None,
            timeout=settings.timeout_seconds,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self.connection.base_url

    async def aclose(self) -> None:
        await self.connection.aclose()

    async def __aenter__(self) -> "AuthenticationApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # URL builders
    # ------------------------------------------------------------------
    def build_authorization_url(self) -> AuthorizationUrlBuilder:
        """Start an authorization URL, pre-filled with the client's ``client_id`` if it has one."""
        builder = AuthorizationUrlBuilder(self.base_url)
        if self.client_id:
            builder.with_client_id(self.client_id)
        return builder

    def build_logout_url(self) -> LogoutUrlBuilder:
        return LogoutUrlBuilder(self.base_url)

    def build_saml_url(self, client: str) -> SamlUrlBuilder:
        return SamlUrlBuilder(self.base_url, client)

    def build_wsfed_url(self) -> WsFedUrlBuilder:
        return WsFedUrlBuilder(self.base_url)

    # ------------------------------------------------------------------
    # Tokens and login
    # ------------------------------------------------------------------
    async def authenticate(self, request: AuthenticationRequest) -> AuthenticationResponse:
        """Authenticate a user against a connection with username and password."""

        payload = await self.connection.request_json("POST", "/oauth/ro", json=request.to_dict())
        return deserialize(AuthenticationResponse, payload)

    async def exchange_code_for_access_token(self, request: ExchangeCodeRequest) -> AccessToken:
        """Exchange the authorization code received on the redirect URI for tokens.

        The token endpoint is called with a form-encoded body.
        """
        payload = await self.connection.request_json("POST", "/oauth/token", data=request.to_dict())
        return deserialize(AccessToken, payload)

    async def get_access_token(self, request: AccessTokenRequest) -> AccessToken:
        """Exchange a social provider access token (Facebook, Google, Twitter, Weibo)."""

        payload = await self.connection.request_json(
            "POST", "/oauth/access_token", json=request.to_dict()
        )
        return deserialize(AccessToken, payload)

    async def get_delegation_token(self, request: DelegationRequest) -> AccessToken:
        """Get a token signed with the target client's secret from an existing token."""

        payload = await self.connection.request_json("POST", "/delegation", json=request.to_dict())
        return deserialize(AccessToken, payload)

    async def get_impersonation_url(self, request: ImpersonationRequest) -> str:
        """Return a single-use link that logs in as ``request.impersonate_id``."""

        body = request.to_dict()
        path = f"/users/{path_segment(request.impersonate_id)}/impersonate"
        url = await self.connection.request_text("POST", path, json=body, token=request.token)
        return url.strip()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    async def get_user_info(self, access_token: str) -> User:
        require(access_token, "access_token")
        payload = await self.connection.request_json("GET", "/userinfo", token=access_token)
        return deserialize(User, payload)

    async def get_token_info(self, id_token: str) -> User:
        """Validate an id token and return the profile of its ``sub``."""

        require(id_token, "id_token")
        payload = await self.connection.request_json("POST", "/tokeninfo", json={"id_token": id_token})
        return deserialize(User, payload)

    async def signup_user(self, request: SignupUserRequest) -> SignupUserResponse:
        payload = await self.connection.request_json(
            "POST", "/dbconnections/signup", json=request.to_dict()
        )
        return deserialize(SignupUserResponse, payload)

    async def change_password(self, request: ChangePasswordRequest) -> str:
        """Trigger the forgot-password email; returns Auth0's confirmation message."""

        return await self.connection.request_text(
            "POST", "/dbconnections/change_password", json=request.to_dict()
        )

    async def unlink_user(self, request: UnlinkUserRequest) -> None:
        await self.connection.send("POST", "/unlink", json=request.to_dict())

    # ------------------------------------------------------------------
    # Passwordless
    # ------------------------------------------------------------------
    async def start_passwordless_email_flow(
        self, request: PasswordlessEmailRequest
    ) -> PasswordlessEmailResponse:
        payload = await self.connection.request_json(
            "POST", "/passwordless/start", json=request.to_dict()
        )
        return deserialize(PasswordlessEmailResponse, payload)

    async def start_passwordless_sms_flow(
        self, request: PasswordlessSmsRequest
    ) -> PasswordlessSmsResponse:
        payload = await self.connection.request_json(
            "POST", "/passwordless/start", json=request.to_dict()
        )
        return deserialize(PasswordlessSmsResponse, payload)

    # ------------------------------------------------------------------
    # Federation metadata
    # ------------------------------------------------------------------
    async def get_saml_metadata(self, client_id: str) -> str:
        require(client_id, "client_id")
        return await self.connection.request_text(
            "GET", f"/samlp/metadata/{path_segment(client_id)}"
        )

    async def get_wsfed_metadata(self) -> str:
        return await self.connection.request_text("GET", WSFED_METADATA_PATH)
