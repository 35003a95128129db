"""Request and response payloads for the Authentication API."""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import Field

from ..exceptions import ValidationError
from .base import Auth0Model, Auth0Request, is_blank


class PasswordlessEmailRequestType(str, Enum):
    LINK = "link"
    CODE = "code"


class AuthenticationRequest(Auth0Request):
    """Resource owner (username/password) authentication against a connection."""

    required_fields: ClassVar[Tuple[str, ...]] = ("client_id", "connection", "username", "password")

    client_id: Optional[str] = None
    connection: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    grant_type: str = "password"
    scope: str = "openid"
    device: Optional[str] = None


class ChangePasswordRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("client_id", "connection", "email")

    client_id: Optional[str] = None
    connection: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class ExchangeCodeRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("client_id", "client_secret", "code", "redirect_uri")

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    code: Optional[str] = None
    redirect_uri: Optional[str] = None
    grant_type: str = "authorization_code"


class AccessTokenRequest(Auth0Request):
    """Exchange a social provider's access token for an Auth0 token."""

    required_fields: ClassVar[Tuple[str, ...]] = ("client_id", "connection", "access_token")

    client_id: Optional[str] = None
    connection: Optional[str] = None
    access_token: Optional[str] = None
    scope: Optional[str] = None


class DelegationRequest(Auth0Request):
    """Delegation using exactly one of an id token or a refresh token."""

    required_fields: ClassVar[Tuple[str, ...]] = ("client_id",)

    client_id: Optional[str] = None
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None
    target: Optional[str] = None
    scope: Optional[str] = None
    api_type: Optional[str] = None
    grant_type: str = "urn:ietf:params:oauth:grant-type:jwt-bearer"

    def check_required(self) -> None:
        super().check_required()
        has_id_token = not is_blank(self.id_token)
        has_refresh_token = not is_blank(self.refresh_token)
        if has_id_token and has_refresh_token:
            raise ValidationError(
                "DelegationRequest accepts either id_token or refresh_token, not both",
                fields=["id_token", "refresh_token"],
            )
        if not (has_id_token or has_refresh_token):
            raise ValidationError(
                "DelegationRequest requires an id_token or a refresh_token",
                fields=["id_token", "refresh_token"],
            )


class ImpersonationRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = (
        "token",
        "impersonate_id",
        "impersonator_id",
        "client_id",
    )

    token: Optional[str] = None
    impersonate_id: Optional[str] = None
    impersonator_id: Optional[str] = None
    client_id: Optional[str] = None
    protocol: str = "oauth2"
    response_type: str = "code"
    callback_url: Optional[str] = None
    state: Optional[str] = None
    scope: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        self.check_required()
        additional = {
            "response_type": self.response_type,
            "state": self.state,
            "callback_url": self.callback_url,
            "scope": self.scope,
        }
        return {
            "protocol": self.protocol,
            "impersonator_id": self.impersonator_id,
            "client_id": self.client_id,
            "additionalParameters": {k: v for k, v in additional.items() if v is not None},
        }


class SignupUserRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("client_id", "connection", "email", "password")

    client_id: Optional[str] = None
    connection: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    username: Optional[str] = None
    user_metadata: Optional[Dict[str, Any]] = None


class SignupUserResponse(Auth0Model):
    id: str = Field(default="", alias="_id")
    email: str = ""
    email_verified: bool = False


class PasswordlessEmailRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("client_id", "email")

    client_id: Optional[str] = None
    connection: str = "email"
    email: Optional[str] = None
    send: PasswordlessEmailRequestType = PasswordlessEmailRequestType.LINK
    auth_params: Optional[Dict[str, Any]] = Field(default=None, alias="authParams")


class PasswordlessEmailResponse(Auth0Model):
    id: str = Field(default="", alias="_id")
    email: str = ""
    email_verified: bool = False


class PasswordlessSmsRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("client_id", "phone_number")

    client_id: Optional[str] = None
    connection: str = "sms"
    phone_number: Optional[str] = None


class PasswordlessSmsResponse(Auth0Model):
    id: str = Field(default="", alias="_id")
    phone_number: str = ""
    request_language: Optional[str] = None


class UnlinkUserRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("access_token", "user_id")

    access_token: Optional[str] = None
    user_id: Optional[str] = None
