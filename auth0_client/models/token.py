"""Token models: blacklisted JWTs and the token payloads returned by the Authentication API."""
from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from .base import Auth0Model, Auth0Request


class BlacklistedToken(Auth0Model):
    aud: str = ""
    jti: str = ""


class BlacklistedTokenCreateRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("jti",)

    aud: Optional[str] = None
    jti: Optional[str] = None


class AccessToken(Auth0Model):
    access_token: str = ""
    id_token: str = ""
    token_type: str = ""
    refresh_token: str = ""
    expires_in: int = 0


class AuthenticationResponse(Auth0Model):
    access_token: str = ""
    id_token: str = ""
    token_type: str = ""
    refresh_token: str = ""
