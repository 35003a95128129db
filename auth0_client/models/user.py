"""User, identity and paging models for the ``/users`` endpoints."""
from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field

from .base import ZERO_TIME, Auth0Model, Auth0Request, Timestamp, is_blank


class Identity(Auth0Model):
    """One linked identity of a user (more than one once accounts are linked)."""

    connection: str = ""
    user_id: str = ""
    provider: str = ""
    is_social: bool = Field(default=False, alias="isSocial")
    access_token: str = ""
    profile_data: Optional[Dict[str, Any]] = Field(default=None, alias="profileData")


class UserProfile(Auth0Model):
    """Normalized profile fields shared by users and user-shaped payloads."""

    email: str = ""
    email_verified: bool = False
    username: str = ""
    phone_number: str = ""
    given_name: str = ""
    family_name: str = ""
    name: str = ""
    nickname: str = ""
    picture: str = ""
    app_metadata: Dict[str, Any] = Field(default_factory=dict)
    user_metadata: Dict[str, Any] = Field(default_factory=dict)


class User(UserProfile):
    user_id: str = ""
    created_at: Timestamp = ZERO_TIME
    updated_at: Timestamp = ZERO_TIME
    identities: List[Identity] = Field(default_factory=list)
    last_ip: str = ""
    last_login: Timestamp = ZERO_TIME
    locale: str = ""
    logins_count: int = 0
    phone_verified: bool = False
    blocked: bool = False

    @property
    def provider_attributes(self) -> Dict[str, Any]:
        """Provider specific attributes outside the normalized profile."""

        return dict(self.model_extra or {})


class PagingInformation(Auth0Model):
    start: int = 0
    limit: int = 0
    length: int = 0
    total: int = 0


class UserCreateRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("connection",)

    connection: Optional[str] = None
    user_id: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    verify_email: Optional[bool] = None
    password: Optional[str] = None
    username: Optional[str] = None
    phone_number: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    picture: Optional[str] = None
    app_metadata: Optional[Dict[str, Any]] = None
    user_metadata: Optional[Dict[str, Any]] = None


class UserUpdateRequest(Auth0Request):
    blocked: Optional[bool] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    verify_email: Optional[bool] = None
    password: Optional[str] = None
    verify_password: Optional[bool] = None
    connection: Optional[str] = None
    client_id: Optional[str] = None
    username: Optional[str] = None
    phone_number: Optional[str] = None
    phone_verified: Optional[bool] = None
    verify_phone_number: Optional[bool] = None
    app_metadata: Optional[Dict[str, Any]] = None
    user_metadata: Optional[Dict[str, Any]] = None


class UserAccountLinkRequest(Auth0Request):
    """Link a secondary account, either by its id token or by provider and user id."""

    provider: Optional[str] = None
    user_id: Optional[str] = None
    connection_id: Optional[str] = None
    link_with: Optional[str] = None

    def missing_fields(self) -> List[str]:
        if not is_blank(self.link_with):
            return []
        return [name for name in ("provider", "user_id") if is_blank(getattr(self, name))]
