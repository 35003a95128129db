"""Client (application) models for the ``/clients`` endpoints."""
from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field

from .base import Auth0Model, Auth0Request


class Client(Auth0Model):
    client_id: str = ""
    client_secret: str = ""
    name: str = ""
    app_type: str = ""
    callbacks: List[str] = Field(default_factory=list)
    allowed_origins: List[str] = Field(default_factory=list)
    allowed_logout_urls: List[str] = Field(default_factory=list)
    is_first_party: bool = False
    sso: bool = False
    jwt_configuration: Dict[str, Any] = Field(default_factory=dict)
    signing_keys: List[Dict[str, Any]] = Field(default_factory=list)
    client_metadata: Dict[str, Any] = Field(default_factory=dict)
    # "global" is a keyword in Python
    global_: bool = Field(default=False, alias="global")


class ClientUpdateRequest(Auth0Request):
    name: Optional[str] = None
    app_type: Optional[str] = None
    callbacks: Optional[List[str]] = None
    allowed_origins: Optional[List[str]] = None
    allowed_logout_urls: Optional[List[str]] = None
    jwt_configuration: Optional[Dict[str, Any]] = None
    client_metadata: Optional[Dict[str, Any]] = None
    sso: Optional[bool] = None


class ClientCreateRequest(ClientUpdateRequest):
    required_fields: ClassVar[Tuple[str, ...]] = ("name",)
