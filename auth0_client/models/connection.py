from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field

from .base import Auth0Model, Auth0Request


class Connection(Auth0Model):
    id: str = ""
    name: str = ""
    strategy: str = ""
    options: Dict[str, Any] = Field(default_factory=dict)
    enabled_clients: List[str] = Field(default_factory=list)


class ConnectionCreateRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("name", "strategy")

    name: Optional[str] = None
    strategy: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    enabled_clients: Optional[List[str]] = None


class ConnectionUpdateRequest(Auth0Request):
    options: Optional[Dict[str, Any]] = None
    enabled_clients: Optional[List[str]] = None
