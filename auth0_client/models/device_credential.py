from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from .base import Auth0Model, Auth0Request


class DeviceCredential(Auth0Model):
    id: str = ""
    device_name: str = ""
    device_id: str = ""
    type: str = ""
    user_id: str = ""


class DeviceCredentialCreateRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("device_name", "type", "value", "device_id")

    device_name: Optional[str] = None
    type: Optional[str] = None
    value: Optional[str] = None
    device_id: Optional[str] = None
    client_id: Optional[str] = None
