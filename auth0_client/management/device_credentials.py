from __future__ import annotations

from typing import List, Optional

from ..connection import ApiConnection, path_segment
from ..models import DeviceCredential, DeviceCredentialCreateRequest, deserialize, deserialize_list
from ..models.base import require


class DeviceCredentialsClient:
    """Client for the ``/device-credentials`` endpoints."""

    def __init__(self, connection: ApiConnection):
        self.connection = connection

    async def get_all(
        self,
        *,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
        user_id: Optional[str] = None,
        client_id: Optional[str] = None,
        type: Optional[str] = None,
    ) -> List[DeviceCredential]:
        params = {
            "fields": fields,
            "include_fields": include_fields,
            "user_id": user_id,
            "client_id": client_id,
            "type": type,
        }
        payload = await self.connection.request_json("GET", "/device-credentials", params=params)
        return deserialize_list(DeviceCredential, payload)

    async def create(self, request: DeviceCredentialCreateRequest) -> DeviceCredential:
        payload = await self.connection.request_json(
            "POST", "/device-credentials", json=request.to_dict()
        )
        return deserialize(DeviceCredential, payload)

    async def delete(self, credential_id: str) -> None:
        require(credential_id, "credential_id")
        await self.connection.send("DELETE", f"/device-credentials/{path_segment(credential_id)}")
