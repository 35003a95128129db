from __future__ import annotations

from typing import List, Optional

from ..connection import ApiConnection, path_segment
from ..models import Client, ClientCreateRequest, ClientUpdateRequest, deserialize, deserialize_list
from ..models.base import require


class ClientsClient:
    """Client for the ``/clients`` (applications) endpoints."""

    def __init__(self, connection: ApiConnection):
        self.connection = connection

    async def get_all(
        self,
        *,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ) -> List[Client]:
        payload = await self.connection.request_json(
            "GET", "/clients", params={"fields": fields, "include_fields": include_fields}
        )
        return deserialize_list(Client, payload)

    async def get(
        self,
        client_id: str,
        *,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ) -> Client:
        require(client_id, "client_id")
        payload = await self.connection.request_json(
            "GET",
            f"/clients/{path_segment(client_id)}",
            params={"fields": fields, "include_fields": include_fields},
        )
        return deserialize(Client, payload)

    async def create(self, request: ClientCreateRequest) -> Client:
        payload = await self.connection.request_json("POST", "/clients", json=request.to_dict())
        return deserialize(Client, payload)

    async def update(self, client_id: str, request: ClientUpdateRequest) -> Client:
        require(client_id, "client_id")
        payload = await self.connection.request_json(
            "PATCH", f"/clients/{path_segment(client_id)}", json=request.to_dict()
        )
        return deserialize(Client, payload)

    async def delete(self, client_id: str) -> None:
        require(client_id, "client_id")
        await self.connection.send("DELETE", f"/clients/{path_segment(client_id)}")
