from __future__ import annotations

from typing import List, Optional

from ..connection import ApiConnection, path_segment
from ..models import (
    Connection,
    ConnectionCreateRequest,
    ConnectionUpdateRequest,
    deserialize,
    deserialize_list,
)
from ..models.base import require


class ConnectionsClient:
    """Client for the ``/connections`` endpoints."""

    def __init__(self, connection: ApiConnection):
        self.connection = connection

    async def get_all(
        self,
        *,
        strategy: Optional[str] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ) -> List[Connection]:
        params = {"strategy": strategy, "fields": fields, "include_fields": include_fields}
        payload = await self.connection.request_json("GET", "/connections", params=params)
        return deserialize_list(Connection, payload)

    async def get(
        self,
        connection_id: str,
        *,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ) -> Connection:
        require(connection_id, "connection_id")
        payload = await self.connection.request_json(
            "GET",
            f"/connections/{path_segment(connection_id)}",
            params={"fields": fields, "include_fields": include_fields},
        )
        return deserialize(Connection, payload)

    async def create(self, request: ConnectionCreateRequest) -> Connection:
        payload = await self.connection.request_json("POST", "/connections", json=request.to_dict())
        return deserialize(Connection, payload)

    async def update(self, connection_id: str, request: ConnectionUpdateRequest) -> Connection:
        require(connection_id, "connection_id")
        payload = await self.connection.request_json(
            "PATCH", f"/connections/{path_segment(connection_id)}", json=request.to_dict()
        )
        return deserialize(Connection, payload)

    async def delete(self, connection_id: str) -> None:
        require(connection_id, "connection_id")
        await self.connection.send("DELETE", f"/connections/{path_segment(connection_id)}")

    async def delete_user(self, connection_id: str, email: str) -> None:
        """Delete a user from a database connection by email."""
        require(connection_id, "connection_id")
        require(email, "email")
        await self.connection.send(
            "DELETE",
            f"/connections/{path_segment(connection_id)}/users",
            params={"email": email},
        )
