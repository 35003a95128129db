"""Operations on the ``/users`` endpoints of the Management API."""
from __future__ import annotations

from typing import List, Optional

from ..connection import ApiConnection, path_segment
from ..exceptions import DeserializationError
from ..models import (
    Identity,
    PagedList,
    PagingInformation,
    User,
    UserAccountLinkRequest,
    UserCreateRequest,
    UserUpdateRequest,
    deserialize,
    deserialize_list,
)
from ..models.base import require


class UsersClient:
    """Client for the Management API user endpoints."""

    def __init__(self, connection: ApiConnection):
        """Initialize the users client.

        Args:
            connection: Connection authenticated with a Management API token
        """
        self.connection = connection

    async def get_all(
        self,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: bool = False,
        sort: Optional[str] = None,
        connection: Optional[str] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
        q: Optional[str] = None,
        search_engine: Optional[str] = None,
    ) -> PagedList[User]:
        """List or search users.

        Args:
            page: Zero-based page index
            per_page: Page size
            include_totals: Return paging totals alongside the users
            sort: Sort expression, e.g. ``created_at:1``
            connection: Only users from this connection
            fields: Comma separated list of fields to include or exclude
            include_fields: Whether ``fields`` is an include (True) or exclude (False) list
            q: Lucene query string
            search_engine: Search engine version, e.g. ``v2``

        Returns:
            A ``PagedList`` of users; ``paging`` is set when ``include_totals`` is True
        """
        params = {
            "page": page,
            "per_page": per_page,
            "include_totals": include_totals or None,
            "sort": sort,
            "connection": connection,
            "fields": fields,
            "include_fields": include_fields,
            "q": q,
            "search_engine": search_engine,
        }
        payload = await self.connection.request_json("GET", "/users", params=params)

        if include_totals and isinstance(payload, dict):
            if "users" not in payload:
                raise DeserializationError("Paged user response is missing 'users'")
            paging = deserialize(PagingInformation, {k: v for k, v in payload.items() if k != "users"})
            return PagedList(deserialize_list(User, payload["users"]), paging=paging)
        return PagedList(deserialize_list(User, payload))

    async def get(
        self,
        user_id: str,
        *,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ) -> User:
        require(user_id, "user_id")
        payload = await self.connection.request_json(
            "GET",
            f"/users/{path_segment(user_id)}",
            params={"fields": fields, "include_fields": include_fields},
        )
        return deserialize(User, payload)

    async def create(self, request: UserCreateRequest) -> User:
        payload = await self.connection.request_json("POST", "/users", json=request.to_dict())
        return deserialize(User, payload)

    async def update(self, user_id: str, request: UserUpdateRequest) -> User:
        require(user_id, "user_id")
        payload = await self.connection.request_json(
            "PATCH", f"/users/{path_segment(user_id)}", json=request.to_dict()
        )
        return deserialize(User, payload)

    async def delete(self, user_id: str) -> None:
        require(user_id, "user_id")
        await self.connection.send("DELETE", f"/users/{path_segment(user_id)}")

    async def delete_multifactor_provider(self, user_id: str, provider: str) -> None:
        """Remove a multifactor provider (e.g. ``duo``, ``google-authenticator``) from a user."""
        require(user_id, "user_id")
        require(provider, "provider")
        await self.connection.send(
            "DELETE", f"/users/{path_segment(user_id)}/multifactor/{path_segment(provider)}"
        )

    async def link_account(self, user_id: str, request: UserAccountLinkRequest) -> List[Identity]:
        """Link a secondary account to ``user_id``; returns the primary's identities."""
        require(user_id, "user_id")
        payload = await self.connection.request_json(
            "POST", f"/users/{path_segment(user_id)}/identities", json=request.to_dict()
        )
        return deserialize_list(Identity, payload)

    async def unlink_account(
        self, primary_user_id: str, provider: str, secondary_user_id: str
    ) -> List[Identity]:
        require(primary_user_id, "primary_user_id")
        require(provider, "provider")
        require(secondary_user_id, "secondary_user_id")
        path = (
            f"/users/{path_segment(primary_user_id)}/identities/"
            f"{path_segment(provider)}/{path_segment(secondary_user_id)}"
        )
        payload = await self.connection.request_json("DELETE", path)
        return deserialize_list(Identity, payload)
