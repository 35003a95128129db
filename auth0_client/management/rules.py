from __future__ import annotations

from typing import List, Optional

from ..connection import ApiConnection, path_segment
from ..models import Rule, RuleCreateRequest, RuleUpdateRequest, deserialize, deserialize_list
from ..models.base import require


class RulesClient:
    """Client for the ``/rules`` endpoints."""

    def __init__(self, connection: ApiConnection):
        self.connection = connection

    async def get_all(
        self,
        *,
        enabled: Optional[bool] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
        stage: Optional[str] = None,
    ) -> List[Rule]:
        params = {
            "enabled": enabled,
            "fields": fields,
            "include_fields": include_fields,
            "stage": stage,
        }
        payload = await self.connection.request_json("GET", "/rules", params=params)
        return deserialize_list(Rule, payload)

    async def get(
        self,
        rule_id: str,
        *,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ) -> Rule:
        require(rule_id, "rule_id")
        payload = await self.connection.request_json(
            "GET",
            f"/rules/{path_segment(rule_id)}",
            params={"fields": fields, "include_fields": include_fields},
        )
        return deserialize(Rule, payload)

    async def create(self, request: RuleCreateRequest) -> Rule:
        payload = await self.connection.request_json("POST", "/rules", json=request.to_dict())
        return deserialize(Rule, payload)

    async def update(self, rule_id: str, request: RuleUpdateRequest) -> Rule:
        require(rule_id, "rule_id")
        payload = await self.connection.request_json(
            "PATCH", f"/rules/{path_segment(rule_id)}", json=request.to_dict()
        )
        return deserialize(Rule, payload)

    async def delete(self, rule_id: str) -> None:
        require(rule_id, "rule_id")
        await self.connection.send("DELETE", f"/rules/{path_segment(rule_id)}")
