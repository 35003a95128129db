from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from .base import Auth0Model, Auth0Request


class Rule(Auth0Model):
    id: str = ""
    name: str = ""
    script: str = ""
    order: int = 0
    enabled: bool = False
    stage: str = ""


class RuleUpdateRequest(Auth0Request):
    name: Optional[str] = None
    script: Optional[str] = None
    order: Optional[int] = None
    enabled: Optional[bool] = None


class RuleCreateRequest(RuleUpdateRequest):
    required_fields: ClassVar[Tuple[str, ...]] = ("name", "script")

    stage: Optional[str] = None
