"""Ticket models for the ``/tickets`` endpoints."""
from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from .base import Auth0Model, Auth0Request, is_blank


class Ticket(Auth0Model):
    ticket: str = ""


class EmailVerificationTicketRequest(Auth0Request):
    required_fields: ClassVar[Tuple[str, ...]] = ("user_id",)

    user_id: Optional[str] = None
    result_url: Optional[str] = None
    ttl_sec: Optional[int] = None


class PasswordChangeTicketRequest(Auth0Request):
    """Target a user by id, or by email within a database connection."""

    result_url: Optional[str] = None
    user_id: Optional[str] = None
    new_password: Optional[str] = None
    connection_id: Optional[str] = None
    email: Optional[str] = None
    ttl_sec: Optional[int] = None

    def missing_fields(self) -> List[str]:
        if not is_blank(self.user_id):
            return []
        return [name for name in ("email", "connection_id") if is_blank(getattr(self, name))]
