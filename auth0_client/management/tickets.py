from __future__ import annotations

from ..connection import ApiConnection
from ..models import EmailVerificationTicketRequest, PasswordChangeTicketRequest, Ticket, deserialize


class TicketsClient:
    """Client for the ``/tickets`` endpoints."""

    def __init__(self, connection: ApiConnection):
        self.connection = connection

    async def create_email_verification_ticket(self, request: EmailVerificationTicketRequest) -> Ticket:
        payload = await self.connection.request_json(
            "POST", "/tickets/email-verification", json=request.to_dict()
        )
        return deserialize(Ticket, payload)

    async def create_password_change_ticket(self, request: PasswordChangeTicketRequest) -> Ticket:
        payload = await self.connection.request_json(
            "POST", "/tickets/password-change", json=request.to_dict()
        )
        return deserialize(Ticket, payload)
