"""Facade over the Auth0 Management API v2."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config.settings import Settings, get_settings
from ..connection import DEFAULT_TIMEOUT, ApiConnection
from ..exceptions import ValidationError
from .blacklisted_tokens import BlacklistedTokensClient
from .clients import ClientsClient
from .connections import ConnectionsClient
from .device_credentials import DeviceCredentialsClient
from .rules import RulesClient
from .tickets import TicketsClient
from .users import UsersClient

logger = logging.getLogger(__name__)


class ManagementApiClient:
    """Async Management API client; every call carries the Management API token.

    Usage:
        async with ManagementApiClient(token, "https://tenant.auth0.com/api/v2") as mgmt:
            user = await mgmt.users.get("auth0|123")
    """

    def __init__(
        self,
        token: str,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not token or not token.strip():
            raise ValidationError("A Management API token is required", fields=["token"])

        self.connection = ApiConnection(base_url, token=token, timeout=timeout, http_client=http_client)
        self.users = UsersClient(self.connection)
        self.connections = ConnectionsClient(self.connection)
        self.clients = ClientsClient(self.connection)
        self.blacklisted_tokens = BlacklistedTokensClient(self.connection, api_key=api_key)
        self.device_credentials = DeviceCredentialsClient(self.connection)
        self.rules = RulesClient(self.connection)
        self.tickets = TicketsClient(self.connection)
        logger.debug("Management API client ready for %s", self.connection.base_url)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "ManagementApiClient":
        """Build a client from ``AUTH0_DOMAIN`` and ``AUTH0_MANAGEMENT_API_TOKEN``."""
        settings = settings or get_settings()
        missing = [
            name for name in ("domain", "management_api_token") if not getattr(settings, name)
        ]
        if missing:
            raise ValidationError(
                "Missing Auth0 settings: " + ", ".join(f"AUTH0_{name.upper()}" for name in missing),
                fields=missing,
            )
        return cls(
            settings.management_api_token,
            settings.management_api_url,
            api_key=settings.api_key or None,
            timeout=settings.timeout_seconds,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self.connection.base_url

    async def aclose(self) -> None:
        await self.connection.aclose()

    async def __aenter__(self) -> "ManagementApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
