"""Operations on ``/blacklists/tokens``.

Blacklisting is eventually consistent on Auth0's side: a token created here can
still show up as valid, or be missing from ``get_all``, for a short while.
"""
from __future__ import annotations

from typing import List, Optional

from ..connection import ApiConnection
from ..models import BlacklistedToken, BlacklistedTokenCreateRequest, deserialize_list
from ..models.base import require


class BlacklistedTokensClient:
    def __init__(self, connection: ApiConnection, api_key: Optional[str] = None):
        self.connection = connection
        self.api_key = api_key

    async def get_all(self, aud: Optional[str] = None) -> List[BlacklistedToken]:
        """Return the blacklisted tokens for an audience.

        Args:
            aud: The ``aud`` claim of the tokens, i.e. the API key; sent as a query
                parameter. Defaults to the API key the client was built with.
        """
        aud = aud or self.api_key
        require(aud, "aud")
        payload = await self.connection.request_json("GET", "/blacklists/tokens", params={"aud": aud})
        return deserialize_list(BlacklistedToken, payload)

    async def create(self, request: BlacklistedTokenCreateRequest) -> None:
        """Blacklist a JWT by its ``jti``; ``aud`` defaults to the client's API key."""
        body = request.to_dict()
        if not body.get("aud") and self.api_key:
            body["aud"] = self.api_key
        await self.connection.send("POST", "/blacklists/tokens", json=body)
