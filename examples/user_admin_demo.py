"""Walk through login URLs and user administration against a real tenant.

Reads AUTH0_DOMAIN, AUTH0_CLIENT_ID and AUTH0_MANAGEMENT_API_TOKEN from the
environment (or a .env file).
"""

import asyncio

from auth0_client import ApiError, AuthenticationApiClient, ManagementApiClient, ValidationError
from auth0_client.config import get_settings
from auth0_client.models import UserCreateRequest, UserUpdateRequest
from auth0_client.utils.telemetry import setup_logging


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        auth = AuthenticationApiClient.from_settings(settings)
        mgmt = ManagementApiClient.from_settings(settings)
    except ValidationError as exc:
        print(f"Auth0 tenant not configured: {exc}")
        return

    async with auth, mgmt:
        print("\n--- Login / logout URLs ---")
        login_url = (
            auth.build_authorization_url()
            .with_redirect_url("http://localhost:3000/callback")
            .with_scope("openid profile email")
            .with_state("demo-state")
            .build()
        )
        print(login_url)
        print(auth.build_logout_url().with_return_url("http://localhost:3000").build())

        print("\n--- Create user ---")
        try:
            user = await mgmt.users.create(
                UserCreateRequest(
                    connection="Username-Password-Authentication",
                    email="demo.user@example.com",
                    password="Dem0-Passw0rd!",
                )
            )
        except ApiError as exc:
            print(f"Create failed: {exc}")
            return
        print(user.user_id, user.email)

        print("\n--- Block user ---")
        user = await mgmt.users.update(user.user_id, UserUpdateRequest(blocked=True))
        print(f"blocked={user.blocked}")

        print("\n--- Search ---")
        page = await mgmt.users.get_all(q=f'email:"{user.email}"', include_totals=True)
        print(f"found {len(page)} of {page.paging.total}")

        print("\n--- Delete user ---")
        await mgmt.users.delete(user.user_id)
        print("deleted")


if __name__ == "__main__":
    asyncio.run(main())
