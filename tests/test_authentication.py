import json
from urllib.parse import parse_qs

import pytest

from auth0_client import AuthenticationApiClient
from auth0_client.authentication import WSFED_METADATA_PATH
from auth0_client.config.settings import Settings
from auth0_client.exceptions import ApiError, ValidationError
from auth0_client.models import (
    AccessTokenRequest,
    AuthenticationRequest,
    ChangePasswordRequest,
    DelegationRequest,
    ExchangeCodeRequest,
    ImpersonationRequest,
    PasswordlessEmailRequest,
    PasswordlessSmsRequest,
    SignupUserRequest,
    UnlinkUserRequest,
)


def _body(request):
    return json.loads(request.content)


def test_from_settings_uses_domain():
    client = AuthenticationApiClient.from_settings(Settings(_env_file=None, domain="tenant.auth0.com"))
    assert client.base_url == "https://tenant.auth0.com"


def test_from_settings_requires_domain():
    with pytest.raises(ValidationError):
        AuthenticationApiClient.from_settings(Settings(_env_file=None))


def test_builders_share_the_tenant_url(auth_client):
    url = auth_client.build_authorization_url().with_client_id("abc").build()
    assert url.startswith("https://tenant.auth0.com/authorize?")
    assert auth_client.build_saml_url("abc").build() == "https://tenant.auth0.com/samlp/abc"


@pytest.mark.asyncio
async def test_authenticate_posts_resource_owner_grant(auth_client, transport):
    transport.queue(json={"access_token": "at", "id_token": "it", "token_type": "bearer"})

    request = AuthenticationRequest(
        client_id="abc", connection="db", username="jane", password="secret"
    )
    response = await auth_client.authenticate(request)

    assert response.access_token == "at"
    sent = transport.last
    assert sent.method == "POST"
    assert sent.url.path == "/oauth/ro"
    assert _body(sent) == {
        "client_id": "abc",
        "connection": "db",
        "username": "jane",
        "password": "secret",
        "grant_type": "password",
        "scope": "openid",
    }
    assert "authorization" not in sent.headers


@pytest.mark.asyncio
async def test_missing_field_fails_before_any_request(auth_client, transport):
    with pytest.raises(ValidationError) as exc_info:
        await auth_client.authenticate(AuthenticationRequest(client_id="abc", connection="db"))

    assert set(exc_info.value.fields) == {"username", "password"}
    assert transport.requests == []


@pytest.mark.asyncio
async def test_exchange_code_sends_form_body(auth_client, transport):
    transport.queue(json={"access_token": "at", "token_type": "Bearer", "expires_in": 86400})

    token = await auth_client.exchange_code_for_access_token(
        ExchangeCodeRequest(client_id="abc", client_secret="s", code="c0de", redirect_uri="https://app/cb")
    )

    assert token.expires_in == 86400
    sent = transport.last
    assert sent.url.path == "/oauth/token"
    assert sent.headers["content-type"] == "application/x-www-form-urlencoded"
    assert parse_qs(sent.content.decode()) == {
        "client_id": ["abc"],
        "client_secret": ["s"],
        "code": ["c0de"],
        "redirect_uri": ["https://app/cb"],
        "grant_type": ["authorization_code"],
    }


@pytest.mark.asyncio
async def test_user_info_uses_access_token(auth_client, transport):
    transport.queue(json={"user_id": "auth0|1", "email": "jane@example.com", "https://app/roles": ["admin"]})

    user = await auth_client.get_user_info("at-123")

    assert user.email == "jane@example.com"
    assert user.provider_attributes == {"https://app/roles": ["admin"]}
    assert transport.last.headers["authorization"] == "Bearer at-123"
    assert transport.last.url.path == "/userinfo"


@pytest.mark.asyncio
async def test_user_info_requires_token(auth_client, transport):
    with pytest.raises(ValidationError):
        await auth_client.get_user_info("")
    assert transport.requests == []


@pytest.mark.asyncio
async def test_invalid_token_is_translated(auth_client, transport):
    transport.queue(401, json={"error": "invalid_token", "error_description": "Invalid access token"})

    with pytest.raises(ApiError) as exc_info:
        await auth_client.get_user_info("expired")

    assert exc_info.value.status_code == 401
    assert exc_info.value.error_code == "invalid_token"
    assert exc_info.value.endpoint == "/userinfo"


@pytest.mark.asyncio
async def test_token_info_posts_id_token(auth_client, transport):
    transport.queue(json={"user_id": "auth0|1"})

    user = await auth_client.get_token_info("id-token")

    assert user.user_id == "auth0|1"
    assert _body(transport.last) == {"id_token": "id-token"}


@pytest.mark.asyncio
async def test_impersonation_url(auth_client, transport):
    transport.queue(text="https://tenant.auth0.com/users/123/impersonate?bewit=abc\n")

    request = ImpersonationRequest(
        token="mgmt-token", impersonate_id="auth0|2", impersonator_id="auth0|1", client_id="abc"
    )
    url = await auth_client.get_impersonation_url(request)

    assert url == "https://tenant.auth0.com/users/123/impersonate?bewit=abc"
    sent = transport.last
    assert b"/users/auth0%7C2/impersonate" in sent.url.raw_path
    assert sent.headers["authorization"] == "Bearer mgmt-token"
    assert _body(sent)["impersonator_id"] == "auth0|1"


@pytest.mark.asyncio
async def test_signup_and_change_password(auth_client, transport):
    transport.queue(json={"_id": "abc123", "email": "jane@example.com", "email_verified": False})
    transport.queue(text="We've just sent you an email to reset your password.")

    created = await auth_client.signup_user(
        SignupUserRequest(client_id="abc", connection="db", email="jane@example.com", password="pw")
    )
    message = await auth_client.change_password(
        ChangePasswordRequest(client_id="abc", connection="db", email="jane@example.com")
    )

    assert created.id == "abc123"
    assert message.startswith("We've just sent you an email")
    assert [r.url.path for r in transport.requests] == [
        "/dbconnections/signup",
        "/dbconnections/change_password",
    ]


@pytest.mark.asyncio
async def test_unlink_user(auth_client, transport):
    transport.queue(200)

    await auth_client.unlink_user(UnlinkUserRequest(access_token="at", user_id="google-oauth2|1"))

    assert transport.last.url.path == "/unlink"
    assert _body(transport.last) == {"access_token": "at", "user_id": "google-oauth2|1"}


@pytest.mark.asyncio
async def test_passwordless_sms(auth_client, transport):
    transport.queue(json={"_id": "p1", "phone_number": "+15555550100", "request_language": "en"})

    response = await auth_client.start_passwordless_sms_flow(
        PasswordlessSmsRequest(client_id="abc", phone_number="+15555550100")
    )

    assert response.phone_number == "+15555550100"
    assert transport.last.url.path == "/passwordless/start"
    assert _body(transport.last)["connection"] == "sms"


@pytest.mark.asyncio
async def test_federation_metadata(auth_client, transport):
    transport.queue(text="<EntityDescriptor/>")
    transport.queue(text="<EntityDescriptor/>")

    saml = await auth_client.get_saml_metadata("abc")
    wsfed = await auth_client.get_wsfed_metadata()

    assert saml == wsfed == "<EntityDescriptor/>"
    assert transport.requests[0].url.path == "/samlp/metadata/abc"
    assert transport.requests[1].url.path == WSFED_METADATA_PATH


@pytest.mark.asyncio
async def test_context_manager_closes_owned_client():
    async with AuthenticationApiClient("https://tenant.auth0.com") as client:
        http_client = client.connection._client
    assert http_client.is_closed


@pytest.mark.asyncio
async def test_social_access_token_and_delegation(auth_client, transport):
    transport.queue(json={"access_token": "auth0-at", "id_token": "it", "token_type": "bearer"})
    transport.queue(json={"id_token": "delegated", "token_type": "Bearer", "expires_in": 36000})

    social = await auth_client.get_access_token(
        AccessTokenRequest(client_id="abc", connection="facebook", access_token="fb-token")
    )
    delegated = await auth_client.get_delegation_token(
        DelegationRequest(client_id="abc", id_token="it", target="other-client", api_type="app")
    )

    assert social.access_token == "auth0-at"
    assert delegated.id_token == "delegated"
    assert [r.url.path for r in transport.requests] == ["/oauth/access_token", "/delegation"]
    assert _body(transport.last)["target"] == "other-client"


@pytest.mark.asyncio
async def test_passwordless_email_code(auth_client, transport):
    transport.queue(json={"_id": "p2", "email": "jane@example.com", "email_verified": False})

    response = await auth_client.start_passwordless_email_flow(
        PasswordlessEmailRequest(client_id="abc", email="jane@example.com", send="code")
    )

    assert response.id == "p2"
    assert _body(transport.last)["send"] == "code"


def test_configured_client_id_prefills_authorization_url():
    client = AuthenticationApiClient.from_settings(
        Settings(_env_file=None, domain="tenant.auth0.com", client_id="configured")
    )

    url = client.build_authorization_url().build()

    assert "client_id=configured" in url
    assert "client_id=other" in client.build_authorization_url().with_client_id("other").build()
