from datetime import datetime, timezone

import pytest

from auth0_client.exceptions import DeserializationError, ValidationError
from auth0_client.models import (
    ZERO_TIME,
    AccessToken,
    BlacklistedToken,
    Client,
    Connection,
    DelegationRequest,
    DeviceCredential,
    Identity,
    ImpersonationRequest,
    PasswordChangeTicketRequest,
    PasswordlessEmailRequest,
    Rule,
    SignupUserResponse,
    Ticket,
    User,
    UserAccountLinkRequest,
    UserCreateRequest,
    format_timestamp,
)

USER_PAYLOAD = {
    "user_id": "auth0|123",
    "email": "jane@example.com",
    "email_verified": True,
    "created_at": "2016-01-31T08:30:00.000Z",
    "updated_at": "2016-01-31T08:30:00.123456Z",
    "last_login": "2016-02-01T10:00:00Z",
    "identities": [
        {"connection": "Username-Password-Authentication", "user_id": "123", "provider": "auth0", "isSocial": False}
    ],
    "app_metadata": {"plan": "pro"},
    "logins_count": 7,
}


def test_user_round_trip_is_exact():
    user = User.from_dict(USER_PAYLOAD)

    assert user.user_id == "auth0|123"
    assert user.identities[0].is_social is False
    assert user.created_at == datetime(2016, 1, 31, 8, 30, tzinfo=timezone.utc)
    assert user.updated_at == datetime(2016, 1, 31, 8, 30, 0, 123456, tzinfo=timezone.utc)
    assert user.last_login == datetime(2016, 2, 1, 10, 0, tzinfo=timezone.utc)
    assert user.to_dict() == USER_PAYLOAD


def test_changed_timestamp_is_reformatted():
    user = User.from_dict(USER_PAYLOAD)

    moved = user.model_copy(update={"last_login": datetime(2020, 5, 17, 10, 1, 2, tzinfo=timezone.utc)})

    assert moved.to_dict()["last_login"] == "2020-05-17T10:01:02.000Z"
    assert moved.to_dict()["updated_at"] == "2016-01-31T08:30:00.123456Z"


def test_null_known_fields_read_as_defaults_and_round_trip():
    payload = {
        "user_id": "auth0|1",
        "picture": None,
        "last_login": None,
        "app_metadata": None,
        "identities": [{"provider": "auth0", "isSocial": None, "profileData": None}],
    }

    user = User.from_dict(payload)

    assert user.picture == ""
    assert user.last_login == ZERO_TIME
    assert user.app_metadata == {}
    assert user.identities[0].is_social is False
    assert user.identities[0].profile_data is None
    assert user.to_dict() == payload


def test_unknown_keys_are_kept_and_re_emitted():
    user = User.from_dict({**USER_PAYLOAD, "new_field": 123, "favorite_color": "blue"})

    assert user.model_extra == {"new_field": 123, "favorite_color": "blue"}
    assert user.provider_attributes["favorite_color"] == "blue"
    assert user.to_dict()["new_field"] == 123


def test_missing_fields_use_defaults():
    user = User.from_dict({"user_id": "auth0|1"})

    assert user.email == ""
    assert user.logins_count == 0
    assert user.identities == []
    assert user.created_at == ZERO_TIME
    assert user.to_dict() == {"user_id": "auth0|1"}


def test_non_object_payload_is_rejected():
    with pytest.raises(DeserializationError):
        User.from_dict(["not", "an", "object"])


def test_wrong_field_type_is_rejected():
    with pytest.raises(DeserializationError):
        User.from_dict({"user_id": "auth0|1", "logins_count": "many"})


def test_format_timestamp_uses_milliseconds_and_z():
    value = datetime(2020, 5, 17, 10, 1, 2, 345000, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2020-05-17T10:01:02.345Z"


def test_client_global_flag_uses_json_name():
    client = Client.from_dict({"client_id": "abc", "global": True})

    assert client.global_ is True
    assert client.to_dict() == {"client_id": "abc", "global": True}


def test_signup_response_reads_underscore_id():
    response = SignupUserResponse.from_dict({"_id": "58457fe6b27", "email": "a@b.c", "email_verified": False})
    assert response.id == "58457fe6b27"


def test_request_missing_required_field():
    request = UserCreateRequest(email="jane@example.com")

    with pytest.raises(ValidationError) as exc_info:
        request.to_dict()
    assert exc_info.value.fields == ["connection"]


def test_request_drops_unset_values():
    request = UserCreateRequest(connection="db", email="jane@example.com")
    assert request.to_dict() == {"connection": "db", "email": "jane@example.com"}


def test_delegation_requires_exactly_one_token():
    with pytest.raises(ValidationError):
        DelegationRequest(client_id="abc").to_dict()
    with pytest.raises(ValidationError):
        DelegationRequest(client_id="abc", id_token="x", refresh_token="y").to_dict()

    body = DelegationRequest(client_id="abc", refresh_token="y").to_dict()
    assert body["grant_type"] == "urn:ietf:params:oauth:grant-type:jwt-bearer"
    assert "id_token" not in body


def test_impersonation_body_nests_additional_parameters():
    request = ImpersonationRequest(
        token="t", impersonate_id="auth0|2", impersonator_id="auth0|1", client_id="abc", state="xyz"
    )

    assert request.to_dict() == {
        "protocol": "oauth2",
        "impersonator_id": "auth0|1",
        "client_id": "abc",
        "additionalParameters": {"response_type": "code", "state": "xyz"},
    }


def test_passwordless_email_defaults():
    body = PasswordlessEmailRequest(client_id="abc", email="a@b.c", auth_params={"scope": "openid"}).to_dict()
    assert body == {
        "client_id": "abc",
        "connection": "email",
        "email": "a@b.c",
        "send": "link",
        "authParams": {"scope": "openid"},
    }


def test_account_link_accepts_either_form():
    assert UserAccountLinkRequest(link_with="id-token").missing_fields() == []
    assert UserAccountLinkRequest(provider="google-oauth2", user_id="1").missing_fields() == []
    assert UserAccountLinkRequest(provider="google-oauth2").missing_fields() == ["user_id"]


def test_password_change_ticket_by_email_needs_connection():
    with pytest.raises(ValidationError) as exc_info:
        PasswordChangeTicketRequest(email="a@b.c").to_dict()
    assert exc_info.value.fields == ["connection_id"]
    assert PasswordChangeTicketRequest(user_id="auth0|1").to_dict() == {"user_id": "auth0|1"}


@pytest.mark.parametrize(
    "model, payload",
    [
        (Connection, {"id": "con_1", "name": "db", "strategy": "auth0", "options": {"mfa": {"active": True}}, "realms": ["db"]}),
        (Rule, {"id": "rul_1", "name": "r", "script": "function () {}", "order": 2, "enabled": True, "stage": "login_success", "owner": "x"}),
        (DeviceCredential, {"id": "dcr_1", "device_name": "phone", "type": "public_key", "user_id": "auth0|1", "extra": 1}),
        (Ticket, {"ticket": "https://tenant.auth0.com/lo/reset?ticket=t", "expires": "soon"}),
        (AccessToken, {"access_token": "at", "token_type": "Bearer", "expires_in": 86400, "scope": "openid"}),
        (BlacklistedToken, {"aud": "api-key", "jti": "j1", "blacklisted_at": 1700000000}),
        (Identity, {"connection": "github", "user_id": "1", "provider": "github", "isSocial": True, "profileData": {"login": "jane"}, "refresh_token": None}),
    ],
)
def test_resource_round_trip_keeps_unknown_keys(model, payload):
    resource = model.from_dict(payload)

    assert resource.model_extra
    assert resource.to_dict() == payload
