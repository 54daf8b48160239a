import pytest

from vibing.auth_response import (
    DeviceCodeAuth,
    KeycloakAccountRoles,
    KeycloakError,
    KeycloakJwtAccount,
    KeycloakJwtActiveStatus,
    KeycloakJwtIntrospection,
    KeycloakSuccessfulAuthentication,
)

DEVICE = {
    "device_code": "dev-1",
    "user_code": "ABCD",
    "verification_uri": "https://auth.example.com/device",
    "verification_uri_complete": "https://auth.example.com/device?user_code=ABCD",
    "expires_in": 600,
    "interval": 5,
}

INTROSPECTION = {
    "exp": 100,
    "iat": 50,
    "auth_time": 40,
    "jti": "jti-1",
    "iss": "https://auth.example.com/realms/demo",
    "sub": "sub-1",
    "typ": "Bearer",
    "resource_access": {"account": {"roles": ["view", "manage"]}},
    "scope": "openid",
    "email_verified": True,
    "name": "Alice Doe",
    "given_name": "Alice",
    "family_name": "Doe",
    "email": "alice@example.com",
    "client_id": "cli",
    "username": "alice",
    "token_type": "Bearer",
    "active": True,
}


def test_keycloak_error_from_dict():
    err = KeycloakError.from_dict({"error": "invalid_grant", "error_description": "expired"})
    assert (err.error, err.error_description) == ("invalid_grant", "expired")


def test_device_code_from_dict():
    auth = DeviceCodeAuth.from_dict(DEVICE)
    assert auth.device_code == "dev-1"
    assert auth.verification_uri_complete == DEVICE["verification_uri_complete"]
    assert auth.expires_in == 600


def test_successful_authentication_ignores_extra_fields():
    data = {
        "access_token": "token",
        "expires_in": 300,
        "token_type": "Bearer",
        "session_state": "state",
        "scope": "openid",
        "refresh_token": "token",
    }
    auth = KeycloakSuccessfulAuthentication.from_dict(data)
    assert auth.access_token == "token"
    assert auth.expires_in == 300


def test_missing_field_raises():
    data = dict(DEVICE)
    del data["interval"]
    with pytest.raises(ValueError, match="interval"):
        DeviceCodeAuth.from_dict(data)


def test_non_mapping_raises():
    with pytest.raises(ValueError):
        KeycloakJwtActiveStatus.from_dict(["active"])


def test_active_status():
    assert KeycloakJwtActiveStatus.from_dict({"active": False}).active is False


def test_account_roles_nested():
    account = KeycloakJwtAccount.from_dict({"account": {"roles": ["view"]}})
    assert account.account == KeycloakAccountRoles(roles=("view",))


def test_introspection_from_dict():
    result = KeycloakJwtIntrospection.from_dict(INTROSPECTION)
    assert result.resource_access.account.roles == ("view", "manage")
    assert result.email == "alice@example.com"
    assert result.active is True


def test_introspection_nested_missing_field():
    data = dict(INTROSPECTION, resource_access={"account": {}})
    with pytest.raises(ValueError, match="roles"):
        KeycloakJwtIntrospection.from_dict(data)