from vibing.auth_request import (
    KeycloakAuth,
    KeycloakDeviceCodeAuthCheck,
    KeycloakJwtIntrospect,
)


def test_keycloak_auth_form():
    request = KeycloakAuth("cli", "secret")
    assert request.to_form() == {"client_id": "cli", "client_secret": "secret"}


def test_device_code_check_form():
    request = KeycloakDeviceCodeAuthCheck(
        "dev-1", "urn:ietf:params:oauth:grant-type:device_code", "cli", "secret"
    )
    assert request.to_form() == {
        "device_code": "dev-1",
        "grant_type": "urn:ietf:params:oauth:grant-type:device_code",
        "client_id": "cli",
        "client_secret": "secret",
    }


def test_introspect_form():
    request = KeycloakJwtIntrospect("cli", "secret", "token")
    assert request.to_form() == {
        "client_id": "cli",
        "client_secret": "secret",
        "token": "token",
    }


def test_form_field_order_matches_declaration():
    request = KeycloakDeviceCodeAuthCheck("d", "g", "c", "secret")
    assert list(request.to_form()) == ["device_code", "grant_type", "client_id", "client_secret"]