"""Documents returned by the identity server."""

from collections.abc import Mapping
from dataclasses import dataclass, fields


def _required_fields(cls, data):
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object for {cls.__name__}")
    values = {}
    for field in fields(cls):
        if field.name not in data:
            raise ValueError(f"missing field `{field.name}` for {cls.__name__}")
        values[field.name] = data[field.name]
    return values


@dataclass(frozen=True)
class KeycloakError:
    """Error document of the identity server."""

    error: str
    error_description: str

    @classmethod
    def from_dict(cls, data):
        return cls(**_required_fields(cls, data))


@dataclass(frozen=True)
class KeycloakSuccessfulAuthentication:
    """Token issued once a device code has been approved."""

    access_token: str
    expires_in: int
    token_type: str
    session_state: str
    scope: str

    @classmethod
    def from_dict(cls, data):
        return cls(**_required_fields(cls, data))


@dataclass(frozen=True)
class DeviceCodeAuth:
    """Device code and the link the user opens to approve it."""

    device_code: str
    user_code: str
    verification_uri: str
    verification_uri_complete: str
    expires_in: int
    interval: int

    @classmethod
    def from_dict(cls, data):
        return cls(**_required_fields(cls, data))


@dataclass(frozen=True)
class KeycloakAccountRoles:
    """Roles granted on an account."""

    roles: tuple

    @classmethod
    def from_dict(cls, data):
        values = _required_fields(cls, data)
        return cls(roles=tuple(values["roles"]))


@dataclass(frozen=True)
class KeycloakJwtAccount:
    """Account section of a token's resource access."""

    account: KeycloakAccountRoles

    @classmethod
    def from_dict(cls, data):
        values = _required_fields(cls, data)
        return cls(account=KeycloakAccountRoles.from_dict(values["account"]))


@dataclass(frozen=True)
class KeycloakJwtIntrospection:
    """Full result of a token introspection."""

    exp: int
    iat: int
    auth_time: int
    jti: str
    iss: str
    sub: str
    typ: str
    resource_access: KeycloakJwtAccount
    scope: str
    email_verified: bool
    name: str
    given_name: str
    family_name: str
    email: str
    client_id: str
    username: str
    token_type: str
    active: bool

    @classmethod
    def from_dict(cls, data):
        values = _required_fields(cls, data)
        values["resource_access"] = KeycloakJwtAccount.from_dict(values["resource_access"])
        return cls(**values)


@dataclass(frozen=True)
class KeycloakJwtActiveStatus:
    """Whether an introspected token is active."""

    active: bool

    @classmethod
    def from_dict(cls, data):
        return cls(**_required_fields(cls, data))