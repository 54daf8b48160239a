"""Form bodies sent to the identity server."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class KeycloakAuth:
    """Client credentials used to request a device code."""

    client_id: str
    client_secret: str

    def to_form(self):
        """Return the form fields of this request."""
        return asdict(self)


@dataclass(frozen=True)
class KeycloakDeviceCodeAuthCheck:
    """Request polling the token endpoint for a device code."""

    device_code: str
    grant_type: str
    client_id: str
    client_secret: str

    def to_form(self):
        """Return the form fields of this request."""
        return asdict(self)


@dataclass(frozen=True)
class KeycloakJwtIntrospect:
    """Request introspecting or revoking a token."""

    client_id: str
    client_secret: str
    token: str

    def to_form(self):
        """Return the form fields of this request."""
        return asdict(self)