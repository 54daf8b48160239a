"""Device-code authentication against the identity server."""

import time

import httpx

from vibing import creds
from vibing.auth_request import (
    KeycloakAuth,
    KeycloakDeviceCodeAuthCheck,
    KeycloakJwtIntrospect,
)
from vibing.auth_response import (
    DeviceCodeAuth,
    KeycloakError,
    KeycloakJwtActiveStatus,
    KeycloakSuccessfulAuthentication,
)
from vibing.env import get_env
from vibing.errors import AppError, FetchError, KeycloakAuthError, from_http_error
from vibing.fetching import FetchOptions, fetch
from vibing.utils import verbose_print

DEVICE_CODE_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:device_code"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
AUTH_CREDENTIAL_USER = "Vibing X Vibes"


def _decode(response, cls):
    try:
        return cls.from_dict(response.json())
    except ValueError as err:
        raise FetchError(
            f"Could not decode the response as {cls.__name__}", cause=err
        ) from err


class KeycloakRequest:
    """Client for the OpenID Connect endpoints of one realm."""

    POLL_INTERVAL = 5

    def __init__(self, url):
        self.url = url
        self.poll_interval = self.POLL_INTERVAL
        self.credential_store = None

    @classmethod
    def from_env(cls):
        """Build the realm URL from ``KEYCLOAK_URL`` and ``KEYCLOAK_REALM``."""
        host = get_env("KEYCLOAK_URL")
        realm = get_env("KEYCLOAK_REALM")
        return cls(f"{host}/realms/{realm}")

    def _post_form(self, path, form):
        try:
            with httpx.Client() as client:
                return client.post(
                    f"{self.url}{path}",
                    data=form,
                    headers={"Content-Type": FORM_CONTENT_TYPE},
                )
        except httpx.HTTPError as err:
            raise from_http_error(err) from err

    def authenticate(self, client_id, client_secret, verbose=False):
        """Run the device-code flow and store the token once the user approves it."""
        verbose_print(verbose, "Generating authentication _magic_ link... Please wait.")
        device = self.generate_device_code(client_id, client_secret)
        print("Device code generated!")
        print(
            "Please, open your browser on any of your devices and go to this link to continue."
        )
        print(f"\t- {device.verification_uri_complete}")
        print(f"\t- {int(device.expires_in / 60)} minutes remaining")
        while True:
            time.sleep(self.poll_interval)
            try:
                authentication = self.check_authentication_status(
                    device.device_code, client_id, client_secret
                )
            except AppError:
                continue
            verbose_print(verbose, "Authenticated!")
            verbose_print(verbose, "Storing credential")
            creds.store_cred(
                AUTH_CREDENTIAL_USER, authentication.access_token, self.credential_store
            )
            break
        print("Successfully authenticated! Now you can vibe ~")

    def generate_device_code(self, client_id, client_secret):
        """Request a new device code for the client."""
        form = KeycloakAuth(client_id, client_secret).to_form()
        response = self._post_form("/protocol/openid-connect/auth/device", form)
        return _decode(response, DeviceCodeAuth)

    def check_authentication_status(self, device_code, client_id, client_secret):
        """Ask whether the device code has been approved; raise while it has not."""
        form = KeycloakDeviceCodeAuthCheck(
            device_code, DEVICE_CODE_GRANT_TYPE, client_id, client_secret
        ).to_form()
        response = self._post_form("/protocol/openid-connect/token", form)
        if response.is_client_error:
            raise KeycloakAuthError(_decode(response, KeycloakError))
        return _decode(response, KeycloakSuccessfulAuthentication)

    def check_auth(self, client_id, client_secret, token):
        """Return whether ``token`` is currently active."""
        form = KeycloakJwtIntrospect(client_id, client_secret, token).to_form()
        response = self._post_form("/protocol/openid-connect/token/introspect", form)
        return _decode(response, KeycloakJwtActiveStatus).active

    def revoke_token(self, client_id, client_secret, token, verbose=False):
        """Revoke ``token`` on the identity server."""
        options = FetchOptions(
            host=self.url,
            path="/protocol/openid-connect/revoke",
            method="POST",
            headers={"Content-type": FORM_CONTENT_TYPE},
            authorization=None,
            data=KeycloakJwtIntrospect(client_id, client_secret, token),
        )
        fetch(options, verbose)