"""Storage of authentication credentials on the local device."""

import json
import os
import tempfile
from pathlib import Path

from platformdirs import user_data_dir

from vibing.env import get_env
from vibing.errors import CredentialsNotFoundError

DEFAULT_SERVICE = "vibing"
STORE_PATH_VARIABLE = "CREDENTIAL_STORE_PATH"


class CredentialStore:
    """A per-user file holding passwords keyed by service and user."""

    def __init__(self, path=None):
        if path is None:
            path = os.environ.get(STORE_PATH_VARIABLE) or (
                Path(user_data_dir("vibing")) / "credentials.json"
            )
        self.path = Path(path)

    def _read(self):
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as err:
            raise CredentialsNotFoundError(str(err), cause=err) from err
        try:
            data = json.loads(text)
        except ValueError as err:
            raise CredentialsNotFoundError(
                f"Credential store {self.path} is corrupt", cause=err
            ) from err
        if not isinstance(data, dict):
            raise CredentialsNotFoundError(f"Credential store {self.path} is corrupt")
        return data

    def _write(self, data):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".creds-")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(data, handle)
                os.chmod(tmp_name, 0o600)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as err:
            raise CredentialsNotFoundError(str(err), cause=err) from err

    def get_password(self, service, user):
        """Return the stored password or raise ``CredentialsNotFoundError``."""
        try:
            return self._read()[service][user]
        except (KeyError, TypeError):
            raise CredentialsNotFoundError(
                f"No credential stored for {user!r} in {service!r}"
            ) from None

    def set_password(self, service, user, password):
        """Store ``password`` for ``user`` of ``service``, replacing any previous one."""
        data = self._read()
        data.setdefault(service, {})[user] = password
        self._write(data)

    def delete_credential(self, service, user):
        """Remove the stored credential or raise ``CredentialsNotFoundError``."""
        data = self._read()
        entries = data.get(service)
        if not isinstance(entries, dict) or user not in entries:
            raise CredentialsNotFoundError(
                f"No credential stored for {user!r} in {service!r}"
            )
        del entries[user]
        if not entries:
            del data[service]
        self._write(data)


def _store_or_default(store):
    return store if store is not None else CredentialStore()


def store_cred(user, password, store=None):
    """Store ``password`` for ``user`` under the application's service."""
    _store_or_default(store).set_password(DEFAULT_SERVICE, user, password)
    print("Credential stored successfully")


def get_cred(service, user, store=None):
    """Return the credential stored for ``user`` of ``service``."""
    return _store_or_default(store).get_password(service, user)


def get_cred_use_defaults(store=None):
    """Return the authentication token using the configured service and user."""
    service = get_env("CREDENTIAL_STORE_AUTH_SERVICE")
    user = get_env("CREDENTIAL_STORE_AUTH_USER")
    return get_cred(service, user, store)


def remove_cred(service, user, store=None):
    """Delete the credential stored for ``user`` of ``service``."""
    _store_or_default(store).delete_credential(service, user)