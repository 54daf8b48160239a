# vibing

A small client library for the Vibes backend. It signs users in through
Keycloak's OAuth 2.0 device-code flow, keeps the resulting access token in a
local credential file, and uses that token to call the backend API.

## Configuration

Settings are read from the environment. `vibing.env.load()` looks for the
nearest `.env` file, starting in the working directory and walking up, loads
it, and returns whether one was found.

| Variable                        | Used for                                        |
|---------------------------------|-------------------------------------------------|
| `BACKEND_URL`                   | Base URL of the backend API                     |
| `KEYCLOAK_URL`                  | Base URL of the Keycloak server                 |
| `KEYCLOAK_REALM`                | Keycloak realm name                             |
| `CREDENTIAL_STORE_AUTH_SERVICE` | Service the backend token is read from          |
| `CREDENTIAL_STORE_AUTH_USER`    | User the backend token is read from             |
| `CREDENTIAL_STORE_PATH`         | Location of the credential file (optional)      |

`vibing.env.get_env(key)` returns a variable's value and raises
`MissingEnvironmentVariable` (a `LookupError`) when it is not set.

## Credentials

`vibing.creds.CredentialStore` keeps passwords keyed by service and user in a
JSON file. Without an explicit path it uses `CREDENTIAL_STORE_PATH`, or
`credentials.json` in the per-user data directory for `vibing`. The file is
written atomically with mode `0600`. Its methods are `get_password`,
`set_password` and `delete_credential`; reading or deleting a missing entry
raises `CredentialsNotFoundError`.

Module-level helpers take an optional `store` and fall back to the default one:

- `store_cred(user, password)` stores under the service `vibing`.
- `get_cred(service, user)` and `remove_cred(service, user)`.
- `get_cred_use_defaults()` reads the token named by
  `CREDENTIAL_STORE_AUTH_SERVICE` and `CREDENTIAL_STORE_AUTH_USER`.

A sign-in stores its token under the service `vibing` and the user
`Vibing X Vibes`, so set the two variables to those values for backend calls
to find it.

## Signing in

```python
from vibing import env
from vibing.keycloak import KeycloakRequest

env.load()
keycloak = KeycloakRequest.from_env()
keycloak.authenticate("my-client", "secret", verbose=True)
```

`KeycloakRequest.from_env()` builds the realm URL
`$KEYCLOAK_URL/realms/$KEYCLOAK_REALM`; `KeycloakRequest(url)` takes one
directly. `authenticate` requests a device code, prints the verification link
and the minutes remaining, then polls the token endpoint every
`poll_interval` seconds (5 by default) until the sign-in is confirmed, and
stores the access token in `credential_store` (the default store when `None`).
Polling does not stop on its own when the code expires.

Other operations:

- `generate_device_code(client_id, client_secret)` returns a `DeviceCodeAuth`.
- `check_authentication_status(device_code, client_id, client_secret)` returns
  a `KeycloakSuccessfulAuthentication`, or raises `KeycloakAuthError` while the
  code is not yet approved.
- `check_auth(client_id, client_secret, token)` returns whether a token is
  active.
- `revoke_token(client_id, client_secret, token, verbose)` posts to the
  revocation endpoint.

Request bodies live in `vibing.auth_request` (`KeycloakAuth`,
`KeycloakDeviceCodeAuthCheck`, `KeycloakJwtIntrospect`, each with `to_form()`),
and response documents in `vibing.auth_response`, each built with
`from_dict()`, which raises `ValueError` on a missing field.

## Calling the backend

```python
from vibing.club import get_club_info

club = get_club_info(42)
print(club.club_name)
```

`get_club_info` fetches `/api/v1/club/<id>`, prints the resulting
`ClubResponse` and returns it.

`vibing.fetching.fetch_backend(path, method, data, verbose)` sends a request to
`BACKEND_URL` with the stored token as a bearer token.
`vibing.fetching.fetch(options, verbose)` sends the request described by a
`FetchOptions` (`host`, `path`, `method`, `headers`, `authorization`, `data`).
It prints the response status line and returns the decoded JSON body, or
`None` for an empty body. Without headers the body is sent as JSON; with a
`Content-type` containing `json` it is sent as JSON, with one containing
`form-data` it is sent as form fields, and with any other content type no body
is sent. A 401 raises `AuthorizationError`, any other unsuccessful status
raises `NetworkError`, and a transport failure raises `FetchError`.

`PageOptions` holds paging parameters (page 0, size 5, no sort, no direction,
no total count by default); `to_dict()` gives them camel-case names, with the
direction as `"Asc"` or `"Desc"` from `PageDirection`.

## Errors

Every failure is raised as a subclass of `vibing.errors.AppError`:
`AuthorizationError`, `NetworkError`, `FetchError`,
`CredentialsNotFoundError`, `KeycloakAuthError` and `OtherError`.
`from_http_error(err)` turns an `httpx` exception into one of them (4xx into
`AuthorizationError`, 5xx into `NetworkError`, anything else into
`FetchError`), and `handle(err)` prints a user-facing explanation for any
error.

## Command-line arguments

`vibing.cli_args.build_parser()` returns an `argparse` parser for
`auth login|logout|check` and `club get <club_id>` (an unsigned 32-bit
integer), with `-v/--verbose` and `-V/--version`.
`vibing.cli_args.parse_args(argv)` parses a list of arguments, or the process
arguments when `argv` is `None`, into a namespace with `command`,
`auth_command` or `club_command`, `club_id` and `verbose`.

## What it does not do

The package installs no command. Parsing arguments only yields a namespace;
nothing here dispatches it to the sign-in or club operations, so a program
that wants `vibing auth login` and the like has to call those functions
itself. Credentials are kept in a plain JSON file, not in the operating
system's keyring.