"""Application errors and the user-facing messages printed for them."""

import httpx

GENERIC_ERROR_MESSAGE = "An error occured while processing your request..."


class AppError(Exception):
    """Base class of every error the application reports to the user."""

    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message=None, *, cause=None):
        super().__init__(message or self.default_message)
        self.cause = cause


class CredentialsNotFoundError(AppError):
    """The credential could not be read from or written to secure storage."""

    default_message = "Credentials not found"


class AuthorizationError(AppError):
    """The server refused the request for lack of authorization."""

    default_message = "You are not authorized to execute this operation"


class NetworkError(AppError):
    """The server failed to process the request."""

    default_message = "The server is experiencing some issues at the moment."


class FetchError(AppError):
    """The request could not be sent or its response could not be read."""

    default_message = "An unknown error occured while fetching data."


class KeycloakAuthError(AppError):
    """The identity server answered with an error document."""

    def __init__(self, error, message=None):
        super().__init__(message or f"{error.error}: {error.error_description}")
        self.error = error


class OtherError(AppError):
    """Any other failure."""


def from_http_error(err):
    """Classify an HTTP client exception as an application error."""
    if isinstance(err, httpx.HTTPStatusError):
        status = err.response.status_code
        if 400 <= status < 500:
            return AuthorizationError(str(err), cause=err)
        if 500 <= status < 600:
            return NetworkError(str(err), cause=err)
    return FetchError(str(err), cause=err)


def build_generic_error(msg=None):
    """Return an ``OSError`` carrying ``msg`` or a generic message."""
    return OSError(msg if msg is not None else GENERIC_ERROR_MESSAGE)


_HANDLED_MESSAGES = (
    (AuthorizationError, ("You are not authorized to execute this operation",)),
    (
        NetworkError,
        (
            "The server is experiencing some issues at the moment.",
            "Please, try again in a few minutes.",
        ),
    ),
    (
        FetchError,
        (
            "An unknown error occured while fetching data.",
            "Please, try again.",
        ),
    ),
    (
        CredentialsNotFoundError,
        (
            "Credentials not found in the device's secure storage...",
            "Try to authenticate again using",
            "`vibes auth login`",
        ),
    ),
    (
        KeycloakAuthError,
        (
            "An error occured while checking your authentication token.",
            "Please, try again or, if the problem persists, try logging in again using",
            "`vibing auth login`",
        ),
    ),
)

_OTHER_MESSAGES = (
    "An unknown error occured while satisfying your request...",
    "Please, try again. If the problem persists, try to contact the technical support.",
)


def handle(err):
    """Print the user-facing explanation for ``err``."""
    for kind, lines in _HANDLED_MESSAGES:
        if isinstance(err, kind):
            break
    else:
        lines = _OTHER_MESSAGES
    for line in lines:
        print(line)