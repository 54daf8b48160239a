"""Environment configuration, optionally loaded from a ``.env`` file."""

import os

from dotenv import find_dotenv, load_dotenv


class MissingEnvironmentVariable(LookupError):
    """Raised when a required environment variable is not set."""

    def __init__(self, key):
        super().__init__(
            f"Could not retrieve environment variable.\nReason: {key} is not set"
        )
        self.key = key


def load():
    """Load variables from the nearest ``.env`` file; return whether one was found."""
    path = find_dotenv(usecwd=True)
    if not path:
        return False
    load_dotenv(path)
    return True


def get_env(key):
    """Return the value of environment variable ``key`` or raise if it is unset."""
    try:
        return os.environ[key]
    except KeyError:
        raise MissingEnvironmentVariable(key) from None