"""Command-line argument definitions."""

import argparse
from importlib.metadata import PackageNotFoundError, version

_U32_LIMIT = 2**32


def _version():
    try:
        return version("vibing")
    except PackageNotFoundError:
        return "1.0.0"


def _u32(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}") from None
    if not 0 <= value < _U32_LIMIT:
        raise argparse.ArgumentTypeError(f"{text} is not in 0..{_U32_LIMIT - 1}")
    return value


def build_parser():
    """Return the parser for the ``vibing`` command."""
    parser = argparse.ArgumentParser(prog="vibing")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print out the trace from all the methods called",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    auth = commands.add_parser(
        "auth",
        help="Authenticate to the application (required for most of the operations)",
    )
    auth_commands = auth.add_subparsers(dest="auth_command", required=True)
    auth_commands.add_parser("login", help="Initiate the login process")
    auth_commands.add_parser("logout", help="Logout from the current logger in account")
    auth_commands.add_parser("check", help="Check your current authentication status")

    club = commands.add_parser("club")
    club_commands = club.add_subparsers(dest="club_command", required=True)
    club_get = club_commands.add_parser("get")
    club_get.add_argument("club_id", type=_u32)
    return parser


def parse_args(argv=None):
    """Parse ``argv`` (or the process arguments) into a namespace."""
    return build_parser().parse_args(argv)