"""Small output helpers shared by the command-line features."""


def verbose_print(verbose, message):
    """Print ``message`` only when ``verbose`` is true."""
    if verbose:
        print(message)