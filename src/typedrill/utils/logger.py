"""Logger namespace and CLI log setup for typedrill.

Every module logs under the ``typedrill`` namespace so an embedding
application can tune or silence the package with one logger. Library code
never configures handlers; only the CLI calls configure_logging.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "typedrill"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the typedrill namespace.

    >>> get_logger("mymodule").name
    'typedrill.mymodule'
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr: debug when verbose, warnings otherwise."""
    logging.basicConfig(format=LOG_FORMAT)
    get_logger(ROOT_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
