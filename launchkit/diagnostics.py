"""Fatal error reporting for the launcher.

Utility functions signal fatal conditions by raising :class:`FatalError`
through :func:`fail` or :func:`fail_with_errno`. Only the entry point turns
them into a process exit, via :func:`terminate` or :func:`fatal_boundary`.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, NoReturn

import click

from launchkit.errors import FatalError

log = logging.getLogger(__name__)


def fail(exit_code: int, message: str) -> NoReturn:
    """
    Abort the launch with ``exit_code`` and ``message``.

    Parameters:
        exit_code (int): Process exit status, see :mod:`launchkit.cli.exit_codes`.
        message (str): Text written to stderr before exiting.

    Raises:
        FatalError: Always.
    """
    raise FatalError(exit_code, message)


def fail_with_errno(exit_code: int, message: str, error: OSError | int) -> NoReturn:
    """
    Abort the launch and append the description of an OS error.

    ``error`` is the exception caught from the failing call (or its raw errno),
    so the number is taken from the call that failed and not read again later.

    Parameters:
        exit_code (int): Process exit status.
        message (str): Text describing what failed.
        error (OSError | int): The captured OS error.

    Raises:
        FatalError: Always.
    """
    if isinstance(error, OSError):
        # Errors built without an errno, such as a short write, still carry their text.
        raise FatalError(exit_code, message, errno=error.errno, cause=str(error) or None)
    raise FatalError(exit_code, message, errno=error)


def terminate(error: FatalError) -> NoReturn:
    """Write the rendered error to stderr and exit with its code."""
    log.debug("Terminating with exit code %s", error.exit_code)
    click.echo(error.render(), err=True)
    sys.stderr.flush()
    sys.exit(error.exit_code)


@contextmanager
def fatal_boundary() -> Iterator[None]:
    """Translate any :class:`FatalError` raised in the block into a process exit."""
    try:
        yield
    except FatalError as exc:
        terminate(exc)
