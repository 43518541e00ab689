"""Path resolution and directory creation."""

from __future__ import annotations

import errno
import logging
import os
from typing import AnyStr

from launchkit.cli.exit_codes import LOCAL_ENVIRONMENTAL_ERROR
from launchkit.constants import PATH_SEPARATOR
from launchkit.diagnostics import fail_with_errno
from launchkit.domain.outcome import Outcome

log = logging.getLogger(__name__)


def _separator(path: AnyStr) -> AnyStr:
    return PATH_SEPARATOR.encode() if isinstance(path, bytes) else PATH_SEPARATOR


def make_absolute(path: AnyStr) -> AnyStr:
    """
    Return ``path`` in absolute form, prefixing the working directory if needed.

    Empty and already-absolute paths are returned unchanged. No ``..`` or
    symlink resolution is done. Called from working directory ``/bar``::

        make_absolute("foo")   -> "/bar/foo"
        make_absolute("/foo")  -> "/foo"

    Parameters:
        path (str | bytes): The path to resolve.

    Returns:
        str | bytes: The absolute path, in the type of ``path``.

    Raises:
        FatalError: If the working directory cannot be determined.
    """
    separator = _separator(path)
    if not path or path.startswith(separator):
        return path

    try:
        cwd = os.getcwdb() if isinstance(path, bytes) else os.getcwd()
    except OSError as exc:
        fail_with_errno(LOCAL_ENVIRONMENTAL_ERROR, "getcwd() failed", exc)

    if cwd.endswith(separator):
        return cwd + path
    return cwd + separator + path


def _make_one(path: AnyStr, mode: int) -> Outcome:
    try:
        os.mkdir(path, mode)
    except FileExistsError as exc:
        if not os.path.isdir(path):
            return Outcome.failure(
                NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), exc.filename)
            )
    except OSError as exc:
        return Outcome.failure(exc)
    return Outcome.success()


def make_directories(path: AnyStr, mode: int) -> Outcome:
    """
    Create ``path`` and every missing parent, like ``mkdir -p``.

    Prefixes are created left to right. An existing directory is fine; an
    existing non-directory, or any other error, stops the walk. Directories
    created before the failure are left in place.

    Parameters:
        path (str | bytes): Directory to create.
        mode (int): Permission bits for each created directory (umask applies).

    Returns:
        Outcome: Success, or the OS error that stopped creation.
    """
    separator = _separator(path)
    index = path.find(separator, 1)
    while index != -1:
        outcome = _make_one(path[:index], mode)
        if not outcome:
            log.debug("Failed to create %r: %s", path[:index], outcome.error)
            return outcome
        index = path.find(separator, index + 1)

    outcome = _make_one(path, mode)
    if not outcome:
        log.debug("Failed to create %r: %s", path, outcome.error)
    return outcome
