"""Whole-file reads and writes for launcher state."""

from __future__ import annotations

import logging
import os
from typing import AnyStr, Optional

from launchkit.constants import EXECUTABLE_FILE_MODE, READ_CHUNK_SIZE
from launchkit.domain.outcome import Outcome

log = logging.getLogger(__name__)


def read_file(path: AnyStr) -> Optional[bytes]:
    """
    Read the whole file at ``path``.

    Reads interrupted by a signal are retried; any other error gives up.

    Parameters:
        path (str | bytes): The file to read.

    Returns:
        Optional[bytes]: The exact file content (NUL bytes included), or None
        if the file could not be opened or read.
    """
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        log.debug("Cannot open %r: %s", path, exc)
        return None

    chunks = []
    try:
        while True:
            try:
                chunk = os.read(fd, READ_CHUNK_SIZE)
            except InterruptedError:
                continue
            if not chunk:
                break
            chunks.append(chunk)
    except OSError as exc:
        log.debug("Cannot read %r: %s", path, exc)
        return None
    finally:
        os.close(fd)
    return b"".join(chunks)


def write_file(content: bytes, path: AnyStr) -> Outcome:
    """
    Replace the file at ``path`` with ``content`` and make it executable.

    Any existing file is unlinked first and the new one is opened with
    ``O_TRUNC``, so old content never survives. If both the write and the close
    fail, the write error is the one reported.

    Parameters:
        content (bytes): Bytes to write.
        path (str | bytes): Destination file.

    Returns:
        Outcome: Success, or the OS error of the first failing step.
    """
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        return Outcome.failure(exc)

    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, EXECUTABLE_FILE_MODE)
    except OSError as exc:
        return Outcome.failure(exc)

    write_error: OSError | None = None
    written = 0
    try:
        written = os.write(fd, content)
    except OSError as exc:
        write_error = exc

    try:
        os.close(fd)
    except OSError as exc:
        # Can fail on NFS.
        return Outcome.failure(write_error or exc)

    if write_error is not None:
        return Outcome.failure(write_error)
    if written != len(content):
        log.debug("Short write to %r: %d of %d bytes", path, written, len(content))
        return Outcome.failure(OSError(f"short write: {written} of {len(content)} bytes"))
    return Outcome.success()
