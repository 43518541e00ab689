"""Process image replacement."""

from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Sequence

log = logging.getLogger(__name__)


def execute_in_place(executable: str, argument_vector: Sequence[str]) -> NoReturn:
    """
    Replace the current process with ``executable``.

    The argument vector is handed over to the new program; callers must not
    use it afterwards. Pending output is flushed first, since the interpreter's
    buffers do not survive the exec.

    Parameters:
        executable (str): Path of the program to run.
        argument_vector (Sequence[str]): Its argv, ``argv[0]`` conventionally
            being the program name.

    Raises:
        OSError: If the exec fails, e.g. the file is missing or not executable.
    """
    argv = tuple(argument_vector)
    log.debug("Executing %s with %d argument(s)", executable, len(argv))
    for handler in logging.getLogger().handlers:
        handler.flush()
    sys.stdout.flush()
    sys.stderr.flush()
    os.execv(executable, argv)


def re_execute_self(new_executable: str, original_argv: Sequence[str]) -> NoReturn:
    """
    Re-run the current command line with ``new_executable`` as the program.

    ``original_argv[0]`` is replaced; every other argument is kept.

    Raises:
        OSError: If the exec fails.
    """
    execute_in_place(new_executable, [new_executable, *original_argv[1:]])
