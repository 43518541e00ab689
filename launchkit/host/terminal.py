"""Heuristics about the terminal the launcher is attached to."""

from __future__ import annotations

import os

from launchkit.constants import DEFAULT_TERMINAL_COLUMNS, DUMB_TERMINALS
from launchkit.utils import parse_int32

STDOUT_FILENO = 1
STDERR_FILENO = 2


def is_interactive_terminal() -> bool:
    """
    Return whether stdout and stderr are both a terminal that supports color and cursor movement.

    The answer is a heuristic based on ``$TERM`` and ``$EMACS``. When in doubt
    it answers False, because escape sequences in a log file are worse than
    plain output on a capable terminal.
    """
    term = os.environ.get("TERM", "")
    emacs = os.environ.get("EMACS", "")
    if term in DUMB_TERMINALS or emacs == "t":
        return False
    return os.isatty(STDOUT_FILENO) and os.isatty(STDERR_FILENO)


def terminal_width() -> int:
    """
    Return the column count of the terminal on stdout.

    Falls back to ``$COLUMNS`` when stdout is not a terminal, and to 80 when
    ``$COLUMNS`` is unset or not a whole decimal number.
    """
    try:
        return os.get_terminal_size(STDOUT_FILENO).columns
    except OSError:
        pass

    columns = os.environ.get("COLUMNS")
    if columns:
        value = parse_int32(columns)
        if value is not None:
            return value
    return DEFAULT_TERMINAL_COLUMNS
