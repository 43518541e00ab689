"""Domain-specific exceptions raised by launchkit runtime components."""

from __future__ import annotations

import os


class LaunchkitError(Exception):
    """Base exception for launchkit-specific runtime failures."""


class FatalError(LaunchkitError):
    """Raised when the launcher cannot continue and must exit with ``exit_code``.

    The OS error number is captured when the error is created, so the
    rendered message reflects the failing call rather than whatever ran later.
    """

    def __init__(
        self,
        exit_code: int,
        message: str,
        errno: int | None = None,
        cause: str | None = None,
    ) -> None:
        self.exit_code = exit_code
        self.message = message
        self.errno = errno
        self.strerror = os.strerror(errno) if errno is not None else cause
        super().__init__(self.render())

    def render(self) -> str:
        """Return the text written to stderr when the process terminates."""
        if self.strerror is None:
            return self.message
        return f"Error: {self.message}: {self.strerror}"
