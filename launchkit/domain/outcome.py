"""Immutable result models returned by recoverable host operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Outcome:
    """Success flag of one filesystem operation plus the OS error that stopped it."""

    ok: bool
    error: OSError | None = None

    @classmethod
    def success(cls) -> Outcome:
        """Return a successful outcome."""
        return cls(ok=True)

    @classmethod
    def failure(cls, error: OSError) -> Outcome:
        """Return a failed outcome carrying ``error``."""
        return cls(ok=False, error=error)

    @property
    def errno(self) -> int | None:
        """Return the captured errno, if any."""
        return self.error.errno if self.error is not None else None

    def __bool__(self) -> bool:
        return self.ok
