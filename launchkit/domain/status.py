"""Snapshot of the launcher's host environment shown when no command is given."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LauncherStatus:
    """Host facts resolved by the launcher before any command runs."""

    user: str
    output_base: str
    interactive: bool
    terminal_columns: int
    command_port: int | None
    last_command: tuple[str, ...] | None

    def as_payload(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping of the status."""
        return {
            "user": self.user,
            "output_base": self.output_base,
            "interactive": self.interactive,
            "terminal_columns": self.terminal_columns,
            "command_port": self.command_port,
            "last_command": list(self.last_command) if self.last_command is not None else None,
        }
