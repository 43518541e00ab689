"""CLI presentation helpers for human and JSON output modes."""

from __future__ import annotations

import json
import shlex
from typing import Any, Mapping

import click

from launchkit.domain.status import LauncherStatus

ELLIPSIS = "..."


class CliPresenter:
    """Render launcher output for human and machine-readable modes."""

    def __init__(self, *, json_output: bool, color: bool) -> None:
        """Store output-mode flags for rendering decisions."""
        self.json_output = json_output
        self.color = color

    def _label(self, text: str) -> str:
        if not self.color:
            return text
        return click.style(text, fg="blue", bold=True)

    def emit_status(self, status: LauncherStatus) -> None:
        """Emit the launcher status in the current render mode."""
        if self.json_output:
            self.emit_json({"status": "ok", **status.as_payload()})
            return

        if status.last_command is None:
            last_command = "none"
        else:
            last_command = shlex.join(status.last_command)
        port = str(status.command_port) if status.command_port is not None else "none"
        rows = (
            ("user", status.user),
            ("output base", status.output_base),
            ("interactive", "yes" if status.interactive else "no"),
            ("columns", str(status.terminal_columns)),
            ("command port", port),
            ("last command", last_command),
        )
        label_width = max(len(name) for name, _ in rows) + 1
        for name, value in rows:
            line = f"{name + ':':<{label_width}} {value}"
            line = truncate(line, status.terminal_columns)
            click.echo(self._label(line[:label_width]) + line[label_width:], color=self.color)

    def emit_json(self, payload: Mapping[str, Any]) -> None:
        """Emit one machine-readable JSON object to stdout."""
        click.echo(json.dumps(payload, sort_keys=True))


def truncate(line: str, width: int) -> str:
    """Cut ``line`` to ``width`` characters, marking the cut with an ellipsis."""
    if width <= len(ELLIPSIS) or len(line) <= width:
        return line
    return line[: width - len(ELLIPSIS)] + ELLIPSIS
