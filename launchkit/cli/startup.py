"""Parsing of launcher startup options that precede the command to run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from launchkit.cli.exit_codes import BAD_ARGV
from launchkit.cli.options import match_nullary_option, match_unary_option, validate_port_or_fail
from launchkit.diagnostics import fail

OUTPUT_BASE = "--output_base"
COMMAND_PORT = "--command_port"
BATCH = "--batch"
JSON = "--json"
END_OF_OPTIONS = "--"


@dataclass(frozen=True, slots=True)
class StartupOptions:
    """Startup options given before the command."""

    output_base: str | None = None
    command_port: int | None = None
    batch: bool = False
    json_output: bool = False


@dataclass(frozen=True, slots=True)
class ParsedCommandLine:
    """Startup options plus the command line that follows them."""

    options: StartupOptions
    command: tuple[str, ...]


def _unary(args: Sequence[str], index: int, key: str) -> Optional[tuple[str, int]]:
    """Return the value of unary option ``key`` at ``index`` and the index after it."""
    arg = args[index]
    next_arg = args[index + 1] if index + 1 < len(args) else None
    value = match_unary_option(arg, next_arg, key)
    if value is None and arg != key:
        return None
    if not value:
        fail(BAD_ARGV, f"Startup option '{key}' requires a value.")
    return value, index + (2 if arg == key else 1)


def parse_startup_options(args: Sequence[str]) -> ParsedCommandLine:
    """
    Split ``args`` into startup options and the command that follows.

    Parsing stops at the first token not starting with ``-`` or right after
    ``--``. A dash-prefixed token that is no known startup option is fatal.

    Parameters:
        args (Sequence[str]): Raw tokens, without the program name.

    Returns:
        ParsedCommandLine: The parsed options and the remaining tokens.

    Raises:
        FatalError: On unknown options, missing values or invalid ports.
    """
    output_base = None
    command_port = None
    batch = False
    json_output = False

    index = 0
    while index < len(args):
        arg = args[index]
        if arg == END_OF_OPTIONS:
            index += 1
            break
        if not arg.startswith("-"):
            break

        matched = _unary(args, index, OUTPUT_BASE)
        if matched is not None:
            output_base, index = matched
            continue

        matched = _unary(args, index, COMMAND_PORT)
        if matched is not None:
            value, index = matched
            command_port = validate_port_or_fail(value, COMMAND_PORT)
            continue

        if match_nullary_option(arg, BATCH):
            batch = True
        elif match_nullary_option(arg, JSON):
            json_output = True
        else:
            fail(BAD_ARGV, f"Unknown startup option '{arg}'.")
        index += 1

    return ParsedCommandLine(
        options=StartupOptions(
            output_base=output_base,
            command_port=command_port,
            batch=batch,
            json_output=json_output,
        ),
        command=tuple(args[index:]),
    )
