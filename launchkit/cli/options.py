"""Matching of raw ``--key``, ``--key=value`` and ``--key value`` tokens."""

from __future__ import annotations

from typing import Optional

from launchkit.cli.exit_codes import BAD_ARGV
from launchkit.constants import MAX_PORT, MIN_PORT
from launchkit.diagnostics import fail
from launchkit.utils import parse_int32


def _suffix_after_key(arg: str, key: str) -> Optional[str]:
    if not arg.startswith(key):
        return None
    return arg[len(key):]


def match_unary_option(arg: str, next_arg: Optional[str], key: str) -> Optional[str]:
    """
    Match a token against an option that takes one value.

    ``--foo=bar`` yields ``"bar"``; a bare ``--foo`` yields ``next_arg``, the
    token that follows it. ``--foobar`` does not match key ``--foo``.

    Parameters:
        arg (str): The token being examined.
        next_arg (Optional[str]): The token after ``arg``, if any.
        key (str): The option name, including leading dashes.

    Returns:
        Optional[str]: The option value, or None if ``arg`` is not this option.
    """
    suffix = _suffix_after_key(arg, key)
    if suffix is None:
        return None
    if suffix.startswith("="):
        return suffix[1:]
    if suffix:
        # Trailing garbage in the key name.
        return None
    return next_arg


def match_nullary_option(arg: str, key: str) -> bool:
    """
    Return whether ``arg`` is exactly the flag ``key``.

    Raises:
        FatalError: If ``arg`` gives the flag a value (``key=value``).
    """
    suffix = _suffix_after_key(arg, key)
    if suffix is None:
        return False
    if suffix.startswith("="):
        fail(BAD_ARGV, f"In argument '{arg}': option '{key}' does not take a value.")
    return not suffix


def is_valid_port(value: str) -> bool:
    """Return whether ``value`` is a decimal TCP/UDP port number (1-65535)."""
    number = parse_int32(value)
    return number is not None and MIN_PORT <= number <= MAX_PORT


def validate_port_or_fail(value: str, option_name: str) -> int:
    """
    Parse ``value`` as a port number given to ``option_name``.

    Returns:
        int: The port.

    Raises:
        FatalError: If ``value`` is not a number between 1 and 65535.
    """
    if not is_valid_port(value):
        fail(
            BAD_ARGV,
            f"Invalid argument to {option_name}: '{value}' (must be a valid port number).",
        )
    return int(value)
