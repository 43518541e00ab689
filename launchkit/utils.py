"""Generic utility helpers for integer parsing and argument records."""

import re
from typing import Optional, Sequence

from launchkit.constants import INT32_MAX, INT32_MIN

_DECIMAL_RE = re.compile(r"\s*[+-]?[0-9]+", re.ASCII)


def parse_int32(text: str) -> Optional[int]:
    """
    Parse a base-10 signed 32-bit integer, requiring the whole string to be consumed.

    Leading whitespace and a sign are accepted; anything after the digits,
    including whitespace, rejects the value.

    Parameters:
        text (str): The text to parse.

    Returns:
        Optional[int]: The parsed value, or None if the text is not a complete
        in-range decimal number.
    """
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = int(text)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def encode_argv(argv: Sequence[str]) -> bytes:
    """Serialize an argument vector as NUL-terminated UTF-8 strings."""
    return b"".join(arg.encode("utf-8", "surrogateescape") + b"\0" for arg in argv)


def decode_argv(data: bytes) -> list[str]:
    """Inverse of :func:`encode_argv`."""
    if not data:
        return []
    if data.endswith(b"\0"):
        data = data[:-1]
    return [part.decode("utf-8", "surrogateescape") for part in data.split(b"\0")]
