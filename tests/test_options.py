"""Tests for raw option-token matching and port validation."""

from __future__ import annotations

import pytest

from launchkit.cli import options
from launchkit.cli.exit_codes import BAD_ARGV
from launchkit.errors import FatalError


def test_unary_option_with_inline_value() -> None:
    """Verify ``key=value`` yields the inline value and ignores the next token."""
    assert options.match_unary_option("--foo=bar", "next", "--foo") == "bar"
    assert options.match_unary_option("--foo=", "next", "--foo") == ""
    assert options.match_unary_option("--foo=a=b", None, "--foo") == "a=b"


def test_unary_option_takes_next_token() -> None:
    """Verify a bare key takes its value from the following token."""
    assert options.match_unary_option("--foo", "bar", "--foo") == "bar"
    assert options.match_unary_option("--foo", None, "--foo") is None


def test_unary_option_rejects_other_keys() -> None:
    """Verify prefixes and unrelated tokens do not match."""
    assert options.match_unary_option("--foobar", "next", "--foo") is None
    assert options.match_unary_option("--bar=1", "next", "--foo") is None
    assert options.match_unary_option("-foo", "next", "--foo") is None


def test_nullary_option_matches_exact_key() -> None:
    """Verify flags match only their exact spelling."""
    assert options.match_nullary_option("--foo", "--foo") is True
    assert options.match_nullary_option("--foobar", "--foo") is False
    assert options.match_nullary_option("--bar", "--foo") is False


def test_nullary_option_with_value_is_fatal() -> None:
    """Verify giving a flag a value aborts with a bad-argument status."""
    with pytest.raises(FatalError) as excinfo:
        options.match_nullary_option("--foo=x", "--foo")

    assert excinfo.value.exit_code == BAD_ARGV
    assert excinfo.value.render() == "In argument '--foo=x': option '--foo' does not take a value."


@pytest.mark.parametrize("value", ["1", "8080", "65535", "+22"])
def test_valid_ports_pass(value: str) -> None:
    """Verify in-range decimal ports are accepted and returned."""
    assert options.validate_port_or_fail(value, "--port") == int(value)


@pytest.mark.parametrize("value", ["0", "65536", "-1", "", "80x", "0x50", "8080 ", "99999999999"])
def test_invalid_ports_are_fatal(value: str) -> None:
    """Verify out-of-range or malformed ports abort naming option and value."""
    with pytest.raises(FatalError) as excinfo:
        options.validate_port_or_fail(value, "--port")

    assert excinfo.value.exit_code == BAD_ARGV
    assert (
        excinfo.value.render()
        == f"Invalid argument to --port: '{value}' (must be a valid port number)."
    )
