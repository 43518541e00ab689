"""Tests for fatal error reporting."""

from __future__ import annotations

import errno
import os

import pytest

from launchkit import diagnostics
from launchkit.cli.exit_codes import BAD_ARGV, LOCAL_ENVIRONMENTAL_ERROR
from launchkit.errors import FatalError, LaunchkitError


def test_fail_raises_fatal_error_with_code_and_message() -> None:
    """Verify fail raises instead of exiting, keeping code and message."""
    with pytest.raises(FatalError) as excinfo:
        diagnostics.fail(BAD_ARGV, "bad input")

    assert excinfo.value.exit_code == BAD_ARGV
    assert excinfo.value.render() == "bad input"
    assert excinfo.value.errno is None
    assert isinstance(excinfo.value, LaunchkitError)


def test_fail_with_errno_appends_os_description() -> None:
    """Verify the OS error text is captured from the failing call."""
    error = FileNotFoundError(errno.ENOENT, "No such file or directory")

    with pytest.raises(FatalError) as excinfo:
        diagnostics.fail_with_errno(LOCAL_ENVIRONMENTAL_ERROR, "getcwd() failed", error)

    assert excinfo.value.errno == errno.ENOENT
    assert excinfo.value.render() == f"Error: getcwd() failed: {os.strerror(errno.ENOENT)}"


def test_fail_with_errno_accepts_raw_errno() -> None:
    """Verify a bare errno integer is accepted in place of an exception."""
    with pytest.raises(FatalError) as excinfo:
        diagnostics.fail_with_errno(LOCAL_ENVIRONMENTAL_ERROR, "open", errno.EACCES)

    assert excinfo.value.strerror == os.strerror(errno.EACCES)


def test_terminate_writes_stderr_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify terminate prints the message to stderr and exits with the error code."""
    with pytest.raises(SystemExit) as excinfo:
        diagnostics.terminate(FatalError(BAD_ARGV, "no good"))

    assert excinfo.value.code == BAD_ARGV
    captured = capsys.readouterr()
    assert captured.err == "no good\n"
    assert captured.out == ""


def test_fatal_boundary_converts_fatal_errors(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the boundary turns FatalError into SystemExit."""
    with pytest.raises(SystemExit) as excinfo:
        with diagnostics.fatal_boundary():
            diagnostics.fail(LOCAL_ENVIRONMENTAL_ERROR, "no home")

    assert excinfo.value.code == LOCAL_ENVIRONMENTAL_ERROR
    assert "no home" in capsys.readouterr().err


def test_fatal_boundary_lets_other_errors_through() -> None:
    """Verify non-fatal exceptions are not swallowed by the boundary."""
    with pytest.raises(RuntimeError):
        with diagnostics.fatal_boundary():
            raise RuntimeError("boom")


def test_fail_with_errno_keeps_text_of_errors_without_errno() -> None:
    """Verify an OSError lacking an errno still contributes its description."""
    with pytest.raises(FatalError) as excinfo:
        diagnostics.fail_with_errno(
            LOCAL_ENVIRONMENTAL_ERROR,
            "could not write record",
            OSError("short write: 2 of 6 bytes"),
        )

    assert excinfo.value.errno is None
    assert excinfo.value.render() == "Error: could not write record: short write: 2 of 6 bytes"
