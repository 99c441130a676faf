"""Tests for portclean error types."""

from __future__ import annotations

from portclean.errors import (
    CommandError,
    CommandFailedError,
    CommandUnavailableError,
    UnsupportedPlatformError,
)


def test_missing_command_message():
    error = CommandUnavailableError.missing(["lsof", "-i", ":80"], "No such file or directory")

    assert isinstance(error, CommandError)
    assert str(error) == "Command not available: lsof (No such file or directory)"
    assert error.command == ("lsof", "-i", ":80")


def test_non_zero_exit_message():
    error = CommandFailedError.non_zero_exit(["kill", "-9", "42"], 1)

    assert str(error) == "Command 'kill -9 42' exited with status 1"
    assert error.returncode == 1


def test_timed_out_message():
    error = CommandFailedError.timed_out(["netstat", "-anp"], 3)

    assert str(error) == "Command 'netstat -anp' timed out after 3s"
    assert error.returncode is None


def test_unsupported_platform_message():
    error = UnsupportedPlatformError("sunos5")

    assert str(error) == "Unsupported platform: sunos5"
    assert error.platform_name == "sunos5"
