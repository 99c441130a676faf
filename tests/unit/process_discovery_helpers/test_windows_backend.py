"""Tests for the Windows discovery backend."""

from __future__ import annotations

from portclean.process_discovery_helpers.process_models import ProcessEntry
from portclean.process_discovery_helpers.windows_backend import WindowsDiscoveryBackend
from tests.helpers.sample_outputs import (
    TASKLIST_NO_MATCH_OUTPUT,
    TASKLIST_OUTPUT,
    WINDOWS_NETSTAT_OUTPUT,
)

NETSTAT = ("netstat", "-ano")


def _tasklist(pid: int) -> tuple:
    return ("tasklist", "/FI", f"PID eq {pid}")


class TestWindowsDiscoveryBackend:
    """Tests for WindowsDiscoveryBackend.find_processes."""

    def test_resolves_image_names(self, fake_runner) -> None:
        fake_runner.respond(NETSTAT, WINDOWS_NETSTAT_OUTPUT)
        fake_runner.respond(_tasklist(4321), TASKLIST_OUTPUT)
        fake_runner.respond(_tasklist(9876), TASKLIST_NO_MATCH_OUTPUT)

        result = WindowsDiscoveryBackend(fake_runner).find_processes(3000)

        assert result == [ProcessEntry(4321, "node.exe"), ProcessEntry(9876, "unknown")]

    def test_one_tasklist_call_per_distinct_pid(self, fake_runner) -> None:
        fake_runner.respond(NETSTAT, WINDOWS_NETSTAT_OUTPUT)
        fake_runner.respond(_tasklist(4321), TASKLIST_OUTPUT)
        fake_runner.respond(_tasklist(9876), TASKLIST_OUTPUT)

        WindowsDiscoveryBackend(fake_runner).find_processes(3000)

        assert fake_runner.calls.count(_tasklist(4321)) == 1

    def test_tasklist_failure_uses_unknown(self, fake_runner) -> None:
        fake_runner.respond(NETSTAT, WINDOWS_NETSTAT_OUTPUT)
        fake_runner.fail(_tasklist(5555))

        assert WindowsDiscoveryBackend(fake_runner).find_processes(8080) == [ProcessEntry(5555, "unknown")]

    def test_netstat_failure_reports_and_returns_empty(self, fake_runner, capsys) -> None:
        fake_runner.missing(NETSTAT)

        result = WindowsDiscoveryBackend(fake_runner).find_processes(3000)

        assert result == []
        assert "Failed to get processes on port 3000" in capsys.readouterr().err

    def test_nothing_listening(self, fake_runner) -> None:
        fake_runner.respond(NETSTAT, WINDOWS_NETSTAT_OUTPUT)

        assert WindowsDiscoveryBackend(fake_runner).find_processes(9999) == []
        assert fake_runner.calls == [NETSTAT]
