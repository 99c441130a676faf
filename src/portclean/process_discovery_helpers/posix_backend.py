"""Port discovery for macOS and Linux hosts."""

from __future__ import annotations

import logging
from typing import List

from ..errors import CommandError, CommandFailedError, CommandUnavailableError
from .command_runner import CommandRunner
from .output_parsers import (
    parse_linux_netstat_output,
    parse_lsof_output,
    parse_ps_command_output,
)
from .platform_family import PlatformFamily
from .process_models import UNKNOWN_COMMAND, ProcessEntry, dedupe_by_pid

logger = logging.getLogger(__name__)


class PosixDiscoveryBackend:
    """Find processes on a port with ``lsof``, falling back to ``netstat`` on Linux."""

    def __init__(self, family: PlatformFamily, runner: CommandRunner) -> None:
        if not family.is_posix:
            raise ValueError(f"{family.value} is not a POSIX platform family")
        self.family = family
        self.runner = runner

    def find_processes(self, port: int) -> List[ProcessEntry]:
        try:
            output = self.runner.run(["lsof", "-i", f":{port}", "-n", "-P"])
        except CommandUnavailableError as exc:
            logger.debug("lsof unavailable for port %s: %s", port, exc)
            return self._fallback(port)
        except CommandFailedError as exc:
            # lsof exits non-zero when nothing matches the selection
            logger.debug("lsof found nothing on port %s: %s", port, exc)
            return []
        return parse_lsof_output(output)

    def _fallback(self, port: int) -> List[ProcessEntry]:
        if not self.family.has_netstat_pids:
            logger.debug("Skipping netstat fallback on %s: no PID column", self.family.value)
            return []
        try:
            output = self.runner.run(["netstat", "-anp"])
        except CommandError as exc:
            logger.debug("netstat fallback failed for port %s: %s", port, exc)
            return []
        pids = parse_linux_netstat_output(output, port)
        return dedupe_by_pid(ProcessEntry(pid=pid, command=self._command_name(pid)) for pid in pids)

    def _command_name(self, pid: int) -> str:
        try:
            output = self.runner.run(["ps", "-p", str(pid), "-o", "comm="])
        except CommandError as exc:
            logger.debug("Could not resolve command for PID %s: %s", pid, exc)
            return UNKNOWN_COMMAND
        return parse_ps_command_output(output) or UNKNOWN_COMMAND
