"""Port discovery for Windows hosts."""

from __future__ import annotations

import logging
import sys
from typing import List

from ..errors import CommandError
from .command_runner import CommandRunner
from .output_parsers import parse_tasklist_output, parse_windows_netstat_output
from .process_models import UNKNOWN_COMMAND, ProcessEntry

logger = logging.getLogger(__name__)


class WindowsDiscoveryBackend:
    """Find processes on a port with ``netstat -ano`` and ``tasklist``."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def find_processes(self, port: int) -> List[ProcessEntry]:
        try:
            output = self.runner.run(["netstat", "-ano"])
        except CommandError as exc:
            logger.debug("netstat failed for port %s: %s", port, exc)
            print(f"Failed to get processes on port {port}: {exc}", file=sys.stderr)
            return []
        return [ProcessEntry(pid=pid, command=self._image_name(pid)) for pid in parse_windows_netstat_output(output, port)]

    def _image_name(self, pid: int) -> str:
        try:
            output = self.runner.run(["tasklist", "/FI", f"PID eq {pid}"])
        except CommandError as exc:
            logger.debug("tasklist lookup failed for PID %s: %s", pid, exc)
            return UNKNOWN_COMMAND
        return parse_tasklist_output(output) or UNKNOWN_COMMAND
