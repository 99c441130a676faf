"""Forcefully terminate a single process by PID."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional

import psutil

from .errors import CommandError
from .process_discovery_helpers.command_runner import CommandRunner
from .process_discovery_helpers.platform_family import PlatformFamily
from .process_discovery_helpers.process_models import ProcessEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KillResult:
    """Outcome of one termination attempt."""

    pid: int
    command: str
    success: bool
    detail: Optional[str] = None


class ProcessTerminator:
    """Send a forceful kill to the exact PID found, never its process tree."""

    def __init__(self, family: PlatformFamily, runner: Optional[CommandRunner] = None) -> None:
        self.family = family
        self.runner = runner if runner is not None else CommandRunner()

    def kill(self, entry: ProcessEntry) -> KillResult:
        """Kill *entry* and print the outcome. Failures are reported, not raised."""
        if self.family is PlatformFamily.WINDOWS:
            result = self._kill_windows(entry)
        else:
            result = self._kill_posix(entry)

        if result.success:
            print(f"✅ Killed process {result.pid} ({result.command})")
        else:
            print(f"❌ Failed to kill process {result.pid}: {result.detail}", file=sys.stderr)
        return result

    def _kill_posix(self, entry: ProcessEntry) -> KillResult:
        try:
            psutil.Process(entry.pid).kill()
        except (psutil.Error, OSError) as exc:
            logger.debug("Direct SIGKILL to %s failed (%s); falling back to kill -9", entry.pid, exc)
        else:
            return KillResult(entry.pid, entry.command, True)

        try:
            self.runner.run(["kill", "-9", str(entry.pid)])
        except CommandError as exc:
            return KillResult(entry.pid, entry.command, False, str(exc))
        return KillResult(entry.pid, entry.command, True)

    def _kill_windows(self, entry: ProcessEntry) -> KillResult:
        try:
            self.runner.run(["taskkill", "/PID", str(entry.pid), "/F"])
        except CommandError as exc:
            return KillResult(entry.pid, entry.command, False, str(exc))
        return KillResult(entry.pid, entry.command, True)
