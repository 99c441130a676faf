"""
Confirmation & Termination Controller

Drives one port at a time through discovery, reporting, confirmation and
termination:

    discover -> report -> (nothing found | confirm -> kill) -> done

``force`` skips every prompt, ``kill_all`` asks once for the whole port, and
the default asks once per process. A failure while handling one port is
logged with the port number and never stops the remaining ports.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .process_discovery import ProcessDiscovery
from .process_discovery_helpers.process_models import ProcessEntry
from .process_terminator import KillResult, ProcessTerminator
from .prompts import PROMPT_SUFFIX, Confirmer, ask_yes_no

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    """Mode flags for one invocation."""

    force: bool = False
    kill_all: bool = False


@dataclass
class PortReport:
    """What happened on one port."""

    port: int
    processes: List[ProcessEntry] = field(default_factory=list)
    killed: List[int] = field(default_factory=list)
    failed: List[int] = field(default_factory=list)
    declined: List[int] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return bool(self.processes)


class PortKiller:
    """Confirm and kill the processes found on each requested port."""

    def __init__(
        self,
        discovery: ProcessDiscovery,
        terminator: ProcessTerminator,
        options: RunOptions,
        confirm: Confirmer = ask_yes_no,
    ) -> None:
        self.discovery = discovery
        self.terminator = terminator
        self.options = options
        self.confirm = confirm

    def run(self, ports: Iterable[int]) -> List[PortReport]:
        """Handle *ports* sequentially in ascending order."""
        return [self.handle_port(port) for port in sorted(ports)]

    def handle_port(self, port: int) -> PortReport:
        report = PortReport(port=port)
        try:
            self._handle(port, report)
        except Exception as exc:  # policy_guard: allow-broad-except
            logger.debug("Failed to handle port %s", port, exc_info=True)
            print(f"Failed to handle port {port}: {exc}", file=sys.stderr)
            report.error = str(exc)
        return report

    def _handle(self, port: int, report: PortReport) -> None:
        report.processes = self.discovery.discover(port)
        if not report.processes:
            print(f"No process found on port {port}")
            return

        _print_process_list(port, report.processes)

        if self.options.force:
            for entry in report.processes:
                self._kill(entry, report)
        elif self.options.kill_all:
            self._confirm_batch(port, report)
        else:
            self._confirm_each(port, report)

    def _confirm_batch(self, port: int, report: PortReport) -> None:
        count = len(report.processes)
        if not self.confirm(f"Kill all {count} process(es) on port {port}? {PROMPT_SUFFIX} "):
            report.declined.extend(entry.pid for entry in report.processes)
            return
        for entry in report.processes:
            self._kill(entry, report)

    def _confirm_each(self, port: int, report: PortReport) -> None:
        for entry in report.processes:
            question = f"Process {entry.pid} ({entry.command}) is using port {port}. Kill it? {PROMPT_SUFFIX} "
            if self.confirm(question):
                self._kill(entry, report)
            else:
                report.declined.append(entry.pid)

    def _kill(self, entry: ProcessEntry, report: PortReport) -> KillResult:
        result = self.terminator.kill(entry)
        if result.success:
            report.killed.append(entry.pid)
        else:
            report.failed.append(entry.pid)
        return result


def _print_process_list(port: int, processes: List[ProcessEntry]) -> None:
    print(f"\nProcesses on port {port}:")
    for index, entry in enumerate(processes, start=1):
        print(f"  {index}. PID {entry.pid} ({entry.command})")


__all__ = ["PortKiller", "PortReport", "RunOptions"]
