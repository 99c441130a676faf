"""Parsers for the text output of the system utilities used for discovery.

Each parser is a pure function over captured stdout so the formats can be
exercised without running the tools.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..port_parser import loose_int
from .process_models import ProcessEntry, dedupe_by_pid

LSOF_HEADER_LINES = 1
LINUX_NETSTAT_HEADER_LINES = 1
WINDOWS_NETSTAT_HEADER_LINES = 4

LINUX_LISTEN_STATE = "LISTEN"
WINDOWS_LISTEN_STATE = "LISTENING"

_LINUX_NETSTAT_MIN_FIELDS = 7
_WINDOWS_NETSTAT_MIN_FIELDS = 5
_PID_PROGRAM_FIELD = re.compile(r"^([0-9]+)/")
_TABLE_RULE = re.compile(r"^[=\s]+$")


def address_port(address: str) -> Optional[int]:
    """Return the port after the last ``:`` of a local address field."""
    return loose_int(address.rsplit(":", 1)[-1])


def _positive(value: Optional[int]) -> bool:
    return value is not None and value > 0


def parse_lsof_output(output: str) -> List[ProcessEntry]:
    """Parse ``lsof -i :<port>`` output into unique process entries."""
    entries = []
    for line in output.strip().splitlines()[LSOF_HEADER_LINES:]:
        fields = line.split()
        if len(fields) < 2:
            continue
        pid = loose_int(fields[1])
        if not _positive(pid):
            continue
        entries.append(ProcessEntry(pid=pid, command=fields[0]))
    return dedupe_by_pid(entries)


def parse_linux_netstat_output(output: str, port: int) -> List[int]:
    """Return PIDs listening on *port* from ``netstat -anp`` output."""
    pids: List[int] = []
    for line in output.strip().splitlines()[LINUX_NETSTAT_HEADER_LINES:]:
        fields = line.split()
        if len(fields) < _LINUX_NETSTAT_MIN_FIELDS:
            continue
        if fields[5] != LINUX_LISTEN_STATE:
            continue
        match = _PID_PROGRAM_FIELD.match(fields[6])
        if match is None:
            continue
        if address_port(fields[3]) != port:
            continue
        pid = int(match.group(1))
        if pid > 0 and pid not in pids:
            pids.append(pid)
    return pids


def parse_windows_netstat_output(output: str, port: int) -> List[int]:
    """Return PIDs listening on *port* from ``netstat -ano`` output.

    The four header lines are the leading blank line, the ``Active
    Connections`` title, a blank line and the column header.
    """
    pids: List[int] = []
    for line in output.splitlines()[WINDOWS_NETSTAT_HEADER_LINES:]:
        fields = line.split()
        if len(fields) < _WINDOWS_NETSTAT_MIN_FIELDS:
            continue
        if fields[3] != WINDOWS_LISTEN_STATE:
            continue
        if address_port(fields[1]) != port:
            continue
        pid = loose_int(fields[4])
        if _positive(pid) and pid not in pids:
            pids.append(pid)
    return pids


def parse_tasklist_output(output: str) -> Optional[str]:
    """Return the image name from ``tasklist /FI "PID eq <pid>"`` output."""
    rows = [line for line in output.strip().splitlines() if line.strip() and not _TABLE_RULE.match(line)]
    if len(rows) < 2:
        return None
    fields = rows[1].split()
    if not fields:
        return None
    return fields[0]


def parse_ps_command_output(output: str) -> Optional[str]:
    """Return the command name printed by ``ps -p <pid> -o comm=``."""
    name = output.strip()
    return name or None


__all__ = [
    "address_port",
    "parse_linux_netstat_output",
    "parse_lsof_output",
    "parse_ps_command_output",
    "parse_tasklist_output",
    "parse_windows_netstat_output",
]
