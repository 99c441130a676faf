from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

UNKNOWN_COMMAND = "unknown"


@dataclass(frozen=True)
class ProcessEntry:
    """A process observed holding a port during one discovery call."""

    pid: int
    command: str = UNKNOWN_COMMAND


def dedupe_by_pid(entries: Iterable[ProcessEntry]) -> List[ProcessEntry]:
    """Keep the first entry seen for each PID, preserving order."""
    seen: set[int] = set()
    unique: List[ProcessEntry] = []
    for entry in entries:
        if entry.pid in seen:
            continue
        seen.add(entry.pid)
        unique.append(entry)
    return unique
