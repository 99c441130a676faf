"""
Port Specification Parser

Turns raw command line tokens such as ``"3000"`` or ``"8000-8010"`` into a
deduplicated set of integer ports plus one error message per rejected token.

Numbers are read with the permissive rules of :func:`loose_int`: surrounding
whitespace, leading zeros, a sign, and any trailing text after the leading
digits are tolerated (``"3000.5"`` reads as ``3000``).

Usage:
    from portclean.port_parser import parse_ports

    result = parse_ports(["3000", "8000-8002"])
    sorted(result.ports)  # [3000, 8000, 8001, 8002]
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

MIN_PORT = 1
MAX_PORT = 65535

RANGE_SEPARATOR = "-"

_LEADING_INTEGER = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass
class PortParseResult:
    """Ports accepted from a batch of tokens and the errors for the rest."""

    ports: Set[int] = field(default_factory=set)
    errors: List[str] = field(default_factory=list)


def loose_int(text: str) -> Optional[int]:
    """Read the leading integer of *text*, or ``None`` if there is none."""
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return None
    return int(match.group(1))


def is_valid_port(value: Optional[int]) -> bool:
    return value is not None and MIN_PORT <= value <= MAX_PORT


def _parse_range(token: str) -> Optional[range]:
    start_text, end_text = token.split(RANGE_SEPARATOR, 1)
    start = loose_int(start_text)
    end = loose_int(end_text)
    if not is_valid_port(start) or not is_valid_port(end):
        return None
    if start > end:
        return None
    return range(start, end + 1)


def parse_ports(tokens: Iterable[str]) -> PortParseResult:
    """
    Parse port tokens into a canonical port set.

    Invalid tokens never abort the parse: each one contributes a single error
    and is skipped, while valid tokens from the same batch are still added.

    Args:
        tokens: Raw tokens, each ``"<n>"`` or ``"<n>-<m>"``

    Returns:
        PortParseResult with the union of all valid ports and the error
        messages in token order
    """
    result = PortParseResult()
    for token in tokens:
        if RANGE_SEPARATOR in token:
            port_range = _parse_range(token)
            if port_range is None:
                result.errors.append(f"Error: Invalid port range {token}")
                continue
            result.ports.update(port_range)
            continue

        port = loose_int(token)
        if not is_valid_port(port):
            result.errors.append(f"Error: Invalid port {token}")
            continue
        result.ports.add(port)
    return result


__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "PortParseResult",
    "is_valid_port",
    "loose_int",
    "parse_ports",
]
