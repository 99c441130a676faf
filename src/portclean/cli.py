"""Command line entry point for portclean.

Usage:
    portclean 3000 8080
    portclean 3000-3005 --all
    portclean 8080 --force
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from . import __version__
from .config import ConfigurationError, load_settings
from .errors import UnsupportedPlatformError
from .logging_config import setup_logging
from .port_killer import PortKiller, RunOptions
from .port_parser import parse_ports
from .process_discovery import create_discovery
from .process_terminator import ProcessTerminator
from .prompts import Confirmer, ask_yes_no

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

_EXAMPLES = """\
examples:
  portclean 3000                     Kill process on port 3000
  portclean 3000 8080                Kill processes on ports 3000 and 8080
  portclean 3000-3005                Kill processes on ports 3000 through 3005
  portclean 3000 --force             Kill port 3000 without confirmation
  portclean 3000 --all               Confirm once for every process on port 3000
  portclean 3000 8080 --force --all  Kill everything on both ports without confirmation
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on invalid arguments."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="portclean",
        description="Kill processes using specific ports",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("ports", nargs="*", metavar="ports", help="port number(s) or ranges such as 3000-3005")
    parser.add_argument("-f", "--force", action="store_true", help="skip confirmation prompts")
    parser.add_argument("-a", "--all", dest="kill_all", action="store_true", help="confirm once for all processes on each port")
    parser.add_argument("-v", "--version", action="version", version=f"portclean v{__version__}")
    parser.add_argument("--verbose", action="store_true", help="show debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, confirm: Optional[Confirmer] = None) -> int:
    """Run portclean and return the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    level = logging.DEBUG if args.verbose else settings.effective_log_level
    setup_logging(level)

    if not args.ports:
        print("Error: No ports specified", file=sys.stderr)
        return EXIT_FAILURE

    parsed = parse_ports(args.ports)
    for error in parsed.errors:
        print(error, file=sys.stderr)
    if not parsed.ports:
        return EXIT_FAILURE

    try:
        discovery = create_discovery(settings)
    except UnsupportedPlatformError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    terminator = ProcessTerminator(discovery.family, discovery.runner)
    options = RunOptions(force=args.force, kill_all=args.kill_all)
    killer = PortKiller(discovery, terminator, options, confirm if confirm is not None else ask_yes_no)

    reports = killer.run(parsed.ports)
    logger.debug(
        "Handled %d port(s): %d killed, %d failed",
        len(reports),
        sum(len(report.killed) for report in reports),
        sum(len(report.failed) for report in reports),
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
