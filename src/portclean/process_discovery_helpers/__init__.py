"""Helpers backing port-to-process discovery."""

from .command_runner import CommandRunner
from .process_models import UNKNOWN_COMMAND, ProcessEntry, dedupe_by_pid

__all__ = ["CommandRunner", "ProcessEntry", "UNKNOWN_COMMAND", "dedupe_by_pid"]
