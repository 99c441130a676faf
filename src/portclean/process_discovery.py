"""
Discovery Orchestrator

Resolves which processes hold a port by delegating to the backend for the
host's platform family. The family is chosen once, when the orchestrator is
built, from an explicit settings value.

Usage:
    from portclean.process_discovery import create_discovery

    discovery = create_discovery(settings)
    for entry in discovery.discover(3000):
        print(entry.pid, entry.command)
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from .config import PortcleanSettings
from .errors import CommandError
from .process_discovery_helpers.command_runner import CommandRunner
from .process_discovery_helpers.platform_family import (
    PlatformFamily,
    resolve_platform_family,
)
from .process_discovery_helpers.posix_backend import PosixDiscoveryBackend
from .process_discovery_helpers.process_models import ProcessEntry
from .process_discovery_helpers.windows_backend import WindowsDiscoveryBackend

logger = logging.getLogger(__name__)


class DiscoveryBackend(Protocol):
    """Minimal contract for a platform-specific discovery strategy."""

    def find_processes(self, port: int) -> List[ProcessEntry]: ...


def build_backend(family: PlatformFamily, runner: CommandRunner) -> DiscoveryBackend:
    """Return the discovery backend for *family*."""
    if family is PlatformFamily.WINDOWS:
        return WindowsDiscoveryBackend(runner)
    return PosixDiscoveryBackend(family, runner)


class ProcessDiscovery:
    """Find the processes bound to a port on one platform family."""

    def __init__(
        self,
        family: PlatformFamily,
        runner: Optional[CommandRunner] = None,
        *,
        backend: Optional[DiscoveryBackend] = None,
    ) -> None:
        self.family = family
        self.runner = runner if runner is not None else CommandRunner()
        self.backend = backend if backend is not None else build_backend(family, self.runner)

    def discover(self, port: int) -> List[ProcessEntry]:
        """
        Return the processes currently holding *port*.

        Probe failures are reported as an empty list so a batch over many
        ports never stops on one port; a failed probe and a free port look
        the same to the caller.
        """
        try:
            processes = self.backend.find_processes(port)
        except CommandError as exc:
            logger.debug("Discovery failed for port %s: %s", port, exc)
            return []
        logger.debug("Discovered %d process(es) on port %s", len(processes), port)
        return processes


def create_discovery(settings: PortcleanSettings, runner: Optional[CommandRunner] = None) -> ProcessDiscovery:
    """
    Build the orchestrator for the configured or detected platform.

    Raises:
        UnsupportedPlatformError: If the platform has no discovery strategy
    """
    family = resolve_platform_family(settings.platform)
    if runner is None:
        runner = CommandRunner(timeout_seconds=settings.command_timeout_seconds)
    logger.debug("Using %s discovery backend", family.value)
    return ProcessDiscovery(family, runner)


__all__ = [
    "DiscoveryBackend",
    "PlatformFamily",
    "ProcessDiscovery",
    "ProcessEntry",
    "build_backend",
    "create_discovery",
]
