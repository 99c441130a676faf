"""Host operating system families with a discovery strategy."""

from __future__ import annotations

import platform
from enum import Enum
from typing import Optional

from ..errors import UnsupportedPlatformError


class PlatformFamily(Enum):
    """Operating system families supported for port discovery.

    ``MACOS`` and ``LINUX`` share the ``lsof`` strategy; only ``LINUX`` has a
    ``netstat`` that reports PIDs, so only it gets the fallback.
    """

    MACOS = "darwin"
    LINUX = "linux"
    WINDOWS = "windows"

    @property
    def is_posix(self) -> bool:
        return self is not PlatformFamily.WINDOWS

    @property
    def has_netstat_pids(self) -> bool:
        return self is PlatformFamily.LINUX


_ALIASES = {
    "darwin": PlatformFamily.MACOS,
    "macos": PlatformFamily.MACOS,
    "linux": PlatformFamily.LINUX,
    "windows": PlatformFamily.WINDOWS,
    "win32": PlatformFamily.WINDOWS,
}


def resolve_platform_family(name: Optional[str] = None) -> PlatformFamily:
    """
    Map an OS name to its platform family.

    Accepts ``platform.system()`` and ``sys.platform`` spellings in any case.
    When *name* is ``None`` the host OS is detected.

    Raises:
        UnsupportedPlatformError: If the OS has no discovery strategy
    """
    system_name = name if name is not None else platform.system()
    family = _ALIASES.get(system_name.strip().lower())
    if family is None:
        raise UnsupportedPlatformError(system_name)
    return family
