"""Settings for a single portclean invocation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .runtime import env_bool, env_seconds, env_str

PLATFORM_ENV = "PORTCLEAN_PLATFORM"
COMMAND_TIMEOUT_ENV = "PORTCLEAN_COMMAND_TIMEOUT_SECONDS"
LOG_LEVEL_ENV = "PORTCLEAN_LOG_LEVEL"
VERBOSE_ENV = "PORTCLEAN_VERBOSE"

DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class PortcleanSettings:
    """Explicit configuration handed to discovery and logging setup.

    ``platform`` is ``None`` when the host OS should be detected.
    ``command_timeout_seconds`` of ``None`` means system utilities may block
    indefinitely.
    """

    platform: Optional[str] = None
    command_timeout_seconds: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL
    verbose: bool = False

    @property
    def effective_log_level(self) -> int:
        if self.verbose:
            return logging.DEBUG
        return getattr(logging, self.log_level)


def _resolve_log_level(raw: str) -> str:
    level = raw.upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, raw, f"Expected one of {', '.join(_LOG_LEVELS)}")
    return level


def load_settings() -> PortcleanSettings:
    """Build settings from the environment and ``.env`` defaults."""

    timeout = env_seconds(COMMAND_TIMEOUT_ENV)
    if timeout == 0:
        timeout = None
    raw_level = env_str(LOG_LEVEL_ENV, or_value=DEFAULT_LOG_LEVEL)
    return PortcleanSettings(
        platform=env_str(PLATFORM_ENV),
        command_timeout_seconds=timeout,
        log_level=_resolve_log_level(raw_level or DEFAULT_LOG_LEVEL),
        verbose=bool(env_bool(VERBOSE_ENV, or_value=False)),
    )


__all__ = ["PortcleanSettings", "load_settings"]
