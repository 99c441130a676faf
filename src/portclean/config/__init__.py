"""Environment-backed configuration helpers."""

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_seconds, env_str
from .settings import PortcleanSettings, load_settings

__all__ = [
    "ConfigurationError",
    "PortcleanSettings",
    "env_bool",
    "env_int",
    "env_seconds",
    "env_str",
    "load_settings",
]
