"""Dotenv file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from ..errors import ConfigurationError


class DotenvLoader:
    """Loads configuration defaults from .env-style files."""

    KEY_PREFIX = "PORTCLEAN_"

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        Only ``PORTCLEAN_*`` keys are kept so a project ``.env`` meant for
        another tool does not leak unrelated settings.

        Args:
            path: Path to .env file

        Returns:
            Dictionary of configuration values (empty if the file is absent)

        Raises:
            ConfigurationError: If file cannot be read
        """
        if not path.exists():
            return {}

        values: Dict[str, str] = {}
        try:
            lines = path.read_text().splitlines()
        except OSError as exc:
            raise ConfigurationError.load_failed("configuration", str(path)) from exc

        for line in lines:
            stripped = line.strip()
            if DotenvLoader._should_skip_line(stripped):
                continue
            key, value = DotenvLoader._parse_env_line(stripped)
            if key.startswith(DotenvLoader.KEY_PREFIX):
                values[key] = value

        return values

    @staticmethod
    def _should_skip_line(line: str) -> bool:
        return not line or line.startswith("#") or "=" not in line

    @staticmethod
    def _parse_env_line(line: str) -> tuple[str, str]:
        key, raw_value = line.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export ") :].strip()
        value = raw_value.strip().strip("'").strip('"')
        return key, value
