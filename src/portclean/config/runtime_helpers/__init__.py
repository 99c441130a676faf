"""Helpers for runtime configuration loading."""

from .dotenv_loader import DotenvLoader

__all__ = ["DotenvLoader"]
