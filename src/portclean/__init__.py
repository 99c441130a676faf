"""Find and kill the processes bound to network ports."""

__version__ = "1.0.0"

__all__ = ["__version__"]
