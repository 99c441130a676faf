"""Error types raised by discovery, termination and platform selection."""

from __future__ import annotations

from typing import Sequence


def _render(args: Sequence[str]) -> str:
    return " ".join(args)


class CommandError(RuntimeError):
    """Raised when a system utility cannot produce usable output."""

    def __init__(self, message: str, *, command: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.command = tuple(command)


class CommandUnavailableError(CommandError):
    """Raised when the executable for a system utility cannot be started."""

    @classmethod
    def missing(cls, args: Sequence[str], reason: str = "") -> "CommandUnavailableError":
        """Create error for a tool that is not installed or not executable."""
        msg = f"Command not available: {args[0]}"
        if reason:
            msg += f" ({reason})"
        return cls(msg, command=args)


class CommandFailedError(CommandError):
    """Raised when a system utility exits unsuccessfully."""

    def __init__(self, message: str, *, command: Sequence[str] = (), returncode: int | None = None) -> None:
        super().__init__(message, command=command)
        self.returncode = returncode

    @classmethod
    def non_zero_exit(cls, args: Sequence[str], returncode: int) -> "CommandFailedError":
        """Create error for a non-zero exit status."""
        return cls(f"Command '{_render(args)}' exited with status {returncode}", command=args, returncode=returncode)

    @classmethod
    def timed_out(cls, args: Sequence[str], timeout_seconds: float) -> "CommandFailedError":
        """Create error for a command that exceeded its timeout."""
        return cls(f"Command '{_render(args)}' timed out after {timeout_seconds}s", command=args)


class UnsupportedPlatformError(RuntimeError):
    """Raised when no discovery strategy exists for the host OS."""

    def __init__(self, platform_name: str) -> None:
        super().__init__(f"Unsupported platform: {platform_name}")
        self.platform_name = platform_name


__all__ = [
    "CommandError",
    "CommandFailedError",
    "CommandUnavailableError",
    "UnsupportedPlatformError",
]
