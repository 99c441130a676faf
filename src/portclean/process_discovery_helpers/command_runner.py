"""Run system utilities and capture their standard output."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Sequence

from ..errors import CommandFailedError, CommandUnavailableError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Blocking runner for the discovery and kill utilities.

    Commands are executed without a shell. Standard error is discarded so
    tool diagnostics never reach the user.
    """

    def __init__(self, timeout_seconds: Optional[float] = None) -> None:
        self.timeout_seconds = timeout_seconds

    def run(self, args: Sequence[str]) -> str:
        """
        Run *args* and return its standard output.

        Raises:
            CommandUnavailableError: If the executable cannot be started
            CommandFailedError: If the command exits non-zero or times out
        """
        logger.debug("Running %s", " ".join(args))
        try:
            proc = subprocess.Popen(
                list(args),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            raise CommandUnavailableError.missing(args, exc.strerror or str(exc)) from exc

        try:
            stdout, _ = proc.communicate(timeout=self.timeout_seconds)
        except subprocess.TimeoutExpired as exc:
            proc.kill()
            proc.communicate()
            raise CommandFailedError.timed_out(args, self.timeout_seconds or 0) from exc

        if proc.returncode != 0:
            logger.debug("%s exited with status %s", args[0], proc.returncode)
            raise CommandFailedError.non_zero_exit(args, proc.returncode)
        return stdout
