"""
Logging configuration for the portclean command.

User-facing output (process lists, prompts, kill results) is printed; the
logging tree carries diagnostics only, on stderr so it never interleaves
with prompts read from stdin.
"""

import logging
import sys
import threading
from typing import Optional

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)

_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", logger.name, e)


def _build_console_handler(level: int) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(level)
    return console_handler


def setup_logging(level: int = logging.WARNING, stream_handler: Optional[logging.Handler] = None) -> logging.Handler:
    """Configure the root logger with a single console handler.

    Earlier handlers are closed and replaced, so repeated calls (for example
    from tests invoking ``main`` more than once) do not duplicate output.
    """

    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)
        root_logger.handlers = []

        handler = stream_handler if stream_handler is not None else _build_console_handler(level)
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
        logging.getLogger("psutil").setLevel(max(level, logging.WARNING))
        return handler


__all__ = ["setup_logging"]
