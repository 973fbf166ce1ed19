"""Package-wide logging for routegraph.

Every module logs through ``get_logger(__name__)``. Those loggers carry no
handlers or levels of their own; the single handler and the level live on the
``routegraph`` logger, so `set_global_log_level` (used by the CLI's
``--verbose``/``--quiet``) changes them all at once.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "routegraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``routegraph`` logger.

    Only the first call after import (or after `reset_logging`) has an effect.

    Args:
        level: Initial level (default: INFO).
        format_string: Record format (default: `DEFAULT_FORMAT`).
        handler: Handler to install (default: a stream handler on stderr,
            leaving stdout to command output).
    """
    global _configured
    if _configured:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers[:] = [handler]
    root.setLevel(level)
    # Propagate so pytest's caplog sees records
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger ``name``, inheriting level and handler from ``routegraph``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``routegraph`` logger and its handler."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the handler and level so the next call reconfigures (used by tests)."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
