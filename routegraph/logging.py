"""Logger wiring for routegraph.

Solver, loader and CLI messages all go to loggers named below
``routegraph``. That package logger holds the only handler (stdout by
default); module loggers carry no handler or level of their own, so one
call to :func:`set_global_log_level` changes what every module emits.
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
) -> logging.Logger:
    """Install the output handler on the ``routegraph`` logger.

    Only the first call does anything. Later calls return the logger as it
    is, which lets every module ask for setup at import time.

    Args:
        level: Threshold for routegraph messages.
        format_string: ``logging.Formatter`` pattern, ``DEFAULT_FORMAT`` if
            omitted.
        handler: Where records go. Tests pass their own; otherwise records
            are written to stdout.

    Returns:
        The ``routegraph`` logger.
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root

    root.setLevel(level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # caplog listens on the interpreter-wide root logger
    root.propagate = True

    _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for a routegraph module, e.g. ``get_logger(__name__)``.

    The returned logger defers its level to ``routegraph``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the threshold of routegraph output, handlers included."""
    root = setup_root_logger()
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Remove the handler so the next setup call starts over."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
