"""Logging setup for astarpath.

Every module logs through a child of the ``astarpath`` logger, which carries
the package's only handler. ``find_path`` reports at DEBUG, so its records
stay hidden until ``enable_debug_logging`` is called.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "astarpath"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler owned by the package; None until setup_root_logger runs
_handler: Optional[logging.Handler] = None


def setup_root_logger(
    level: int = logging.INFO,
    format_string: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach the package handler to the ``astarpath`` logger.

    Only the first call after import, or after ``reset_logging``, configures
    anything; later calls return the logger untouched.

    Args:
        level: Level for the ``astarpath`` logger.
        format_string: Format applied to the handler.
        handler: Destination for records; defaults to stdout.

    Returns:
        The ``astarpath`` logger.
    """
    global _handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        return root_logger

    _handler = handler if handler is not None else logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(_handler)
    root_logger.setLevel(level)
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name``; its level defers to ``astarpath``."""
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level every astarpath logger inherits."""
    setup_root_logger().setLevel(level)


def enable_debug_logging() -> None:
    """Show search diagnostics from ``find_path``."""
    set_global_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Detach the package handler and clear the level (used by tests)."""
    global _handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler = None
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
