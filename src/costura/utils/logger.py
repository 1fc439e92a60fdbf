"""Logging helpers for Costura.

Every logger lives under the ``costura`` namespace so callers can tune
harness verbosity with a single ``logging.getLogger("costura")`` handle.

Example:
    >>> from costura.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Checking %s/%s", "cpp", "comments")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``costura``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("harness").name
        'costura.harness'
    """
    if not (name == "costura" or name.startswith("costura.")):
        name = f"costura.{name}"
    return logging.getLogger(name)


def configure_logging(verbosity: int = 0) -> None:
    """Attach a stderr handler for command line use.

    Args:
        verbosity: 0 for warnings, 1 for info, 2 or more for debug
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("costura").setLevel(level)
