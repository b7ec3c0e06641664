"""Minimal logging utilities for Hellman.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from hellman.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rejected %s value as numeric fragment", "str")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Names outside the package namespace are moved under "hellman.", so
    callers can silence or enable every builder log via the "hellman" logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("grading").name
        'hellman.grading'
        >>> get_logger("hellman.output").name
        'hellman.output'
    """
    if not (name == "hellman" or name.startswith("hellman.")):
        name = f"hellman.{name}"
    return logging.getLogger(name)
