"""Utility modules for Hellman.

Provides:
- logger: get_logger for logging
"""

from hellman.utils.logger import get_logger

__all__ = [
    "get_logger",
]
