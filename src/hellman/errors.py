"""Exception classes for Hellman.

Provides standardized exceptions for error handling throughout Hellman.
"""

from __future__ import annotations

from typing import Any


class HellmanError(Exception):
    """Base exception for all Hellman errors.
    
    Subclass this for specific error categories.
    """

    pass


class NumericFragmentError(HellmanError, TypeError):
    """Value passed as a numeric fragment has no canonical number text.

    Raised by push_numeric() for booleans (in strict mode) and for values
    that are not numbers at all.
    """

    def __init__(self, value: Any, strict: bool = True) -> None:
        """Initialize numeric fragment error.
        
        Args:
            value: The rejected value
            strict: Whether strict numeric mode was active
        """
        self.value = value
        self.strict = strict

        mode = " (strict mode)" if strict else ""
        super().__init__(
            f"Cannot push {type(value).__name__} value {value!r} as a numeric fragment{mode}"
        )
