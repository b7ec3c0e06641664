"""Immutable builder for OUTPUT result lines.

Every line starts with the marker token ``OUTPUT`` followed by the appended
fragments in call order:

- numeric fragments render as ``<number> ``
- textual fragments render as ``:<text>: ``

The marker is prepended at render time only, and trailing whitespace is
trimmed from the finished line.

Example:
    >>> from hellman import HellmanOutput
    >>> out = HellmanOutput().push_text("Fresh Avacado").push_numeric(13)
    >>> out.render()
    'OUTPUT :Fresh Avacado: 13'
    >>> HellmanOutput().render()
    'OUTPUT'

Thread Safety:
    HellmanOutput is frozen. Each push returns a new instance and leaves
    the receiver untouched, so instances are safe to share across threads.

"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import Any

from hellman.config import get_output_config
from hellman.errors import NumericFragmentError
from hellman.utils.logger import get_logger

logger = get_logger(__name__)

MARKER = "OUTPUT"

def _is_canonical_numeric(value: Any) -> bool:
    """Return True for integers, floating-point Reals and Decimal (never bool)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (numbers.Integral, Decimal)):
        return True
    # Fraction and other non-integer Rationals have no decimal text
    return isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational)


def _format_numeric(value: Any) -> str:
    """Return the canonical text for a numeric fragment.

    Raises:
        NumericFragmentError: If value is not acceptable under the active config.
    """
    strict = get_output_config().strict_numeric
    if _is_canonical_numeric(value):
        return str(value)
    if strict or not isinstance(value, numbers.Number):
        raise NumericFragmentError(value, strict=strict)
    logger.debug("Formatting non-standard numeric %s value %r", type(value).__name__, value)
    return str(value)


@total_ordering
@dataclass(frozen=True, slots=True)
class HellmanOutput:
    """Immutable accumulator for one OUTPUT line.

    Equality and hashing follow the accumulated content, so builders made by
    different call sequences that produce the same fragments are equal.
    Ordering follows the rendered text.

    Usage:
            >>> a = HellmanOutput.from_text("x")
            >>> b = a.push_numeric(2)
            >>> a.render(), b.render()
            ('OUTPUT :x:', 'OUTPUT :x: 2')

    Attributes:
        content: Formatted fragments in append order (never includes the marker)

    """

    content: str = ""

    @classmethod
    def empty(cls) -> HellmanOutput:
        """Create a builder with no fragments."""
        return cls()

    @classmethod
    def from_text(cls, s: str) -> HellmanOutput:
        """Create a builder holding a single textual fragment.

        Never fails: empty strings, colons and the marker token itself are
        all taken verbatim.

        Args:
            s: Raw text for the fragment

        Returns:
            New HellmanOutput equivalent to ``HellmanOutput().push_text(s)``
        """
        return cls().push_text(s)

    # Alias kept for callers written against the str-parsing entry point
    from_str = from_text

    def push_numeric(self, value: Any) -> HellmanOutput:
        """Append a numeric fragment.

        Args:
            value: int, float or Decimal (any number when strict_numeric is off)

        Returns:
            New HellmanOutput with ``"<value> "`` appended

        Raises:
            NumericFragmentError: If value has no canonical number text.
        """
        return type(self)(self.content + f"{_format_numeric(value)} ")

    def push_text(self, s: str) -> HellmanOutput:
        """Append a textual fragment.

        The text is wrapped as ``:s: `` with no escaping.

        Args:
            s: Raw text

        Returns:
            New HellmanOutput with the wrapped text appended
        """
        return type(self)(self.content + f":{s}: ")

    push_str = push_text

    def render(self) -> str:
        """Render the finished line.

        Returns:
            ``"OUTPUT "`` plus the content, with trailing whitespace trimmed
        """
        return f"{MARKER} {self.content}".rstrip()

    def __str__(self) -> str:
        return self.render()

    def __lt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.render() < other.render()

    def __len__(self) -> int:
        """Return length of the accumulated content (marker excluded)."""
        return len(self.content)

    def __bool__(self) -> bool:
        """Return True if any fragments have been appended."""
        return bool(self.content)


__all__ = [
    "MARKER",
    "HellmanOutput",
]
