"""
Hellman — immutable builder for OUTPUT result lines

Formats one line of results in a fixed convention: the ``OUTPUT`` marker,
numbers followed by a space, and text wrapped in single colons.

Quick Start:
    >>> from hellman import HellmanOutput
    >>> out = HellmanOutput.from_text("Fresh Avacado").push_numeric(13)
    >>> print(out)
    OUTPUT :Fresh Avacado: 13

Configuration:
    >>> from hellman import OutputConfig, output_config_context
    >>> with output_config_context(OutputConfig(strict_numeric=False)):
    ...     HellmanOutput().push_numeric(True).render()
    'OUTPUT True'
"""

from hellman.config import (
    OutputConfig,
    get_output_config,
    output_config_context,
    reset_output_config,
    set_output_config,
)
from hellman.errors import HellmanError, NumericFragmentError
from hellman.output import MARKER, HellmanOutput

__version__ = "0.1.0"

__all__ = [
    "MARKER",
    "HellmanError",
    "HellmanOutput",
    "NumericFragmentError",
    "OutputConfig",
    "__version__",
    "get_output_config",
    "output_config_context",
    "reset_output_config",
    "set_output_config",
]
