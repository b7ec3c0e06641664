"""ContextVar-based output configuration for Hellman.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is read by HellmanOutput.push_numeric() at call time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from hellman.config import OutputConfig, output_config_context

    with output_config_context(OutputConfig(strict_numeric=False)):
        line = HellmanOutput().push_numeric(True).render()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any, Iterator

from hellman.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Immutable output configuration.

    Attributes:
        strict_numeric: Only accept integers, floating-point Reals and Decimal
            (never bool or Fraction) as numeric fragments. When False, any
            numbers.Number is accepted.

    """

    strict_numeric: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "OutputConfig":
        """Create OutputConfig from dictionary.

        Only includes keys that are valid OutputConfig fields; unknown keys
        are ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                OutputConfig attribute names.

        Returns:
            New OutputConfig instance with values from dict.

        Example:
            >>> OutputConfig.from_dict({"strict_numeric": False, "color": "red"})
            OutputConfig(strict_numeric=False)

        """
        valid_fields = {f.name for f in fields(cls)}
        ignored = sorted(k for k in config_dict if k not in valid_fields)
        if ignored:
            logger.debug("Ignoring unknown output config keys: %s", ", ".join(ignored))
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: OutputConfig = OutputConfig()

_output_config: ContextVar[OutputConfig] = ContextVar(
    "output_config",
    default=_DEFAULT_CONFIG,
)


def get_output_config() -> OutputConfig:
    """Get current output configuration (thread-local)."""
    return _output_config.get()


def set_output_config(config: OutputConfig) -> None:
    """Set output configuration for current context.

    Args:
        config: OutputConfig instance to use for this context.

    """
    _output_config.set(config)


def reset_output_config() -> None:
    """Reset to the default configuration."""
    _output_config.set(_DEFAULT_CONFIG)


@contextmanager
def output_config_context(config: OutputConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: OutputConfig to use within the context.

    Yields:
        None

    Example:
        >>> with output_config_context(OutputConfig(strict_numeric=False)):
        ...     HellmanOutput().push_numeric(True).render()
        'OUTPUT True'

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _output_config.get()
    _output_config.set(config)
    try:
        yield
    finally:
        _output_config.set(previous)


__all__ = [
    "OutputConfig",
    "get_output_config",
    "set_output_config",
    "reset_output_config",
    "output_config_context",
]
