"""Exception hierarchy for changelog-py.

All errors raised by the library derive from ChangelogPyError so that
callers can catch everything at a single boundary (the CLI does).
The transformation stages themselves never raise: they are total over
well-formed input.
"""

from __future__ import annotations


class ChangelogPyError(Exception):
    """Base class for all changelog-py errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationError(ChangelogPyError):
    """Invalid or unusable rule configuration."""


class DuplicateCategoryOrderError(ConfigurationError):
    """Two categories declare the same order value."""

    def __init__(self, order: int, keys: tuple[str, str]) -> None:
        self.order = order
        self.keys = keys
        super().__init__(
            f"Categories '{keys[0]}' and '{keys[1]}' both declare order {order}. "
            "Category order values must be unique."
        )


class DuplicateCategoryKeyError(ConfigurationError):
    """Two categories declare the same key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Category key '{key}' is declared more than once.")


class ConfigNotFoundError(ConfigurationError):
    """No configuration file could be located."""


class ConfigValidationError(ConfigurationError):
    """Configuration file is unreadable or does not match the schema."""


# =============================================================================
# Commit source
# =============================================================================


class CommitSourceError(ChangelogPyError):
    """Commit log could not be read or parsed."""
