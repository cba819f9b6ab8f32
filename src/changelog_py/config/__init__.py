"""Configuration management for changelog-py."""

from __future__ import annotations

from changelog_py.config.loader import load_config
from changelog_py.config.models import (
    Category,
    ChangelogConfig,
    ContributorsConfig,
    LabelRule,
    ReplacementRule,
)

__all__ = [
    "Category",
    "ChangelogConfig",
    "ContributorsConfig",
    "LabelRule",
    "ReplacementRule",
    "load_config",
]
