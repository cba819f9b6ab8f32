"""changelog-py: categorized changelogs from commit titles."""

from __future__ import annotations

from changelog_py.config import ChangelogConfig, load_config
from changelog_py.core import Commit, generate_changelog

__version__ = "0.1.0"

__all__ = [
    "ChangelogConfig",
    "Commit",
    "__version__",
    "generate_changelog",
    "load_config",
]
