"""Core business logic for changelog-py.

This module contains the pipeline stages:
- Prefix labeling of commit titles
- Literal title rewriting
- Grouping into ordered categories
- Document building and rendering
"""

from __future__ import annotations

from changelog_py.core.categorizer import find_category, group_commits
from changelog_py.core.changelog import (
    ChangelogDocument,
    ChangelogEntry,
    ChangelogSection,
    build_document,
    generate_changelog,
    render_document,
)
from changelog_py.core.commits import Commit, filter_skip_commits
from changelog_py.core.labeler import label_commits, match_label
from changelog_py.core.replacer import apply_replacements
from changelog_py.core.source import parse_commit_log, read_commits

__all__ = [
    # Changelog
    "ChangelogDocument",
    "ChangelogEntry",
    "ChangelogSection",
    # Commits
    "Commit",
    # Replacer
    "apply_replacements",
    "build_document",
    "filter_skip_commits",
    # Categorizer
    "find_category",
    "generate_changelog",
    "group_commits",
    # Labeler
    "label_commits",
    "match_label",
    # Source
    "parse_commit_log",
    "read_commits",
    "render_document",
]
