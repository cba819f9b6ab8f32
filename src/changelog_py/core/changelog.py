"""Changelog document building and rendering.

The pipeline runs as a chain of pure steps:

    filter -> label -> categorize -> build document (replace) -> render

Nothing here performs I/O; commits come in as values and the document
goes out as a string, so identical inputs always render identically.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from changelog_py.core.categorizer import group_commits
from changelog_py.core.commits import filter_skip_commits
from changelog_py.core.labeler import label_commits
from changelog_py.core.replacer import apply_replacements

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from changelog_py.config.models import Category, ChangelogConfig
    from changelog_py.core.commits import Commit

logger = structlog.get_logger(__name__)

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


@dataclass(frozen=True)
class ChangelogEntry:
    """A commit paired with its rewritten display title."""

    commit: Commit
    title: str


@dataclass(frozen=True)
class ChangelogSection:
    """A category and its entries in source order."""

    category: Category
    entries: tuple[ChangelogEntry, ...]


@dataclass(frozen=True)
class ChangelogDocument:
    """Sections in ascending category order, plus contributor names."""

    sections: tuple[ChangelogSection, ...] = ()
    contributors: tuple[str, ...] = field(default=())

    @property
    def is_empty(self) -> bool:
        return not self.sections


def expand_template(template: str, values: Mapping[str, str]) -> str:
    """Substitute ``{{name}}`` placeholders.

    Unknown placeholders are left as written.
    """

    def substitute(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    return _PLACEHOLDER_RE.sub(substitute, template)


def format_entry(entry: ChangelogEntry, template: str) -> str:
    """Render one commit line."""
    commit = entry.commit
    return expand_template(
        template,
        {
            "commitShortHash": commit.short_hash,
            "commitHash": commit.hash,
            "commitTitle": entry.title,
            "commitAuthor": commit.author or "",
        },
    )


def format_heading(category: Category, template: str) -> str:
    """Render a category heading."""
    return expand_template(
        template,
        {"categoryTitle": category.title, "categoryKey": category.key},
    )


def collect_contributors(sections: Sequence[ChangelogSection]) -> tuple[str, ...]:
    """Distinct authors of the given sections, in order of appearance."""
    seen: dict[str, None] = {}
    for section in sections:
        for entry in section.entries:
            author = entry.commit.author
            if author:
                seen.setdefault(author, None)
    return tuple(seen)


def build_document(
    grouped: Mapping[str, Sequence[Commit]],
    config: ChangelogConfig,
) -> ChangelogDocument:
    """Arrange grouped commits into an ordered document.

    Args:
        grouped: Category key to member commits, as from group_commits()
        config: Configuration supplying categories and replacers

    Returns:
        Document with non-empty categories sorted by ascending order
    """
    sections = []
    for category in config.ordered_categories:
        members = grouped.get(category.key)
        if not members:
            continue
        entries = tuple(
            ChangelogEntry(commit, apply_replacements(config.replacers, commit.title))
            for commit in members
        )
        sections.append(ChangelogSection(category, entries))

    contributors = collect_contributors(sections) if config.contributors.enabled else ()
    return ChangelogDocument(sections=tuple(sections), contributors=contributors)


def render_document(document: ChangelogDocument, config: ChangelogConfig) -> str:
    """Render a document to text.

    Each section is its heading, a blank line, then one line per commit.
    Sections are separated by a blank line. An empty document renders
    as an empty string.
    """
    lines: list[str] = []

    for section in document.sections:
        if lines:
            lines.append("")
        lines.append(format_heading(section.category, config.category_format))
        lines.append("")
        lines.extend(format_entry(entry, config.format) for entry in section.entries)

    if config.contributors.enabled and document.contributors:
        if lines:
            lines.append("")
        lines.append(
            expand_template(
                config.category_format,
                {"categoryTitle": config.contributors.title, "categoryKey": "contributors"},
            )
        )
        lines.append("")
        lines.extend(f"- {name}" for name in document.contributors)

    return "\n".join(lines)


def generate_changelog(commits: Iterable[Commit], config: ChangelogConfig) -> str:
    """Generate changelog text from commits.

    Args:
        commits: Commits since the last release, in source order
        config: Rule configuration

    Returns:
        Rendered changelog; empty when no commit lands in a category
    """
    commits = list(commits)
    kept = filter_skip_commits(commits, config.skip_patterns)
    if len(kept) != len(commits):
        logger.debug("commits_skipped", count=len(commits) - len(kept))

    labeled = label_commits(kept, config.labelers)
    for commit in labeled:
        if not commit.is_labeled:
            logger.debug("commit_unlabeled", hash=commit.short_hash, title=commit.title)

    grouped = group_commits(labeled, config.categories)
    document = build_document(grouped, config)

    logger.debug(
        "changelog_generated",
        commits=len(commits),
        included=sum(len(section.entries) for section in document.sections),
        sections=[section.category.key for section in document.sections],
    )
    return render_document(document, config)
