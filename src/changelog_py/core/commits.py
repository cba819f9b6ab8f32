"""Commit value object and pre-labeling filters."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

SHORT_HASH_LENGTH = 7


@dataclass(frozen=True)
class Commit:
    """A single change record since the last release.

    Attributes:
        hash: Commit identifier (short or full)
        title: First line of the commit message
        author: Author name, if the commit source provides one
        label: Classification assigned by the labeler
    """

    hash: str
    title: str = ""
    author: str | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        # Missing titles are treated as empty rather than rejected
        if self.title is None:
            object.__setattr__(self, "title", "")

    @property
    def short_hash(self) -> str:
        """Abbreviated hash for display."""
        return self.hash[:SHORT_HASH_LENGTH]

    @property
    def is_labeled(self) -> bool:
        return self.label is not None

    def with_label(self, label: str) -> Commit:
        """Return a copy carrying ``label``.

        Raises:
            ValueError: If this commit already has a label
        """
        if self.label is not None:
            raise ValueError(f"Commit {self.short_hash} is already labeled '{self.label}'")
        return replace(self, label=label)


def filter_skip_commits(commits: Iterable[Commit], skip_patterns: list[str]) -> list[Commit]:
    """Drop commits whose title contains a skip marker.

    Markers are matched case-insensitively anywhere in the title.

    Args:
        commits: Commits in source order
        skip_patterns: Marker strings such as ``[skip changelog]``

    Returns:
        Remaining commits, source order preserved
    """
    if not skip_patterns:
        return list(commits)

    lowered = [pattern.lower() for pattern in skip_patterns]
    return [
        commit
        for commit in commits
        if not any(pattern in commit.title.lower() for pattern in lowered)
    ]
