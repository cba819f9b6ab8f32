"""Grouping of labeled commits into categories.

When a label belongs to more than one category, the category declared
first in the configuration list claims the commit. Declaration order,
not the ``order`` value, decides; ``order`` only affects rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from changelog_py.config.models import Category
    from changelog_py.core.commits import Commit


def find_category(categories: Sequence[Category], label: str | None) -> Category | None:
    """Return the first declared category containing ``label``."""
    if label is None:
        return None
    for category in categories:
        if label in category.labels:
            return category
    return None


def group_commits(
    commits: Iterable[Commit],
    categories: Sequence[Category],
) -> dict[str, list[Commit]]:
    """Group commits by category key.

    Args:
        commits: Labeled commits in source order
        categories: Categories in declaration order

    Returns:
        Category key to member commits. Keys follow declaration order,
        members keep source order, and categories without members are
        absent. Unlabeled or uncategorized commits are dropped.
    """
    grouped: dict[str, list[Commit]] = {category.key: [] for category in categories}

    for commit in commits:
        category = find_category(categories, commit.label)
        if category is not None:
            grouped[category.key].append(commit)

    return {key: members for key, members in grouped.items() if members}
