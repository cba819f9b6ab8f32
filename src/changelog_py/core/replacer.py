"""Literal search/replace rewriting of commit titles."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from changelog_py.config.models import ReplacementRule


def apply_replacements(rules: Sequence[ReplacementRule], title: str) -> str:
    """Apply each rule to ``title`` in order.

    Every occurrence of ``search`` is replaced, and each rule sees the
    output of the rule before it. ``search`` is literal text, not a
    pattern.
    """
    for rule in rules:
        title = title.replace(rule.search, rule.replace)
    return title
