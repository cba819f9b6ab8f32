"""Title-prefix labeling.

Rules are scanned in declaration order and the first whose prefix
starts the title wins. Matching is case-sensitive. A title that no
rule matches simply stays unlabeled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from changelog_py.config.models import LabelRule
    from changelog_py.core.commits import Commit


def match_label(rules: Sequence[LabelRule], title: str) -> str | None:
    """Return the label of the first rule whose prefix starts ``title``."""
    for rule in rules:
        if title.startswith(rule.prefix):
            return rule.label
    return None


def label_commits(commits: Iterable[Commit], rules: Sequence[LabelRule]) -> list[Commit]:
    """Label each commit, preserving source order.

    Commits that already carry a label are passed through untouched.
    """
    labeled = []
    for commit in commits:
        if not commit.is_labeled:
            label = match_label(rules, commit.title)
            if label is not None:
                commit = commit.with_label(label)
        labeled.append(commit)
    return labeled
