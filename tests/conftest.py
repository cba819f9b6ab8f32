"""Shared pytest fixtures for changelog-py tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from changelog_py.config.models import Category, ChangelogConfig, LabelRule, ReplacementRule
from changelog_py.core.commits import Commit

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def sample_commits() -> list[Commit]:
    """Commits covering every default label plus unlabeled noise."""
    return [
        Commit("a1b2c3d4e5", "feat: add retry support", "Alice"),
        Commit("b2c3d4e5f6", "fix: null pointer in parser", "Bob"),
        Commit("c3d4e5f6a7", "chore: bump dependencies", "Alice"),
        Commit("d4e5f6a7b8", "Merge branch 'main' into dev", "Carol"),
        Commit("e5f6a7b8c9", "docs: describe config format", "Dana"),
        Commit("f6a7b8c9d0", "ci: cache pip downloads", "Bob"),
        Commit("a7b8c9d0e1", "fix: off-by-one in pager", "Erin"),
    ]


@pytest.fixture
def bug_only_config() -> ChangelogConfig:
    """Minimal configuration with a single bug rule."""
    return ChangelogConfig(
        labelers=[LabelRule(label="bug", prefix="fix: ")],
        replacers=[ReplacementRule(search="fix: ", replace="")],
        categories=[
            Category(key="feature", title="🚀 New Features", labels={"feature"}, order=1),
            Category(key="bug", title="🐞 Bug Fixes", labels={"bug"}, order=2),
        ],
    )


@pytest.fixture
def project_with_config(tmp_path: Path) -> Path:
    """Project directory whose pyproject.toml carries a changelog-py table."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.changelog-py]
format = "* {{commitTitle}} ({{commitShortHash}})"

[[tool.changelog-py.labelers]]
label = "bug"
prefix = "fix:"

[[tool.changelog-py.replacers]]
search = "fix: "

[[tool.changelog-py.categories]]
key = "bug"
title = "Bug Fixes"
labels = ["bug"]
order = 1

[tool.changelog-py.contributors]
enabled = true
""",
        encoding="utf-8",
    )
    return tmp_path
