"""Pydantic configuration models.

Defaults reproduce the release configuration changelog-py grew out of:
conventional prefixes mapped onto four categories, prefixes stripped
from the rendered titles, and no contributor section.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from changelog_py.exceptions import DuplicateCategoryKeyError, DuplicateCategoryOrderError

DEFAULT_ENTRY_FORMAT = "- {{commitShortHash}} {{commitTitle}}"
DEFAULT_CATEGORY_FORMAT = "## {{categoryTitle}}"


class LabelRule(BaseModel):
    """Assigns ``label`` to commits whose title starts with ``prefix``."""

    model_config = {"frozen": True}

    label: str
    prefix: str


class ReplacementRule(BaseModel):
    """Replaces every occurrence of ``search`` with ``replace``."""

    model_config = {"frozen": True}

    search: str = Field(min_length=1)
    replace: str = ""


class Category(BaseModel):
    """A heading in the changelog collecting one or more labels."""

    model_config = {"frozen": True}

    key: str
    title: str
    labels: frozenset[str]
    order: int


class ContributorsConfig(BaseModel):
    """Contributor section toggle."""

    model_config = {"frozen": True}

    enabled: bool = False
    title: str = "Contributors"


def _default_labelers() -> list[LabelRule]:
    return [
        LabelRule(label="feature", prefix="feat:"),
        LabelRule(label="bug", prefix="fix:"),
        LabelRule(label="task", prefix="chore:"),
        LabelRule(label="task", prefix="ci:"),
        LabelRule(label="doc", prefix="docs:"),
    ]


def _default_categories() -> list[Category]:
    return [
        Category(key="feature", title="🚀 New Features", labels=frozenset({"feature"}), order=1),
        Category(key="bug", title="🐞 Bug Fixes", labels=frozenset({"bug"}), order=2),
        Category(key="task", title="🔨 Tasks", labels=frozenset({"task"}), order=3),
        Category(key="doc", title="📔 Docs", labels=frozenset({"doc"}), order=4),
    ]


def _default_replacers() -> list[ReplacementRule]:
    return [
        ReplacementRule(search=prefix, replace="")
        for prefix in ("feat: ", "fix: ", "chore: ", "ci: ", "docs: ")
    ]


def _default_skip_patterns() -> list[str]:
    return ["[skip changelog]", "[changelog skip]", "[no changelog]"]


class ChangelogConfig(BaseModel):
    """Root configuration, read from ``[tool.changelog-py]``.

    Rule lists are ordered: labelers and categories are scanned first
    match wins, replacers are applied in sequence.
    """

    model_config = {"frozen": True}

    labelers: list[LabelRule] = Field(default_factory=_default_labelers)
    replacers: list[ReplacementRule] = Field(default_factory=_default_replacers)
    categories: list[Category] = Field(default_factory=_default_categories)
    contributors: ContributorsConfig = Field(default_factory=ContributorsConfig)

    format: str = DEFAULT_ENTRY_FORMAT
    category_format: str = DEFAULT_CATEGORY_FORMAT
    skip_patterns: list[str] = Field(default_factory=_default_skip_patterns)

    @field_validator("skip_patterns")
    @classmethod
    def _drop_blank_patterns(cls, value: list[str]) -> list[str]:
        # A blank marker would match every title
        return [pattern for pattern in value if pattern.strip()]

    @model_validator(mode="after")
    def _check_categories(self) -> ChangelogConfig:
        # Not ValueError subclasses, so pydantic propagates them unwrapped
        keys: set[str] = set()
        orders: dict[int, str] = {}
        for category in self.categories:
            if category.key in keys:
                raise DuplicateCategoryKeyError(category.key)
            keys.add(category.key)

            if category.order in orders:
                raise DuplicateCategoryOrderError(
                    category.order, (orders[category.order], category.key)
                )
            orders[category.order] = category.key
        return self

    @property
    def ordered_categories(self) -> list[Category]:
        """Categories sorted by ascending ``order``."""
        return sorted(self.categories, key=lambda category: category.order)

    def with_contributors(self, enabled: bool) -> ChangelogConfig:
        """Return a copy with the contributor toggle overridden."""
        contributors = self.contributors.model_copy(update={"enabled": enabled})
        return self.model_copy(update={"contributors": contributors})
