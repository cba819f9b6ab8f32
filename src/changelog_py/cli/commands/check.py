"""Implementation of the 'check' command.

Loads the configuration, which validates it, and prints the rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from changelog_py.cli.utils import resolve_config

if TYPE_CHECKING:
    from rich.console import Console


def run_check(config_path: str | None, console: Console, err_console: Console) -> None:
    """Run the check command.

    Args:
        config_path: Optional config file or project directory
        console: Console for standard output
        err_console: Console for error output
    """
    config = resolve_config(config_path, err_console)

    labelers = Table(title="Label rules")
    labelers.add_column("#", justify="right")
    labelers.add_column("Prefix")
    labelers.add_column("Label")
    for index, rule in enumerate(config.labelers, start=1):
        labelers.add_row(str(index), repr(rule.prefix), rule.label)

    replacers = Table(title="Replacement rules")
    replacers.add_column("#", justify="right")
    replacers.add_column("Search")
    replacers.add_column("Replace")
    for index, rule in enumerate(config.replacers, start=1):
        replacers.add_row(str(index), repr(rule.search), repr(rule.replace))

    categories = Table(title="Categories")
    categories.add_column("Order", justify="right")
    categories.add_column("Key")
    categories.add_column("Title")
    categories.add_column("Labels")
    for category in config.ordered_categories:
        categories.add_row(
            str(category.order),
            category.key,
            category.title,
            ", ".join(sorted(category.labels)),
        )

    console.print(labelers)
    console.print(replacers)
    console.print(categories)

    # Labels produced by a rule but claimed by no category never render
    claimed = {label for category in config.categories for label in category.labels}
    orphaned = sorted({rule.label for rule in config.labelers} - claimed)
    if orphaned:
        console.print(f"[yellow]Labels with no category:[/] {escape(', '.join(orphaned))}")

    state = "enabled" if config.contributors.enabled else "disabled"
    console.print(f"Contributors section: [cyan]{state}[/]")
    console.print("[green]Configuration OK[/]")
