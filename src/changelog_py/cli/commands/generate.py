"""Implementation of the 'generate' command.

The generate command reads a commit log, applies the configured rules
and writes the rendered changelog.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from changelog_py.cli.utils import resolve_config
from changelog_py.core.changelog import generate_changelog
from changelog_py.core.source import read_commits
from changelog_py.exceptions import ChangelogPyError

if TYPE_CHECKING:
    from rich.console import Console


def run_generate(
    commits_path: str,
    config_path: str | None,
    output_path: str | None,
    contributors: bool | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the generate command.

    Args:
        commits_path: Commit log file, or ``-`` for stdin
        config_path: Optional config file or project directory
        output_path: File to write; stdout when omitted
        contributors: Override for the contributor toggle
        console: Console for standard output
        err_console: Console for error output
    """
    config = resolve_config(config_path, err_console)
    if contributors is not None:
        config = config.with_contributors(contributors)

    try:
        commits = read_commits(commits_path)
    except ChangelogPyError as e:
        err_console.print(f"[red]Error reading commits:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if not commits:
        err_console.print("[yellow]No commits found. Nothing to do.[/]")
        return

    changelog = generate_changelog(commits, config)

    if not changelog:
        err_console.print("[yellow]No commits matched a changelog category.[/]")
        return

    if output_path is None:
        # Plain write so markup in commit titles is not interpreted
        console.out(changelog, highlight=False)
        return

    try:
        Path(output_path).write_text(changelog + "\n", encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Error writing {output_path}:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    err_console.print(f"  [green]✓[/] Wrote changelog to {output_path}")
