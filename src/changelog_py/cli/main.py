"""Root Typer application for the changelog-py CLI."""

from __future__ import annotations

import typer

from changelog_py import __version__
from changelog_py.cli.utils import console, err_console
from changelog_py.config.logging import configure_logging

app = typer.Typer(
    name="changelog-py",
    help="Categorized changelogs from commit titles.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"changelog-py {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines."),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """changelog-py CLI: label, group and render commits."""
    configure_logging(verbose=verbose, log_json=log_json)


@app.command("generate")
def generate(
    commits: str = typer.Option(
        "-", "--commits", "-c", help="Commit log file, or '-' for stdin."
    ),
    config: str | None = typer.Option(
        None, "--config", help="Config TOML file or project directory."
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write the changelog here instead of stdout."
    ),
    contributors: bool | None = typer.Option(
        None,
        "--contributors/--no-contributors",
        help="Override the configured contributor section.",
    ),
) -> None:
    """Generate a changelog from a commit log."""
    from changelog_py.cli.commands.generate import run_generate

    run_generate(commits, config, output, contributors, console, err_console)


@app.command("check")
def check(
    config: str | None = typer.Option(
        None, "--config", help="Config TOML file or project directory."
    ),
) -> None:
    """Validate the configuration and show its rules."""
    from changelog_py.cli.commands.check import run_check

    run_check(config, console, err_console)


if __name__ == "__main__":
    app()
