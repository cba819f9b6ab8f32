"""Tests for the changelog-py CLI."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from changelog_py import __version__
from changelog_py.cli.main import app

if TYPE_CHECKING:
    from pathlib import Path

COMMIT_LOG = """\
abc1234\tAlice\tfix: null pointer in parser
def5678\tBob\tfeat: add retry support
0a0b0c0\tCarol\tMerge branch 'main'
"""


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each CLI invocation."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def commit_log(tmp_path: Path) -> Path:
    path = tmp_path / "commits.txt"
    path.write_text(COMMIT_LOG, encoding="utf-8")
    return path


class TestGenerateCommand:
    """Tests for 'changelog-py generate'."""

    def test_generate_to_stdout(
        self,
        runner: CliRunner,
        commit_log: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """Render with defaults when no config file exists."""
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["generate", "--commits", str(commit_log)])

        assert result.exit_code == 0, result.output
        assert "## 🚀 New Features" in result.stdout
        assert "- def5678 add retry support" in result.stdout
        assert "- abc1234 null pointer in parser" in result.stdout
        assert "Merge branch" not in result.stdout
        assert result.stdout.index("New Features") < result.stdout.index("Bug Fixes")

    def test_generate_to_file(self, runner: CliRunner, commit_log: Path, tmp_path: Path):
        """--output writes the document to a file."""
        output = tmp_path / "CHANGELOG.md"
        config = tmp_path / "changelog.toml"
        config.write_text("", encoding="utf-8")

        result = runner.invoke(
            app,
            ["generate", "-c", str(commit_log), "--config", str(config), "-o", str(output)],
        )

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").startswith("## 🚀 New Features\n\n")

    def test_generate_with_project_config(
        self, runner: CliRunner, commit_log: Path, project_with_config: Path
    ):
        """Rules and templates come from pyproject.toml."""
        result = runner.invoke(
            app,
            ["generate", "-c", str(commit_log), "--config", str(project_with_config)],
        )

        assert result.exit_code == 0, result.output
        assert "## Bug Fixes" in result.stdout
        assert "* null pointer in parser (abc1234)" in result.stdout
        assert "## Contributors" in result.stdout
        assert "- Alice" in result.stdout
        assert "retry" not in result.stdout

    def test_no_contributors_override(
        self, runner: CliRunner, commit_log: Path, project_with_config: Path
    ):
        """--no-contributors turns the configured section off."""
        result = runner.invoke(
            app,
            [
                "generate",
                "-c",
                str(commit_log),
                "--config",
                str(project_with_config),
                "--no-contributors",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Contributors" not in result.stdout

    def test_missing_commit_log(self, runner: CliRunner, tmp_path: Path):
        """Unreadable commit log exits with status 1."""
        config = tmp_path / "changelog.toml"
        config.write_text("", encoding="utf-8")

        result = runner.invoke(
            app,
            ["generate", "-c", str(tmp_path / "missing.txt"), "--config", str(config)],
        )

        assert result.exit_code == 1
        assert "Error reading commits" in result.output

    def test_duplicate_order_config_fails(
        self, runner: CliRunner, commit_log: Path, tmp_path: Path
    ):
        """A configuration with duplicate category order exits with status 1."""
        config = tmp_path / "changelog.toml"
        config.write_text(
            """\
[[categories]]
key = "a"
title = "A"
labels = ["a"]
order = 1

[[categories]]
key = "b"
title = "B"
labels = ["b"]
order = 1
""",
            encoding="utf-8",
        )

        result = runner.invoke(app, ["generate", "-c", str(commit_log), "--config", str(config)])

        assert result.exit_code == 1
        assert "Error loading config" in result.output

    def test_explicit_missing_config_fails(
        self, runner: CliRunner, commit_log: Path, tmp_path: Path
    ):
        """An explicit config path that does not exist is an error."""
        result = runner.invoke(
            app,
            ["generate", "-c", str(commit_log), "--config", str(tmp_path / "nowhere")],
        )

        assert result.exit_code == 1

    def test_missing_config_file_inside_project_fails(
        self, runner: CliRunner, commit_log: Path, project_with_config: Path
    ):
        """A mistyped --config is not replaced by the project pyproject.toml."""
        result = runner.invoke(
            app,
            [
                "generate",
                "-c",
                str(commit_log),
                "--config",
                str(project_with_config / "missing.toml"),
            ],
        )

        assert result.exit_code == 1
        assert "Error loading config" in result.output
        assert "null pointer" not in result.output

    def test_non_utf8_commit_log_fails(self, runner: CliRunner, tmp_path: Path):
        """An undecodable commit log exits with status 1 instead of a traceback."""
        log = tmp_path / "commits.txt"
        log.write_bytes(b"abc fix: \xff\xfe bad\n")
        config = tmp_path / "changelog.toml"
        config.write_text("", encoding="utf-8")

        result = runner.invoke(app, ["generate", "-c", str(log), "--config", str(config)])

        assert result.exit_code == 1
        assert "Error reading commits" in result.output

    def test_nothing_categorized(self, runner: CliRunner, tmp_path: Path):
        """A log with no categorized commits prints a notice and succeeds."""
        log = tmp_path / "commits.txt"
        log.write_text("abc Merge branch 'x'\n", encoding="utf-8")
        config = tmp_path / "changelog.toml"
        config.write_text("", encoding="utf-8")

        result = runner.invoke(app, ["generate", "-c", str(log), "--config", str(config)])

        assert result.exit_code == 0
        assert "No commits matched" in result.output

    def test_generate_from_stdin(self, runner: CliRunner, tmp_path: Path):
        """Commits are read from stdin by default."""
        config = tmp_path / "changelog.toml"
        config.write_text("", encoding="utf-8")

        result = runner.invoke(
            app, ["generate", "--config", str(config)], input="abc123 docs: explain\n"
        )

        assert result.exit_code == 0, result.output
        assert "- abc123 explain" in result.stdout


class TestCheckCommand:
    """Tests for 'changelog-py check'."""

    def test_check_valid_config(self, runner: CliRunner, project_with_config: Path):
        """A valid configuration reports OK."""
        result = runner.invoke(app, ["check", "--config", str(project_with_config)])

        assert result.exit_code == 0, result.output
        assert "Configuration OK" in result.output
        assert "enabled" in result.output

    def test_check_reports_orphaned_labels(self, runner: CliRunner, tmp_path: Path):
        """Labels that no category claims are pointed out."""
        config = tmp_path / "changelog.toml"
        config.write_text(
            """\
[[labelers]]
label = "perf"
prefix = "perf:"
""",
            encoding="utf-8",
        )

        result = runner.invoke(app, ["check", "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert "Labels with no category" in result.output
        assert "perf" in result.output

    def test_check_invalid_config(self, runner: CliRunner, tmp_path: Path):
        """An invalid configuration exits with status 1."""
        config = tmp_path / "changelog.toml"
        config.write_text('[[replacers]]\nsearch = ""\n', encoding="utf-8")

        result = runner.invoke(app, ["check", "--config", str(config)])

        assert result.exit_code == 1
        assert "Error loading config" in result.output


class TestVersion:
    """Tests for --version."""

    def test_version(self, runner: CliRunner):
        """--version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
