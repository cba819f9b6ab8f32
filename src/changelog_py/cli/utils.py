"""CLI helpers shared by the commands: consoles and config resolution."""

from __future__ import annotations

from pathlib import Path

import structlog
from rich.console import Console
from rich.markup import escape

from changelog_py.config import ChangelogConfig, load_config
from changelog_py.exceptions import ChangelogPyError, ConfigNotFoundError

logger = structlog.get_logger(__name__)

console = Console()
err_console = Console(stderr=True)


def resolve_config(config_path: str | None, err_console: Console) -> ChangelogConfig:
    """Load configuration, falling back to defaults when none is found.

    An explicit ``config_path`` must exist; only the implicit search from
    the current directory may fall back.
    """
    try:
        if config_path:
            return load_config(Path(config_path))
        try:
            return load_config(Path.cwd())
        except ConfigNotFoundError:
            logger.debug("config_defaults_used", cwd=str(Path.cwd()))
            return ChangelogConfig()
    except ChangelogPyError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e
