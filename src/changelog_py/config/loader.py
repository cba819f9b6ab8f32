"""Configuration loading from TOML files.

Configuration lives in the ``[tool.changelog-py]`` table of
``pyproject.toml``. A standalone TOML file (e.g. ``changelog.toml``)
may be used instead, in which case its top level is the configuration.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from changelog_py.config.models import ChangelogConfig
from changelog_py.exceptions import ConfigNotFoundError, ConfigValidationError

logger = structlog.get_logger(__name__)

PYPROJECT_FILENAME = "pyproject.toml"
TOOL_SECTION = "changelog-py"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml by searching upward from ``start``.

    Args:
        start: Directory to start from (defaults to the current directory)

    Returns:
        Path to the nearest pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists in any parent
    """
    current = (start or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_FILENAME
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No {PYPROJECT_FILENAME} found in {current} or its parents")


def load_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is unreadable or not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigValidationError(f"Cannot read {path}: {e}") from e


def extract_changelog_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.changelog-py]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_SECTION, {})


def load_config(path: Path | None = None) -> ChangelogConfig:
    """Load and validate changelog configuration.

    Args:
        path: A TOML file, or an existing directory to search upward from
            for pyproject.toml. Defaults to the current directory.

    Returns:
        Validated configuration. A pyproject.toml without a
        ``[tool.changelog-py]`` table yields the defaults.

    Raises:
        ConfigNotFoundError: If no configuration file is found
        ConfigValidationError: If the configuration does not validate
        DuplicateCategoryOrderError: If two categories share an order
        DuplicateCategoryKeyError: If two categories share a key
    """
    if path is None or path.is_dir():
        config_path = find_pyproject_toml(path)
    else:
        # An explicit file must exist; load_toml reports it otherwise
        config_path = path

    data = load_toml(config_path)
    if config_path.name == PYPROJECT_FILENAME:
        data = extract_changelog_config(data)

    try:
        config = ChangelogConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {config_path}:\n{e}") from e

    logger.debug(
        "config_loaded",
        path=str(config_path),
        labelers=len(config.labelers),
        categories=len(config.categories),
    )
    return config
