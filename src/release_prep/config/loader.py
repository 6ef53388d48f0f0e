"""Load release-prep configuration from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from release_prep.config.models import ReleasePrepConfig
from release_prep.exceptions import ConfigNotFoundError, ConfigValidationError

TOOL_TABLE = "release-prep"

# Version files in auto-detection order
VERSION_FILE_CANDIDATES = ("pyproject.toml", "package.json")


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find the nearest pyproject.toml, walking up from ``start``.

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist or cannot be read
        ConfigValidationError: If the file is not valid UTF-8 TOML
    """
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigNotFoundError(f"Failed to read {path}: {e}") from e
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_release_prep_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.release-prep]`` table, or an empty dict."""
    table = pyproject.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigValidationError(f"[tool.{TOOL_TABLE}] must be a table")
    return table


def load_config(project_path: Path | None = None) -> ReleasePrepConfig:
    """Load configuration for a project.

    Falls back to defaults when there is no pyproject.toml or it has no
    ``[tool.release-prep]`` table.

    Raises:
        ConfigValidationError: If the configuration values are invalid
    """
    try:
        pyproject_path = find_pyproject_toml(project_path)
    except ConfigNotFoundError:
        return ReleasePrepConfig()

    raw = extract_release_prep_config(load_pyproject_toml(pyproject_path))
    try:
        return ReleasePrepConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_TABLE}] in {pyproject_path}:\n{e}") from e


def resolve_version_file(config: ReleasePrepConfig, project_path: Path) -> Path:
    """Locate the file holding the project version.

    Raises:
        ConfigNotFoundError: If no version file can be found
    """
    if config.version_file is not None:
        return project_path / config.version_file

    for name in VERSION_FILE_CANDIDATES:
        candidate = project_path / name
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(
        f"No version file found in {project_path}. "
        f"Expected one of: {', '.join(VERSION_FILE_CANDIDATES)}"
    )
