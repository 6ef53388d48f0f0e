"""pyproject.toml version manipulation.

Reads and updates the version number in pyproject.toml files.

Formatting and comments are preserved by using regex-based
replacement rather than full TOML parsing and rewriting.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from release_prep.exceptions import ProjectError, VersionNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

# Table header -> regex for that table's body up to the next table or EOF
_VERSION_TABLES = {
    "[project]": r"^\[project\][^\n]*(?:\n|\Z).*?(?=^\[|\Z)",
    "[tool.poetry]": r"^\[tool\.poetry\][^\n]*(?:\n|\Z).*?(?=^\[|\Z)",
}
_VERSION_LINE = re.compile(r'^(version\s*=\s*)(["\'])([^"\']+)\2', re.MULTILINE)


def _resolve(path: Path) -> Path:
    pyproject_path = path / "pyproject.toml" if path.is_dir() else path
    if not pyproject_path.is_file():
        raise ProjectError(f"Version file not found: {pyproject_path}")
    return pyproject_path


def _read(pyproject_path: Path) -> str:
    try:
        return pyproject_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ProjectError(f"Failed to read {pyproject_path}: not valid UTF-8 ({e})") from e


def get_pyproject_version(path: Path) -> str:
    """Get the version from pyproject.toml.

    Args:
        path: Path to pyproject.toml or the directory containing it

    Returns:
        Version string

    Raises:
        VersionNotFoundError: If version cannot be found
        ProjectError: If the file does not exist
    """
    pyproject_path = _resolve(path)
    content = _read(pyproject_path)

    # PEP 621 first, then Poetry
    for pattern in _VERSION_TABLES.values():
        section = re.search(pattern, content, re.MULTILINE | re.DOTALL)
        if section:
            match = _VERSION_LINE.search(section.group(0))
            if match:
                return match.group(3)

    raise VersionNotFoundError(
        f"Could not find version in {pyproject_path}. "
        "Expected [project].version or [tool.poetry].version."
    )


def update_pyproject_version(path: Path, new_version: str) -> Path:
    """Update the version in pyproject.toml.

    Only the first ``version = "..."`` line of the first table that has
    one is touched; the quote style is kept.

    Args:
        path: Path to pyproject.toml or the directory containing it
        new_version: New version string to set

    Returns:
        Path to the updated pyproject.toml

    Raises:
        VersionNotFoundError: If version cannot be found
        ProjectError: If the file does not exist
    """
    pyproject_path = _resolve(path)
    content = _read(pyproject_path)

    def replace_version(match: re.Match[str]) -> str:
        return _VERSION_LINE.sub(
            lambda m: f"{m.group(1)}{m.group(2)}{new_version}{m.group(2)}",
            match.group(0),
            count=1,
        )

    for pattern in _VERSION_TABLES.values():
        section = re.search(pattern, content, re.MULTILINE | re.DOTALL)
        if section and _VERSION_LINE.search(section.group(0)):
            updated = (
                content[: section.start()] + replace_version(section) + content[section.end() :]
            )
            pyproject_path.write_text(updated, encoding="utf-8")
            return pyproject_path

    raise VersionNotFoundError(
        f"Could not find version to update in {pyproject_path}. "
        "Expected [project].version or [tool.poetry].version."
    )
