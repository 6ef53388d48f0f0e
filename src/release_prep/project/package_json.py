"""package.json version manipulation."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from release_prep.exceptions import ProjectError, VersionNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


def _load(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ProjectError(f"Version file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProjectError(f"Failed to read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProjectError(f"{path} must contain a JSON object")
    return data


def get_package_json_version(path: Path) -> str:
    """Get the ``version`` field of package.json.

    Raises:
        VersionNotFoundError: If there is no string version field
        ProjectError: If the file is missing or not valid JSON
    """
    data = _load(path)
    version = data.get("version")
    if not isinstance(version, str):
        raise VersionNotFoundError(f"Could not find a string 'version' field in {path}")
    return version


def update_package_json_version(path: Path, new_version: str) -> Path:
    """Set the ``version`` field of package.json.

    Key order is kept; the file is written with two-space indentation
    and a trailing newline, as npm does.
    """
    data = _load(path)
    if "version" not in data:
        raise VersionNotFoundError(f"Could not find a 'version' field in {path}")

    data["version"] = new_version
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
