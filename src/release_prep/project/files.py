"""File-backed collaborators for the release orchestrator."""

from __future__ import annotations

import os
from pathlib import Path

from release_prep.exceptions import ProjectError, StorageError
from release_prep.project.package_json import (
    get_package_json_version,
    update_package_json_version,
)
from release_prep.project.pyproject import get_pyproject_version, update_pyproject_version

DEFAULT_CI_ENV_VAR = "GITHUB_ENV"


class PyprojectVersionStore:
    """Version held in ``[project]`` or ``[tool.poetry]`` of pyproject.toml."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = path.name

    def read_version(self) -> str:
        try:
            return get_pyproject_version(self.path)
        except OSError as e:
            raise StorageError(f"Failed to read {self.path}: {e}", self.path) from e

    def write_version(self, version: str) -> None:
        try:
            update_pyproject_version(self.path, version)
        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}", self.path) from e


class PackageJsonVersionStore:
    """Version held in the ``version`` field of package.json."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = path.name

    def read_version(self) -> str:
        try:
            return get_package_json_version(self.path)
        except OSError as e:
            raise StorageError(f"Failed to read {self.path}: {e}", self.path) from e

    def write_version(self, version: str) -> None:
        try:
            update_package_json_version(self.path, version)
        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}", self.path) from e


def version_store_for(path: Path) -> PyprojectVersionStore | PackageJsonVersionStore:
    """Pick the version store matching a version file.

    Raises:
        ProjectError: If the file type is not supported
    """
    if path.suffix == ".toml":
        return PyprojectVersionStore(path)
    if path.suffix == ".json":
        return PackageJsonVersionStore(path)
    raise ProjectError(
        f"Unsupported version file: {path}. Expected pyproject.toml or package.json."
    )


class ChangelogFile:
    """CHANGELOG.md on disk. A missing file reads as empty."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {self.path}: {e}", self.path) from e

    def write(self, text: str) -> None:
        _write_text(self.path, text)


class NotesFile:
    """Release notes file, overwritten on every run."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def write(self, text: str) -> None:
        _write_text(self.path, text)


class EnvFile:
    """Writes ``KEY=value`` to a local env file and to the CI env file.

    The local file is overwritten. When the ``ci_env_var`` environment
    variable names a file (``GITHUB_ENV`` on GitHub Actions), the same
    line is appended there as well.
    """

    def __init__(self, path: Path, ci_env_var: str | None = DEFAULT_CI_ENV_VAR) -> None:
        self.path = path
        self.ci_env_var = ci_env_var

    @property
    def ci_env_path(self) -> Path | None:
        if not self.ci_env_var:
            return None
        value = os.environ.get(self.ci_env_var)
        return Path(value) if value else None

    def write(self, key: str, value: str) -> None:
        line = f"{key}={value}\n"
        _write_text(self.path, line)

        ci_path = self.ci_env_path
        if ci_path is not None:
            try:
                with ci_path.open("a", encoding="utf-8") as handle:
                    handle.write(line)
            except OSError as e:
                raise StorageError(f"Failed to append to {ci_path}: {e}", ci_path) from e


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Failed to write {path}: {e}", path) from e
