"""Shared fixtures for release-prep tests."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from release_prep.core.release import ReleaseOrchestrator
from release_prep.project import MemoryChangelog, MemoryEnv, MemoryNotes, MemoryVersionStore

RELEASE_DATE = date(2026, 10, 19)


@pytest.fixture
def version_store() -> MemoryVersionStore:
    return MemoryVersionStore("1.0.0", name="package.json")


@pytest.fixture
def changelog_store() -> MemoryChangelog:
    return MemoryChangelog()


@pytest.fixture
def notes() -> MemoryNotes:
    return MemoryNotes()


@pytest.fixture
def env() -> MemoryEnv:
    return MemoryEnv()


@pytest.fixture
def orchestrator(
    version_store: MemoryVersionStore,
    changelog_store: MemoryChangelog,
    notes: MemoryNotes,
    env: MemoryEnv,
) -> ReleaseOrchestrator:
    """Orchestrator wired to in-memory collaborators and a fixed date."""
    return ReleaseOrchestrator(
        version_store,
        changelog_store,
        notes,
        env,
        today=lambda: RELEASE_DATE,
    )


@pytest.fixture
def python_project(tmp_path: Path) -> Path:
    """A project directory with a PEP 621 pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
# keep this comment
version = "1.0.0"
description = "A test project"

[tool.other]
version = "9.9.9"
"""
    )
    return tmp_path


@pytest.fixture
def node_project(tmp_path: Path) -> Path:
    """A project directory with a package.json."""
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "test-app", "version": "1.0.0", "private": True}, indent=2) + "\n"
    )
    return tmp_path
