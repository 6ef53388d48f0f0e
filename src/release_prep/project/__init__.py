"""Project file handling: version files, changelog, release notes, env."""

from __future__ import annotations

from release_prep.project.files import (
    ChangelogFile,
    EnvFile,
    NotesFile,
    PackageJsonVersionStore,
    PyprojectVersionStore,
    version_store_for,
)
from release_prep.project.memory import (
    MemoryChangelog,
    MemoryEnv,
    MemoryNotes,
    MemoryVersionStore,
)

__all__ = [
    "ChangelogFile",
    "EnvFile",
    "MemoryChangelog",
    "MemoryEnv",
    "MemoryNotes",
    "MemoryVersionStore",
    "NotesFile",
    "PackageJsonVersionStore",
    "PyprojectVersionStore",
    "version_store_for",
]
