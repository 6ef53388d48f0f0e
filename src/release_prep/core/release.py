"""Release orchestration.

Runs one release from start to finish:

1. Load the current version
2. Bump it
3. Classify and group the commits
4. Render the changelog section, merge it, render the release notes
5. Persist the version, changelog, release notes and env line

Collaborators are injected so tests can use in-memory fakes. Any failure
propagates to the caller; files written by earlier stages are left as
they are.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Protocol

from release_prep.core.changelog import (
    DEFAULT_PR_TITLE,
    ReleaseEntry,
    merge_changelog,
    render_entry,
    render_release_notes,
)
from release_prep.core.commits import classify_commits, group_commits
from release_prep.core.version import BumpType, Version

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_ENV_VAR = "NEW_VERSION"


class VersionStore(Protocol):
    """Holds the project version (pyproject.toml, package.json, ...)."""

    name: str

    def read_version(self) -> str: ...

    def write_version(self, version: str) -> None: ...


class ChangelogStore(Protocol):
    """Holds the changelog document."""

    def read(self) -> str: ...

    def write(self, text: str) -> None: ...


class NotesWriter(Protocol):
    """Receives the release notes for the current run."""

    def write(self, text: str) -> None: ...


class EnvWriter(Protocol):
    """Exports a variable to the surrounding CI job."""

    def write(self, key: str, value: str) -> None: ...


@dataclass(frozen=True)
class ReleaseRequest:
    """Inputs for one release run."""

    bump: BumpType = BumpType.PATCH
    commits: list[str] = field(default_factory=list)
    pr_title: str = DEFAULT_PR_TITLE
    pr_number: str | None = None


@dataclass(frozen=True)
class ReleaseResult:
    """What a release run produced."""

    previous_version: str
    new_version: str
    entry: ReleaseEntry
    changelog: str
    release_notes: str


class ReleaseOrchestrator:
    """Drive a release through its five stages.

    Args:
        version_store: Source and destination of the project version
        changelog_store: Changelog document
        notes_writer: Destination of the release notes
        env_writer: Destination of the ``NEW_VERSION=...`` line
        today: Clock returning the release date
        env_var: Name of the exported version variable
    """

    def __init__(
        self,
        version_store: VersionStore,
        changelog_store: ChangelogStore,
        notes_writer: NotesWriter,
        env_writer: EnvWriter,
        *,
        today: Callable[[], date] = date.today,
        env_var: str = DEFAULT_ENV_VAR,
    ) -> None:
        self.version_store = version_store
        self.changelog_store = changelog_store
        self.notes_writer = notes_writer
        self.env_writer = env_writer
        self.today = today
        self.env_var = env_var

    def run(self, request: ReleaseRequest) -> ReleaseResult:
        """Run all stages for a single release."""
        logger.debug("Processing %d commits for %s release", len(request.commits), request.bump)

        # Load
        version = Version.parse(self.version_store.read_version())
        previous_version = str(version)
        logger.debug("Current version %s from %s", previous_version, self.version_store.name)

        # Bump
        new_version = str(version.bump(request.bump))
        logger.info("Bumping version %s -> %s", previous_version, new_version)

        # Classify & group
        changes = group_commits(classify_commits(request.commits))
        logger.debug(
            "Grouped commits: %d breaking, %d feat, %d fix, %d other",
            len(changes.breaking),
            len(changes.feat),
            len(changes.fix),
            len(changes.other),
        )

        # Render & merge
        entry = ReleaseEntry(version=new_version, date=self.today(), changes=changes)
        changelog = merge_changelog(self.changelog_store.read(), render_entry(entry))
        release_notes = render_release_notes(entry, request.pr_title, request.pr_number)

        # Persist
        self.version_store.write_version(new_version)
        logger.debug("Wrote version to %s", self.version_store.name)
        self.changelog_store.write(changelog)
        self.notes_writer.write(release_notes)
        self.env_writer.write(self.env_var, new_version)

        return ReleaseResult(
            previous_version=previous_version,
            new_version=new_version,
            entry=entry,
            changelog=changelog,
            release_notes=release_notes,
        )
