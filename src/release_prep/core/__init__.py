"""Core business logic for release-prep.

This module contains the fundamental building blocks:
- Version parsing and bumping
- Conventional commit classification
- Changelog and release notes rendering
- Release orchestration
"""

from __future__ import annotations

from release_prep.core.changelog import (
    CHANGELOG_PREAMBLE,
    ReleaseEntry,
    find_insertion_point,
    merge_changelog,
    render_entry,
    render_release_notes,
)
from release_prep.core.commits import (
    ChangeGroups,
    ParsedCommit,
    classify_commit,
    classify_commits,
    group_commits,
    parse_commit_batch,
)
from release_prep.core.release import ReleaseOrchestrator, ReleaseRequest, ReleaseResult
from release_prep.core.version import BumpType, Version, parse_version

__all__ = [
    # Changelog
    "CHANGELOG_PREAMBLE",
    # Version
    "BumpType",
    # Commits
    "ChangeGroups",
    "ParsedCommit",
    # Release
    "ReleaseEntry",
    "ReleaseOrchestrator",
    "ReleaseRequest",
    "ReleaseResult",
    "Version",
    "classify_commit",
    "classify_commits",
    "find_insertion_point",
    "group_commits",
    "merge_changelog",
    "parse_commit_batch",
    "parse_version",
    "render_entry",
    "render_release_notes",
]
