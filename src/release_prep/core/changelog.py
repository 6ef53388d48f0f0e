"""Changelog and release notes rendering.

Sections follow the Keep a Changelog layout::

    ## [1.1.0] - 2026-10-19

    ### ✨ Features

    - **api**: add endpoint

Everything here is a pure string transformation; reading and writing
files is left to :mod:`release_prep.project.files`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from release_prep.core.commits import ChangeGroups, ParsedCommit

CHANGELOG_PREAMBLE = (
    "# Changelog\n"
    "\n"
    "All notable changes to this project will be documented in this file.\n"
    "\n"
    "The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/),\n"
    "and this project adheres to "
    "[Semantic Versioning](https://semver.org/spec/v2.0.0.html).\n"
    "\n"
)

# Rendered in this order
CATEGORY_LABELS = {
    "breaking": "### ⚠ BREAKING CHANGES",
    "feat": "### ✨ Features",
    "fix": "### 🐛 Bug Fixes",
    "other": "### 📝 Other Changes",
}

VERSION_HEADER_PATTERN = re.compile(r"^## \[", re.MULTILINE)
ENTRY_HEADER_PATTERN = re.compile(r"^## \[.*?\] - .*?\n\n")

DEFAULT_PR_TITLE = "Merged changes"


@dataclass(frozen=True, slots=True)
class ReleaseEntry:
    """One release worth of classified changes."""

    version: str
    date: date
    changes: ChangeGroups


def format_commit(pc: ParsedCommit) -> str:
    """Format a commit as a changelog bullet."""
    scope = f"**{pc.scope}**: " if pc.scope else ""
    return f"- {scope}{pc.description}"


def render_entry(entry: ReleaseEntry) -> str:
    """Render a release entry as a Markdown changelog section.

    Empty categories are omitted. The result ends with a blank line so it
    can be placed directly in front of an older section.

    Args:
        entry: Release to render

    Returns:
        Markdown text starting with ``## [version] - date``
    """
    lines = [f"## [{entry.version}] - {entry.date.isoformat()}", ""]

    for category, label in CATEGORY_LABELS.items():
        commits = getattr(entry.changes, category)
        if not commits:
            continue
        lines.append(label)
        lines.append("")
        lines.extend(format_commit(pc) for pc in commits)
        lines.append("")

    return "\n".join(lines) + "\n"


def render_release_notes(
    entry: ReleaseEntry,
    pr_title: str = DEFAULT_PR_TITLE,
    pr_number: str | int | None = None,
) -> str:
    """Render standalone release notes for a GitHub release body.

    Args:
        entry: Release to render
        pr_title: Title of the merged pull request
        pr_number: Number of the merged pull request, if known

    Returns:
        Markdown release notes
    """
    pr_ref = f" (#{pr_number})" if pr_number not in (None, "") else ""
    body = ENTRY_HEADER_PATTERN.sub("", render_entry(entry), count=1)

    return f"# Release {entry.version}\n\n**Merged PR**: {pr_title}{pr_ref}\n\n{body}"


def find_insertion_point(text: str) -> int | None:
    """Find where a new section belongs in an existing changelog.

    Returns:
        Offset of the first line starting with ``## [``, or None if the
        changelog has no version sections yet. 0 is a valid offset.
    """
    match = VERSION_HEADER_PATTERN.search(text)
    if match is None:
        return None
    return match.start()


def merge_changelog(existing: str, section: str) -> str:
    """Merge a newly rendered section into existing changelog content.

    The new section goes in front of the newest existing release, so
    earlier entries are never overwritten.

    Args:
        existing: Current CHANGELOG.md content, empty if the file is new
        section: Output of :func:`render_entry`

    Returns:
        Updated changelog content
    """
    if not existing.strip():
        return CHANGELOG_PREAMBLE + section

    offset = find_insertion_point(existing)
    if offset is None:
        if existing.endswith("\n\n"):
            separator = ""
        elif existing.endswith("\n"):
            separator = "\n"
        else:
            separator = "\n\n"
        return existing + separator + section

    return existing[:offset] + section + existing[offset:]
