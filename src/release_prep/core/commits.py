"""Conventional commit classification.

Commit messages come from a single-line PR merge workflow, so only the
``type(scope)!: description`` header is parsed. Footers are not; the
only body marker recognised is the ``BREAKING CHANGE`` text.

Reference: https://www.conventionalcommits.org/
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from release_prep.exceptions import InputError

if TYPE_CHECKING:
    from collections.abc import Iterable

# Matched against every line; the first matching line is the header.
CONVENTIONAL_PATTERN = re.compile(
    r"^(?P<type>\w+)(?:\((?P<scope>[^)]+)\))?!?:\s*(?P<description>.+)$",
    re.MULTILINE,
)

BREAKING_MARKERS = ("BREAKING CHANGE", "!:")

OTHER_TYPE = "other"


@dataclass(frozen=True, slots=True)
class ParsedCommit:
    """A commit message broken down into its conventional parts.

    Attributes:
        type: Lowercased commit type, "other" for non-conventional messages
        scope: Optional scope from ``type(scope):``
        description: Header description, or the first line of the message
        breaking: Whether the commit is an incompatible change
        original: The raw message
    """

    type: str
    scope: str | None
    description: str
    breaking: bool
    original: str


@dataclass(frozen=True, slots=True)
class ChangeGroups:
    """Classified commits bucketed by changelog category."""

    breaking: tuple[ParsedCommit, ...] = ()
    feat: tuple[ParsedCommit, ...] = ()
    fix: tuple[ParsedCommit, ...] = ()
    other: tuple[ParsedCommit, ...] = ()

    def __len__(self) -> int:
        return len(self.breaking) + len(self.feat) + len(self.fix) + len(self.other)


def classify_commit(message: str) -> ParsedCommit:
    """Classify a single commit message.

    Never fails: messages that are not conventional commits are
    classified as type "other" with their first line as description.

    Args:
        message: Raw commit message, possibly multi-line

    Returns:
        ParsedCommit for the message
    """
    match = CONVENTIONAL_PATTERN.search(message)
    if match:
        return ParsedCommit(
            type=match.group("type").lower(),
            scope=match.group("scope"),
            description=match.group("description").strip(),
            breaking=any(marker in message for marker in BREAKING_MARKERS),
            original=message,
        )

    first_line = message.split("\n", 1)[0]
    return ParsedCommit(
        type=OTHER_TYPE,
        scope=None,
        description=first_line.strip(),
        breaking=False,
        original=message,
    )


def classify_commits(messages: Iterable[str]) -> list[ParsedCommit]:
    """Classify commit messages, keeping their order."""
    return [classify_commit(message) for message in messages]


def group_commits(commits: Iterable[ParsedCommit]) -> ChangeGroups:
    """Bucket commits into breaking, feat, fix and other.

    Every commit lands in exactly one bucket. Breaking commits go to the
    breaking bucket regardless of their type.
    """
    buckets: dict[str, list[ParsedCommit]] = {
        "breaking": [],
        "feat": [],
        "fix": [],
        "other": [],
    }
    for pc in commits:
        if pc.breaking:
            buckets["breaking"].append(pc)
        elif pc.type in ("feat", "fix"):
            buckets[pc.type].append(pc)
        else:
            buckets["other"].append(pc)

    return ChangeGroups(**{name: tuple(items) for name, items in buckets.items()})


def parse_commit_batch(payload: str | None) -> list[str]:
    """Decode the JSON array of commit messages passed on the command line.

    Args:
        payload: JSON text such as ``'["feat: x", "fix: y"]'``

    Returns:
        List of commit messages; empty when payload is None or blank

    Raises:
        InputError: If the payload is not a JSON array of strings
    """
    if payload is None or not payload.strip():
        return []

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise InputError(f"Failed to parse commits JSON: {e}") from e

    if not isinstance(data, list):
        raise InputError(f"Commits JSON must be an array, got {type(data).__name__}")

    for index, item in enumerate(data):
        if not isinstance(item, str):
            raise InputError(
                f"Commits JSON item {index} must be a string, got {type(item).__name__}"
            )

    return data
