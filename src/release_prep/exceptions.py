"""Exception hierarchy for release-prep.

All errors raised by the library derive from :class:`ReleasePrepError`,
so the CLI can report any failure with a single handler.
"""

from __future__ import annotations

from pathlib import Path


class ReleasePrepError(Exception):
    """Base class for all release-prep errors."""


class FormatError(ReleasePrepError):
    """A version string could not be parsed."""


class InputError(ReleasePrepError):
    """Invalid user input: unknown bump kind or malformed commit batch."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(ReleasePrepError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """pyproject.toml could not be found or read."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


# =============================================================================
# Project files
# =============================================================================


class ProjectError(ReleasePrepError):
    """A project file is missing or malformed."""


class VersionNotFoundError(ProjectError):
    """The version field could not be located in a version file."""


class StorageError(ReleasePrepError):
    """A file could not be read or written.

    Args:
        message: Human readable description
        path: The file involved, if known
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
