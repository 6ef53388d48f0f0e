"""Configuration models for release-prep.

Configuration lives in the ``[tool.release-prep]`` table of
pyproject.toml. Every field has a default, so the table is optional::

    [tool.release-prep]
    changelog_path = "docs/CHANGELOG.md"
    default_bump = "minor"
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from release_prep.core.version import BumpType


class ReleasePrepConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    version_file: Path | None = Field(
        default=None,
        description="File holding the version. Auto-detects pyproject.toml, then package.json.",
    )
    changelog_path: Path = Field(default=Path("CHANGELOG.md"))
    release_notes_path: Path = Field(default=Path("RELEASE_NOTES.md"))
    env_file: Path = Field(default=Path(".env"))
    env_var: str = Field(default="NEW_VERSION", min_length=1)
    ci_env_var: str | None = Field(
        default="GITHUB_ENV",
        description="Environment variable naming a CI env file to append to.",
    )
    default_bump: BumpType = BumpType.PATCH
    default_pr_title: str = "Merged changes"

    @field_validator("env_var")
    @classmethod
    def _check_env_var(cls, value: str) -> str:
        if "=" in value or any(ch.isspace() for ch in value):
            raise ValueError("env_var must not contain '=' or whitespace")
        return value
