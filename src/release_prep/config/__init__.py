"""Configuration management for release-prep."""

from __future__ import annotations

from release_prep.config.loader import load_config, resolve_version_file
from release_prep.config.models import ReleasePrepConfig

__all__ = [
    "ReleasePrepConfig",
    "load_config",
    "resolve_version_file",
]
