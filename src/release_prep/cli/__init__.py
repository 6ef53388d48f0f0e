"""Command-line interface for release-prep."""

from __future__ import annotations

from release_prep.cli.app import cli, main

__all__ = ["cli", "main"]
