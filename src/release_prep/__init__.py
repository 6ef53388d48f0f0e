"""release-prep: bump the version, write the changelog and release notes.

Prepares a release from the commits of a merged pull request:
- Version bumping (major.minor.patch)
- Conventional commit classification
- Keep a Changelog style CHANGELOG.md and RELEASE_NOTES.md
"""

from __future__ import annotations

__version__ = "0.1.0"
