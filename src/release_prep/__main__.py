"""Allow running as ``python -m release_prep``."""

from __future__ import annotations

from release_prep.cli.app import main

if __name__ == "__main__":
    main()
