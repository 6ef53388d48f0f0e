"""Implementation of the 'prepare' command.

The prepare command bumps the version and writes the changelog, the
release notes and the env file for the current release.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel

from release_prep.config import load_config, resolve_version_file
from release_prep.core.commits import parse_commit_batch
from release_prep.core.release import ReleaseOrchestrator, ReleaseRequest
from release_prep.core.version import BumpType
from release_prep.exceptions import ReleasePrepError
from release_prep.project import (
    ChangelogFile,
    EnvFile,
    MemoryChangelog,
    MemoryEnv,
    MemoryNotes,
    MemoryVersionStore,
    NotesFile,
    version_store_for,
)

if TYPE_CHECKING:
    from rich.console import Console


def run_prepare(
    path: str | None,
    bump_type: str | None,
    commits_json: str | None,
    pr_title: str | None,
    pr_number: str | None,
    dry_run: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the prepare command.

    Args:
        path: Optional path to project directory
        bump_type: major, minor or patch; None uses the configured default
        commits_json: JSON array of commit messages
        pr_title: Title of the merged pull request
        pr_number: Number of the merged pull request
        dry_run: Render everything but write no files
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
        bump = BumpType.from_string(bump_type) if bump_type else config.default_bump
        commits = parse_commit_batch(commits_json)
    except ReleasePrepError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(f"Processing {len(commits)} commits for {bump} release...")

    try:
        version_path = resolve_version_file(config, project_path)
        version_store = version_store_for(version_path)
        changelog_store = ChangelogFile(project_path / config.changelog_path)

        if dry_run:
            orchestrator = ReleaseOrchestrator(
                MemoryVersionStore(version_store.read_version(), name=version_store.name),
                MemoryChangelog(changelog_store.read()),
                MemoryNotes(),
                MemoryEnv(),
                env_var=config.env_var,
            )
        else:
            orchestrator = ReleaseOrchestrator(
                version_store,
                changelog_store,
                NotesFile(project_path / config.release_notes_path),
                EnvFile(project_path / config.env_file, ci_env_var=config.ci_env_var),
                env_var=config.env_var,
            )

        result = orchestrator.run(
            ReleaseRequest(
                bump=bump,
                commits=commits,
                pr_title=pr_title or config.default_pr_title,
                pr_number=pr_number,
            )
        )
    except ReleasePrepError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(f"Current version: [cyan]{result.previous_version}[/]")
    console.print(f"New version: [green]{result.new_version}[/]")

    if dry_run:
        console.print(
            Panel(
                Markdown(result.release_notes),
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        console.print("\n[dim]Run without [cyan]--dry-run[/] to write these changes.[/]")
        return

    console.print(
        Panel(
            f"[green]Release {result.new_version} prepared successfully![/]\n\n"
            "Updated files:\n"
            f"  • {version_path.name}\n"
            f"  • {config.changelog_path}\n"
            f"  • {config.release_notes_path}\n"
            f"  • {config.env_file}",
            title="[green]Release Prepared[/]",
            border_style="green",
        )
    )
