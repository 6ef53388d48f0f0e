"""Command-line interface for release-prep."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from release_prep import __version__
from release_prep.cli.commands.prepare import run_prepare

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Send release_prep logs to stderr through rich."""
    package_logger = logging.getLogger("release_prep")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=err_console, show_path=False, log_time_format="[%X]")
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="release-prep")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Bump the version and write the changelog for a merged pull request."""
    configure_logging(verbose)


@cli.command("prepare")
@click.option(
    "--bump-type",
    default=None,
    metavar="[major|minor|patch]",
    help="Version component to bump. Defaults to the configured default_bump (patch).",
)
@click.option("--commits", default=None, help="JSON array of commit messages.")
@click.option("--pr-title", default=None, help="Title of the merged pull request.")
@click.option("--pr-number", default=None, help="Number of the merged pull request.")
@click.option(
    "--path",
    default=None,
    type=click.Path(file_okay=False),
    help="Project directory. Defaults to the current directory.",
)
@click.option("--dry-run", is_flag=True, help="Show the release notes without writing files.")
def prepare(
    bump_type: str | None,
    commits: str | None,
    pr_title: str | None,
    pr_number: str | None,
    path: str | None,
    dry_run: bool,
) -> None:
    """Prepare a release: version, CHANGELOG.md, RELEASE_NOTES.md and .env."""
    run_prepare(
        path=path,
        bump_type=bump_type,
        commits_json=commits,
        pr_title=pr_title,
        pr_number=pr_number,
        dry_run=dry_run,
        console=console,
        err_console=err_console,
    )


def main() -> None:
    cli()
