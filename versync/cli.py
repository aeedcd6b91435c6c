"""CLI interface for VERSYNC.

Typer application exposing a single command that syncs the version from
package.json into Cargo.toml. Intended to run as a CI step: it prints one
confirmation line on success and exits non-zero on any failure.
"""

from pathlib import Path
from typing import Annotated

import typer

from versync.config.settings import (
    DEFAULT_SOURCE_MANIFEST,
    DEFAULT_TARGET_MANIFEST,
    Settings,
)
from versync.syncer import SyncResult, VersionSyncer
from versync.utils.console import print_error, print_plain, print_warning, show_version
from versync.utils.errors import ExitCode, VersyncError
from versync.utils.logging import log_message, setup_logging

# Create Typer app
app = typer.Typer(
    name="versync",
    help="VERSYNC - Sync the package.json version into Cargo.toml",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.command()
def main(
    source: Annotated[
        Path,
        typer.Option(
            "--source",
            "-s",
            envvar="VERSYNC_SOURCE",
            help="JSON manifest to read the version from",
        ),
    ] = Path(DEFAULT_SOURCE_MANIFEST),
    target: Annotated[
        Path,
        typer.Option(
            "--target",
            "-t",
            envvar="VERSYNC_TARGET",
            help="TOML manifest whose version line is rewritten",
        ),
    ] = Path(DEFAULT_TARGET_MANIFEST),
    directory: Annotated[
        Path,
        typer.Option(
            "--directory",
            "-C",
            help="Resolve relative manifest paths against this directory",
        ),
    ] = Path("."),
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show what would be synced without writing the target",
        ),
    ] = False,
    check: Annotated[
        bool,
        typer.Option(
            "--check",
            help="Fail if the target version differs from the source; never writes",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Copy the version field of SOURCE into the version line of TARGET."""
    setup_logging()

    if dry_run and check:
        print_error("--dry-run and --check cannot be used together")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    settings = Settings(
        source=source,
        target=target,
        directory=directory,
        dry_run=dry_run,
        check=check,
    )

    try:
        _run(settings)
    except VersyncError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e


def _run(settings: Settings) -> SyncResult:
    source_path, target_path = settings.resolve_paths()
    log_message(f"Syncing {source_path} -> {target_path}")
    syncer = VersionSyncer(source_path, target_path)

    if settings.check:
        result = syncer.check()
        print_plain(f"Version {result.version} is in sync with {target_path.name}")
        return result

    result = syncer.sync(dry_run=settings.dry_run)
    if not result.matched:
        print_warning(f"No version line found in {target_path.name}; left unchanged")

    if settings.dry_run:
        print_plain(f"Would sync version {result.version} to {target_path.name}")
    else:
        print_plain(result.message)
    return result


__all__ = ["app", "main"]
