"""Tessel CLI Main Entry Point

Tessel - static pages stitched together from reusable HTML components.
Pages reference components with {{name}} tags; components can nest and take
properties ({{ui/Button text="Go"}} fills ${text} in the fragment).

Usage:
    tessel build                   # Compile all pages into the output directory
    tessel build -w                # Build, then rebuild on changes
    tessel watch                   # Same as build -w
    tessel compile index           # Print one compiled page
    tessel list                    # Show components and pages
    tessel init                    # Scaffold tessel.yaml and src/ directories
    tessel --version               # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ._version import __version__
from .commands import (
    build_command,
    compile_command,
    init_command,
    list_command,
    watch_command,
)
from .commands.utils import setup_logging

typer_app = typer.Typer(no_args_is_help=True, add_completion=False)

_CONFIG_HELP = "Path to tessel.yaml (default: look in the current directory)."


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tessel {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "-V",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug output."),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only show errors."),
) -> None:
    """Compose static HTML pages from reusable components."""
    setup_logging(verbose=verbose, quiet=quiet)


@typer_app.command()
def build(
    config: Optional[Path] = typer.Option(None, "-c", "--config", help=_CONFIG_HELP),
    watch: bool = typer.Option(False, "-w", "--watch", help="Rebuild on changes."),
) -> None:
    """Compile every page into the output directory."""
    build_command(config, watch=watch)


@typer_app.command()
def watch(
    config: Optional[Path] = typer.Option(None, "-c", "--config", help=_CONFIG_HELP),
) -> None:
    """Build, then rebuild whenever a component or page changes."""
    watch_command(config)


@typer_app.command("compile")
def compile_(
    page: str = typer.Argument(..., help="Page name without extension."),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help=_CONFIG_HELP),
) -> None:
    """Print one compiled page to stdout."""
    compile_command(page, config)


@typer_app.command("list")
def list_(
    config: Optional[Path] = typer.Option(None, "-c", "--config", help=_CONFIG_HELP),
) -> None:
    """List components and pages."""
    list_command(config)


@typer_app.command()
def init(
    force: bool = typer.Option(False, "-f", "--force", help="Overwrite tessel.yaml."),
) -> None:
    """Scaffold a new project in the current directory."""
    init_command(force=force)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
