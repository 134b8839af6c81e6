"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from tessel.lib.config import TesselConfig, find_config_file, load_config

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for the tessel CLI.

    Log levels:
    - Normal: INFO - build progress
    - Verbose (-v): DEBUG - every registered component and resolved tag
    - Quiet (-q): only errors
    - Debug (TESSEL_DEBUG=1): DEBUG with source locations
    """
    debug = bool(os.environ.get("TESSEL_DEBUG"))
    if debug or verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.INFO

    handler = RichHandler(
        console=err_console,
        show_time=verbose or debug,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    tessel_logger = logging.getLogger("tessel")
    tessel_logger.setLevel(level)
    tessel_logger.handlers = [handler]
    tessel_logger.propagate = False


def load_project(config_path: Optional[Path] = None) -> tuple[TesselConfig, Path]:
    """Load config and return it with the project root it is relative to."""
    if config_path is None:
        config_path = find_config_file()

    config = load_config(config_path)
    root = config_path.resolve().parent if config_path else Path.cwd()

    # --quiet and --verbose on the command line take precedence
    tessel_logger = logging.getLogger("tessel")
    if config.verbose and tessel_logger.level in (logging.NOTSET, logging.INFO):
        tessel_logger.setLevel(logging.DEBUG)

    return config, root
