"""Compile command - print a single compiled page"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from tessel.lib.errors import handle_error, TesselError
from tessel.lib.site import prepare_site

from .utils import load_project


def compile_command(page: str, config_path: Optional[Path] = None) -> None:
    """Compile `page` and write the result to stdout."""
    try:
        config, root = load_project(config_path)
        _, compiler = prepare_site(config, root)
        output = compiler.compile(page)
    except TesselError as e:
        handle_error(e)

    typer.echo(output, nl=False)
