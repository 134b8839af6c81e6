"""Build command - compile every page into the output directory"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tessel.lib.errors import handle_error, TesselError
from tessel.lib.site import build_site

from .utils import console, load_project
from .watch import watch_project


def build_command(config_path: Optional[Path] = None, watch: bool = False) -> None:
    """Build the site once, then keep watching if requested."""
    try:
        config, root = load_project(config_path)
        result = build_site(config, root)
    except TesselError as e:
        handle_error(e)

    console.print(
        f"[green]✓[/green] Built {len(result.written)} pages "
        f"from {len(result.components)} components"
    )

    if watch or config.watch:
        watch_project(config, root)
