"""List command - show registered components and pages"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.table import Table

from tessel.lib.errors import handle_error, TesselError
from tessel.lib.site import prepare_site
from tessel.lib.tags import find_tags, parse_tag

from .utils import console, load_project


def list_command(config_path: Optional[Path] = None) -> None:
    """List components and pages with the components each one references."""
    try:
        config, root = load_project(config_path)
        registry, compiler = prepare_site(config, root)
    except TesselError as e:
        handle_error(e)

    if not registry.count() and not compiler.page_count():
        console.print("[yellow]No components or pages found[/yellow]")
        return

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("References")

    def references(text: str) -> str:
        names = dict.fromkeys(parse_tag(tag).name for tag in find_tags(text))
        return ", ".join(names) or "[dim]-[/dim]"

    for name in sorted(registry.get_all()):
        table.add_row(name, "[magenta]component[/magenta]", references(registry.get(name)))

    for name in sorted(compiler.get_page_names()):
        table.add_row(name, "[green]page[/green]", references(compiler.pages[name]))

    console.print(table)
