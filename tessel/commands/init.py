"""Init command for tessel."""

from __future__ import annotations

from pathlib import Path

import typer

from tessel.lib.config import CONFIG_FILE_NAMES, TesselConfig, resolve_dir, save_config
from tessel.lib.errors import TesselError, exit_with_error, handle_error
from tessel.lib.files import ensure_dir, write_text

_EXAMPLE_COMPONENT = '<button class="btn">${text}</button>\n'

_EXAMPLE_PAGE = """<!DOCTYPE html>
<html>
<body>
  {{ui/Button text="Hello"}}
</body>
</html>
"""


def scaffold(root: Path) -> Path:
    """Write tessel.yaml, the source directories and a starter page."""
    config = TesselConfig()
    config_path = root / CONFIG_FILE_NAMES[0]
    save_config(config, config_path)

    components_dir = ensure_dir(resolve_dir(config, "components", root))
    pages_dir = ensure_dir(resolve_dir(config, "pages", root))
    ensure_dir(resolve_dir(config, "assets", root))

    button = components_dir / "ui" / "Button.html"
    if not button.exists():
        ensure_dir(button.parent)
        write_text(button, _EXAMPLE_COMPONENT)

    index = pages_dir / "index.html"
    if not index.exists():
        write_text(index, _EXAMPLE_PAGE)

    return config_path


def init_command(force: bool = False, cwd: Path | None = None) -> None:
    """Initialize a tessel project in the current directory."""
    root = (cwd or Path.cwd()).resolve()
    config_path = root / CONFIG_FILE_NAMES[0]

    if config_path.exists() and not force:
        exit_with_error(f"{config_path.name} already exists (use --force to overwrite)", 1)

    try:
        scaffold(root)
    except TesselError as e:
        handle_error(e)

    typer.echo("Initialized tessel in current directory")
