"""Watch command - rebuild whenever components or pages change"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from tessel.lib.config import TesselConfig, resolve_dir
from tessel.lib.errors import handle_error, TesselError
from tessel.lib.site import build_site
from tessel.lib.watcher import FileChange, Watcher

from .utils import load_project

log = logging.getLogger(__name__)


def watch_project(config: TesselConfig, root: Path) -> None:
    """Poll the component and page directories and rebuild on change."""

    def rebuild(changes: list[FileChange]) -> None:
        build_site(config, root)

    watcher = Watcher(
        [resolve_dir(config, "components", root), resolve_dir(config, "pages", root)],
        on_change=rebuild,
        interval=config.watch_interval,
    )
    watcher.run()


def watch_command(config_path: Optional[Path] = None) -> None:
    """Build once, then rebuild on every change."""
    try:
        config, root = load_project(config_path)
    except TesselError as e:
        handle_error(e)

    try:
        build_site(config, root)
    except TesselError as e:
        # keep watching; the next change may fix it
        log.error(f"Build failed: {e.message}")

    watch_project(config, root)
