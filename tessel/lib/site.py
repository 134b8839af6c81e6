"""Full site build: register components, compile pages, copy assets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .compiler import PageCompiler
from .config import TesselConfig, resolve_dir
from .files import copy_assets, ensure_dir, write_text
from .loader import TEMPLATE_SUFFIX, load_components, load_pages
from .registry import ComponentRegistry

log = logging.getLogger(__name__)


class BuildResult(BaseModel):
    """Summary of one build."""

    components: list[str] = Field(default_factory=list)
    pages: list[str] = Field(default_factory=list)
    written: list[Path] = Field(default_factory=list)
    assets_copied: int = 0


def prepare_site(
    config: TesselConfig, root: Path
) -> tuple[ComponentRegistry, PageCompiler]:
    """Load all components and pages; nothing is compiled or written."""
    components_dir = resolve_dir(config, "components", root)
    pages_dir = resolve_dir(config, "pages", root)

    if not components_dir.exists():
        ensure_dir(components_dir)
        ensure_dir(pages_dir)
        log.info("No components directory found, creating new ones")

    registry = ComponentRegistry()
    compiler = PageCompiler(registry)

    load_components(registry, components_dir)
    log.info(f"Found {registry.count()} components in {components_dir}")

    load_pages(compiler, pages_dir)
    log.info(f"Found {compiler.page_count()} pages in {pages_dir}")

    return registry, compiler


def build_site(config: TesselConfig, root: Optional[Path] = None) -> BuildResult:
    """Build the whole site into the output directory.

    All pages are compiled before any file is written, so a compilation
    error leaves the previous output untouched.
    """
    root = root or Path.cwd()
    registry, compiler = prepare_site(config, root)
    output_dir = ensure_dir(resolve_dir(config, "output", root))

    log.info("Compiling pages...")
    compiled = {name: compiler.compile(name) for name in compiler.get_page_names()}

    result = BuildResult(components=registry.get_all(), pages=list(compiled))
    for name, content in compiled.items():
        out_path = output_dir / f"{name}{TEMPLATE_SUFFIX}"
        write_text(out_path, content)
        result.written.append(out_path)
        log.debug(f"Wrote compiled page: {out_path.name}")

    assets_dir = resolve_dir(config, "assets", root)
    if assets_dir.is_dir():
        log.info("Copying assets...")
        copied = copy_assets(assets_dir, output_dir)
        result.assets_copied = copied.copied
        if copied.copied:
            log.info(f"Copied {copied.copied} asset files")

    return result
