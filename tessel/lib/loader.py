"""Load components and pages from disk into the registry and compiler."""

from __future__ import annotations

import logging
from pathlib import Path

from .compiler import PageCompiler
from .files import list_dir, read_text
from .registry import ComponentRegistry

log = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html"


def component_name_for(path: Path, components_dir: Path) -> str:
    """Derive the namespaced name of a component file.

    Example:
        src/components/ui/inputs/TextInput.html -> "ui/inputs/TextInput"
    """
    rel = path.relative_to(components_dir).with_suffix("")
    return rel.as_posix()


def _iter_templates(directory: Path, recursive: bool) -> list[Path]:
    found: list[Path] = []
    for entry in list_dir(directory):
        if entry.is_dir():
            if recursive:
                found.extend(_iter_templates(entry, recursive))
        elif entry.suffix == TEMPLATE_SUFFIX:
            found.append(entry)
    return found


def load_components(registry: ComponentRegistry, components_dir: Path) -> list[str]:
    """Register every .html file below `components_dir`. Returns the names."""
    names = []
    for path in _iter_templates(components_dir, recursive=True):
        name = component_name_for(path, components_dir)
        names.append(registry.register(name, read_text(path)))
    log.debug(f"Registered {len(names)} components from {components_dir}")
    return names


def load_pages(compiler: PageCompiler, pages_dir: Path) -> list[str]:
    """Add every top-level .html file in `pages_dir` as a page. Returns the names."""
    names = []
    for path in _iter_templates(pages_dir, recursive=False):
        compiler.add_page(path.stem, read_text(path))
        names.append(path.stem)
    log.debug(f"Loaded {len(names)} pages from {pages_dir}")
    return names
