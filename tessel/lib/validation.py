"""Name and path validation for the component namespace."""

from __future__ import annotations

import re
from pathlib import Path

from .errors import InvalidPathError

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]+")
_FILE_NAME_RE = re.compile(r"[A-Za-z0-9_-]+\.[A-Za-z0-9]+")


def is_valid_component_name(name: object) -> bool:
    """Check a `/`-namespaced component name such as ``ui/inputs/TextInput``.

    Every segment must be non-empty and made of letters, digits, ``_`` or ``-``.
    """
    if not isinstance(name, str) or not name:
        return False

    if "//" in name or name.startswith("/") or name.endswith("/"):
        return False

    return all(_SEGMENT_RE.fullmatch(segment) for segment in name.split("/"))


def is_valid_file_name(name: object) -> bool:
    """Check a bare file name like ``Button.html`` (no directories, no traversal)."""
    if not isinstance(name, str):
        return False

    if "\0" in name or ".." in name:
        return False

    return _FILE_NAME_RE.fullmatch(name) is not None


def sanitize_path(user_path: str | Path, base_dir: str | Path) -> Path:
    """Resolve `user_path` against `base_dir`, refusing anything outside it.

    Raises:
        InvalidPathError: If the resolved path escapes the base directory.
    """
    base = Path(base_dir).resolve()
    full = (base / user_path).resolve()

    if full != base and base not in full.parents:
        raise InvalidPathError(user_path)

    return full
