"""File-system helpers that raise tessel errors instead of bare OSError."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from .errors import (
    DirectoryCreateError,
    DirectoryReadError,
    FileReadError,
    FileWriteError,
    InvalidPathError,
)
from .validation import is_valid_file_name, sanitize_path

ASSET_EXTENSIONS = frozenset(
    {
        # Stylesheets
        "css", "scss", "sass", "less",
        # JavaScript
        "js", "mjs", "cjs",
        # Images
        "png", "jpg", "jpeg", "gif", "svg", "webp", "ico", "avif",
        # Fonts
        "woff", "woff2", "ttf", "otf", "eot",
        # Other
        "json", "xml", "txt", "pdf", "map",
    }
)


@dataclass
class CopyResult:
    """Outcome of an asset copy."""

    copied: int = 0
    files: list[str] = field(default_factory=list)


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, e) from e


def write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(path, e) from e


def list_dir(path: Path) -> list[Path]:
    """Directory entries sorted by name."""
    try:
        return sorted(path.iterdir())
    except OSError as e:
        raise DirectoryReadError(path, e) from e


def ensure_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(path, e) from e
    return path


def copy_file(src: Path, dest: Path) -> None:
    try:
        shutil.copy2(src, dest)
    except OSError as e:
        raise FileWriteError(dest, e) from e


def read_file_safe(file_name: str, base_dir: Path) -> str:
    """Read a bare file name from `base_dir`, refusing traversal."""
    if not is_valid_file_name(file_name):
        raise InvalidPathError(file_name)
    return read_text(sanitize_path(file_name, base_dir))


def get_extension(path: Path) -> str:
    """Lowercase extension without the dot."""
    return path.suffix[1:].lower()


def is_asset_file(path: Path) -> bool:
    return get_extension(path) in ASSET_EXTENSIONS


def copy_assets(src_dir: Path, dest_dir: Path) -> CopyResult:
    """Recursively copy everything under `src_dir` into `dest_dir`.

    A missing source directory copies nothing.
    """
    result = CopyResult()
    if not src_dir.is_dir():
        return result

    _copy_tree(src_dir, dest_dir, Path(), result)
    return result


def _copy_tree(src_root: Path, dest_root: Path, rel: Path, result: CopyResult) -> None:
    ensure_dir(dest_root / rel)
    for entry in list_dir(src_root / rel):
        rel_entry = rel / entry.name
        if entry.is_dir():
            _copy_tree(src_root, dest_root, rel_entry, result)
        else:
            copy_file(entry, dest_root / rel_entry)
            result.copied += 1
            result.files.append(rel_entry.as_posix())
