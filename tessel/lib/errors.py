"""Shared error handling for tessel."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Sequence

import typer


class TesselError(Exception):
    """Base exception for tessel operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class InvalidNameError(TesselError):
    """Raised when a component name fails validation."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Invalid component name: {name!r}")


class InvalidPathError(TesselError):
    """Raised when a path escapes its base directory or has a bad file name."""

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(f"Invalid path: {path}")


class ComponentNotFoundError(TesselError):
    """Raised when a component is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Component "{name}" not found')


class PageNotFoundError(TesselError):
    """Raised when compiling a page that was never loaded."""

    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f'Page "{name}" not found')


class CompilationError(TesselError):
    """Raised when a page or fragment cannot be fully resolved.

    Carries the page/context name and every sub-message collected during
    the compile pass.
    """

    def __init__(self, context_name: str, errors: Sequence[str]) -> None:
        self.context_name = context_name
        self.errors = list(errors)
        error_list = "\n  - ".join(self.errors)
        super().__init__(f'Failed to compile "{context_name}":\n  - {error_list}')


class ResolutionAbortedError(CompilationError):
    """Fatal compilation failure; resolution stops at the first one."""


class CircularReferenceError(ResolutionAbortedError):
    """Raised when a component references itself on the active path."""

    def __init__(self, context_name: str, path: Sequence[str]) -> None:
        self.path = list(path)
        super().__init__(
            context_name,
            [f"Circular component reference: {' -> '.join(self.path)}"],
        )


class MaxDepthExceededError(ResolutionAbortedError):
    """Raised when components nest deeper than the allowed maximum."""

    def __init__(self, context_name: str, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            context_name,
            [f'Maximum nesting depth ({max_depth}) exceeded in "{context_name}"'],
        )


class ConfigError(TesselError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=2)


class FileSystemError(TesselError):
    """Base class for wrapped I/O and decoding failures."""

    action = "access"
    kind = "file"

    def __init__(self, path: str | Path, original: Exception) -> None:
        self.path = path
        self.original = original
        reason = getattr(original, "strerror", None) or original
        super().__init__(f'Failed to {self.action} {self.kind} "{path}": {reason}')


class FileReadError(FileSystemError):
    action = "read"


class FileWriteError(FileSystemError):
    action = "write"


class DirectoryReadError(FileSystemError):
    action = "read"
    kind = "directory"


class DirectoryCreateError(FileSystemError):
    action = "create"
    kind = "directory"


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on tessel errors."""
    if isinstance(error, TesselError):
        exit_with_error(error.message, error.exit_code)
    else:
        # Unexpected error
        typer.echo(f"Unexpected error: {error}", err=True)
        sys.exit(1)
