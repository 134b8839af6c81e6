"""CLI commands"""

from .build import build_command
from .compile import compile_command
from .init import init_command
from .list import list_command
from .watch import watch_command

__all__ = [
    "build_command",
    "compile_command",
    "init_command",
    "list_command",
    "watch_command",
]
