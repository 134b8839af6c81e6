"""Tessel - static page composition from reusable HTML components"""

# Re-export the engine
from tessel.lib.compiler import MAX_DEPTH, PageCompiler
from tessel.lib.registry import ComponentRegistry
from tessel.lib.tags import ParsedTag, find_tags, interpolate, parse_tag
from tessel.lib.validation import is_valid_component_name, is_valid_file_name

# Re-export errors
from tessel.lib.errors import (
    CircularReferenceError,
    CompilationError,
    ComponentNotFoundError,
    InvalidNameError,
    MaxDepthExceededError,
    PageNotFoundError,
    ResolutionAbortedError,
    TesselError,
)

from ._version import __version__

__all__ = [
    # engine
    "MAX_DEPTH",
    "PageCompiler",
    "ComponentRegistry",
    "ParsedTag",
    "find_tags",
    "interpolate",
    "parse_tag",
    "is_valid_component_name",
    "is_valid_file_name",
    # errors
    "CircularReferenceError",
    "CompilationError",
    "ComponentNotFoundError",
    "InvalidNameError",
    "MaxDepthExceededError",
    "PageNotFoundError",
    "ResolutionAbortedError",
    "TesselError",
    "__version__",
]
