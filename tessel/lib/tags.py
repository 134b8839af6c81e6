"""Placeholder tag parsing and property interpolation.

Pages and fragments reference components with ``{{name}}`` tags, optionally
passing properties::

    {{ui/Button text="Click me" size=3 disabled=false}}

Fragments consume properties through ``${key}`` tokens. Deliberately minimal:
no expressions, no defaults, no filters.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping, Union

PropValue = Union[str, int, float, bool]

# {{name}} or {{name key=value ...}}; names may be namespaced with '/'
TAG_RE = re.compile(r"\{\{[A-Za-z0-9_/-]+(?:\s+[^{}]*)?\}\}")

# key="double quoted" | key='single quoted' | key=bareword
PROP_RE = re.compile(r"""(\w+)=(?:"([^"]*)"|'([^']*)'|([^\s"']+))""", re.ASCII)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True)
class ParsedTag:
    """A placeholder tag split into component name and properties."""

    name: str
    props: dict[str, PropValue] = field(default_factory=dict)


def find_tags(text: str) -> list[str]:
    """Return the unique placeholder tags in `text`, in order of first appearance."""
    return list(dict.fromkeys(TAG_RE.findall(text)))


def has_tags(text: str) -> bool:
    """Check whether `text` contains at least one placeholder tag."""
    return TAG_RE.search(text) is not None


def _inner(tag: str) -> str:
    if tag.startswith("{{"):
        tag = tag[2:]
    if tag.endswith("}}"):
        tag = tag[:-2]
    return tag.strip()


def parse_tag(tag: str) -> ParsedTag:
    """Split a tag like ``{{button text="Go"}}`` into name and props.

    Example:
        >>> parse_tag('{{button text="Go" primary=true}}')
        ParsedTag(name='button', props={'text': 'Go', 'primary': True})
    """
    parts = _inner(tag).split(None, 1)
    if not parts:
        return ParsedTag(name="")
    if len(parts) == 1:
        return ParsedTag(name=parts[0])
    return ParsedTag(name=parts[0], props=parse_props(parts[1]))


def parse_props(text: str) -> dict[str, PropValue]:
    """Parse ``key=value`` pairs; text between pairs is ignored."""
    props: dict[str, PropValue] = {}
    for match in PROP_RE.finditer(text):
        key, double, single, bare = match.groups()
        if double is not None:
            raw = double
        elif single is not None:
            raw = single
        else:
            raw = bare
        props[key] = coerce_value(raw)
    return props


def coerce_value(raw: str) -> PropValue:
    """Coerce a raw property value: booleans, then numbers, else the string."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    if _INT_RE.fullmatch(raw):
        return int(raw)
    if _NUMBER_RE.fullmatch(raw):
        return float(raw)
    return raw


def render_value(value: Any) -> str:
    """Render a property value the way it appears in output text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _render_float(value)
    return str(value)


def _render_float(value: float) -> str:
    # JavaScript Number#toString: fixed notation for 1e-6 <= |x| < 1e21
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def interpolate(text: str, props: Mapping[str, Any]) -> str:
    """Replace every ``${key}`` in `text` with the rendered property value.

    Tokens for keys not in `props` are left untouched. Substituted values are
    never scanned again, so a value containing ``${other}`` stays literal.
    """
    if not props:
        return text

    keys = sorted(props, key=len, reverse=True)
    pattern = re.compile(r"\$\{(" + "|".join(re.escape(k) for k in keys) + r")\}")

    def replace(match: re.Match[str]) -> str:
        return render_value(props[match.group(1)])

    return pattern.sub(replace, text)


def has_props(tag: str) -> bool:
    """Check whether a tag carries a properties clause."""
    inner = _inner(tag)
    return any(c.isspace() for c in inner) and "=" in inner
