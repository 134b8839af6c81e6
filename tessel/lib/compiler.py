"""Page compiler - expands component placeholders recursively.

Algorithm for one blob of text (a page body or a fragment):
1. Discover the unique placeholder tags (left to right).
2. For each tag: cycle check, depth check, registry lookup, property
   interpolation, recursive expansion of nested tags, then replace every
   occurrence of the tag.
3. Missing components are collected and reported together; cycles and
   depth overruns abort immediately.

Resolution state (depth and the path of components being expanded) is passed
down explicitly. Each branch gets its own copy of the path, so two sibling
references to the same component are not a cycle.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .errors import (
    CircularReferenceError,
    CompilationError,
    ComponentNotFoundError,
    MaxDepthExceededError,
    PageNotFoundError,
    ResolutionAbortedError,
)
from .registry import ComponentRegistry
from .tags import find_tags, has_tags, interpolate, parse_tag

log = logging.getLogger(__name__)

MAX_DEPTH = 10


class PageCompiler:
    """Compiles pages against a component registry."""

    def __init__(self, registry: ComponentRegistry, max_depth: int = MAX_DEPTH):
        self.registry = registry
        self.max_depth = max_depth
        self.pages: dict[str, str] = {}

    def add_page(self, name: str, body: str) -> None:
        """Make a page available to `compile` by name."""
        self.pages[name] = body
        log.debug(f"Loaded page: {name}")

    def get_page_names(self) -> list[str]:
        return list(self.pages)

    def page_count(self) -> int:
        return len(self.pages)

    def clear(self) -> None:
        self.pages.clear()

    def compile(self, page_name: Optional[str], page_body: Optional[str] = None) -> str:
        """Fully resolve a page.

        If `page_body` is omitted the page must have been added with `add_page`.

        Raises:
            PageNotFoundError: No body given and no page loaded under that name.
            CompilationError: Missing components (all of them, in one error).
            CircularReferenceError: A component includes itself on one path.
            MaxDepthExceededError: Components nest deeper than `max_depth`.
        """
        if page_body is None:
            if page_name is None or page_name not in self.pages:
                raise PageNotFoundError(page_name)
            page_body = self.pages[page_name]

        return self.resolve_content(page_body, page_name or "", depth=0, visited=())

    def resolve_content(
        self,
        content: str,
        context_name: str,
        depth: int = 0,
        visited: Iterable[str] = (),
    ) -> str:
        """Expand every placeholder in `content`.

        Args:
            content: Text to expand.
            context_name: Page or component that owns `content`, for messages.
            depth: Nesting level of `content`; the page itself is 0.
            visited: Components being expanded on the current path, outermost first.
        """
        tags = find_tags(content)
        if not tags:
            return content

        path = tuple(visited)
        errors: list[str] = []

        for tag in tags:
            parsed = parse_tag(tag)
            name = parsed.name

            if name in path:
                raise CircularReferenceError(context_name, [*path, name])

            # tags found at `depth` resolve to components nested at depth + 1
            if depth >= self.max_depth:
                raise MaxDepthExceededError(context_name, self.max_depth)

            try:
                fragment = self.registry.get(name)
            except ComponentNotFoundError as exc:
                errors.append(self._missing_message(exc, context_name, depth))
                continue

            if parsed.props:
                fragment = interpolate(fragment, parsed.props)

            if has_tags(fragment):
                try:
                    fragment = self.resolve_content(
                        fragment, name, depth + 1, [*path, name]
                    )
                except ResolutionAbortedError:
                    raise
                except CompilationError as exc:
                    errors.extend(exc.errors)
                    continue

            log.debug(f'Resolved component "{name}" in "{context_name}" (depth {depth})')
            content = content.replace(tag, fragment)

        if errors:
            raise CompilationError(context_name, errors)

        if has_tags(content):
            # stray braces next to a substituted tag can form a new one
            return self.resolve_content(content, context_name, depth + 1, path)

        return content

    @staticmethod
    def _missing_message(
        exc: ComponentNotFoundError, context_name: str, depth: int
    ) -> str:
        if depth == 0:
            return exc.message
        return f'{exc.message} (in "{context_name}")'
