"""In-memory component registry.

Maps validated component names to fragment text. The namespace is flat:
``ui/Button`` is just a name with structure, not a nested mapping.

The registry is owned by the caller and passed to the compiler. Register
everything first, then compile; it is not meant for concurrent mutation.
"""

from __future__ import annotations

import logging

from .errors import ComponentNotFoundError, InvalidNameError
from .validation import is_valid_component_name

log = logging.getLogger(__name__)


class ComponentRegistry:
    """Stores named fragments for placeholder resolution."""

    def __init__(self) -> None:
        self._components: dict[str, str] = {}

    def register(self, name: str, content: str) -> str:
        """Register `content` under `name`, overriding any previous value.

        Raises:
            InvalidNameError: If `name` is not a valid component name.
        """
        if not is_valid_component_name(name):
            raise InvalidNameError(name)

        if name in self._components:
            log.warning(f'Component "{name}" already exists, overriding')

        self._components[name] = content
        log.debug(f"Registered component: {name}")
        return name

    def get(self, name: str) -> str:
        """Return the fragment text for `name`."""
        try:
            return self._components[name]
        except (KeyError, TypeError):
            raise ComponentNotFoundError(name) from None

    def has(self, name: object) -> bool:
        return isinstance(name, str) and name in self._components

    def get_all(self) -> list[str]:
        """Names of all registered components."""
        return list(self._components)

    def count(self) -> int:
        return len(self._components)

    def clear(self) -> None:
        self._components.clear()

    def __contains__(self, name: object) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return self.count()
