"""
Name-to-constructor registry.

Stands in for dynamic class loading: types are looked up by dotted name in
a plain mapping, and a missing name is a lookup failure.
"""

import logging
from typing import Any, Callable, Dict, List, Optional


logger = logging.getLogger(__name__)


class UnknownTypeError(LookupError):
    """Raised when a type name is not registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


class TypeRegistry:
    """Maps dotted type names to constructors."""

    def __init__(self, types: Optional[Dict[str, Callable[..., Any]]] = None):
        self._types: Dict[str, Callable[..., Any]] = dict(types or {})

    def register(self, name: str, constructor: Callable[..., Any]):
        """Register a constructor under a dotted name."""
        if not name:
            raise ValueError("Type name cannot be empty")
        self._types[name] = constructor
        logger.debug(f"Registered type {name}")

    def get(self, name: str) -> Optional[Callable[..., Any]]:
        """Return the constructor for name, or None if absent."""
        return self._types.get(name)

    def load(self, name: str) -> Callable[..., Any]:
        """
        Resolve a type by name.

        Raises:
            UnknownTypeError: If nothing is registered under name
        """
        constructor = self.get(name)
        if constructor is None:
            raise UnknownTypeError(name)
        return constructor

    def names(self) -> List[str]:
        return sorted(self._types)

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


def default_registry() -> TypeRegistry:
    """Registry holding the built-in value types."""
    return TypeRegistry({
        'builtins.int': int,
        'builtins.float': float,
        'builtins.str': str,
        'builtins.bytes': bytes,
        'builtins.list': list,
        'builtins.dict': dict,
    })
