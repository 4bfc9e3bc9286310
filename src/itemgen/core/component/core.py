"""Component registry and decorator.

Usage:
    @component
    @dataclass(slots=True)
    class NameTag:
        text: str
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import is_dataclass
from typing import overload


class ComponentRegistry:
    """Process-local registry of the types that may be stored on entities.

    Maps each registered type to its fully qualified name so snapshots and
    diagnostics can refer to components without holding the class.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, str] = {}
        self._by_name: dict[str, type] = {}

    def register(self, cls: type) -> str:
        """Register a component type and return its qualified name.

        Raises:
            RuntimeError: If a different class already uses the same name.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        name = f"{cls.__module__}.{cls.__qualname__}"
        existing = self._by_name.get(name)
        if existing is not None and existing is not cls:
            raise RuntimeError(f"Component name collision: {cls} and {existing} share {name}")

        self._by_type[cls] = name
        self._by_name[name] = cls
        return name

    def get_type(self, name: str) -> type | None:
        return self._by_name.get(name)

    def is_registered(self, cls: type) -> bool:
        return cls in self._by_type


_registry = ComponentRegistry()


def get_registry() -> ComponentRegistry:
    """Access the global component registry."""
    return _registry


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic."""
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


@overload
def component(cls: type) -> type: ...


@overload
def component(cls: None = None) -> Callable[[type], type]: ...


def component(cls: type | None = None) -> type | Callable[[type], type]:
    """Register a dataclass or Pydantic model as a component type.

    Apply @component AFTER @dataclass.

    Raises:
        TypeError: If class is neither a dataclass nor Pydantic model.
    """

    def decorator(c: type) -> type:
        if not (is_dataclass(c) or _is_pydantic(c)):
            raise TypeError(
                f"Component {c.__name__} must be a dataclass or Pydantic model. "
                f"Did you forget @dataclass decorator?"
            )
        c.__component_name__ = _registry.register(c)  # type: ignore
        return c

    if cls is None:
        return decorator
    return decorator(cls)
