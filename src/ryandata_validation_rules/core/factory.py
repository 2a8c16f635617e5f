"""Generic plugin factory base class.

Keeps a class-level registry of named implementation types and creates
instances from it. Subclasses pick the entity name and register their
defaults lazily.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses should define:
        - _registry: Class-level dict mapping type names to implementation classes
        - _entity_name: Human-readable name for error messages (e.g., "rule object")
        - _ensure_defaults_registered(): Method to register default implementations

    Example subclass:
        class RuleObjectFactory(PluginFactory[RuleObject]):
            _registry: ClassVar[dict[str, type[RuleObject]]] = {}
            _entity_name: ClassVar[str] = "rule object"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                cls._registry.setdefault("exists", Exists)
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str | None] = None
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default implementations are registered.

        Called before every registry read so that defaults removed by
        ``clear_registry`` come back on next use.
        """
        ...

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register an implementation type.

        Args:
            name: Type name for the implementation.
            impl_class: Class to instantiate for that name.
        """
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an implementation type.

        Args:
            name: Type name to unregister.
        """
        cls._registry.pop(name, None)

    @classmethod
    def get(cls, name: str) -> type[T]:
        """Look up a registered implementation type.

        Raises:
            ValueError: If the type name is not registered.
        """
        cls._ensure_defaults_registered()

        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(
                f"Unknown {cls._entity_name} type: {name}. Available types: {available}"
            )
        return cls._registry[name]  # type: ignore[no-any-return]

    @classmethod
    def create(cls, name: str | None = None, *args: Any, **kwargs: Any) -> T:
        """Create an instance of the specified type.

        Args:
            name: Type name to create. If None, uses the default type.
            *args: Positional arguments for the constructor.
            **kwargs: Keyword arguments for the constructor.

        Returns:
            Instance of the requested type.

        Raises:
            ValueError: If the type name is not registered or no default exists.
        """
        type_name = name if name is not None else cls._default_type
        if type_name is None:
            raise ValueError(f"No default {cls._entity_name} type configured")

        impl_class = cls.get(type_name)
        return impl_class(*args, **kwargs)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check whether a type name is registered."""
        cls._ensure_defaults_registered()
        return name in cls._registry

    @classmethod
    def available_types(cls) -> list[str]:
        """Get list of available types.

        Returns:
            Sorted list of registered type names.
        """
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry (mainly for testing)."""
        cls._registry.clear()
