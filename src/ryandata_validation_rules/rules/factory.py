from __future__ import annotations

from typing import ClassVar

from ryandata_validation_rules.core.factory import PluginFactory
from ryandata_validation_rules.rules.objects import Enum, Exists, In, NotIn, RuleObject, Unique


class RuleObjectFactory(PluginFactory[RuleObject]):
    """Factory for creating object-valued rules by name.

    The builders create their ``exists``/``unique``/``in``/``not_in``/``enum``
    rules through this factory, so registering a replacement type changes
    what every builder emits.

    Example:
        >>> rule = RuleObjectFactory.create("exists", "users", "email")

        # Register a custom rule object
        >>> RuleObjectFactory.register("exists", SoftDeleteAwareExists)
    """

    _registry: ClassVar[dict[str, type[RuleObject]]] = {}
    _entity_name: ClassVar[str] = "rule object"

    _defaults: ClassVar[dict[str, type[RuleObject]]] = {
        "exists": Exists,
        "unique": Unique,
        "in": In,
        "not_in": NotIn,
        "enum": Enum,
    }

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default rule objects are registered."""
        for name, impl_class in cls._defaults.items():
            cls._registry.setdefault(name, impl_class)
