"""Dynamic facade over the rule builders.

``Manager`` turns ``manager.<rule>(key, *args)`` into
``make(key).<rule>(*args)`` so one-off rule lists can be written without
instantiating a builder first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ryandata_validation_rules.config import RulesConfig
from ryandata_validation_rules.models.errors import UnknownRuleMethodError
from ryandata_validation_rules.rules.base import BaseRules
from ryandata_validation_rules.rules.validation_rules import ValidationRules

logger = logging.getLogger(__name__)


class Manager:
    """Factory and dynamic dispatcher for rule builders.

    Example:
        >>> manager = Manager()
        >>> manager.required("email").email().rules()
        ['required', 'email']
        >>> manager.max("name", 50, "Name is too long").messages()
        {'name.max': 'Name is too long'}
    """

    def __init__(
        self,
        rules_class: type[BaseRules] = ValidationRules,
        config: RulesConfig | None = None,
    ) -> None:
        self._rules_class = rules_class
        self._config = config

    @property
    def rules_class(self) -> type[BaseRules]:
        return self._rules_class

    def make(self, key: str) -> BaseRules:
        """Create a new builder for ``key``."""
        return self._rules_class(key, self._config)

    def __getattr__(self, name: str) -> Callable[..., BaseRules]:
        if name.startswith("_"):
            raise AttributeError(name)

        method = getattr(self._rules_class, name, None)
        if not callable(method):
            raise UnknownRuleMethodError(name, self._rules_class.__name__)

        def dispatch(*args: Any, **kwargs: Any) -> BaseRules:
            if not args:
                raise TypeError(
                    f"too few arguments to function {type(self).__name__}.make(), "
                    "0 passed in. exactly 1 expected."
                )
            key, *rest = args

            logger.debug("Dispatching %s for field %s", name, key)
            result = getattr(self.make(key), name)(*rest, **kwargs)

            if not isinstance(result, self._rules_class):
                raise UnknownRuleMethodError(name, self._rules_class.__name__)
            return result

        dispatch.__name__ = name
        return dispatch


_default_manager: Manager | None = None


def get_default_manager() -> Manager:
    """Get or create the default Manager instance.

    Returns:
        Shared Manager using ValidationRules and the default config.
    """
    global _default_manager
    if _default_manager is None:
        _default_manager = Manager()
    return _default_manager


def make(key: str) -> BaseRules:
    """Create a ValidationRules builder for ``key`` using the default manager."""
    return get_default_manager().make(key)
