"""Base classes for hand-written validation rules.

A custom rule is handed to the host validator as a rule object (through
``BaseRules.add_object``). The host calls ``validate(attribute, value, fail)``;
the rule keeps that state, runs ``execute()`` and reports a failure by
passing its translated ``message`` to ``fail``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar

from ryandata_validation_rules.config import get_default_config

logger = logging.getLogger(__name__)

FailCallback = Callable[[str], Any]


class CustomRule(ABC):
    """Validation rule implemented in Python and run by the host validator.

    Subclasses set ``message`` (a translation key or plain text) and
    implement ``execute``, reading ``self.attribute`` and ``self.value``.

    Example:
        >>> class Uppercase(CustomRule):
        ...     message = "validation.uppercase"
        ...
        ...     def execute(self) -> bool:
        ...         return str(self.value).isupper()
        >>> ValidationRules("code").required().add_object("uppercase", Uppercase())
    """

    message: ClassVar[str] = ""
    implicit: ClassVar[bool] = False

    attribute: str = ""
    value: Any = None

    def validate(self, attribute: str, value: Any, fail: FailCallback) -> None:
        """Run the rule against one attribute, calling ``fail`` if it does not pass."""
        self.attribute = attribute
        self.value = value
        self._fail = fail

        if not self.execute():
            self.failed()

    @abstractmethod
    def execute(self) -> bool:
        """Return True when ``self.value`` passes the rule."""
        ...

    def failed(self) -> None:
        logger.debug("Rule %s failed for %s", type(self).__name__, self.attribute)
        self._fail(get_default_config().translate(self.message) or "")


class ImplicitRule(CustomRule):
    """Custom rule the host runs even when the attribute is missing or empty."""

    implicit: ClassVar[bool] = True
