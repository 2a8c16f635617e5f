from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_validation_rules.models import FieldRules


@runtime_checkable
class FieldRulesSource(Protocol):
    """Anything that can produce a FieldRules snapshot (normally a rule builder)."""

    def key(self) -> str:
        """Name of the field the rules apply to."""
        ...

    def to_field_rules(self) -> FieldRules:
        """Snapshot the accumulated rules and messages.

        Returns:
            Immutable FieldRules.
        """
        ...


@runtime_checkable
class Translator(Protocol):
    """Callable that turns a display-label key into display text."""

    def __call__(self, text: str) -> str: ...
