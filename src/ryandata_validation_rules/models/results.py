"""Snapshot models for built rules.

These are the artifacts handed to a host validator: the per-field
``FieldRules`` and the ``RuleSchema`` that merges several fields into the
rules/messages/attributes mappings a validator call expects.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ryandata_validation_rules.models.errors import RuleBuilderError

if TYPE_CHECKING:
    from ryandata_validation_rules.protocols import FieldRulesSource


def _render(rules: Iterable[Any], stringify: bool) -> list[Any]:
    return [str(rule) if stringify else rule for rule in rules]


class FieldRules(BaseModel):
    """Immutable snapshot of the rules built for one field."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str = Field(min_length=1)
    attribute: str | None = None
    rules: list[Any] = Field(default_factory=list)
    rule_names: list[str] = Field(default_factory=list)
    messages: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_rule_names(self) -> FieldRules:
        if len(self.rules) != len(self.rule_names):
            raise RuleBuilderError.create(
                "rule_names_mismatch",
                "{rules} rules but {names} rule names",
                rules=len(self.rules),
                names=len(self.rule_names),
            )
        return self

    def has_rule(self, rule_name: str) -> bool:
        """Check whether a rule name was added to the field."""
        return rule_name in self.rule_names

    def to_dict(self, stringify: bool = False) -> dict[str, Any]:
        """Convert to a plain dictionary.

        Args:
            stringify: Render rule objects with ``str()`` (e.g. for JSON output).

        Returns:
            Dictionary with key, attribute, rules, rule_names and messages.
        """
        return {
            "key": self.key,
            "attribute": self.attribute,
            "rules": _render(self.rules, stringify),
            "rule_names": list(self.rule_names),
            "messages": dict(self.messages),
        }


class RuleSchema(BaseModel):
    """Rules, messages and display labels for a whole input payload.

    Example:
        >>> schema = RuleSchema.from_builders([
        ...     ValidationRules("email").required().email(),
        ...     ValidationRules("age").nullable().integer(),
        ... ])
        >>> schema.rules["email"]
        ['required', 'email']
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    rules: dict[str, list[Any]] = Field(default_factory=dict)
    messages: dict[str, str] = Field(default_factory=dict)
    attributes: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_builders(cls, builders: Iterable[FieldRulesSource | FieldRules]) -> RuleSchema:
        """Merge several builders (or snapshots) into one schema.

        Raises:
            RuleBuilderError: If two builders target the same key.
        """
        schema = cls()
        for builder in builders:
            schema.add(builder)
        return schema

    def add(self, builder: FieldRulesSource | FieldRules) -> RuleSchema:
        """Add one field's rules to the schema.

        Raises:
            RuleBuilderError: If the key is already defined.
        """
        field_rules = builder if isinstance(builder, FieldRules) else builder.to_field_rules()

        if field_rules.key in self.rules:
            raise RuleBuilderError.create(
                "duplicate_field",
                "Rules for field '{key}' are already defined",
                key=field_rules.key,
            )

        self.rules[field_rules.key] = list(field_rules.rules)
        self.messages.update(field_rules.messages)
        if field_rules.attribute is not None:
            self.attributes[field_rules.key] = field_rules.attribute
        return self

    def to_dict(self, stringify: bool = False) -> dict[str, Any]:
        """Convert to a plain dictionary of rules, messages and attributes."""
        return {
            "rules": {key: _render(rules, stringify) for key, rules in self.rules.items()},
            "messages": dict(self.messages),
            "attributes": dict(self.attributes),
        }
