"""Base rule builder.

This module provides the accumulation core shared by every rule builder:
the field key, an optional display label, the ordered rule tokens and the
per-rule message overrides.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Self

from pydantic import ValidationError

from ryandata_validation_rules.config import RulesConfig, get_default_config
from ryandata_validation_rules.models.errors import RuleBuilderError, RulesValidationError
from ryandata_validation_rules.models.results import FieldRules
from ryandata_validation_rules.rules.factory import RuleObjectFactory
from ryandata_validation_rules.rules.objects import enum_value

if TYPE_CHECKING:
    from abstract_validation_base import ValidationResult

logger = logging.getLogger(__name__)


def render_value(value: Any) -> str:
    """Render a single rule argument the way the host validator reads it."""
    value = enum_value(value)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_values(values: Any) -> list[str]:
    """Flatten scalars and (nested) sequences into rendered rule arguments.

    A bare None means "no arguments".
    """
    if values is None:
        return []
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return [render_value(values)]

    rendered: list[str] = []
    for value in values:
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            rendered.extend(flatten_values(value))
        else:
            rendered.append(render_value(value))
    return rendered


class BaseRules:
    """Accumulates rule tokens and message overrides for one field.

    Every mutating method returns the builder so calls can be chained. The
    two artifacts a host validator needs are read back with ``rules()`` and
    ``messages()``.

    Example:
        >>> builder = BaseRules("email").add_string("required").add_string(
        ...     "max", "Too long", 255
        ... )
        >>> builder.rules()
        ['required', 'max:255']
        >>> builder.messages()
        {'email.max': 'Too long'}
    """

    def __init__(self, key: str, config: RulesConfig | None = None) -> None:
        if not key:
            raise RuleBuilderError.create("empty_key", "key cannot be empty.")

        self._key = key
        self._config = config or get_default_config()
        self._attribute: str | None = None
        self._rules: list[Any] = []
        self._rule_names: list[str] = []
        self._messages: dict[str, str] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, rules={self._rules!r})"

    @property
    def config(self) -> RulesConfig:
        """Config this builder reads its defaults from."""
        return self._config

    def key(self) -> str:
        """Get the field name."""
        return self._key

    def label(self, attribute: str) -> Self:
        """Set the display label used for the field in error messages."""
        self._attribute = attribute
        return self

    def attribute(self) -> str | None:
        """Get the display label, passed through the configured translator."""
        return self._config.translate(self._attribute)

    def rules(self) -> list[Any]:
        """Get the rule tokens in insertion order."""
        return list(self._rules)

    def rule_names(self) -> list[str]:
        """Get the rule names, parallel to ``rules()``."""
        return list(self._rule_names)

    def messages(self) -> dict[str, str]:
        """Get message overrides keyed ``"<key>.<rule_name>"``."""
        return dict(self._messages)

    def _add(
        self,
        rule_name: str,
        message: str | None = None,
        values: Any = (),
        rule: Any = None,
    ) -> Self:
        if rule is None:
            rendered = flatten_values(values)
            rule = f"{rule_name}:{','.join(rendered)}" if rendered else rule_name

        self._rules.append(rule)
        self._rule_names.append(rule_name)
        logger.debug("Added rule %s to field %s", rule_name, self._key)

        if message is not None:
            self._messages[f"{self._key}.{rule_name}"] = message

        return self

    def add_string(self, rule: str, message: str | None = None, values: Any = ()) -> Self:
        """Add a string rule and an optional message override.

        Args:
            rule: Rule name, or a complete ``name:args`` token.
            message: Message override for this rule.
            values: Scalar or sequence of arguments appended as ``:a,b``. Only
                allowed when ``rule`` carries no inline arguments.

        Raises:
            RuleBuilderError: If the rule is empty, or has inline arguments and
                ``values`` as well.
        """
        if not rule:
            raise RuleBuilderError.create("empty_rule", "rule cannot be empty.")

        rule_name, _, inline_args = rule.partition(":")
        if inline_args:
            if flatten_values(values):
                raise RuleBuilderError.create(
                    "inline_values_conflict",
                    "rule '{rule}' already has arguments; pass values separately or inline.",
                    rule=rule,
                )
            return self._add(rule_name, message, rule=rule)
        return self._add(rule_name, message, values)

    def add_object(self, rule_name: str, rule: object, message: str | None = None) -> Self:
        """Add a rule object under ``rule_name`` and an optional message override."""
        return self._add(rule_name, message, rule=rule)

    def add_registered(
        self, rule_name: str, *args: Any, message: str | None = None, **kwargs: Any
    ) -> Self:
        """Create a rule object through RuleObjectFactory and add it.

        Raises:
            RuleBuilderError: If no rule object is registered under ``rule_name``.
        """
        if not RuleObjectFactory.is_registered(rule_name):
            raise RuleBuilderError.create(
                "unknown_rule_object",
                "Unknown rule object type: {rule_name}. Available types: {available}",
                rule_name=rule_name,
                available=", ".join(RuleObjectFactory.available_types()),
            )
        rule = RuleObjectFactory.create(rule_name, *args, **kwargs)
        return self.add_object(rule_name, rule, message)

    def reset(self) -> Self:
        """Drop all rules and messages, keeping the key and label."""
        self._rules = []
        self._rule_names = []
        self._messages = {}
        return self

    def to_field_rules(self) -> FieldRules:
        """Snapshot the builder.

        Raises:
            RulesValidationError: If the snapshot fails validation.
        """
        try:
            return FieldRules(
                key=self._key,
                attribute=self.attribute(),
                rules=self.rules(),
                rule_names=self.rule_names(),
                messages=self.messages(),
            )
        except ValidationError as e:
            raise RulesValidationError.from_validation_error(e, {"key": self._key}) from e

    def validate_definition(self) -> ValidationResult:
        """Run the default definition checks over the accumulated rules."""
        from ryandata_validation_rules.validation.validators import create_default_validators

        return create_default_validators().validate(self.to_field_rules())
