from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

if TYPE_CHECKING:
    from ryandata_validation_rules.models import FieldRules

# Rule pairs that can never both pass for the same value
EXCLUSIVE_RULES: list[tuple[str, str]] = [
    ("required", "prohibited"),
    ("required", "missing"),
    ("present", "missing"),
    ("accepted", "declined"),
]


class DuplicateRuleValidator(BaseValidator["FieldRules"]):
    """Flags rule names added more than once.

    A repeated rule also shares one message override slot, so the second
    message silently replaces the first.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "duplicate_rules"

    def validate(self, field_rules: FieldRules) -> ValidationResult:
        """Check the field for repeated rule names.

        Args:
            field_rules: Snapshot to check.

        Returns:
            ValidationResult with one error per repeated rule name.
        """
        result = ValidationResult(is_valid=True)
        counts = Counter(field_rules.rule_names)
        for rule_name, count in counts.items():
            if count > 1:
                result.add_error(
                    field=field_rules.key,
                    message=f"Rule '{rule_name}' is added {count} times",
                    value=rule_name,
                )
        return result


class ExclusiveRuleValidator(BaseValidator["FieldRules"]):
    """Flags rule pairs that contradict each other."""

    def __init__(self, pairs: list[tuple[str, str]] | None = None) -> None:
        """Initialize the validator.

        Args:
            pairs: Mutually exclusive rule names. Defaults to EXCLUSIVE_RULES.
        """
        self._pairs = pairs if pairs is not None else EXCLUSIVE_RULES

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "exclusive_rules"

    def validate(self, field_rules: FieldRules) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        present = set(field_rules.rule_names)
        for first, second in self._pairs:
            if first in present and second in present:
                result.add_error(
                    field=field_rules.key,
                    message=f"Rules '{first}' and '{second}' cannot both pass",
                    value=f"{first},{second}",
                )
        return result


class MessageTargetValidator(BaseValidator["FieldRules"]):
    """Flags message overrides that no rule on the field can trigger."""

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "message_targets"

    def validate(self, field_rules: FieldRules) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        prefix = f"{field_rules.key}."

        for message_key in field_rules.messages:
            if not message_key.startswith(prefix):
                result.add_error(
                    field=field_rules.key,
                    message=f"Message key '{message_key}' does not belong to this field",
                    value=message_key,
                )
                continue

            rule_name = message_key[len(prefix) :]
            if not field_rules.has_rule(rule_name):
                result.add_error(
                    field=field_rules.key,
                    message=f"Message for '{rule_name}' has no matching rule",
                    value=message_key,
                )

        return result


def create_default_validators(
    check_duplicates: bool = True,
    exclusive_pairs: list[tuple[str, str]] | None = None,
) -> CompositeValidator[FieldRules]:
    """Create the default rule-definition check pipeline.

    Args:
        check_duplicates: If True, include DuplicateRuleValidator.
        exclusive_pairs: Overrides the mutually exclusive rule pairs.

    Returns:
        CompositeValidator with the definition checks configured.
    """
    builder: ValidatorPipelineBuilder[FieldRules] = ValidatorPipelineBuilder("rule_definition")

    if check_duplicates:
        builder.add(DuplicateRuleValidator())

    builder.add(ExclusiveRuleValidator(exclusive_pairs))
    builder.add(MessageTargetValidator())

    return builder.build()
