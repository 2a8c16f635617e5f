"""Rule-definition checks.

These validators look at a built FieldRules snapshot for mistakes in the
definition itself (repeated rules, contradicting rules, orphan messages).
They never look at user input.
"""

from abstract_validation_base import BaseValidator, CompositeValidator, ValidatorPipelineBuilder

from ryandata_validation_rules.validation.validators import (
    EXCLUSIVE_RULES,
    DuplicateRuleValidator,
    ExclusiveRuleValidator,
    MessageTargetValidator,
    create_default_validators,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "EXCLUSIVE_RULES",
    "DuplicateRuleValidator",
    "ExclusiveRuleValidator",
    "MessageTargetValidator",
    "create_default_validators",
]
