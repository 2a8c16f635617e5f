"""Rule models package.

This package contains the rule-name enums, error classes and the snapshot
models produced by the builders.
"""

from __future__ import annotations

from ryandata_validation_rules.models.enums import (
    RULE_NAMES,
    DateFormat,
    RuleName,
)
from ryandata_validation_rules.models.errors import (
    PACKAGE_NAME,
    RuleBuilderError,
    RulesValidationError,
    UnknownRuleMethodError,
)
from ryandata_validation_rules.models.results import (
    FieldRules,
    RuleSchema,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "RuleBuilderError",
    "RulesValidationError",
    "UnknownRuleMethodError",
    # Enums and constants
    "RuleName",
    "RULE_NAMES",
    "DateFormat",
    # Snapshots
    "FieldRules",
    "RuleSchema",
]
