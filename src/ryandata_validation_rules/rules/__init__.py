from ryandata_validation_rules.rules.base import BaseRules, flatten_values, render_value
from ryandata_validation_rules.rules.custom import CustomRule, ImplicitRule
from ryandata_validation_rules.rules.factory import RuleObjectFactory
from ryandata_validation_rules.rules.objects import (
    DatabaseRule,
    Enum,
    Exists,
    In,
    NotIn,
    RuleObject,
    Unique,
)
from ryandata_validation_rules.rules.standard import StandardRules
from ryandata_validation_rules.rules.validation_rules import ValidationRules

__all__ = [
    "BaseRules",
    "StandardRules",
    "ValidationRules",
    "RuleObjectFactory",
    "CustomRule",
    "ImplicitRule",
    "RuleObject",
    "DatabaseRule",
    "Exists",
    "Unique",
    "In",
    "NotIn",
    "Enum",
    "flatten_values",
    "render_value",
]
