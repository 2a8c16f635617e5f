"""ryandata-validation-rules: fluent, declarative validation rule builders.

This package builds the two artifacts a Laravel-style validator consumes
for a field: an ordered list of rule tokens and a map of message
overrides. It never validates input, runs a query or performs I/O.

- Fluent builders covering the host validator's rule vocabulary
- Convenience rules (date formats, soft-delete aware exists/unique, ...)
- Object-valued rules with where clauses and query callbacks
- A dynamic facade for one-off rule lists
- Definition checks for contradicting or repeated rules

Quick Start:
    >>> from ryandata_validation_rules import ValidationRules
    >>> email = (
    ...     ValidationRules("email")
    ...     .required("Please enter your email")
    ...     .email()
    ...     .max(255)
    ...     .label("Email address")
    ... )
    >>> email.rules()
    ['required', 'email', 'max:255']
    >>> email.messages()
    {'email.required': 'Please enter your email'}

    # Facade
    >>> from ryandata_validation_rules import get_default_manager
    >>> rules = get_default_manager()
    >>> rules.required("name").string().rules()
    ['required', 'string']

    # Several fields at once
    >>> from ryandata_validation_rules import RuleSchema
    >>> schema = RuleSchema.from_builders([email, rules.nullable("age").integer()])
    >>> schema.rules["age"]
    ['nullable', 'integer']
"""

from __future__ import annotations  # noqa: I001

from ryandata_validation_rules.config import (
    RulesConfig,
    get_default_config,
    reset_default_config,
)
from ryandata_validation_rules.core import PluginFactory, RyanDataValidationError
from ryandata_validation_rules.models import (
    PACKAGE_NAME,
    RULE_NAMES,
    DateFormat,
    FieldRules,
    RuleBuilderError,
    RuleName,
    RuleSchema,
    RulesValidationError,
    UnknownRuleMethodError,
)
from ryandata_validation_rules.protocols import FieldRulesSource, Translator
from ryandata_validation_rules.rules import (
    BaseRules,
    CustomRule,
    DatabaseRule,
    Enum,
    Exists,
    ImplicitRule,
    In,
    NotIn,
    RuleObject,
    RuleObjectFactory,
    StandardRules,
    Unique,
    ValidationRules,
)
from ryandata_validation_rules.facade import Manager, get_default_manager, make
from ryandata_validation_rules.validation import (
    DuplicateRuleValidator,
    ExclusiveRuleValidator,
    MessageTargetValidator,
    create_default_validators,
)

__version__ = "0.1.0"
__package_name__ = "ryandata-validation-rules"

__all__ = [
    # Version
    "__version__",
    # Builders
    "BaseRules",
    "StandardRules",
    "ValidationRules",
    # Facade
    "Manager",
    "get_default_manager",
    "make",
    # Rule objects
    "RuleObject",
    "DatabaseRule",
    "Exists",
    "Unique",
    "In",
    "NotIn",
    "Enum",
    "RuleObjectFactory",
    "PluginFactory",
    # Custom rules
    "CustomRule",
    "ImplicitRule",
    # Models
    "FieldRules",
    "RuleSchema",
    "RuleName",
    "RULE_NAMES",
    "DateFormat",
    # Config
    "RulesConfig",
    "get_default_config",
    "reset_default_config",
    # Errors
    "PACKAGE_NAME",
    "RuleBuilderError",
    "RulesValidationError",
    "RyanDataValidationError",
    "UnknownRuleMethodError",
    # Protocols
    "FieldRulesSource",
    "Translator",
    # Definition checks
    "DuplicateRuleValidator",
    "ExclusiveRuleValidator",
    "MessageTargetValidator",
    "create_default_validators",
]
