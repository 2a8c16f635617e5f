"""RyanData core - reusable, domain-agnostic building blocks.

Usage:
    from ryandata_validation_rules.core import (
        PluginFactory,
        RyanDataValidationError,
    )
"""

from __future__ import annotations

from ryandata_validation_rules.core.errors import RyanDataValidationError
from ryandata_validation_rules.core.factory import PluginFactory

__all__ = [
    # Errors
    "RyanDataValidationError",
    # Factory
    "PluginFactory",
]
