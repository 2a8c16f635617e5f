"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

from ryandata_validation_rules.config import reset_default_config
from ryandata_validation_rules.rules.factory import RuleObjectFactory

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def isolated_state() -> Iterator[None]:
    """Reset the rule object registry and default config around a test."""
    RuleObjectFactory.clear_registry()
    reset_default_config()
    yield
    RuleObjectFactory.clear_registry()
    reset_default_config()
