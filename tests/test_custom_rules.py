from __future__ import annotations

from typing import Any

import pytest

from ryandata_validation_rules import (
    CustomRule,
    ImplicitRule,
    RulesConfig,
    ValidationRules,
)
from ryandata_validation_rules import config as config_module

pytestmark = pytest.mark.usefixtures("isolated_state")


class Uppercase(CustomRule):
    message = "validation.uppercase"

    def execute(self) -> bool:
        return str(self.value).isupper()


class RequiredWhenPublished(ImplicitRule):
    message = "Required before publishing"

    def execute(self) -> bool:
        return self.value not in (None, "")


def run(rule: CustomRule, attribute: str, value: Any) -> list[str]:
    failures: list[str] = []
    rule.validate(attribute, value, failures.append)
    return failures


class TestCustomRule:
    def test_passing_value_does_not_fail(self) -> None:
        assert run(Uppercase(), "code", "ABC") == []

    def test_failing_value_reports_message(self) -> None:
        assert run(Uppercase(), "code", "abc") == ["validation.uppercase"]

    def test_state_is_kept_for_execute(self) -> None:
        rule = Uppercase()
        run(rule, "code", "abc")

        assert rule.attribute == "code"
        assert rule.value == "abc"

    def test_message_goes_through_translator(self, monkeypatch: pytest.MonkeyPatch) -> None:
        config = RulesConfig(translator={"validation.uppercase": "Use capitals"}.__getitem__)
        monkeypatch.setattr(config_module, "_default_config", config)

        assert run(Uppercase(), "code", "abc") == ["Use capitals"]

    def test_is_not_implicit(self) -> None:
        assert Uppercase.implicit is False

    def test_execute_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            CustomRule()  # type: ignore[abstract]


class TestImplicitRule:
    def test_is_implicit(self) -> None:
        assert RequiredWhenPublished().implicit is True

    def test_fails_on_empty_value(self) -> None:
        assert run(RequiredWhenPublished(), "title", "") == ["Required before publishing"]
        assert run(RequiredWhenPublished(), "title", "Hello") == []


def test_builder_accepts_custom_rules() -> None:
    rule = Uppercase()
    builder = ValidationRules("code").required().add_object("uppercase", rule, "Capitals only")

    assert builder.rules() == ["required", rule]
    assert builder.rule_names() == ["required", "uppercase"]
    assert builder.messages() == {"code.uppercase": "Capitals only"}
    assert builder.validate_definition().is_valid
