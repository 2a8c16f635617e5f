from __future__ import annotations

import pytest

from ryandata_validation_rules import (
    Manager,
    RuleBuilderError,
    RulesConfig,
    StandardRules,
    UnknownRuleMethodError,
    ValidationRules,
    get_default_manager,
    make,
)


@pytest.fixture
def manager() -> Manager:
    return Manager()


class TestMake:
    def test_make_returns_fresh_builder(self, manager: Manager) -> None:
        first = manager.make("email")
        second = manager.make("email")

        assert isinstance(first, ValidationRules)
        assert first is not second
        assert first.key() == "email"
        assert first.rules() == []

    def test_make_uses_configured_class(self) -> None:
        manager = Manager(StandardRules)

        assert manager.rules_class is StandardRules
        assert type(manager.make("name")) is StandardRules

    def test_make_passes_config(self) -> None:
        config = RulesConfig(id_column="uid")
        builder = Manager(config=config).make("user_id")

        assert builder.config is config

    def test_module_level_make(self) -> None:
        assert make("name").required().rules() == ["required"]

    def test_default_manager_is_shared(self) -> None:
        assert get_default_manager() is get_default_manager()


class TestDispatch:
    def test_first_argument_is_key(self, manager: Manager) -> None:
        builder = manager.required("email").email()

        assert builder.key() == "email"
        assert builder.rules() == ["required", "email"]

    def test_remaining_arguments_are_forwarded(self, manager: Manager) -> None:
        builder = manager.max("name", 50, "Name is too long")

        assert builder.rules() == ["max:50"]
        assert builder.messages() == {"name.max": "Name is too long"}

    def test_keyword_arguments_are_forwarded(self, manager: Manager) -> None:
        builder = manager.between("age", 18, 65, message="Out of range")
        assert builder.messages() == {"age.between": "Out of range"}

    def test_convenience_methods_dispatch(self, manager: Manager) -> None:
        builder = manager.id("user_id", "users")
        assert [str(r) for r in builder.rules()] == ["exists:users,id"]

    def test_label_dispatch(self, manager: Manager) -> None:
        builder = manager.label("email", "Email address").required()

        assert builder.attribute() == "Email address"
        assert builder.rules() == ["required"]

    def test_each_call_starts_a_new_builder(self, manager: Manager) -> None:
        first = manager.required("a")
        second = manager.required("a")

        assert first is not second
        assert second.rules() == ["required"]

    def test_no_arguments_raises_type_error(self, manager: Manager) -> None:
        with pytest.raises(TypeError) as exc_info:
            manager.required()

        assert "Manager.make()" in str(exc_info.value)
        assert "0 passed in" in str(exc_info.value)

    def test_empty_key_raises(self, manager: Manager) -> None:
        with pytest.raises(RuleBuilderError):
            manager.required("")


class TestUnknownMethods:
    def test_unknown_name(self, manager: Manager) -> None:
        with pytest.raises(UnknownRuleMethodError) as exc_info:
            manager.no_such_rule("email")

        assert exc_info.value.method_name == "no_such_rule"
        assert str(exc_info.value) == "method ValidationRules.no_such_rule() does not exist."

    def test_unknown_name_is_an_attribute_error(self, manager: Manager) -> None:
        assert not hasattr(manager, "no_such_rule")

    def test_private_names_are_not_dispatched(self, manager: Manager) -> None:
        with pytest.raises(AttributeError):
            manager._add("email", "required")

    def test_accessor_results_are_rejected(self, manager: Manager) -> None:
        with pytest.raises(UnknownRuleMethodError):
            manager.rules("email")

    def test_class_name_in_message(self) -> None:
        manager = Manager(StandardRules)

        with pytest.raises(UnknownRuleMethodError, match="StandardRules.tel"):
            manager.tel("phone")
