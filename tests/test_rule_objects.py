from __future__ import annotations

import enum
from types import SimpleNamespace
from typing import Any

import pytest

from ryandata_validation_rules import ValidationRules
from ryandata_validation_rules.rules.objects import Enum, Exists, In, NotIn, Unique


class Role(enum.Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class Level(enum.IntEnum):
    LOW = 1
    HIGH = 2


class RecordingQuery:
    """Stand-in for a host query builder that records what callbacks ask for."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, list[Any]]] = []

    def where_in(self, column: str, values: list[Any]) -> RecordingQuery:
        self.calls.append(("where_in", column, values))
        return self

    def where_not_in(self, column: str, values: list[Any]) -> RecordingQuery:
        self.calls.append(("where_not_in", column, values))
        return self


class TestExists:
    def test_table_and_column(self) -> None:
        assert str(Exists("users", "email")) == "exists:users,email"

    def test_default_column_is_null(self) -> None:
        assert str(Exists("users")) == "exists:users,NULL"

    def test_where_clauses_are_quoted(self) -> None:
        rule = Exists("users", "email").where("account_id", 1).where("status", "active")
        assert str(rule) == 'exists:users,email,account_id,"1",status,"active"'

    def test_where_none_becomes_null(self) -> None:
        rule = Exists("users", "id").where("deleted_at", None)
        assert str(rule) == 'exists:users,id,deleted_at,"NULL"'

    def test_where_not_null(self) -> None:
        rule = Exists("users", "id").where_not_null("deleted_at")
        assert str(rule) == 'exists:users,id,deleted_at,"NOT_NULL"'

    def test_where_not_negates_value(self) -> None:
        rule = Exists("users", "id").where_not("status", "banned")
        assert str(rule) == 'exists:users,id,status,"!banned"'

    def test_bool_where_values_render_as_digits(self) -> None:
        rule = Exists("users", "id").where("active", True).where("locked", False)
        assert str(rule) == 'exists:users,id,active,"1",locked,"0"'

    def test_enum_where_value(self) -> None:
        rule = Exists("users", "id").where("role", Role.ADMIN)
        assert str(rule) == 'exists:users,id,role,"admin"'

    def test_quotes_in_where_values_are_doubled(self) -> None:
        rule = Exists("users", "id").where("name", 'say "hi"')
        assert str(rule) == 'exists:users,id,name,"say ""hi"""'

    def test_without_trashed_and_only_trashed(self) -> None:
        assert str(Exists("users", "id").without_trashed()) == 'exists:users,id,deleted_at,"NULL"'
        assert (
            str(Exists("users", "id").only_trashed("removed_at"))
            == 'exists:users,id,removed_at,"NOT_NULL"'
        )

    def test_wheres_property_is_a_copy(self) -> None:
        rule = Exists("users", "id").where("a", 1)
        rule.wheres.append(("b", "2"))
        assert rule.wheres == [("a", "1")]


class TestQueryCallbacks:
    def test_callable_where_registers_callback(self) -> None:
        def callback(query: Any) -> Any:
            return query

        rule = Exists("users", "id").where(callback)

        assert rule.query_callbacks() == [callback]
        assert str(rule) == "exists:users,id"

    def test_list_value_becomes_where_in_callback(self) -> None:
        rule = Exists("users", "id").where("role", [Role.ADMIN, "editor"])
        query = RecordingQuery()

        for callback in rule.query_callbacks():
            callback(query)

        assert query.calls == [("where_in", "role", ["admin", "editor"])]
        assert str(rule) == "exists:users,id"

    def test_where_not_with_list_becomes_where_not_in(self) -> None:
        rule = Unique("users", "email").where_not("status", ["banned", "closed"])
        query = RecordingQuery()

        rule.query_callbacks()[0](query)

        assert query.calls == [("where_not_in", "status", ["banned", "closed"])]

    def test_callbacks_are_not_executed_when_rendering(self) -> None:
        calls: list[Any] = []
        rule = Exists("users", "id").using(calls.append)

        str(rule)
        repr(rule)

        assert calls == []


class TestUnique:
    def test_basic(self) -> None:
        assert str(Unique("users", "email")) == "unique:users,email,NULL,id"

    def test_ignore_id(self) -> None:
        assert str(Unique("users", "email").ignore(5)) == 'unique:users,email,"5",id'

    def test_ignore_custom_column(self) -> None:
        rule = Unique("users", "email").ignore("abc", "uuid")
        assert str(rule) == 'unique:users,email,"abc",uuid'

    @pytest.mark.parametrize("ignored", [None, ""])
    def test_empty_ignore_renders_null(self, ignored: Any) -> None:
        assert str(Unique("users", "email").ignore(ignored)) == "unique:users,email,NULL,id"

    def test_zero_ignore_is_quoted(self) -> None:
        assert str(Unique("users", "email").ignore(0)) == 'unique:users,email,"0",id'

    def test_ignore_value_is_slashed(self) -> None:
        rule = Unique("users", "email").ignore('a"b')
        assert str(rule) == 'unique:users,email,"a\\"b",id'

    def test_ignore_model(self) -> None:
        model = SimpleNamespace(id=42, uuid="u-1")

        assert str(Unique("users", "email").ignore_model(model)) == 'unique:users,email,"42",id'
        assert (
            str(Unique("users", "email").ignore_model(model, "uuid"))
            == 'unique:users,email,"u-1",uuid'
        )

    def test_wheres_after_id_column(self) -> None:
        rule = Unique("users", "email").ignore(1).where_null("deleted_at")
        assert str(rule) == 'unique:users,email,"1",id,deleted_at,"NULL"'


class TestIn:
    def test_values_are_quoted(self) -> None:
        assert str(In(["a", "b"])) == 'in:"a","b"'

    def test_single_value(self) -> None:
        assert str(In("a")) == 'in:"a"'

    def test_embedded_quotes_are_doubled(self) -> None:
        assert str(In(['a"b'])) == 'in:"a""b"'

    def test_commas_survive_inside_quotes(self) -> None:
        assert str(In(["a,b", "c"])) == 'in:"a,b","c"'

    def test_enum_members_render_by_value(self) -> None:
        assert str(In([Role.ADMIN, Level.HIGH])) == 'in:"admin","2"'

    def test_not_in(self) -> None:
        assert str(NotIn([1, 2])) == 'not_in:"1","2"'


class TestEnum:
    def test_all_members(self) -> None:
        assert str(Enum(Role)) == 'in:"admin","editor","viewer"'

    def test_only(self) -> None:
        assert str(Enum(Role).only([Role.ADMIN, Role.VIEWER])) == 'in:"admin","viewer"'

    def test_except(self) -> None:
        assert str(Enum(Role).except_(Role.VIEWER)) == 'in:"admin","editor"'

    def test_only_and_except(self) -> None:
        rule = Enum(Role).only([Role.ADMIN, Role.EDITOR]).except_(Role.ADMIN)
        assert rule.allowed_values() == ["editor"]

    def test_int_enum(self) -> None:
        assert str(Enum(Level)) == 'in:"1","2"'

    def test_rejects_non_enum(self) -> None:
        with pytest.raises(TypeError):
            Enum(str)  # type: ignore[arg-type]


class TestRuleObjectProtocol:
    def test_repr_shows_rendered_rule(self) -> None:
        assert repr(Exists("users", "id")) == "Exists('exists:users,id')"

    def test_equality_by_type_and_rendering(self) -> None:
        assert Exists("users", "id") == Exists("users", "id")
        assert Exists("users", "id") != Exists("users", "email")
        assert In(["a"]) != NotIn(["a"])


class TestScalarRendering:
    def test_in_renders_bool_and_none_like_the_host(self) -> None:
        assert str(In([True, False, None, "x"])) == 'in:"1","0","","x"'

    def test_builder_in_matches_rule_object(self) -> None:
        builder = ValidationRules("f").in_([True, None, "x"])
        assert str(builder.rules()[0]) == 'in:"1","","x"'

    def test_where_not_none_is_bare_negation(self) -> None:
        rule = Exists("users", "id").where_not("status", None)
        assert str(rule) == 'exists:users,id,status,"!"'

    def test_where_not_bool(self) -> None:
        rule = Exists("users", "id").where_not("active", True)
        assert str(rule) == 'exists:users,id,active,"!1"'

    def test_unique_ignore_bool(self) -> None:
        assert str(Unique("users", "email").ignore(True)) == 'unique:users,email,"1",id'
