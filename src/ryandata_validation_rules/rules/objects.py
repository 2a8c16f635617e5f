"""Object-valued rules.

Some rules carry more structure than a ``name:arg,arg`` string can hold
comfortably: database constraints with extra where clauses and query
callbacks, value lists that need quoting, enum-backed lists. These objects
collect that structure fluently and render it in the host validator's
string format through ``str()``. Query callbacks are never executed here;
they are handed to the host through ``query_callbacks()``.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Self

QueryCallback = Callable[[Any], Any]


def enum_value(value: Any) -> Any:
    """Unwrap enum members to their value, leaving everything else alone."""
    return value.value if isinstance(value, enum.Enum) else value


def _as_list(values: Any) -> list[Any]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return [values]
    return list(values)


def _scalar(value: Any) -> str:
    """Render a value the way the host casts it to a string: 1/0 for bools, "" for None."""
    value = enum_value(value)
    if isinstance(value, bool):
        return "1" if value else "0"
    if value is None:
        return ""
    return str(value)


def _quote(value: Any) -> str:
    return '"' + _scalar(value).replace('"', '""') + '"'


def _addslashes(value: str) -> str:
    return (
        value.replace("\\", "\\\\").replace("'", "\\'").replace('"', '\\"').replace("\0", "\\0")
    )


class RuleObject(ABC):
    """Base class for rules that render themselves into a rule token."""

    rule_name: ClassVar[str]

    @abstractmethod
    def __str__(self) -> str:
        """Render the rule in the host validator's string format."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleObject):
            return NotImplemented
        return type(self) is type(other) and str(self) == str(other)


class DatabaseRule(RuleObject):
    """Shared where-clause handling for rules that target a table column."""

    def __init__(self, table: str, column: str = "NULL") -> None:
        self.table = table
        self.column = column
        self._wheres: list[tuple[str, str]] = []
        self._using: list[QueryCallback] = []

    @property
    def wheres(self) -> list[tuple[str, str]]:
        """Copy of the (column, value) where clauses in insertion order."""
        return list(self._wheres)

    def where(self, column: str | QueryCallback, value: Any = None) -> Self:
        """Add a where clause.

        A callable column registers a query callback, a list value becomes
        ``where_in`` and a None value becomes ``where_null``.
        """
        if callable(column):
            return self.using(column)
        if isinstance(value, (list, tuple, set, frozenset)):
            return self.where_in(column, value)
        if value is None:
            return self.where_null(column)
        self._wheres.append((column, _scalar(value)))
        return self

    def where_not(self, column: str, value: Any) -> Self:
        """Add a negated where clause (``!value``)."""
        if isinstance(value, (list, tuple, set, frozenset)):
            return self.where_not_in(column, value)
        return self.where(column, "!" + _scalar(value))

    def where_null(self, column: str) -> Self:
        return self.where(column, "NULL")

    def where_not_null(self, column: str) -> Self:
        return self.where(column, "NOT_NULL")

    def where_in(self, column: str, values: Iterable[Any]) -> Self:
        """Constrain the column to a set of values through a query callback."""
        items = [enum_value(v) for v in values]
        return self.using(lambda query: query.where_in(column, items))

    def where_not_in(self, column: str, values: Iterable[Any]) -> Self:
        """Exclude a set of values through a query callback."""
        items = [enum_value(v) for v in values]
        return self.using(lambda query: query.where_not_in(column, items))

    def without_trashed(self, deleted_at_column: str = "deleted_at") -> Self:
        """Only consider rows that are not soft deleted."""
        return self.where_null(deleted_at_column)

    def only_trashed(self, deleted_at_column: str = "deleted_at") -> Self:
        """Only consider rows that are soft deleted."""
        return self.where_not_null(deleted_at_column)

    def using(self, callback: QueryCallback) -> Self:
        """Register a callback the host applies to its query builder."""
        self._using.append(callback)
        return self

    def query_callbacks(self) -> list[QueryCallback]:
        return list(self._using)

    def _format_wheres(self) -> str:
        return ",".join(f"{column},{_quote(value)}" for column, value in self._wheres)


class Exists(DatabaseRule):
    """Value must exist in ``table.column``."""

    rule_name = "exists"

    def __str__(self) -> str:
        return f"exists:{self.table},{self.column},{self._format_wheres()}".rstrip(",")


class Unique(DatabaseRule):
    """Value must not already exist in ``table.column``."""

    rule_name = "unique"

    def __init__(self, table: str, column: str = "NULL") -> None:
        super().__init__(table, column)
        self._ignore: Any = None
        self.id_column = "id"

    def ignore(self, id: Any, id_column: str | None = None) -> Self:
        """Ignore the row whose ``id_column`` equals ``id`` (e.g. the row being updated)."""
        self._ignore = id
        self.id_column = id_column or "id"
        return self

    def ignore_model(self, model: Any, id_column: str | None = None) -> Self:
        """Ignore the row backing ``model``, reading its id attribute."""
        self.id_column = id_column or "id"
        self._ignore = getattr(model, self.id_column)
        return self

    def __str__(self) -> str:
        if self._ignore is None or self._ignore == "":
            ignore = "NULL"
        else:
            ignore = '"' + _addslashes(_scalar(self._ignore)) + '"'
        token = f"unique:{self.table},{self.column},{ignore},{self.id_column},"
        return (token + self._format_wheres()).rstrip(",")


class In(RuleObject):
    """Value must be one of a fixed list."""

    rule_name = "in"

    def __init__(self, values: Any) -> None:
        self.values = [enum_value(v) for v in _as_list(values)]

    def __str__(self) -> str:
        return f"{self.rule_name}:" + ",".join(_quote(v) for v in self.values)


class NotIn(In):
    """Value must not be one of a fixed list."""

    rule_name = "not_in"


class Enum(RuleObject):
    """Value must be the value of a member of an enum class.

    Renders as the equivalent ``in:`` token over the allowed member values.
    """

    rule_name = "enum"

    def __init__(self, enum_class: type[enum.Enum]) -> None:
        if not (isinstance(enum_class, type) and issubclass(enum_class, enum.Enum)):
            raise TypeError(f"Enum rule requires an enum class, got {enum_class!r}")
        self.enum_class = enum_class
        self._only: list[enum.Enum] = []
        self._except: list[enum.Enum] = []

    def only(self, values: enum.Enum | Iterable[enum.Enum]) -> Self:
        """Restrict the allowed members."""
        self._only.extend(_as_list(values))
        return self

    def except_(self, values: enum.Enum | Iterable[enum.Enum]) -> Self:
        """Remove members from the allowed set."""
        self._except.extend(_as_list(values))
        return self

    def allowed_values(self) -> list[Any]:
        members = list(self.enum_class)
        if self._only:
            members = [m for m in members if m in self._only]
        return [m.value for m in members if m not in self._except]

    def __str__(self) -> str:
        return str(In(self.allowed_values()))
