"""The host validator's rule vocabulary as fluent builder methods.

Each method appends exactly one rule token (or nothing, for ``dimensions``
without constraints) and records the optional ``message`` override under
``"<key>.<rule_name>"``.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from typing import Any, Self, TypeVar

from ryandata_validation_rules.rules.base import BaseRules
from ryandata_validation_rules.rules.factory import RuleObjectFactory
from ryandata_validation_rules.rules.objects import Enum, Exists, Unique

R = TypeVar("R")

Fields = str | Sequence[str]
Values = Any


def _apply(callback: Callable[[R], R | None] | None, rule: R) -> R:
    """Let a callback adjust a rule object; a None result keeps the original."""
    if callback is None:
        return rule
    result = callback(rule)
    return rule if result is None else result


def _ascii(is_ascii: bool) -> list[str]:
    return ["ascii"] if is_ascii else []


class StandardRules(BaseRules):
    """Rule builder exposing every rule the host validator understands.

    Example:
        >>> StandardRules("email").required().email().max(255).rules()
        ['required', 'email', 'max:255']
    """

    # -------------------------------------------------------------------------
    # Presence
    # -------------------------------------------------------------------------

    def bail(self, message: str | None = None) -> Self:
        """Stop running rules for the field after the first failure."""
        return self._add("bail", message)

    def required(self, message: str | None = None) -> Self:
        """Value must be present and not empty."""
        return self._add("required", message)

    def required_if(self, field: str, value: Values, message: str | None = None) -> Self:
        """Required when ``field`` equals ``value``."""
        return self._add("required_if", message, [field, value])

    def required_if_accepted(self, fields: Fields, message: str | None = None) -> Self:
        """Required when the other field(s) are accepted."""
        return self._add("required_if_accepted", message, fields)

    def required_if_declined(self, fields: Fields, message: str | None = None) -> Self:
        """Required when the other field(s) are declined."""
        return self._add("required_if_declined", message, fields)

    def required_unless(self, field: str, value: Values, message: str | None = None) -> Self:
        """Required unless ``field`` equals ``value``."""
        return self._add("required_unless", message, [field, value])

    def required_with(self, fields: Fields, message: str | None = None) -> Self:
        """Required when any of the other fields is present."""
        return self._add("required_with", message, fields)

    def required_with_all(self, fields: Fields, message: str | None = None) -> Self:
        """Required when all of the other fields are present."""
        return self._add("required_with_all", message, fields)

    def required_without(self, fields: Fields, message: str | None = None) -> Self:
        """Required when any of the other fields is missing."""
        return self._add("required_without", message, fields)

    def required_without_all(self, fields: Fields, message: str | None = None) -> Self:
        """Required when all of the other fields are missing."""
        return self._add("required_without_all", message, fields)

    def required_array_keys(self, keys: Fields, message: str | None = None) -> Self:
        """Value must be an array containing at least the given keys."""
        return self._add("required_array_keys", message, keys)

    def filled(self, message: str | None = None) -> Self:
        """Value must not be empty when present."""
        return self._add("filled", message)

    def nullable(self, message: str | None = None) -> Self:
        """Value may be null."""
        return self._add("nullable", message)

    def present(self, message: str | None = None) -> Self:
        """Field must be present, though it may be empty."""
        return self._add("present", message)

    def present_if(self, field: str, value: Values, message: str | None = None) -> Self:
        return self._add("present_if", message, [field, value])

    def present_unless(self, field: str, value: Values, message: str | None = None) -> Self:
        return self._add("present_unless", message, [field, value])

    def present_with(self, field: Fields, message: str | None = None) -> Self:
        return self._add("present_with", message, field)

    def present_with_all(self, fields: Fields, message: str | None = None) -> Self:
        return self._add("present_with_all", message, fields)

    def missing(self, message: str | None = None) -> Self:
        """Field must not be present."""
        return self._add("missing", message)

    def missing_if(self, field: str, values: Values, message: str | None = None) -> Self:
        """Field must not be present when ``field`` equals any of ``values``."""
        return self._add("missing_if", message, [field, values])

    def missing_unless(self, field: str, values: Values, message: str | None = None) -> Self:
        return self._add("missing_unless", message, [field, values])

    def missing_with(self, fields: Fields, message: str | None = None) -> Self:
        return self._add("missing_with", message, fields)

    def missing_with_all(self, fields: Fields, message: str | None = None) -> Self:
        return self._add("missing_with_all", message, fields)

    def prohibited(self, message: str | None = None) -> Self:
        """Field must be missing or empty."""
        return self._add("prohibited", message)

    def prohibited_if(self, field: str, values: Values, message: str | None = None) -> Self:
        return self._add("prohibited_if", message, [field, values])

    def prohibited_unless(self, field: str, values: Values, message: str | None = None) -> Self:
        return self._add("prohibited_unless", message, [field, values])

    def prohibits(self, fields: Fields, message: str | None = None) -> Self:
        """When this field is present, the other fields must be missing or empty."""
        return self._add("prohibits", message, fields)

    def exclude(self, message: str | None = None) -> Self:
        """Drop the field from the validated data."""
        return self._add("exclude", message)

    def exclude_if(self, field: str, value: Values, message: str | None = None) -> Self:
        return self._add("exclude_if", message, [field, value])

    def exclude_unless(self, field: str, value: Values, message: str | None = None) -> Self:
        return self._add("exclude_unless", message, [field, value])

    def exclude_with(self, fields: Fields, message: str | None = None) -> Self:
        return self._add("exclude_with", message, fields)

    def exclude_without(self, field: str, message: str | None = None) -> Self:
        return self._add("exclude_without", message, field)

    # -------------------------------------------------------------------------
    # Acceptance
    # -------------------------------------------------------------------------

    def accepted(self, message: str | None = None) -> Self:
        """Value must be "yes", "on", 1, "1", true or "true"."""
        return self._add("accepted", message)

    def accepted_if(self, field: str, value: Values, message: str | None = None) -> Self:
        """Accepted when ``field`` equals ``value``."""
        return self._add("accepted_if", message, [field, value])

    def declined(self, message: str | None = None) -> Self:
        """Value must be "no", "off", 0, "0", false or "false"."""
        return self._add("declined", message)

    def declined_if(self, field: str, value: Values, message: str | None = None) -> Self:
        """Declined when ``field`` equals ``value``."""
        return self._add("declined_if", message, [field, value])

    # -------------------------------------------------------------------------
    # Types
    # -------------------------------------------------------------------------

    def array(self, accept_keys: Fields = (), message: str | None = None) -> Self:
        """Value must be an array, optionally limited to the given keys."""
        return self._add("array", message, accept_keys)

    def list_(self, message: str | None = None) -> Self:
        """Value must be an array with consecutive keys from 0."""
        return self._add("list", message)

    def boolean(self, message: str | None = None) -> Self:
        return self._add("boolean", message)

    def integer(self, message: str | None = None) -> Self:
        return self._add("integer", message)

    def numeric(self, message: str | None = None) -> Self:
        return self._add("numeric", message)

    def string(self, message: str | None = None) -> Self:
        return self._add("string", message)

    def json(self, message: str | None = None) -> Self:
        """Value must be a valid JSON string."""
        return self._add("json", message)

    def file(self, message: str | None = None) -> Self:
        """Value must be a successfully uploaded file."""
        return self._add("file", message)

    def image(self, message: str | None = None) -> Self:
        """Value must be an uploaded image."""
        return self._add("image", message)

    def enum(
        self,
        enum_class: type[enum.Enum],
        callback: Callable[[Enum], Enum | None] | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must be the value of a member of ``enum_class``.

        Args:
            enum_class: Enum whose member values are allowed.
            callback: Receives the Enum rule (e.g. to call ``only``/``except_``).
            message: Message override for the ``enum`` rule.
        """
        rule = _apply(callback, RuleObjectFactory.create("enum", enum_class))
        return self._add("enum", message, rule=rule)

    # -------------------------------------------------------------------------
    # Strings
    # -------------------------------------------------------------------------

    def alpha(self, is_ascii: bool = False, message: str | None = None) -> Self:
        """Value must be entirely alphabetic (ASCII only with ``is_ascii``)."""
        return self._add("alpha", message, _ascii(is_ascii))

    def alpha_dash(self, is_ascii: bool = False, message: str | None = None) -> Self:
        """Value may hold alphanumerics, dashes and underscores."""
        return self._add("alpha_dash", message, _ascii(is_ascii))

    def alpha_num(self, is_ascii: bool = False, message: str | None = None) -> Self:
        """Value must be entirely alphanumeric."""
        return self._add("alpha_num", message, _ascii(is_ascii))

    def ascii(self, message: str | None = None) -> Self:
        """Value must only contain 7-bit ASCII characters."""
        return self._add("ascii", message)

    def lowercase(self, message: str | None = None) -> Self:
        return self._add("lowercase", message)

    def uppercase(self, message: str | None = None) -> Self:
        return self._add("uppercase", message)

    def starts_with(self, values: Values, message: str | None = None) -> Self:
        return self._add("starts_with", message, values)

    def ends_with(self, values: Values, message: str | None = None) -> Self:
        return self._add("ends_with", message, values)

    def doesnt_start_with(self, values: Values, message: str | None = None) -> Self:
        return self._add("doesnt_start_with", message, values)

    def doesnt_end_with(self, values: Values, message: str | None = None) -> Self:
        return self._add("doesnt_end_with", message, values)

    def regex(self, pattern: str, message: str | None = None) -> Self:
        """Value must match ``pattern`` (delimited, e.g. ``/^[a-z]+$/``)."""
        return self._add("regex", message, pattern)

    def not_regex(self, pattern: str, message: str | None = None) -> Self:
        """Value must not match ``pattern``."""
        return self._add("not_regex", message, pattern)

    def email(self, message: str | None = None) -> Self:
        return self._add("email", message)

    def url(self, message: str | None = None) -> Self:
        return self._add("url", message)

    def active_url(self, message: str | None = None) -> Self:
        """Value must be a URL whose host has a DNS record."""
        return self._add("active_url", message)

    def ip(self, message: str | None = None) -> Self:
        return self._add("ip", message)

    def ipv4(self, message: str | None = None) -> Self:
        return self._add("ipv4", message)

    def ipv6(self, message: str | None = None) -> Self:
        return self._add("ipv6", message)

    def mac_address(self, message: str | None = None) -> Self:
        return self._add("mac_address", message)

    def hex_color(self, message: str | None = None) -> Self:
        return self._add("hex_color", message)

    def uuid(self, message: str | None = None) -> Self:
        return self._add("uuid", message)

    def ulid(self, message: str | None = None) -> Self:
        return self._add("ulid", message)

    def timezone(self, identifiers: Values = (), message: str | None = None) -> Self:
        """Value must be a timezone identifier, optionally limited (e.g. ``"all"``)."""
        return self._add("timezone", message, identifiers)

    # -------------------------------------------------------------------------
    # Sizes and numbers
    # -------------------------------------------------------------------------

    def between(
        self, min_value: int | float, max_value: int | float, message: str | None = None
    ) -> Self:
        """Size must lie between ``min_value`` and ``max_value`` inclusive."""
        return self._add("between", message, [min_value, max_value])

    def min(self, value: int | float, message: str | None = None) -> Self:
        return self._add("min", message, value)

    def max(self, value: int | float, message: str | None = None) -> Self:
        return self._add("max", message, value)

    def size(self, value: int | float, message: str | None = None) -> Self:
        """Size must equal ``value`` (length, count, number or kilobytes)."""
        return self._add("size", message, value)

    def digits(self, length: int, message: str | None = None) -> Self:
        """Value must be numeric with exactly ``length`` digits."""
        return self._add("digits", message, length)

    def digits_between(self, min_value: int, max_value: int, message: str | None = None) -> Self:
        return self._add("digits_between", message, [min_value, max_value])

    def min_digits(self, value: int, message: str | None = None) -> Self:
        return self._add("min_digits", message, value)

    def max_digits(self, value: int, message: str | None = None) -> Self:
        return self._add("max_digits", message, value)

    def decimal(
        self, min_places: int, max_places: int | None = None, message: str | None = None
    ) -> Self:
        """Value must be numeric with the given number of decimal places."""
        values = min_places if max_places is None else [min_places, max_places]
        return self._add("decimal", message, values)

    def multiple_of(self, value: int | float, message: str | None = None) -> Self:
        return self._add("multiple_of", message, value)

    # -------------------------------------------------------------------------
    # Comparison with other fields
    # -------------------------------------------------------------------------

    def confirmed(self, message: str | None = None) -> Self:
        """A matching ``<key>_confirmation`` field must be present."""
        return self._add("confirmed", message)

    def same(self, field: str, message: str | None = None) -> Self:
        return self._add("same", message, field)

    def different(self, field: str, message: str | None = None) -> Self:
        return self._add("different", message, field)

    def gt(self, field: str, message: str | None = None) -> Self:
        """Value must be greater than the other field."""
        return self._add("gt", message, field)

    def gte(self, field: str, message: str | None = None) -> Self:
        return self._add("gte", message, field)

    def lt(self, field: str, message: str | None = None) -> Self:
        """Value must be less than the other field."""
        return self._add("lt", message, field)

    def lte(self, field: str, message: str | None = None) -> Self:
        return self._add("lte", message, field)

    def current_password(self, guard: str = "web", message: str | None = None) -> Self:
        """Value must match the authenticated user's password."""
        return self._add("current_password", message, guard)

    # -------------------------------------------------------------------------
    # Dates
    # -------------------------------------------------------------------------

    def date(self, message: str | None = None) -> Self:
        return self._add("date", message)

    def date_equals(self, date: str, message: str | None = None) -> Self:
        return self._add("date_equals", message, date)

    def date_format(self, date_format: str, message: str | None = None) -> Self:
        """Value must match ``date_format`` (see ``DateFormat``)."""
        return self._add("date_format", message, date_format)

    def after(self, date: str, message: str | None = None) -> Self:
        """Value must be a date after ``date`` (a date string or another field)."""
        return self._add("after", message, date)

    def after_or_equal(self, date: str, message: str | None = None) -> Self:
        return self._add("after_or_equal", message, date)

    def before(self, date: str, message: str | None = None) -> Self:
        """Value must be a date before ``date`` (a date string or another field)."""
        return self._add("before", message, date)

    def before_or_equal(self, date: str, message: str | None = None) -> Self:
        return self._add("before_or_equal", message, date)

    # -------------------------------------------------------------------------
    # Lists and membership
    # -------------------------------------------------------------------------

    def in_(self, values: Values, message: str | None = None) -> Self:
        """Value must be one of ``values``."""
        rule = RuleObjectFactory.create("in", values)
        return self._add("in", message, rule=rule)

    def not_in(self, values: Values, message: str | None = None) -> Self:
        """Value must not be one of ``values``."""
        rule = RuleObjectFactory.create("not_in", values)
        return self._add("not_in", message, rule=rule)

    def in_array(self, field: str, key: str, message: str | None = None) -> Self:
        """Value must exist in the other field's values (``field.key``)."""
        return self._add("in_array", message, [field, key])

    def contains(self, values: Values, message: str | None = None) -> Self:
        """Array value must contain all of ``values``."""
        return self._add("contains", message, values)

    def distinct(
        self, strict: bool = False, ignore_case: bool = False, message: str | None = None
    ) -> Self:
        """Array items must not repeat."""
        values = []
        if strict:
            values.append("strict")
        if ignore_case:
            values.append("ignore_case")
        return self._add("distinct", message, values)

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def extensions(self, extensions: Values, message: str | None = None) -> Self:
        """Uploaded file must have one of the user-assigned extensions."""
        return self._add("extensions", message, extensions)

    def mimes(self, extensions: Values, message: str | None = None) -> Self:
        """Uploaded file MIME type must map to one of the extensions."""
        return self._add("mimes", message, extensions)

    def mimetypes(self, mimetypes: Values, message: str | None = None) -> Self:
        return self._add("mimetypes", message, mimetypes)

    def dimensions(
        self,
        width: int | None = None,
        height: int | None = None,
        min_width: int | None = None,
        min_height: int | None = None,
        max_width: int | None = None,
        max_height: int | None = None,
        ratio: float | str | None = None,
        message: str | None = None,
    ) -> Self:
        """Image must meet the given dimension constraints.

        Nothing is added when every constraint is None.
        """
        constraints = {
            "width": width,
            "height": height,
            "min_width": min_width,
            "min_height": min_height,
            "max_width": max_width,
            "max_height": max_height,
            "ratio": ratio,
        }
        values = [f"{name}={value}" for name, value in constraints.items() if value is not None]
        if not values:
            return self
        return self._add("dimensions", message, values)

    # -------------------------------------------------------------------------
    # Database
    # -------------------------------------------------------------------------

    def exists(
        self,
        table: str,
        column: str | None = None,
        callback: Callable[[Exists], Exists | None] | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must exist in ``table.column``; the column defaults to the key.

        Args:
            table: Table (or ``connection.table``) to look in.
            column: Column to match; defaults to the field key.
            callback: Receives the Exists rule to add where clauses.
            message: Message override for the ``exists`` rule.
        """
        if column is None:
            column = self._key
        rule = _apply(callback, RuleObjectFactory.create("exists", table, column))
        return self._add("exists", message, rule=rule)

    def unique(
        self,
        table: str,
        column: str | None = None,
        callback: Callable[[Unique], Unique | None] | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must not exist in ``table.column``; the column defaults to the key.

        Args:
            table: Table (or ``connection.table``) to look in.
            column: Column to match; defaults to the field key.
            callback: Receives the Unique rule to add ignores and where clauses.
            message: Message override for the ``unique`` rule.
        """
        if column is None:
            column = self._key
        rule = _apply(callback, RuleObjectFactory.create("unique", table, column))
        return self._add("unique", message, rule=rule)
