"""Convenience rules built on top of the standard vocabulary.

Soft-delete aware database rules read their default column names from
``RulesConfig`` (``RYANDATA_RULES_DELETED_AT_COLUMN`` / ``RYANDATA_RULES_ID_COLUMN``).
"""

from __future__ import annotations

from typing import Any, Self

from ryandata_validation_rules.models.enums import DateFormat
from ryandata_validation_rules.rules.objects import Exists, Unique
from ryandata_validation_rules.rules.standard import StandardRules

TEL_PATTERN = "/^[0-9]{2,3}-[0-9]{3,4}-[0-9]{4}$/"
POST_CODE_PATTERN = "/^[0-9]{3}-[0-9]{4}$/"


class ValidationRules(StandardRules):
    """Rule builder with shorthand rules for common field shapes.

    Example:
        >>> ValidationRules("user_id").required().id("users").rules()
        ['required', Exists('exists:users,id')]
    """

    def flag(self, message: str | None = None) -> Self:
        """Value must be 0 or 1."""
        return self.between(0, 1, message)

    # -------------------------------------------------------------------------
    # Date formats
    # -------------------------------------------------------------------------

    def as_date(self, message: str | None = None) -> Self:
        """Value must be a date in ``Y-m-d`` format."""
        return self.date_format(DateFormat.DATE.value, message)

    def as_time(self, message: str | None = None) -> Self:
        """Value must be a time in ``H:i:s`` format."""
        return self.date_format(DateFormat.TIME.value, message)

    def as_date_time(self, message: str | None = None) -> Self:
        """Value must be a datetime in ``Y-m-d H:i:s`` format."""
        return self.date_format(DateFormat.DATE_TIME.value, message)

    def as_year_month(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.YEAR_MONTH.value, message)

    def as_month_day(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.MONTH_DAY.value, message)

    def as_hour_minute(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.HOUR_MINUTE.value, message)

    def as_minute_second(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.MINUTE_SECOND.value, message)

    def as_year(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.YEAR.value, message)

    def as_month(self, message: str | None = None) -> Self:
        """Value must be a month number without leading zero."""
        return self.date_format(DateFormat.MONTH.value, message)

    def as_month_zero(self, message: str | None = None) -> Self:
        """Value must be a zero-padded month number."""
        return self.date_format(DateFormat.MONTH_ZERO.value, message)

    def as_month_name(self, message: str | None = None) -> Self:
        """Value must be a full month name (January)."""
        return self.date_format(DateFormat.MONTH_NAME.value, message)

    def as_month_name_short(self, message: str | None = None) -> Self:
        """Value must be a short month name (Jan)."""
        return self.date_format(DateFormat.MONTH_NAME_SHORT.value, message)

    def as_day(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.DAY.value, message)

    def as_day_zero(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.DAY_ZERO.value, message)

    def as_hour(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.HOUR.value, message)

    def as_hour_zero(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.HOUR_ZERO.value, message)

    def as_hour_twelve_notation(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.HOUR_TWELVE_NOTATION.value, message)

    def as_hour_twelve_notation_zero(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.HOUR_TWELVE_NOTATION_ZERO.value, message)

    def as_minute(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.MINUTE.value, message)

    def as_second(self, message: str | None = None) -> Self:
        return self.date_format(DateFormat.SECOND.value, message)

    # -------------------------------------------------------------------------
    # Patterns
    # -------------------------------------------------------------------------

    def tel(self, message: str | None = None) -> Self:
        """Value must look like a hyphenated telephone number (03-1234-5678)."""
        return self.regex(TEL_PATTERN, message)

    def post_code(self, message: str | None = None) -> Self:
        """Value must look like a hyphenated post code (123-4567)."""
        return self.regex(POST_CODE_PATTERN, message)

    # -------------------------------------------------------------------------
    # Database
    # -------------------------------------------------------------------------

    def _deleted_at(self, deleted_at_column: str | None) -> str:
        return deleted_at_column or self._config.deleted_at_column

    def _id_column(self, id_column: str | None) -> str:
        return id_column or self._config.id_column

    def id(self, table: str, message: str | None = None) -> Self:
        """Value must exist in the id column of ``table``."""
        return self.exists(table, self._id_column(None), message=message)

    def exists_not_deleted(
        self,
        table: str,
        column: str | None = None,
        deleted_at_column: str | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must exist in a row that is not soft deleted."""
        deleted_at = self._deleted_at(deleted_at_column)

        def constrain(rule: Exists) -> Exists:
            return rule.where_null(deleted_at)

        return self.exists(table, column, constrain, message)

    def exists_deleted(
        self,
        table: str,
        column: str | None = None,
        deleted_at_column: str | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must exist in a row that is soft deleted."""
        deleted_at = self._deleted_at(deleted_at_column)

        def constrain(rule: Exists) -> Exists:
            return rule.where_not_null(deleted_at)

        return self.exists(table, column, constrain, message)

    def unique_not_deleted(
        self,
        table: str,
        column: str | None = None,
        deleted_at_column: str | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must not exist among rows that are not soft deleted."""
        deleted_at = self._deleted_at(deleted_at_column)

        def constrain(rule: Unique) -> Unique:
            return rule.where_null(deleted_at)

        return self.unique(table, column, constrain, message)

    def unique_deleted(
        self,
        table: str,
        column: str | None = None,
        deleted_at_column: str | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must not exist among rows that are soft deleted."""
        deleted_at = self._deleted_at(deleted_at_column)

        def constrain(rule: Unique) -> Unique:
            return rule.where_not_null(deleted_at)

        return self.unique(table, column, constrain, message)

    def unique_ignore(
        self,
        table: str,
        column: str | None = None,
        ignore: Any = None,
        ignore_column: str | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must be unique except for the row identified by ``ignore``."""
        id_column = self._id_column(ignore_column)

        def constrain(rule: Unique) -> Unique:
            return rule.ignore(ignore, id_column)

        return self.unique(table, column, constrain, message)

    def unique_ignore_not_deleted(
        self,
        table: str,
        column: str | None = None,
        ignore: Any = None,
        ignore_column: str | None = None,
        deleted_at_column: str | None = None,
        message: str | None = None,
    ) -> Self:
        """Like ``unique_ignore``, among rows that are not soft deleted."""
        id_column = self._id_column(ignore_column)
        deleted_at = self._deleted_at(deleted_at_column)

        def constrain(rule: Unique) -> Unique:
            return rule.ignore(ignore, id_column).where_null(deleted_at)

        return self.unique(table, column, constrain, message)

    def unique_ignore_deleted(
        self,
        table: str,
        column: str | None = None,
        ignore: Any = None,
        ignore_column: str | None = None,
        deleted_at_column: str | None = None,
        message: str | None = None,
    ) -> Self:
        """Like ``unique_ignore``, among rows that are soft deleted."""
        id_column = self._id_column(ignore_column)
        deleted_at = self._deleted_at(deleted_at_column)

        def constrain(rule: Unique) -> Unique:
            return rule.ignore(ignore, id_column).where_not_null(deleted_at)

        return self.unique(table, column, constrain, message)
