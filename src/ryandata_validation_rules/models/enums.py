"""Rule name and date format enumerations."""

from __future__ import annotations

from enum import Enum


class RuleName(str, Enum):
    """Enumeration of every rule token name the builder can emit."""

    ACCEPTED = "accepted"
    ACCEPTED_IF = "accepted_if"
    ACTIVE_URL = "active_url"
    AFTER = "after"
    AFTER_OR_EQUAL = "after_or_equal"
    ALPHA = "alpha"
    ALPHA_DASH = "alpha_dash"
    ALPHA_NUM = "alpha_num"
    ARRAY = "array"
    ASCII = "ascii"
    BAIL = "bail"
    BEFORE = "before"
    BEFORE_OR_EQUAL = "before_or_equal"
    BETWEEN = "between"
    BOOLEAN = "boolean"
    CONFIRMED = "confirmed"
    CONTAINS = "contains"
    CURRENT_PASSWORD = "current_password"
    DATE = "date"
    DATE_EQUALS = "date_equals"
    DATE_FORMAT = "date_format"
    DECIMAL = "decimal"
    DECLINED = "declined"
    DECLINED_IF = "declined_if"
    DIFFERENT = "different"
    DIGITS = "digits"
    DIGITS_BETWEEN = "digits_between"
    DIMENSIONS = "dimensions"
    DISTINCT = "distinct"
    DOESNT_START_WITH = "doesnt_start_with"
    DOESNT_END_WITH = "doesnt_end_with"
    EMAIL = "email"
    ENDS_WITH = "ends_with"
    ENUM = "enum"
    EXCLUDE = "exclude"
    EXCLUDE_IF = "exclude_if"
    EXCLUDE_UNLESS = "exclude_unless"
    EXCLUDE_WITH = "exclude_with"
    EXCLUDE_WITHOUT = "exclude_without"
    EXISTS = "exists"
    EXTENSIONS = "extensions"
    FILE = "file"
    FILLED = "filled"
    GT = "gt"
    GTE = "gte"
    HEX_COLOR = "hex_color"
    IMAGE = "image"
    IN = "in"
    IN_ARRAY = "in_array"
    INTEGER = "integer"
    IP = "ip"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    JSON = "json"
    LT = "lt"
    LTE = "lte"
    LOWERCASE = "lowercase"
    LIST = "list"
    MAC_ADDRESS = "mac_address"
    MAX = "max"
    MAX_DIGITS = "max_digits"
    MIMETYPES = "mimetypes"
    MIMES = "mimes"
    MIN = "min"
    MIN_DIGITS = "min_digits"
    MULTIPLE_OF = "multiple_of"
    MISSING = "missing"
    MISSING_IF = "missing_if"
    MISSING_UNLESS = "missing_unless"
    MISSING_WITH = "missing_with"
    MISSING_WITH_ALL = "missing_with_all"
    NOT_IN = "not_in"
    NOT_REGEX = "not_regex"
    NULLABLE = "nullable"
    NUMERIC = "numeric"
    PRESENT = "present"
    PRESENT_IF = "present_if"
    PRESENT_UNLESS = "present_unless"
    PRESENT_WITH = "present_with"
    PRESENT_WITH_ALL = "present_with_all"
    PROHIBITED = "prohibited"
    PROHIBITED_IF = "prohibited_if"
    PROHIBITED_UNLESS = "prohibited_unless"
    PROHIBITS = "prohibits"
    REGEX = "regex"
    REQUIRED = "required"
    REQUIRED_IF = "required_if"
    REQUIRED_IF_ACCEPTED = "required_if_accepted"
    REQUIRED_IF_DECLINED = "required_if_declined"
    REQUIRED_UNLESS = "required_unless"
    REQUIRED_WITH = "required_with"
    REQUIRED_WITH_ALL = "required_with_all"
    REQUIRED_WITHOUT = "required_without"
    REQUIRED_WITHOUT_ALL = "required_without_all"
    REQUIRED_ARRAY_KEYS = "required_array_keys"
    SAME = "same"
    SIZE = "size"
    STARTS_WITH = "starts_with"
    STRING = "string"
    TIMEZONE = "timezone"
    UNIQUE = "unique"
    UPPERCASE = "uppercase"
    URL = "url"
    ULID = "ulid"
    UUID = "uuid"


class DateFormat(str, Enum):
    """Date format strings understood by the host validator's ``date_format`` rule."""

    DATE = "Y-m-d"
    TIME = "H:i:s"
    DATE_TIME = "Y-m-d H:i:s"
    YEAR_MONTH = "Y-m"
    MONTH_DAY = "m-d"
    HOUR_MINUTE = "H:i"
    MINUTE_SECOND = "i:s"
    YEAR = "Y"
    MONTH = "n"
    MONTH_ZERO = "m"
    MONTH_NAME = "F"
    MONTH_NAME_SHORT = "M"
    DAY = "j"
    DAY_ZERO = "d"
    HOUR = "G"
    HOUR_ZERO = "H"
    HOUR_TWELVE_NOTATION = "g"
    HOUR_TWELVE_NOTATION_ZERO = "h"
    MINUTE = "i"
    SECOND = "s"


# All rule names as a list
RULE_NAMES: list[str] = [r.value for r in RuleName]
