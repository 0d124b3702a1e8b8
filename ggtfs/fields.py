"""Field types of GTFS files and the checks applied to single field values."""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Callable, Optional

from ggtfs.notices import (
    InvalidBikesAllowedNotice,
    InvalidCalendarDayNotice,
    InvalidCalendarExceptionNotice,
    InvalidCharacterNotice,
    InvalidColorNotice,
    InvalidContinuousDropOffNotice,
    InvalidContinuousPickupNotice,
    InvalidCurrencyAmountNotice,
    InvalidDateNotice,
    InvalidDirectionIdNotice,
    InvalidDropOffTypeNotice,
    InvalidEmailNotice,
    InvalidFloatNotice,
    InvalidIntegerNotice,
    InvalidLanguageCodeNotice,
    InvalidLatitudeNotice,
    InvalidLocationTypeNotice,
    InvalidLongitudeNotice,
    InvalidPhoneNumberNotice,
    InvalidPickupTypeNotice,
    InvalidRouteTypeNotice,
    InvalidTimeNotice,
    InvalidTimepointNotice,
    InvalidTimezoneNotice,
    InvalidURLNotice,
    InvalidWheelchairAccessibleNotice,
    InvalidWheelchairBoardingValueNotice,
    MissingRequiredFieldNotice,
    SingleLineNotice,
    ValidationNotice,
)


class FieldType(str, Enum):
    """The kind of value a GTFS field holds."""

    COLOR = "Color"
    CURRENCY_CODE = "CurrencyCode"
    CURRENCY_AMOUNT = "CurrencyAmount"
    DATE = "Date"
    EMAIL = "Email"
    ID = "ID"
    LANGUAGE_CODE = "LanguageCode"
    LATITUDE = "Latitude"
    LONGITUDE = "Longitude"
    FLOAT = "Float"
    INTEGER = "Integer"
    PHONE_NUMBER = "PhoneNumber"
    TIME = "Time"
    TEXT = "Text"
    TIMEZONE = "Timezone"
    URL = "URL"
    CALENDAR_DAY = "CalendarDay"
    CALENDAR_EXCEPTION = "CalendarException"
    ROUTE_TYPE = "RouteType"
    CONTINUOUS_PICKUP = "ContinuousPickup"
    CONTINUOUS_DROP_OFF = "ContinuousDropOff"
    LOCATION_TYPE = "LocationType"
    WHEELCHAIR_BOARDING = "WheelchairBoarding"
    PICKUP_TYPE = "PickupType"
    DROP_OFF_TYPE = "DropOffType"
    TIMEPOINT = "Timepoint"
    DIRECTION_ID = "DirectionId"
    WHEELCHAIR_ACCESSIBLE = "WheelchairAccessible"
    BIKES_ALLOWED = "BikesAllowed"


def string_is_nil_or_empty(value: Optional[str]) -> bool:
    """Return True when the value is missing or holds only whitespace."""
    return value is None or value.strip() == ""


# --- numbers -------------------------------------------------------------

_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_DEC_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+", re.ASCII
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?inf(?:inity)?|nan", re.ASCII | re.IGNORECASE)


def _parse_int(value: str) -> Optional[int]:
    """Parse a 64-bit decimal integer; None when the text is not one."""
    if not _INT_RE.fullmatch(value):
        return None
    number = int(value)
    if number < _INT64_MIN or number > _INT64_MAX:
        return None
    return number


def _parse_float(value: str) -> Optional[float]:
    """Parse a 64-bit float; None on bad syntax or overflow."""
    if _SPECIAL_FLOAT_RE.fullmatch(value):
        return float(value)
    if _DEC_FLOAT_RE.fullmatch(value):
        number = float(value)
        return None if math.isinf(number) else number
    if _HEX_FLOAT_RE.fullmatch(value):
        try:
            return float.fromhex(value)
        except OverflowError:
            return None
    return None


def _is_integer(value: str) -> bool:
    return _parse_int(value) is not None


def _is_float(value: str) -> bool:
    return _parse_float(value) is not None


def _int_between(low: int, high: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        number = _parse_int(value)
        return number is not None and low <= number <= high

    return check


# --- URLs ----------------------------------------------------------------

_HOST_SAFE = set("-_.~!$&'()*+,;=:[]<>\"")
_USERINFO_SAFE = set("-._:~!$&'()*+,;=%@")
_HEX_DIGITS = set("0123456789abcdefABCDEF")


def _valid_escapes(text: str) -> bool:
    parts = text.split("%")
    return all(len(part) >= 2 and part[0] in _HEX_DIGITS and part[1] in _HEX_DIGITS for part in parts[1:])


def _valid_optional_port(port: str) -> bool:
    if port == "":
        return True
    return port[0] == ":" and all(c.isascii() and c.isdigit() for c in port[1:])


def _valid_host(host: str) -> bool:
    if host.startswith("["):
        end = host.rfind("]")
        if end < 0 or not _valid_optional_port(host[end + 1 :]):
            return False
    else:
        colon = host.rfind(":")
        if colon != -1 and not _valid_optional_port(host[colon:]):
            return False
    if not _valid_escapes(host):
        return False
    return all(
        c == "%" or not c.isascii() or c.isalnum() or c in _HOST_SAFE for c in host
    )


def _valid_authority(authority: str) -> bool:
    userinfo, at, host = authority.rpartition("@")
    if at and not all(c.isascii() and (c.isalnum() or c in _USERINFO_SAFE) for c in userinfo):
        return False
    return _valid_host(host)


def _split_scheme(value: str) -> Optional[tuple[str, str]]:
    """Split off a URI scheme; None when a ':' comes first."""
    for index, char in enumerate(value):
        if char.isascii() and char.isalpha():
            continue
        if char.isascii() and (char.isdigit() or char in "+-."):
            if index == 0:
                return "", value
            continue
        if char == ":":
            if index == 0:
                return None
            return value[:index], value[index + 1 :]
        return "", value
    return "", value


def _is_request_uri(value: str) -> bool:
    """Accept an absolute URI or an absolute path, as a request line would."""
    if not value or any(ord(c) < 0x20 or ord(c) == 0x7F for c in value):
        return False
    if value == "*":
        return True
    split = _split_scheme(value)
    if split is None:
        return False
    scheme, rest = split
    if rest.endswith("?") and rest.count("?") == 1:
        rest = rest[:-1]
    else:
        rest = rest.partition("?")[0]
    if not rest.startswith("/"):
        return scheme != ""
    if scheme and rest.startswith("//"):
        authority, slash, path = rest[2:].partition("/")
        if not _valid_authority(authority):
            return False
        rest = slash + path
    return _valid_escapes(rest)


# --- e-mail addresses ----------------------------------------------------

_ATOM = r"[A-Za-z0-9!#$%&'*+\-/=?^_`{|}~\u0080-\U0010ffff]+"
_QUOTED = r'"(?:[^"\\]|\\.)+"'
_DOT_ATOM = rf"{_ATOM}(?:\.{_ATOM})*"
_ADDR_SPEC = rf"(?:{_DOT_ATOM}|{_QUOTED})@(?:{_DOT_ATOM}|\[[^\[\]\\]*\])"
_WORD = rf"(?:{_ATOM}(?:\.{_ATOM})*\.?|{_QUOTED})"
_MAILBOX_RE = re.compile(
    rf"[ \t]*(?:{_ADDR_SPEC}|(?:{_WORD}(?:[ \t]+{_WORD})*)?[ \t]*<{_ADDR_SPEC}>)[ \t]*"
)


def _is_email(value: str) -> bool:
    return _MAILBOX_RE.fullmatch(value) is not None


# --- pattern checks ------------------------------------------------------


def _matches(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern, re.ASCII)
    return lambda value: compiled.fullmatch(value) is not None


_CHECKS: dict[FieldType, tuple[Callable[[str], bool], type[SingleLineNotice]]] = {
    FieldType.URL: (_is_request_uri, InvalidURLNotice),
    FieldType.TIMEZONE: (_matches(r"[A-Za-z]+/[A-Za-z_]+"), InvalidTimezoneNotice),
    FieldType.LANGUAGE_CODE: (_matches(r"[a-zA-Z]{2,3}(?:-[a-zA-Z]{2,3})?"), InvalidLanguageCodeNotice),
    FieldType.PHONE_NUMBER: (_matches(r"[0-9\t\n\f\r \-+()]{5,}"), InvalidPhoneNumberNotice),
    FieldType.EMAIL: (_is_email, InvalidEmailNotice),
    FieldType.COLOR: (_matches(r"[0-9A-Fa-f]{6}"), InvalidColorNotice),
    FieldType.INTEGER: (_is_integer, InvalidIntegerNotice),
    FieldType.FLOAT: (_is_float, InvalidFloatNotice),
    FieldType.TIME: (
        _matches(
            r"(?:[0-3][0-9]|4[0-7]):[0-5][0-9]:[0-5][0-9]"
            r"|(?:[0-9]|1[0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9]"
        ),
        InvalidTimeNotice,
    ),
    # A malformed currency code is reported with the currency amount notice.
    FieldType.CURRENCY_CODE: (_matches(r"[A-Z]{3}"), InvalidCurrencyAmountNotice),
    FieldType.CURRENCY_AMOUNT: (_is_float, InvalidCurrencyAmountNotice),
    FieldType.DATE: (
        _matches(r"(?:19|20)[0-9]{2}(?:0[1-9]|1[0-2])(?:0[1-9]|[12][0-9]|3[01])"),
        InvalidDateNotice,
    ),
    # Coordinates are checked for syntax only; any parsable float passes.
    FieldType.LATITUDE: (_is_float, InvalidLatitudeNotice),
    FieldType.LONGITUDE: (_is_float, InvalidLongitudeNotice),
    FieldType.CALENDAR_DAY: (_int_between(0, 1), InvalidCalendarDayNotice),
    FieldType.CALENDAR_EXCEPTION: (_int_between(1, 2), InvalidCalendarExceptionNotice),
    # Any integer is accepted as a route type.
    FieldType.ROUTE_TYPE: (_is_integer, InvalidRouteTypeNotice),
    FieldType.CONTINUOUS_PICKUP: (_int_between(1, 4), InvalidContinuousPickupNotice),
    FieldType.CONTINUOUS_DROP_OFF: (_int_between(1, 4), InvalidContinuousDropOffNotice),
    FieldType.LOCATION_TYPE: (_int_between(0, 4), InvalidLocationTypeNotice),
    FieldType.WHEELCHAIR_BOARDING: (_int_between(0, 2), InvalidWheelchairBoardingValueNotice),
    FieldType.PICKUP_TYPE: (_int_between(0, 3), InvalidPickupTypeNotice),
    FieldType.DROP_OFF_TYPE: (_int_between(0, 3), InvalidDropOffTypeNotice),
    FieldType.TIMEPOINT: (_int_between(0, 1), InvalidTimepointNotice),
    FieldType.DIRECTION_ID: (_int_between(0, 1), InvalidDirectionIdNotice),
    FieldType.WHEELCHAIR_ACCESSIBLE: (_int_between(0, 2), InvalidWheelchairAccessibleNotice),
    FieldType.BIKES_ALLOWED: (_int_between(0, 2), InvalidBikesAllowedNotice),
}


def _is_valid_utf8(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def validate_field(
    field_type: FieldType,
    field_name: str,
    field_value: Optional[str],
    is_required: bool,
    file_name: str,
    line: int,
) -> list[ValidationNotice]:
    """Check one field value and return the notices it raises."""
    if not field_value:
        if is_required:
            return [MissingRequiredFieldNotice(file_name, field_name, line)]
        return []

    notices: list[ValidationNotice] = []
    if not _is_valid_utf8(field_value):
        notices.append(InvalidCharacterNotice(file_name, field_name, line))

    check = _CHECKS.get(FieldType(field_type))
    if check is not None:
        is_valid, notice_type = check
        if not is_valid(field_value):
            notices.append(notice_type(file_name, field_name, line))

    return notices


def is_location_type_valid(location_type: Optional[str]) -> bool:
    """Return True when the value is an integer location type from 0 to 4."""
    if location_type is None:
        return False
    number = _parse_int(location_type)
    return number is not None and 0 <= number <= 4