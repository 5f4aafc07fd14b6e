"""Validation helpers shared by the converters."""

from __future__ import annotations

import datetime
import math
from typing import Any

from excelserial._errors import (
    ERR_MSG_INVALID_DATE_SYSTEM,
    ERR_MSG_INVALID_SERIAL,
    ERR_MSG_TIMEZONE_NOT_SUPPORTED,
    ERR_MSG_UNSUPPORTED_TYPE,
    InvalidDateSystemError,
    InvalidSerialError,
    TimezoneNotSupportedError,
    UnsupportedTypeError,
)
from excelserial.date_system import DateSystem


def resolve_date_system(date_system: DateSystem | str) -> DateSystem:
    """Coerce a DateSystem member or its string value."""
    if isinstance(date_system, DateSystem):
        return date_system
    try:
        return DateSystem(date_system)
    except ValueError as exc:
        raise InvalidDateSystemError(
            ERR_MSG_INVALID_DATE_SYSTEM,
            f"unknown date system {date_system!r}, expected one of "
            f"{[member.value for member in DateSystem]}",
            wrapped=exc,
        ) from exc


def require_type(value: Any, expected: type, context: str) -> None:
    """Reject values that are not instances of the expected civil type."""
    if not isinstance(value, expected):
        raise UnsupportedTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"{context} expects {expected.__name__}, got {type(value).__name__}",
        )


def reject_timezone(value: datetime.time | datetime.datetime) -> None:
    """Excel stores no offset, so only naive values can be converted."""
    if value.tzinfo is not None:
        raise TimezoneNotSupportedError(
            ERR_MSG_TIMEZONE_NOT_SUPPORTED,
            f"value {value.isoformat()} has tzinfo {value.tzinfo!r}",
        )


def validate_serial(serial: Any, *, allow_negative: bool = False) -> float:
    """Return the serial as a float, rejecting non-numeric and non-finite input."""
    if isinstance(serial, bool) or not isinstance(serial, (int, float)):
        raise UnsupportedTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"serial must be int or float, got {type(serial).__name__}",
        )
    value = float(serial)
    if not math.isfinite(value):
        raise InvalidSerialError(
            ERR_MSG_INVALID_SERIAL,
            f"serial {serial!r} is not finite",
        )
    if value < 0 and not allow_negative:
        raise InvalidSerialError(
            ERR_MSG_INVALID_SERIAL,
            f"serial {serial!r} is negative",
        )
    return value
