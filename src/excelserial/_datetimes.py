"""Combined date-time conversion built from the date and time converters."""

from __future__ import annotations

import datetime
import math

from excelserial._constants import DEFAULT_DATE_SYSTEM, MS_PER_DAY
from excelserial._dates import date_to_serial, serial_to_date
from excelserial._times import fraction_to_ms, ms_to_time, time_to_serial
from excelserial._utils import (
    reject_timezone,
    require_type,
    resolve_date_system,
    validate_serial,
)
from excelserial.date_system import DateSystem


def datetime_to_serial(
    value: datetime.datetime,
    *,
    date_system: DateSystem | str = DEFAULT_DATE_SYSTEM,
) -> float:
    """Convert a naive datetime to an Excel serial datetime.

    The result is exactly ``date_to_serial(value.date()) +
    time_to_serial(value.time())``. For example 2026-01-01 12:00 is 46023.5.

    Raises:
        UnsupportedTypeError: If value is not a datetime.
        TimezoneNotSupportedError: If value carries tzinfo.
        InvalidDateSystemError: If date_system is unknown.
    """
    require_type(value, datetime.datetime, "datetime_to_serial")
    reject_timezone(value)

    date = date_to_serial(value.date(), date_system=date_system)
    time = time_to_serial(value.time())

    return date + time


def serial_to_datetime(
    serial: float,
    *,
    date_system: DateSystem | str = DEFAULT_DATE_SYSTEM,
) -> datetime.datetime:
    """Convert a serial datetime back to a naive datetime.

    The time is rounded to the nearest millisecond; a rounded full day is
    carried into the date.

    Raises:
        InvalidSerialError: If serial is negative, not finite, or out of range.
        NonexistentDateError: If the date part is the phantom 1900-02-29.
    """
    value = validate_serial(serial)
    system = resolve_date_system(date_system)

    days = math.floor(value)
    elapsed_ms = fraction_to_ms(value - days)
    if elapsed_ms == MS_PER_DAY:
        days += 1
        elapsed_ms = 0

    date = serial_to_date(days, date_system=system)
    return datetime.datetime.combine(date, ms_to_time(elapsed_ms))
