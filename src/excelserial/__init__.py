"""excelserial - Convert civil dates and times to Excel serial date values."""

from __future__ import annotations

try:
    from excelserial._version import __version__
except ModuleNotFoundError:  # editable install without generated version file
    __version__ = "0.0.0.dev0"

import datetime
from typing import Any

from excelserial._constants import DEFAULT_DATE_SYSTEM
from excelserial._dates import date_to_serial, serial_to_date
from excelserial._datetimes import datetime_to_serial, serial_to_datetime
from excelserial._errors import (
    ERR_MSG_UNSUPPORTED_TYPE,
    ConversionError,
    InvalidDateSystemError,
    InvalidSerialError,
    NonexistentDateError,
    TimezoneNotSupportedError,
    UnsupportedTypeError,
)
from excelserial._times import (
    serial_to_time,
    serial_to_timedelta,
    time_to_serial,
    timedelta_to_serial,
)
from excelserial.date_system import DateSystem

__all__ = [
    "to_serial",
    "date_to_serial",
    "time_to_serial",
    "datetime_to_serial",
    "timedelta_to_serial",
    "serial_to_date",
    "serial_to_time",
    "serial_to_datetime",
    "serial_to_timedelta",
    "DateSystem",
    "ConversionError",
    "InvalidDateSystemError",
    "InvalidSerialError",
    "NonexistentDateError",
    "TimezoneNotSupportedError",
    "UnsupportedTypeError",
]


def to_serial(
    value: Any,
    *,
    date_system: DateSystem | str = DEFAULT_DATE_SYSTEM,
) -> float:
    """Convert any supported civil value to an Excel serial number.

    Args:
        value: A date, naive time, naive datetime or timedelta.
        date_system: Workbook epoch. Ignored for times and durations, which
            do not depend on the epoch.

    Returns:
        The serial value. Cells holding it still need a date or time number
        format to display as anything other than a number.

    Raises:
        UnsupportedTypeError: If value is none of the supported types.
        TimezoneNotSupportedError: If value carries tzinfo.
        InvalidDateSystemError: If date_system is unknown.
    """
    # datetime subclasses date, so it must be matched first
    if isinstance(value, datetime.datetime):
        return datetime_to_serial(value, date_system=date_system)
    if isinstance(value, datetime.date):
        return date_to_serial(value, date_system=date_system)
    if isinstance(value, datetime.time):
        return time_to_serial(value)
    if isinstance(value, datetime.timedelta):
        return timedelta_to_serial(value)

    raise UnsupportedTypeError(
        ERR_MSG_UNSUPPORTED_TYPE,
        f"cannot convert {type(value).__name__} to an Excel serial",
    )
