"""Calendar date <-> whole-day serial conversion."""

from __future__ import annotations

import datetime
import logging
import math

from excelserial._constants import (
    DEFAULT_DATE_SYSTEM,
    LEAP_BUG_LAST_REAL_DAY,
    LEAP_BUG_SERIAL,
)
from excelserial._errors import (
    ERR_MSG_INVALID_SERIAL,
    ERR_MSG_NONEXISTENT_DATE,
    InvalidSerialError,
    NonexistentDateError,
)
from excelserial._utils import (
    reject_timezone,
    require_type,
    resolve_date_system,
    validate_serial,
)
from excelserial.date_system import DateSystem

logger = logging.getLogger(__name__)


def date_to_serial(
    value: datetime.date,
    *,
    date_system: DateSystem | str = DEFAULT_DATE_SYSTEM,
) -> float:
    """Convert a calendar date to an Excel serial day count.

    The serial is the number of days since the epoch of ``date_system``. In
    the 1900 system Excel counts 1900 as a leap year, so every date from
    1900-03-01 onward is one greater than the true day count.

    Dates before the epoch are not rejected and produce negative serials,
    which Excel itself cannot display.

    Args:
        value: The date to convert. A naive datetime contributes only its
            date; an aware one is rejected.
        date_system: Workbook epoch. Defaults to the 1900 system.

    Returns:
        A whole-valued float.

    Raises:
        UnsupportedTypeError: If value is not a date.
        TimezoneNotSupportedError: If value is a datetime carrying tzinfo.
        InvalidDateSystemError: If date_system is unknown.
    """
    require_type(value, datetime.date, "date_to_serial")
    system = resolve_date_system(date_system)
    if isinstance(value, datetime.datetime):
        reject_timezone(value)
        value = value.date()

    days = (value - system.epoch).days
    if days < 0:
        logger.debug("date %s precedes the %s epoch, serial is %d", value, system.value, days)

    serial = float(days)
    # Excel inserts a phantom 1900-02-29 as serial 60.
    if system.has_leap_year_bug and serial > LEAP_BUG_LAST_REAL_DAY:
        serial += 1.0

    return serial


def serial_to_date(
    serial: float,
    *,
    date_system: DateSystem | str = DEFAULT_DATE_SYSTEM,
) -> datetime.date:
    """Convert the whole-day part of a serial back to a calendar date.

    Raises:
        InvalidSerialError: If serial is negative, not finite, or beyond
            the last representable date.
        NonexistentDateError: For serial 60 in the 1900 system.
    """
    value = validate_serial(serial)
    system = resolve_date_system(date_system)
    days = math.floor(value)

    if system.has_leap_year_bug:
        if days == LEAP_BUG_SERIAL:
            raise NonexistentDateError(
                ERR_MSG_NONEXISTENT_DATE,
                f"serial {serial!r} is 1900-02-29, which Excel invents",
            )
        if days > LEAP_BUG_SERIAL:
            days -= 1

    try:
        return system.epoch + datetime.timedelta(days=days)
    except OverflowError as exc:
        raise InvalidSerialError(
            ERR_MSG_INVALID_SERIAL,
            f"serial {serial!r} is beyond {datetime.date.max.isoformat()}",
            wrapped=exc,
        ) from exc
