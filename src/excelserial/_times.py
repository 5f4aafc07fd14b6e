"""Time-of-day and duration <-> fractional-day conversion.

Excel's smallest time unit is the millisecond. Forward conversions truncate
sub-millisecond components; inverse conversions round to the nearest
millisecond to absorb floating point error.
"""

from __future__ import annotations

import datetime
import math

from excelserial._constants import MS_PER_DAY, MS_PER_SECOND, US_PER_MS
from excelserial._errors import ERR_MSG_INVALID_SERIAL, InvalidSerialError
from excelserial._utils import reject_timezone, require_type, validate_serial


def time_to_serial(value: datetime.time) -> float:
    """Convert a time of day to the fraction of a day since midnight.

    Args:
        value: A naive time. Microseconds are truncated to milliseconds.

    Returns:
        A float in [0.0, 1.0).

    Raises:
        UnsupportedTypeError: If value is not a time.
        TimezoneNotSupportedError: If value carries tzinfo.
    """
    require_type(value, datetime.time, "time_to_serial")
    reject_timezone(value)

    elapsed_ms = (
        ((value.hour * 60 + value.minute) * 60 + value.second) * MS_PER_SECOND
        + value.microsecond // US_PER_MS
    )
    return elapsed_ms / MS_PER_DAY


def timedelta_to_serial(value: datetime.timedelta) -> float:
    """Convert a duration to days, flooring to whole milliseconds."""
    require_type(value, datetime.timedelta, "timedelta_to_serial")
    elapsed_ms = (
        value.days * MS_PER_DAY
        + value.seconds * MS_PER_SECOND
        + value.microseconds // US_PER_MS
    )
    return elapsed_ms / MS_PER_DAY


def fraction_to_ms(fraction: float) -> int:
    """Round a fraction of a day to whole milliseconds.

    May return MS_PER_DAY when the fraction is within half a millisecond of
    the next day; callers decide whether to wrap or carry.
    """
    return round(fraction * MS_PER_DAY)


def ms_to_time(elapsed_ms: int) -> datetime.time:
    """Build a time of day from milliseconds since midnight (below MS_PER_DAY)."""
    seconds, ms = divmod(elapsed_ms, MS_PER_SECOND)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return datetime.time(hour, minute, second, ms * US_PER_MS)


def serial_to_time(serial: float) -> datetime.time:
    """Convert the fractional part of a serial to a time of day.

    The whole-day part is ignored. A fraction that rounds up to a full day
    wraps to midnight.

    Raises:
        InvalidSerialError: If serial is negative or not finite.
    """
    value = validate_serial(serial)
    elapsed_ms = fraction_to_ms(value - math.floor(value))
    if elapsed_ms == MS_PER_DAY:
        elapsed_ms = 0
    return ms_to_time(elapsed_ms)


def serial_to_timedelta(serial: float) -> datetime.timedelta:
    """Convert a serial day count to a duration at millisecond resolution.

    Negative serials give negative durations.
    """
    value = validate_serial(serial, allow_negative=True)
    try:
        return datetime.timedelta(milliseconds=round(value * MS_PER_DAY))
    except OverflowError as exc:
        raise InvalidSerialError(
            ERR_MSG_INVALID_SERIAL,
            f"serial {serial!r} exceeds the timedelta range",
            wrapped=exc,
        ) from exc
