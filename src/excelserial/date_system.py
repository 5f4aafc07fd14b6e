"""Workbook date systems."""

from __future__ import annotations

import datetime
import enum

from excelserial._constants import EPOCH_1900, EPOCH_1904


class DateSystem(enum.StrEnum):
    """Epoch selection stored at workbook level.

    ``WINDOWS_1900`` is the default for every modern workbook and reproduces
    Excel's 1900 leap-year bug. ``MAC_1904`` counts from 1904-01-01 and has no
    such quirk.
    """

    WINDOWS_1900 = "1900"
    MAC_1904 = "1904"

    @property
    def epoch(self) -> datetime.date:
        if self is DateSystem.MAC_1904:
            return EPOCH_1904
        return EPOCH_1900

    @property
    def has_leap_year_bug(self) -> bool:
        return self is DateSystem.WINDOWS_1900
