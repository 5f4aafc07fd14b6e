"""Epoch and unit constants for Excel serial date conversion."""

import datetime

EPOCH_1900 = datetime.date(1899, 12, 31)
"""Day 0 of the 1900 date system, so 1900-01-01 is serial 1."""

EPOCH_1904 = datetime.date(1904, 1, 1)
"""Day 0 of the 1904 date system used by legacy Mac workbooks."""

DEFAULT_DATE_SYSTEM = "1900"
"""Value of the 1900 date system, used when no date system is given."""

LEAP_BUG_SERIAL = 60
"""Serial Excel assigns to the nonexistent 1900-02-29."""

LEAP_BUG_LAST_REAL_DAY = 59
"""Day counts above this (1900-03-01 onward) are shifted by one day."""

MS_PER_SECOND = 1000
MS_PER_DAY = 24 * 60 * 60 * MS_PER_SECOND
US_PER_MS = 1000
