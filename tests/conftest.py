"""Shared test fixtures."""

import datetime

import pytest

from excelserial import DateSystem


@pytest.fixture
def system_1900():
    return DateSystem.WINDOWS_1900


@pytest.fixture
def system_1904():
    return DateSystem.MAC_1904


# Independently known Excel serials (1900 system), as shown by =VALUE() in Excel.
KNOWN_1900_DATES = [
    (datetime.date(1899, 12, 31), 0.0),
    (datetime.date(1900, 1, 1), 1.0),
    (datetime.date(1900, 1, 31), 31.0),
    (datetime.date(1900, 2, 28), 59.0),
    (datetime.date(1900, 3, 1), 61.0),
    (datetime.date(1904, 1, 1), 1462.0),
    (datetime.date(2000, 1, 1), 36526.0),
    (datetime.date(2023, 1, 1), 44927.0),
    (datetime.date(2026, 1, 1), 46023.0),
    (datetime.date(9999, 12, 31), 2958465.0),
]
