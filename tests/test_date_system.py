"""DateSystem tests."""

import datetime

from excelserial import DateSystem
from excelserial._constants import DEFAULT_DATE_SYSTEM
from excelserial._utils import resolve_date_system


class TestDateSystem:
    def test_values(self):
        assert DateSystem.WINDOWS_1900 == "1900"
        assert DateSystem.MAC_1904 == "1904"

    def test_epochs(self):
        assert DateSystem.WINDOWS_1900.epoch == datetime.date(1899, 12, 31)
        assert DateSystem.MAC_1904.epoch == datetime.date(1904, 1, 1)

    def test_leap_year_bug_only_in_1900(self):
        assert DateSystem.WINDOWS_1900.has_leap_year_bug
        assert not DateSystem.MAC_1904.has_leap_year_bug

    def test_default_resolves_to_1900(self):
        assert resolve_date_system(DEFAULT_DATE_SYSTEM) is DateSystem.WINDOWS_1900
