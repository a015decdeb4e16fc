"""
tests/calendar/test_calendar.py

Covers:
  - Easter Sunday for known years
  - Easter Monday predicate (dates and datetimes)
  - Default Slovenian holiday set
  - Custom holiday data and predicates
  - Validation of (month, day) pairs
"""

from datetime import date, datetime

import pytest

from semafor.calendar import (
    DEFAULT_CALENDAR,
    SLOVENIAN_HOLIDAYS,
    CalendarError,
    HolidayCalendar,
    easter_sunday,
    is_easter_monday,
)


# ── Easter ────────────────────────────────────────────────────────────────────

class TestEaster:

    @pytest.mark.parametrize(
        "year, expected",
        [
            (2000, date(2000, 4, 23)),
            (2016, date(2016, 3, 27)),
            (2019, date(2019, 4, 21)),
            (2024, date(2024, 3, 31)),
            (2025, date(2025, 4, 20)),
            (2038, date(2038, 4, 25)),
        ],
    )
    def test_easter_sunday(self, year, expected):
        assert easter_sunday(year) == expected

    def test_easter_monday_in_march(self):
        assert is_easter_monday(date(2016, 3, 28))

    def test_easter_monday_in_april(self):
        assert is_easter_monday(date(2025, 4, 21))

    def test_easter_sunday_is_not_monday(self):
        assert not is_easter_monday(date(2016, 3, 27))

    def test_datetime_is_compared_by_date(self):
        assert is_easter_monday(datetime(2016, 3, 28, 23, 59))

    def test_ordinary_day(self):
        assert not is_easter_monday(date(2016, 3, 21))


# ── Default calendar ──────────────────────────────────────────────────────────

class TestDefaultCalendar:

    def test_default_uses_slovenian_holidays(self):
        assert DEFAULT_CALENDAR.holidays == SLOVENIAN_HOLIDAYS

    def test_default_predicate_is_easter_monday(self):
        assert DEFAULT_CALENDAR.easter_monday is is_easter_monday

    @pytest.mark.parametrize(
        "day",
        [date(2025, 1, 1), date(2025, 2, 8), date(2025, 6, 25), date(2025, 12, 26)],
    )
    def test_fixed_holidays(self, day):
        assert DEFAULT_CALENDAR.is_fixed_holiday(day)

    def test_ordinary_day_is_not_holiday(self):
        assert not DEFAULT_CALENDAR.is_fixed_holiday(date(2025, 7, 8))

    def test_holiday_recurs_every_year(self):
        assert DEFAULT_CALENDAR.is_fixed_holiday(date(1999, 5, 1))
        assert DEFAULT_CALENDAR.is_fixed_holiday(date(2031, 5, 1))

    def test_twelve_recurring_holidays(self):
        assert len(SLOVENIAN_HOLIDAYS) == 12


# ── Custom calendars ──────────────────────────────────────────────────────────

class TestCustomCalendar:

    def test_custom_holidays_replace_default(self):
        cal = HolidayCalendar(holidays=[(7, 8)])
        assert cal.is_fixed_holiday(date(2025, 7, 8))
        assert not cal.is_fixed_holiday(date(2025, 1, 1))

    def test_empty_holidays(self):
        cal = HolidayCalendar(holidays=())
        assert cal.holidays == frozenset()

    def test_custom_predicate(self):
        def never(_):
            return False

        cal = HolidayCalendar(easter_monday=never)
        assert cal.easter_monday is never

    def test_leap_day_is_accepted(self):
        cal = HolidayCalendar(holidays=[(2, 29)])
        assert cal.is_fixed_holiday(date(2024, 2, 29))

    def test_duplicates_collapse(self):
        cal = HolidayCalendar(holidays=[(1, 1), (1, 1)])
        assert cal.holidays == frozenset({(1, 1)})

    def test_repr_mentions_count(self):
        assert "holidays=12" in repr(DEFAULT_CALENDAR)


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:

    @pytest.mark.parametrize(
        "pair",
        [(0, 1), (13, 1), (4, 31), (2, 30), (1, 0), ("1", 1), (1.5, 1), (2, 1.5), (True, 1)],
    )
    def test_invalid_pair_raises(self, pair):
        with pytest.raises(CalendarError):
            HolidayCalendar(holidays=[pair])

    def test_non_pair_raises(self):
        with pytest.raises(CalendarError):
            HolidayCalendar(holidays=[(1, 2, 3)])

    def test_scalar_entry_raises(self):
        with pytest.raises(CalendarError):
            HolidayCalendar(holidays=[5])

    def test_integral_float_is_normalised(self):
        cal = HolidayCalendar(holidays=[(6.0, 25.0)])
        assert cal.holidays == frozenset({(6, 25)})
        assert all(isinstance(v, int) for pair in cal.holidays for v in pair)
