# src/semafor/calendar/__init__.py
"""
semafor.calendar
~~~~~~~~~~~~~~~~

Holiday data used to decide whether a day is a workday.  A HolidayCalendar
bundles a fixed set of recurring (month, day) holidays with a predicate that
recognises Easter Monday, which moves from year to year.

Basic usage::

    from datetime import date
    from semafor.calendar import DEFAULT_CALENDAR

    DEFAULT_CALENDAR.is_fixed_holiday(date(2025, 6, 25))   # → True
    DEFAULT_CALENDAR.easter_monday(date(2016, 3, 28))       # → True

Custom data::

    from semafor.calendar import HolidayCalendar

    cal = HolidayCalendar(holidays={(1, 1), (12, 25)})

Public API
----------
HolidayCalendar     Holiday set + Easter-Monday predicate.
DEFAULT_CALENDAR    HolidayCalendar with the Slovenian work-free days.
SLOVENIAN_HOLIDAYS  Recurring Slovenian holidays as (month, day) pairs.
easter_sunday       Gregorian Easter Sunday for a year.
is_easter_monday    True if a date is Easter Monday.
CalendarError       Base exception for all calendar-related errors.
"""

from __future__ import annotations

from semafor.calendar._exceptions import CalendarError
from semafor.calendar.calendar import (
    DEFAULT_CALENDAR,
    SLOVENIAN_HOLIDAYS,
    HolidayCalendar,
    easter_sunday,
    is_easter_monday,
)

__all__ = [
    "DEFAULT_CALENDAR",
    "SLOVENIAN_HOLIDAYS",
    "HolidayCalendar",
    "easter_sunday",
    "is_easter_monday",
    "CalendarError",
]
