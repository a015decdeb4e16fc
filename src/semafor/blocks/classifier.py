from __future__ import annotations

from datetime import date
from enum import Enum

from semafor.calendar import DEFAULT_CALENDAR, HolidayCalendar

# Inclusive month bounds; high season wraps over the year boundary.
HIGH_SEASON = (11, 2)   # November .. February
LOW_SEASON = (3, 10)    # March .. October

_EASTER_MONTH = 3
_WEEKEND = (5, 6)       # date.weekday(): Saturday, Sunday


class Season(Enum):
    HIGH = "high"
    LOW = "low"
    NEITHER = "neither"


class DayCategory(Enum):
    WORKDAY = "workday"
    WEEKEND_OR_HOLIDAY = "weekend_or_holiday"


def is_high_season(day: date) -> bool:
    start, end = HIGH_SEASON
    return day.month >= start or day.month <= end


def is_low_season(day: date) -> bool:
    start, end = LOW_SEASON
    return start <= day.month <= end


def season_of(day: date) -> Season:
    """
    Season of `day`.  The two season tests are evaluated independently, so
    NEITHER is returned if some edit of the bounds leaves a month uncovered.
    """
    if is_high_season(day):
        return Season.HIGH
    if is_low_season(day):
        return Season.LOW
    return Season.NEITHER


def classify_day_category(
    day: date, calendar: HolidayCalendar = DEFAULT_CALENDAR
) -> DayCategory:
    """
    Weekend days, fixed holidays and Easter Monday are WEEKEND_OR_HOLIDAY.
    The Easter-Monday predicate is only consulted for dates in March.
    """
    if day.weekday() in _WEEKEND:
        return DayCategory.WEEKEND_OR_HOLIDAY
    if calendar.is_fixed_holiday(day):
        return DayCategory.WEEKEND_OR_HOLIDAY
    if day.month == _EASTER_MONTH and calendar.easter_monday(day):
        return DayCategory.WEEKEND_OR_HOLIDAY
    return DayCategory.WORKDAY
