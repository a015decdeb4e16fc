from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from dateutil.easter import EASTER_WESTERN, easter

from ._exceptions import CalendarError

EasterMondayPredicate = Callable[[date], bool]

# Recurring work-free days in Slovenia as (month, day).
SLOVENIAN_HOLIDAYS: frozenset[tuple[int, int]] = frozenset(
    {
        (1, 1),    # novo leto
        (1, 2),    # novo leto
        (2, 8),    # Prešernov dan
        (4, 27),   # dan upora proti okupatorju
        (5, 1),    # praznik dela
        (5, 2),    # praznik dela
        (6, 25),   # dan državnosti
        (8, 15),   # Marijino vnebovzetje
        (10, 31),  # dan reformacije
        (11, 1),   # dan spomina na mrtve
        (12, 25),  # božič
        (12, 26),  # dan samostojnosti in enotnosti
    }
)

# Leap-year lengths; (2, 29) is a valid recurring pair.
_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday."""
    return easter(year, EASTER_WESTERN)


def is_easter_monday(day: date) -> bool:
    return _as_date(day) == easter_sunday(day.year) + timedelta(days=1)


def _as_date(day: date) -> date:
    # datetime is a date subclass; compare on the calendar date only.
    return date(day.year, day.month, day.day)


def _is_integral(value: object) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return int(value) == value  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return False


class HolidayCalendar:
    """
    Immutable holiday data consulted by the day classifier.

    holidays
        Iterable of (month, day) pairs, month 1-12.  Defaults to
        SLOVENIAN_HOLIDAYS.
    easter_monday
        Predicate recognising Easter Monday.  Defaults to is_easter_monday.
    """

    __slots__ = ("_holidays", "_easter_monday")

    def __init__(
        self,
        holidays: Optional[Iterable[tuple[int, int]]] = None,
        easter_monday: Optional[EasterMondayPredicate] = None,
    ) -> None:
        pairs = SLOVENIAN_HOLIDAYS if holidays is None else holidays
        checked = set()
        for pair in pairs:
            try:
                month, day = pair
            except (TypeError, ValueError):
                raise CalendarError(
                    f"Holiday must be a (month, day) pair; got {pair!r}."
                ) from None
            for value in (month, day):
                if not _is_integral(value):
                    raise CalendarError(
                        f"Holiday month and day must be integers; got {pair!r}."
                    )
            month, day = int(month), int(day)
            if not 1 <= month <= 12:
                raise CalendarError(f"Holiday month must be in 1..12; got {month}.")
            if not 1 <= day <= _DAYS_IN_MONTH[month - 1]:
                raise CalendarError(
                    f"Holiday day {day} is out of range for month {month}."
                )
            checked.add((month, day))

        self._holidays: frozenset[tuple[int, int]] = frozenset(checked)
        self._easter_monday: EasterMondayPredicate = (
            is_easter_monday if easter_monday is None else easter_monday
        )

    def is_fixed_holiday(self, day: date) -> bool:
        return (day.month, day.day) in self._holidays

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def holidays(self) -> frozenset[tuple[int, int]]:
        return self._holidays

    @property
    def easter_monday(self) -> EasterMondayPredicate:
        return self._easter_monday

    def __repr__(self) -> str:
        return (
            f"HolidayCalendar(holidays={len(self._holidays)}, "
            f"easter_monday={getattr(self._easter_monday, '__name__', self._easter_monday)!r})"
        )


DEFAULT_CALENDAR = HolidayCalendar()
