from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, Sequence

import numpy as np

from semafor.calendar import DEFAULT_CALENDAR, HolidayCalendar

from ._exceptions import TimeBlockError
from .classifier import DayCategory, Season, classify_day_category, season_of

_LOGGER = logging.getLogger(__name__)

HOURS_PER_DAY = 24
# Period bounds above 24 are hours of the next day: 30 == 06:00 tomorrow.
MAX_PERIOD_END = 30

FALLBACK_BLOCK_ID = 5


def _is_integral(value: object) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return int(value) == value  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return False


@dataclass(frozen=True)
class Period:
    """Half-open hour interval [start, end); end > 24 crosses midnight."""

    start: int
    end: int

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if not _is_integral(value):
                raise TimeBlockError(f"Period {name} must be an integer hour; got {value!r}.")
            object.__setattr__(self, name, int(value))
        if not 0 <= self.start < HOURS_PER_DAY:
            raise TimeBlockError(f"Period start must be in [0, 24); got {self.start}.")
        if not self.start < self.end <= MAX_PERIOD_END:
            raise TimeBlockError(
                f"Period end must be in ({self.start}, {MAX_PERIOD_END}]; got {self.end}."
            )

    @property
    def is_overnight(self) -> bool:
        return self.end > HOURS_PER_DAY

    def hours(self) -> np.ndarray:
        """Plain 0-23 hours covered by the period, in order."""
        return np.arange(self.start, self.end, dtype=np.int64) % HOURS_PER_DAY


@dataclass(frozen=True)
class TimeBlock:
    id: int
    periods: tuple[Period, ...]

    def __post_init__(self) -> None:
        if not _is_integral(self.id) or self.id < 1:
            raise TimeBlockError(f"Block id must be a positive integer; got {self.id!r}.")
        periods = tuple(self.periods)
        if not periods:
            raise TimeBlockError(f"Block {self.id} has no periods.")
        object.__setattr__(self, "periods", periods)


TimeBlockTable = tuple[TimeBlock, ...]


def validate_table(blocks: Sequence[TimeBlock]) -> TimeBlockTable:
    """
    Check that the periods of all blocks tile [0, 24) exactly once and return
    the blocks as a tuple.  Raises TimeBlockError listing uncovered and
    doubly covered hours otherwise.
    """
    coverage = np.zeros(HOURS_PER_DAY, dtype=np.int64)
    for block in blocks:
        for period in block.periods:
            np.add.at(coverage, period.hours(), 1)

    gaps = np.flatnonzero(coverage == 0)
    overlaps = np.flatnonzero(coverage > 1)
    if gaps.size or overlaps.size:
        raise TimeBlockError(
            f"Time blocks must cover every hour exactly once; "
            f"uncovered={gaps.tolist()}, overlapping={overlaps.tolist()}."
        )
    return tuple(blocks)


def _table(*blocks: tuple[int, Sequence[tuple[int, int]]]) -> TimeBlockTable:
    return validate_table(
        [TimeBlock(block_id, tuple(Period(s, e) for s, e in spans)) for block_id, spans in blocks]
    )


HIGH_SEASON_WORKDAYS = _table(
    (1, [(7, 14), (16, 20)]),
    (2, [(6, 7), (14, 16), (20, 22)]),
    (3, [(22, 30)]),
)

HIGH_SEASON_WEEKENDS_AND_HOLIDAYS = _table(
    (2, [(7, 14), (16, 20)]),
    (3, [(6, 7), (14, 16), (20, 22)]),
    (4, [(22, 30)]),
)

LOW_SEASON_WORKDAYS = _table(
    (2, [(7, 14), (16, 20)]),
    (3, [(6, 7), (14, 16), (20, 22)]),
    (4, [(22, 30)]),
)

LOW_SEASON_WEEKENDS_AND_HOLIDAYS = _table(
    (3, [(7, 14), (16, 20)]),
    (4, [(6, 7), (14, 16), (20, 22)]),
    (5, [(22, 30)]),
)

TABLES: Mapping[tuple[Season, DayCategory], TimeBlockTable] = MappingProxyType({
    (Season.HIGH, DayCategory.WORKDAY): HIGH_SEASON_WORKDAYS,
    (Season.HIGH, DayCategory.WEEKEND_OR_HOLIDAY): HIGH_SEASON_WEEKENDS_AND_HOLIDAYS,
    (Season.LOW, DayCategory.WORKDAY): LOW_SEASON_WORKDAYS,
    (Season.LOW, DayCategory.WEEKEND_OR_HOLIDAY): LOW_SEASON_WEEKENDS_AND_HOLIDAYS,
})


def select_table(
    day: date, calendar: HolidayCalendar = DEFAULT_CALENDAR
) -> TimeBlockTable:
    """Time blocks applying on `day`; empty if the day has no season."""
    season = season_of(day)
    if season is Season.NEITHER:
        _LOGGER.debug("No season for %s; no time-block table applies", day)
        return ()
    return TABLES[(season, classify_day_category(day, calendar))]
