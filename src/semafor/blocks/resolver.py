from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

import numpy as np

from semafor.calendar import DEFAULT_CALENDAR, HolidayCalendar

from .tables import (
    FALLBACK_BLOCK_ID,
    HOURS_PER_DAY,
    Period,
    TimeBlockTable,
    select_table,
)

_LOGGER = logging.getLogger(__name__)

TIMEZONE = ZoneInfo("Europe/Ljubljana")

HourLike = Union[int, "np.ndarray"]


@dataclass(frozen=True)
class CurrentBlock:
    """The block in force at some moment; `end` is already in 0-23 form."""

    id: int
    start: int
    end: int
    is_overnight: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "start": self.start,
            "end": self.end,
            "is_overnight": self.is_overnight,
        }


@dataclass(frozen=True)
class BlockSegment:
    """
    One bar of a day's timeline.  `day=1` marks the part of an overnight
    period that runs from `start` up to midnight (`end=0`).
    """

    id: int
    start: int
    end: int
    day: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "start": self.start, "end": self.end}
        if self.day is not None:
            data["day"] = self.day
        return data


# ── period matching ──────────────────────────────────────────────────────

def is_hour_in_period(hour: HourLike, period: Period) -> Union[bool, np.ndarray]:
    """
    True if the plain 0-23 `hour` lies in `period`.  Overnight periods match
    from their start to midnight and from midnight to `end - 24`.
    Arrays of hours give a boolean array of the same shape.
    """
    scalar = np.ndim(hour) == 0
    h = np.asarray(hour)
    if period.end > HOURS_PER_DAY:
        inside = (h >= period.start) | (h < period.end - HOURS_PER_DAY)
    else:
        inside = (h >= period.start) & (h < period.end)
    return bool(inside) if scalar else inside


def _match_ids(table: TimeBlockTable, hours: np.ndarray) -> np.ndarray:
    # 0 marks hours no period matched; real ids start at 1.
    ids = np.zeros(hours.shape, dtype=np.int64)
    for block in table:
        for period in block.periods:
            hit = is_hour_in_period(hours, period) & (ids == 0)
            ids[hit] = block.id
    return ids


# ── public queries ───────────────────────────────────────────────────────

def get_current_time_block(
    moment: Optional[date] = None,
    calendar: HolidayCalendar = DEFAULT_CALENDAR,
) -> Optional[CurrentBlock]:
    """
    Block in force at `moment` (default: now in Europe/Ljubljana), or None
    if the day has no table or no period matches the hour.  A plain `date`
    is taken as midnight of that day.
    """
    if moment is None:
        moment = datetime.now(TIMEZONE)
    hour = getattr(moment, "hour", 0)

    for block in select_table(moment, calendar):
        for period in block.periods:
            if is_hour_in_period(hour, period):
                end = period.end - HOURS_PER_DAY if period.is_overnight else period.end
                return CurrentBlock(
                    id=block.id,
                    start=period.start,
                    end=end,
                    is_overnight=period.is_overnight,
                )

    _LOGGER.debug("No time block matches %s", moment)
    return None


def find_block_for_hour(
    day: date, hour: int, calendar: HolidayCalendar = DEFAULT_CALENDAR
) -> Optional[int]:
    """Block id for `hour` on `day`, or None when nothing matches."""
    for block in select_table(day, calendar):
        for period in block.periods:
            if is_hour_in_period(hour, period):
                return block.id
    return None


def get_block_for_hour(
    day: date, hour: HourLike, calendar: HolidayCalendar = DEFAULT_CALENDAR
) -> Union[int, np.ndarray]:
    """
    Block id for `hour` (0-23) on `day`.  Unmatched hours yield
    FALLBACK_BLOCK_ID (5), which is also a real low-season weekend id; use
    find_block_for_hour to tell them apart.  Hours outside 0-23 are not
    validated and resolve however the period tests place them.
    """
    if np.ndim(hour) == 0:
        block_id = find_block_for_hour(day, hour, calendar)
        if block_id is None:
            _LOGGER.debug("No block for hour %s on %s; using fallback", hour, day)
            return FALLBACK_BLOCK_ID
        return block_id

    hours = np.asarray(hour)
    ids = _match_ids(select_table(day, calendar), hours)
    missing = ids == 0
    if missing.any():
        _LOGGER.debug(
            "No block for %d hour(s) on %s; using fallback", int(missing.sum()), day
        )
        ids[missing] = FALLBACK_BLOCK_ID
    return ids


def hourly_profile(
    day: date, calendar: HolidayCalendar = DEFAULT_CALENDAR
) -> np.ndarray:
    """Block id for each hour 0..23 of `day`, shape (24,)."""
    return get_block_for_hour(day, np.arange(HOURS_PER_DAY), calendar)


def generate_time_blocks(
    day: date, calendar: HolidayCalendar = DEFAULT_CALENDAR
) -> list[BlockSegment]:
    """
    Flatten the day's table into timeline segments, in table order.
    Overnight periods are split at midnight into a `day=1` segment ending
    at 0 and a segment starting at 0.
    """
    segments: list[BlockSegment] = []
    for block in select_table(day, calendar):
        for period in block.periods:
            if period.is_overnight:
                segments.append(BlockSegment(block.id, period.start, 0, day=1))
                segments.append(BlockSegment(block.id, 0, period.end - HOURS_PER_DAY))
            else:
                segments.append(BlockSegment(block.id, period.start, period.end))
    return segments
