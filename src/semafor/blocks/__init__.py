# src/semafor/blocks/__init__.py
"""
semafor.blocks
~~~~~~~~~~~~~~

Slovenian network-tariff time blocks.  A day is classified by season (high:
November–February, low: March–October) and day category (workday, or
weekend/holiday), which selects one of four static tables.  Each table maps
block ids to hour periods that tile the day; periods ending after 24 run
past midnight (30 == 06:00 next day).

Basic usage::

    from datetime import date, datetime
    from semafor.blocks import get_block_for_hour, get_current_time_block

    get_block_for_hour(date(2025, 7, 8), 10)                # → 2
    get_current_time_block(datetime(2025, 12, 6, 23, 15))   # → CurrentBlock(id=4, ...)

NumPy arrays of hours are accepted by get_block_for_hour::

    import numpy as np
    get_block_for_hour(date(2025, 7, 8), np.arange(24))

Public API
----------
get_current_time_block  Block in force at a moment, or None.
get_block_for_hour      Block id for an hour; 5 when nothing matches.
find_block_for_hour     Block id for an hour, or None.
generate_time_blocks    Timeline segments for a day.
hourly_profile          Block id for each of the 24 hours.
select_table            Time-block table applying on a day.
validate_table          Check that blocks tile a day exactly once.
TimeBlockError          Base exception for invalid periods and tables.
"""

from __future__ import annotations

from semafor.blocks._exceptions import TimeBlockError
from semafor.blocks.classifier import (
    DayCategory,
    Season,
    classify_day_category,
    is_high_season,
    is_low_season,
    season_of,
)
from semafor.blocks.resolver import (
    BlockSegment,
    CurrentBlock,
    find_block_for_hour,
    generate_time_blocks,
    get_block_for_hour,
    get_current_time_block,
    hourly_profile,
    is_hour_in_period,
)
from semafor.blocks.tables import (
    FALLBACK_BLOCK_ID,
    TABLES,
    Period,
    TimeBlock,
    select_table,
    validate_table,
)

__all__ = [
    "BlockSegment",
    "CurrentBlock",
    "DayCategory",
    "FALLBACK_BLOCK_ID",
    "Period",
    "Season",
    "TABLES",
    "TimeBlock",
    "TimeBlockError",
    "classify_day_category",
    "find_block_for_hour",
    "generate_time_blocks",
    "get_block_for_hour",
    "get_current_time_block",
    "hourly_profile",
    "is_high_season",
    "is_hour_in_period",
    "is_low_season",
    "season_of",
    "select_table",
    "validate_table",
]
