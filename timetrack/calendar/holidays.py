# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holidays for the supported German regions.

All movable feasts are offsets from Easter Sunday, which is computed with
the anonymous Gregorian (Meeus/Jones/Butcher) algorithm.
"""

from datetime import date, timedelta
from functools import lru_cache

from timetrack.models.enums import Region

# (month, day) pairs observed in every supported region
COMMON_FIXED_HOLIDAYS = (
    (1, 1),  # New Year's Day
    (5, 1),  # Labour Day
    (10, 3),  # German Unity Day
    (12, 25),  # Christmas Day
    (12, 26),  # Second Day of Christmas
)

# Day offsets from Easter Sunday
EASTER_OFFSETS = (
    -2,  # Good Friday
    1,  # Easter Monday
    39,  # Ascension Day
    50,  # Whit Monday
)

REGIONAL_FIXED_HOLIDAYS = {
    Region.BERLIN: ((3, 8),),  # International Women's Day
    Region.BRANDENBURG: ((10, 31),),  # Reformation Day
}


def easter_sunday(year: int) -> date:
    """Return the date of Easter Sunday in the Gregorian calendar."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    weekday_shift = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * weekday_shift) // 451
    month, day = divmod(h + weekday_shift - 7 * m + 114, 31)
    return date(year, month, day + 1)


@lru_cache(maxsize=256)
def holidays_for(year: int, region: Region) -> frozenset[date]:
    """Return the public holidays of a year for a region."""
    easter = easter_sunday(year)
    fixed = COMMON_FIXED_HOLIDAYS + REGIONAL_FIXED_HOLIDAYS[Region(region)]
    days = {date(year, month, day) for month, day in fixed}
    days.update(easter + timedelta(days=offset) for offset in EASTER_OFFSETS)
    return frozenset(days)


def is_holiday(day: date, region: Region) -> bool:
    """Check whether a date is a public holiday in the region."""
    return day in holidays_for(day.year, region)


def holidays_between(start: date, end: date, region: Region) -> list[date]:
    """Return the sorted public holidays within an inclusive date range."""
    if start > end:
        return []
    return sorted(
        day
        for year in range(start.year, end.year + 1)
        for day in holidays_for(year, region)
        if start <= day <= end
    )
