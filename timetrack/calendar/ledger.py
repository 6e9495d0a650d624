# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Arithmetic of the vacation ledger, independent of storage."""

from collections.abc import Callable, Iterable
from datetime import date, timedelta
from decimal import Decimal

DayCounter = Callable[[date, date], Decimal]


def clip_to_year(start: date, end: date, year: int) -> tuple[date, date] | None:
    """Clip an inclusive range to a calendar year, or None if disjoint."""
    clipped_start = max(start, date(year, 1, 1))
    clipped_end = min(end, date(year, 12, 31))
    if clipped_start > clipped_end:
        return None
    return clipped_start, clipped_end


def split_used_planned(
    periods: Iterable[tuple[date, date]],
    year: int,
    today: date,
    count_days: DayCounter,
) -> tuple[Decimal, Decimal]:
    """Split vacation periods of a year into used and planned days.

    Each period is clipped to the year. Days up to and including
    ``today`` count as used, later days as planned; ``count_days``
    measures the working days of each part.

    Returns:
        Tuple of (used_days, planned_days).
    """
    used = Decimal("0")
    planned = Decimal("0")
    for start, end in periods:
        clipped = clip_to_year(start, end, year)
        if clipped is None:
            continue
        start, end = clipped
        if end <= today:
            used += count_days(start, end)
        elif start > today:
            planned += count_days(start, end)
        else:
            used += count_days(start, today)
            planned += count_days(today + timedelta(days=1), end)
    return used, planned


def remaining_days(
    allowance: Decimal,
    carried_over: Decimal,
    adjustment: Decimal,
    used: Decimal,
    planned: Decimal,
) -> Decimal:
    """Entitlement left: allowance + carry-over + adjustment - used - planned."""
    return allowance + carried_over + adjustment - used - planned


def years_touched(*ranges: tuple[date, date]) -> set[int]:
    """Every calendar year any of the inclusive ranges touches."""
    years: set[int] = set()
    for start, end in ranges:
        years.update(range(min(start, end).year, max(start, end).year + 1))
    return years
