# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for vacation ledger arithmetic."""

from datetime import date
from decimal import Decimal

from timetrack.calendar.ledger import (
    clip_to_year,
    remaining_days,
    split_used_planned,
    years_touched,
)


def calendar_days(start: date, end: date) -> Decimal:
    return Decimal((end - start).days + 1)


def test_clip_to_year():
    assert clip_to_year(date(2025, 12, 29), date(2026, 1, 2), 2025) == (
        date(2025, 12, 29),
        date(2025, 12, 31),
    )
    assert clip_to_year(date(2025, 12, 29), date(2026, 1, 2), 2026) == (
        date(2026, 1, 1),
        date(2026, 1, 2),
    )
    assert clip_to_year(date(2025, 3, 1), date(2025, 3, 5), 2026) is None


def test_past_period_is_used():
    used, planned = split_used_planned(
        [(date(2025, 3, 3), date(2025, 3, 7))], 2025, date(2025, 6, 1), calendar_days
    )

    assert used == Decimal("5")
    assert planned == Decimal("0")


def test_future_period_is_planned():
    used, planned = split_used_planned(
        [(date(2025, 8, 4), date(2025, 8, 8))], 2025, date(2025, 6, 1), calendar_days
    )

    assert used == Decimal("0")
    assert planned == Decimal("5")


def test_period_containing_today_is_split():
    used, planned = split_used_planned(
        [(date(2025, 6, 2), date(2025, 6, 6))], 2025, date(2025, 6, 4), calendar_days
    )

    assert used == Decimal("3")
    assert planned == Decimal("2")


def test_cross_year_period_counts_only_days_of_the_year():
    period = [(date(2025, 12, 29), date(2026, 1, 2))]

    used_2025, planned_2025 = split_used_planned(
        period, 2025, date(2025, 12, 30), calendar_days
    )
    used_2026, planned_2026 = split_used_planned(
        period, 2026, date(2025, 12, 30), calendar_days
    )

    assert (used_2025, planned_2025) == (Decimal("2"), Decimal("1"))
    assert (used_2026, planned_2026) == (Decimal("0"), Decimal("2"))


def test_remaining_days():
    assert remaining_days(
        Decimal("30"), Decimal("2.5"), Decimal("-1"), Decimal("4"), Decimal("5.5")
    ) == Decimal("22.0")


def test_years_touched():
    assert years_touched((date(2025, 3, 1), date(2025, 3, 5))) == {2025}
    assert years_touched(
        (date(2025, 12, 29), date(2026, 1, 2)), (date(2027, 1, 4), date(2027, 1, 8))
    ) == {2025, 2026, 2027}
