# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Classify calendar dates into working-day units for one user.

A ``UserCalendar`` is an immutable snapshot of everything the rules need:
region, weekday configuration, recurrence rules with their exemptions and
the user's non-vacation absences. Classification never touches storage.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from timetrack.calendar.holidays import is_holiday
from timetrack.calendar.recurrence import RecurrenceRule, applies_to_date
from timetrack.models.enums import Region

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HALF = Decimal("0.5")
FULL = Decimal("1")

# Christmas Eve and New Year's Eve
HALF_DAY_DATES = ((12, 24), (12, 31))


@dataclass(frozen=True)
class WorkingDay:
    """Nominal configuration of one ISO weekday."""

    weekday: int
    is_working_day: bool
    hours: Decimal = ZERO


@dataclass(frozen=True)
class AbsenceSpan:
    """An inclusive range of days on which the user is absent."""

    start_date: date
    end_date: date

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class UserCalendar:
    """Snapshot of a user's calendar configuration.

    ``exemptions`` holds (rule id, date) pairs. ``absences`` are the
    non-vacation absences that make a day non-working.
    ``check_recurring_off_days`` is switched off when the snapshot is used
    to count the days of a non-vacation absence itself.
    """

    region: Region
    working_days: Mapping[int, WorkingDay]
    rules: tuple[RecurrenceRule, ...] = ()
    exemptions: frozenset = field(default_factory=frozenset)
    absences: tuple[AbsenceSpan, ...] = ()
    half_day_holidays_enabled: bool = False
    check_recurring_off_days: bool = True

    def is_exempted(self, rule: RecurrenceRule, day: date) -> bool:
        return (rule.id, day) in self.exemptions

    def recurring_off_day_rule(self, day: date) -> RecurrenceRule | None:
        """Return the first rule that makes the date an off-day, if any."""
        for rule in self.rules:
            if applies_to_date(rule, day) and not self.is_exempted(rule, day):
                return rule
        return None


def is_half_day_date(day: date) -> bool:
    """Check whether the date is Dec 24 or Dec 31."""
    return (day.month, day.day) in HALF_DAY_DATES


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date of an inclusive range."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def classify(calendar: UserCalendar, day: date) -> Decimal:
    """Return the working-day units (0, 0.5 or 1) a date is worth."""
    config = calendar.working_days.get(day.isoweekday())
    if config is None or not config.is_working_day:
        return ZERO

    half_day = calendar.half_day_holidays_enabled and is_half_day_date(day)

    if is_holiday(day, calendar.region):
        return HALF if half_day else ZERO

    if (
        calendar.check_recurring_off_days
        and calendar.recurring_off_day_rule(day) is not None
    ):
        return ZERO

    if any(absence.covers(day) for absence in calendar.absences):
        return ZERO

    return HALF if half_day else FULL


def expected_hours(calendar: UserCalendar, day: date) -> Decimal:
    """Return the nominal working hours a date is worth."""
    config = calendar.working_days.get(day.isoweekday())
    if config is None:
        return ZERO
    return Decimal(config.hours) * classify(calendar, day)


def total_working_days(calendar: UserCalendar, start: date, end: date) -> Decimal:
    """Sum the working-day units over an inclusive range.

    Returns 0 for an empty range (start after end).
    """
    if start > end:
        return ZERO
    total = sum((classify(calendar, day) for day in iter_days(start, end)), ZERO)
    logger.debug(f"Working days {start}..{end} in {calendar.region.value}: {total}")
    return total
