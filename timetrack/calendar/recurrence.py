# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Recurring off-day rules and their evaluation.

A rule names an ISO weekday and one of two patterns:

* ``EveryNthWeek``: the weekday in every N-th week counted from a
  reference date (N=2 gives "every other Friday").
* ``NthWeekdayOfMonth``: the k-th occurrence of the weekday in each
  month, where occurrence 5 means the last one.

Evaluation is pure. Exemptions are held outside the rule and only
consulted by ``applies_with_exemptions``.
"""

import logging
import uuid
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from timetrack.exceptions import InvalidRecurrenceRuleError
from timetrack.models.enums import RecurrencePattern

logger = logging.getLogger(__name__)

LAST_OCCURRENCE = 5


@dataclass(frozen=True)
class EveryNthWeek:
    """Every ``interval_weeks``-th week, counted from ``reference_date``."""

    interval_weeks: int
    reference_date: date

    def __post_init__(self) -> None:
        if self.interval_weeks is None or self.interval_weeks < 1:
            raise InvalidRecurrenceRuleError(
                f"Week interval must be at least 1, got {self.interval_weeks}"
            )
        if self.reference_date is None:
            raise InvalidRecurrenceRuleError(
                "Every-nth-week rules require a reference date"
            )


@dataclass(frozen=True)
class NthWeekdayOfMonth:
    """The ``occurrence``-th weekday of each month (5 = last)."""

    occurrence: int

    def __post_init__(self) -> None:
        if self.occurrence is None or not 1 <= self.occurrence <= LAST_OCCURRENCE:
            raise InvalidRecurrenceRuleError(
                f"Week of month must be between 1 and 5, got {self.occurrence}"
            )


PatternVariant = EveryNthWeek | NthWeekdayOfMonth


@dataclass(frozen=True)
class RecurrenceRule:
    """Immutable in-memory form of a recurring off-day."""

    weekday: int
    pattern: PatternVariant
    start_date: date
    end_date: date | None = None
    is_active: bool = True
    id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None

    def __post_init__(self) -> None:
        if self.weekday is None or not 1 <= self.weekday <= 7:
            raise InvalidRecurrenceRuleError(
                f"Weekday must be between 1 (Monday) and 7 (Sunday), "
                f"got {self.weekday}"
            )
        if self.start_date is None:
            raise InvalidRecurrenceRuleError("Start date is required")
        if self.end_date is not None and self.end_date < self.start_date:
            raise InvalidRecurrenceRuleError("End date must not be before start date")

    def covers(self, day: date) -> bool:
        """Check whether a date lies within the rule's validity window."""
        if day < self.start_date:
            return False
        return self.end_date is None or day <= self.end_date


def weeks_between(start: date, end: date) -> int:
    """Whole weeks from ``start`` to ``end``, truncated toward zero."""
    days = (end - start).days
    if days >= 0:
        return days // 7
    return -(-days // 7)


def _first_weekday_of_month(day: date) -> date:
    first = day.replace(day=1)
    return first + timedelta(days=(day.isoweekday() - first.isoweekday()) % 7)


def _matches_pattern(pattern: PatternVariant, day: date) -> bool:
    if isinstance(pattern, EveryNthWeek):
        if day < pattern.reference_date:
            return False
        weeks = weeks_between(pattern.reference_date, day)
        return weeks % pattern.interval_weeks == 0

    if isinstance(pattern, NthWeekdayOfMonth):
        if pattern.occurrence == LAST_OCCURRENCE:
            return (day + timedelta(days=7)).month != day.month
        occurrence = weeks_between(_first_weekday_of_month(day), day) + 1
        return occurrence == pattern.occurrence

    logger.warning(f"Unknown recurrence pattern {pattern!r}, treating as not applying")
    return False


def applies_to_date(rule: RecurrenceRule, day: date) -> bool:
    """Check whether a rule marks a date as an off-day.

    Checks short-circuit in order: the rule is active, the date lies in
    the validity window, the date falls on the rule's weekday, and
    finally the pattern matches.
    """
    if not rule.is_active:
        return False
    if not rule.covers(day):
        return False
    if day.isoweekday() != rule.weekday:
        return False
    return _matches_pattern(rule.pattern, day)


def applies_with_exemptions(
    rule: RecurrenceRule, day: date, exempted_dates: Collection[date]
) -> bool:
    """Like ``applies_to_date``, but an exempted date never applies."""
    return day not in exempted_dates and applies_to_date(rule, day)


def rule_from_record(record) -> RecurrenceRule:
    """Build a rule from a persisted recurring off-day row.

    Raises:
        InvalidRecurrenceRuleError: If the stored columns do not form a
            valid rule for the stored pattern kind.
    """
    if record.recurrence_pattern == RecurrencePattern.EVERY_NTH_WEEK:
        if record.week_of_month is not None:
            raise InvalidRecurrenceRuleError(
                "Every-nth-week rules must not set a week of month"
            )
        pattern = EveryNthWeek(record.week_interval, record.reference_date)
    elif record.recurrence_pattern == RecurrencePattern.NTH_WEEKDAY_OF_MONTH:
        if record.week_interval is not None or record.reference_date is not None:
            raise InvalidRecurrenceRuleError(
                "Nth-weekday-of-month rules must not set an interval "
                "or reference date"
            )
        pattern = NthWeekdayOfMonth(record.week_of_month)
    else:
        raise InvalidRecurrenceRuleError(
            f"Unknown recurrence pattern: {record.recurrence_pattern}"
        )

    return RecurrenceRule(
        weekday=record.weekday,
        pattern=pattern,
        start_date=record.start_date,
        end_date=record.end_date,
        is_active=record.is_active,
        id=record.id,
        user_id=record.user_id,
    )


def load_rules(records: Iterable) -> list[RecurrenceRule]:
    """Convert stored rows to rules, skipping and logging malformed ones."""
    rules = []
    for record in records:
        try:
            rules.append(rule_from_record(record))
        except InvalidRecurrenceRuleError as e:
            logger.warning(f"Skipping malformed recurring off-day {record.id}: {e}")
    return rules
