# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pure calendar rules: holidays, recurrences, day classification, ledger math."""

from timetrack.calendar.classifier import (
    AbsenceSpan,
    UserCalendar,
    WorkingDay,
    classify,
    expected_hours,
    total_working_days,
)
from timetrack.calendar.holidays import (
    easter_sunday,
    holidays_between,
    holidays_for,
    is_holiday,
)
from timetrack.calendar.recurrence import (
    EveryNthWeek,
    NthWeekdayOfMonth,
    RecurrenceRule,
    applies_to_date,
    applies_with_exemptions,
    weeks_between,
)

__all__ = [
    "AbsenceSpan",
    "EveryNthWeek",
    "NthWeekdayOfMonth",
    "RecurrenceRule",
    "UserCalendar",
    "WorkingDay",
    "applies_to_date",
    "applies_with_exemptions",
    "classify",
    "easter_sunday",
    "expected_hours",
    "holidays_between",
    "holidays_for",
    "is_holiday",
    "total_working_days",
    "weeks_between",
]
