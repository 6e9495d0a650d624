# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from timetrack.models.base import Base, TimestampMixin
from timetrack.models.conflict_warning import RecurringOffDayConflictWarning
from timetrack.models.enums import RecurrencePattern, Region, TimeOffType
from timetrack.models.recurring_off_day import RecurringOffDay
from timetrack.models.recurring_off_day_exemption import RecurringOffDayExemption
from timetrack.models.time_entry import TimeEntry
from timetrack.models.time_off import TimeOff
from timetrack.models.user import User
from timetrack.models.vacation_balance import VacationBalance
from timetrack.models.working_hours import WorkingHours

__all__ = [
    "Base",
    "RecurrencePattern",
    "RecurringOffDay",
    "RecurringOffDayConflictWarning",
    "RecurringOffDayExemption",
    "Region",
    "TimeEntry",
    "TimeOff",
    "TimeOffType",
    "TimestampMixin",
    "User",
    "VacationBalance",
    "WorkingHours",
]
