# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class Region(str, Enum):
    """German federal state whose public holiday calendar applies."""

    BERLIN = "berlin"
    BRANDENBURG = "brandenburg"


class RecurrencePattern(str, Enum):
    """Kind of a recurring off-day rule."""

    EVERY_NTH_WEEK = "every_nth_week"
    NTH_WEEKDAY_OF_MONTH = "nth_weekday_of_month"


class TimeOffType(str, Enum):
    """Time-off type enumeration.

    Only VACATION draws on the annual allowance; the other types mark
    the covered days as non-working.
    """

    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    OTHER = "other"
