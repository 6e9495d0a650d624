# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar query schemas (public holidays, working-day counts)."""

import datetime
from decimal import Decimal

from pydantic import BaseModel

from timetrack.models.enums import Region


class PublicHolidaysResponse(BaseModel):
    """Public holidays of a year for a region."""

    year: int
    region: Region
    holidays: list[datetime.date]


class DayClassification(BaseModel):
    """Working-day value of a single date."""

    date: datetime.date
    working_day_units: Decimal
    expected_hours: Decimal


class WorkingDaysResponse(BaseModel):
    """Working days of a user over an inclusive range."""

    start_date: datetime.date
    end_date: datetime.date
    region: Region
    total_working_days: Decimal
    total_expected_hours: Decimal
    days: list[DayClassification]
