# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar query endpoints: public holidays and working-day counts."""

import datetime
from decimal import Decimal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from timetrack.api.deps import get_db, get_path_user
from timetrack.calendar.holidays import holidays_for
from timetrack.config import get_settings
from timetrack.models import Region, User
from timetrack.schemas.calendar import (
    DayClassification,
    PublicHolidaysResponse,
    WorkingDaysResponse,
)
from timetrack.services import working_days_service

router = APIRouter()


@router.get("/public-holidays", response_model=PublicHolidaysResponse)
def list_public_holidays(
    year: int = Query(..., ge=1900, le=2200),
    region: Region | None = None,
) -> PublicHolidaysResponse:
    """List the public holidays of a year for a region."""
    region = region or get_settings().default_region
    return PublicHolidaysResponse(
        year=year,
        region=region,
        holidays=sorted(holidays_for(year, region)),
    )


@router.get("/users/{user_id}/working-days", response_model=WorkingDaysResponse)
def get_working_days(
    start: datetime.date,
    end: datetime.date,
    region: Region | None = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> WorkingDaysResponse:
    """Classify every date of a range and total the working days."""
    calendar, days = working_days_service.classify_range(
        db, user.id, start, end, region=region
    )
    return WorkingDaysResponse(
        start_date=start,
        end_date=end,
        region=calendar.region,
        total_working_days=sum((units for _, units, _ in days), Decimal("0")),
        total_expected_hours=sum((hours for _, _, hours in days), Decimal("0")),
        days=[
            DayClassification(date=day, working_day_units=units, expected_hours=hours)
            for day, units, hours in days
        ],
    )
