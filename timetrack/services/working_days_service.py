# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working days service: loads a user's calendar and counts working days."""

import logging
import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from timetrack.calendar.classifier import (
    AbsenceSpan,
    UserCalendar,
    WorkingDay,
    classify,
    expected_hours,
    iter_days,
    total_working_days as count_working_days,
)
from timetrack.calendar.recurrence import load_rules
from timetrack.exceptions import ValidationError
from timetrack.models import Region, TimeOff, TimeOffType, User
from timetrack.services import (
    recurring_off_day_service,
    time_off_service,
    user_service,
    working_hours_service,
)

logger = logging.getLogger(__name__)

MAX_CLASSIFY_DAYS = 366


def build_user_calendar(
    db: Session,
    user: User,
    start: date,
    end: date,
    region: Region | None = None,
    exclude_time_off_id: uuid.UUID | None = None,
    check_recurring_off_days: bool = True,
) -> UserCalendar:
    """Load everything needed to classify the user's days in a range.

    Args:
        db: Database session
        user: The user whose calendar is loaded
        start: First date that will be classified
        end: Last date that will be classified
        region: Holiday region, defaults to the user's region
        exclude_time_off_id: Absence to leave out of the snapshot
        check_recurring_off_days: Whether recurring off-days count

    Returns:
        An immutable calendar snapshot
    """
    working_days = {
        row.weekday: WorkingDay(
            weekday=row.weekday,
            is_working_day=row.is_working_day,
            hours=Decimal(row.hours),
        )
        for row in working_hours_service.get_working_hours(db, user.id)
    }

    rules = load_rules(recurring_off_day_service.get_rules(db, user.id))
    exemptions = recurring_off_day_service.get_exempted_dates(
        db, [rule.id for rule in rules], start, end
    )

    absences = tuple(
        AbsenceSpan(time_off.start_date, time_off.end_date)
        for time_off in time_off_service.get_time_off_in_range(
            db, user.id, start, end, exclude_types=[TimeOffType.VACATION]
        )
        if time_off.id != exclude_time_off_id
    )

    return UserCalendar(
        region=region or user.region,
        working_days=working_days,
        rules=tuple(rules),
        exemptions=frozenset(exemptions),
        absences=absences,
        half_day_holidays_enabled=user.half_day_holidays_enabled,
        check_recurring_off_days=check_recurring_off_days,
    )


def total_working_days(
    db: Session,
    user_id: uuid.UUID,
    region: Region | None,
    start: date,
    end: date,
    exclude_time_off_id: uuid.UUID | None = None,
) -> Decimal:
    """Count a user's working days over an inclusive range.

    Excluding a non-vacation absence counts the days of that absence
    itself; recurring off-days are then ignored because the absence
    takes precedence over them.

    Raises:
        NotFoundError: If the user does not exist
    """
    user = user_service.require_user(db, user_id)
    if start > end:
        return Decimal("0")

    check_recurring_off_days = True
    if exclude_time_off_id is not None:
        excluded = time_off_service.get_time_off(db, exclude_time_off_id)
        if excluded and excluded.time_off_type != TimeOffType.VACATION:
            check_recurring_off_days = False

    calendar = build_user_calendar(
        db,
        user,
        start,
        end,
        region=region,
        exclude_time_off_id=exclude_time_off_id,
        check_recurring_off_days=check_recurring_off_days,
    )
    return count_working_days(calendar, start, end)


def count_time_off_days(db: Session, time_off: TimeOff) -> Decimal:
    """Count the working days an absence covers."""
    return total_working_days(
        db,
        time_off.user_id,
        None,
        time_off.start_date,
        time_off.end_date,
        exclude_time_off_id=time_off.id,
    )


def classify_range(
    db: Session,
    user_id: uuid.UUID,
    start: date,
    end: date,
    region: Region | None = None,
) -> tuple[UserCalendar, list[tuple[date, Decimal, Decimal]]]:
    """Classify each date of a range.

    Returns:
        The calendar used and (date, working-day units, expected hours)
        for every date in the range.

    Raises:
        ValidationError: If end is before start or the range is longer
            than MAX_CLASSIFY_DAYS
        NotFoundError: If the user does not exist
    """
    if end < start:
        raise ValidationError("End date must not be before start date")
    if (end - start).days + 1 > MAX_CLASSIFY_DAYS:
        raise ValidationError(
            f"Range must not exceed {MAX_CLASSIFY_DAYS} days, "
            f"got {(end - start).days + 1}"
        )
    user = user_service.require_user(db, user_id)
    calendar = build_user_calendar(db, user, start, end, region=region)
    days = [
        (day, classify(calendar, day), expected_hours(calendar, day))
        for day in iter_days(start, end)
    ]
    logger.debug(f"Classified {len(days)} days for user {user_id}")
    return calendar, days
