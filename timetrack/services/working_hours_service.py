# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hours service: the per-weekday nominal schedule of a user."""

import logging
import uuid
from datetime import time
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from timetrack.database import transaction
from timetrack.exceptions import NotFoundError, ValidationError
from timetrack.models import WorkingHours
from timetrack.schemas.working_hours import WorkingHoursUpdate
from timetrack.services import user_service

logger = logging.getLogger(__name__)

MAX_HOURS_PER_DAY = Decimal("24")

# weekday -> (is_working_day, hours); Monday to Friday, eight hours each
DEFAULT_WORKING_HOURS = {
    1: (True, Decimal("8.00")),
    2: (True, Decimal("8.00")),
    3: (True, Decimal("8.00")),
    4: (True, Decimal("8.00")),
    5: (True, Decimal("8.00")),
    6: (False, Decimal("0.00")),
    7: (False, Decimal("0.00")),
}


def create_default_working_hours(
    db: Session, user_id: uuid.UUID
) -> list[WorkingHours]:
    """Add the default weekday template for a new user (no commit)."""
    rows = [
        WorkingHours(
            user_id=user_id,
            weekday=weekday,
            is_working_day=is_working_day,
            hours=hours,
            break_minutes=0,
        )
        for weekday, (is_working_day, hours) in DEFAULT_WORKING_HOURS.items()
    ]
    db.add_all(rows)
    db.flush()
    return rows


def get_working_hours(db: Session, user_id: uuid.UUID) -> list[WorkingHours]:
    """Get the weekday configuration of a user, Monday first."""
    user_service.require_user(db, user_id)
    return (
        db.query(WorkingHours)
        .filter(WorkingHours.user_id == user_id)
        .order_by(WorkingHours.weekday)
        .all()
    )


def get_working_day(
    db: Session, user_id: uuid.UUID, weekday: int
) -> WorkingHours | None:
    """Get the configuration of a single weekday."""
    return (
        db.query(WorkingHours)
        .filter(WorkingHours.user_id == user_id, WorkingHours.weekday == weekday)
        .first()
    )


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def calculate_hours(start: time, end: time, break_minutes: int) -> Decimal:
    """Net hours between two times minus a break, rounded half-up to 0.01.

    Raises:
        ValidationError: If end is not after start or the break does not
            fit into the span.
    """
    span = _minutes(end) - _minutes(start)
    if span <= 0:
        raise ValidationError("End time must be after start time")
    if break_minutes >= span:
        raise ValidationError("Break must be shorter than the working span")
    hours = Decimal(span - break_minutes) / Decimal(60)
    return hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def update_working_day(
    db: Session, user_id: uuid.UUID, weekday: int, data: WorkingHoursUpdate
) -> WorkingHours:
    """Replace the configuration of one weekday.

    Args:
        db: Database session
        user_id: Owner of the schedule
        weekday: ISO weekday, 1 (Monday) to 7 (Sunday)
        data: New configuration

    Returns:
        The updated row

    Raises:
        ValidationError: If the weekday or the times are invalid
        NotFoundError: If the user or the weekday row does not exist
    """
    if not 1 <= weekday <= 7:
        raise ValidationError(f"Weekday must be between 1 and 7, got {weekday}")
    if (data.start_time is None) != (data.end_time is None):
        raise ValidationError("Start time and end time must be given together")

    if data.start_time is not None and data.end_time is not None:
        hours = calculate_hours(data.start_time, data.end_time, data.break_minutes)
    elif data.hours is not None:
        hours = data.hours
    else:
        raise ValidationError("Either hours or start and end time must be given")

    if not Decimal("0") <= hours <= MAX_HOURS_PER_DAY:
        raise ValidationError(f"Hours must be between 0 and 24, got {hours}")

    user_service.require_user(db, user_id)
    row = get_working_day(db, user_id, weekday)
    if not row:
        raise NotFoundError("Working hours", f"{user_id}/{weekday}")

    with transaction(db):
        row.is_working_day = data.is_working_day
        row.hours = hours
        row.start_time = data.start_time
        row.end_time = data.end_time
        row.break_minutes = data.break_minutes

    db.refresh(row)
    logger.info(
        f"Updated working hours of user {user_id} weekday {weekday}: "
        f"working={row.is_working_day} hours={row.hours}"
    )
    return row
