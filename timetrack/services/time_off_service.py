# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time-off service: absences and the balance recalculations they trigger."""

import logging
import uuid
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from timetrack.calendar.ledger import years_touched
from timetrack.database import transaction
from timetrack.exceptions import ForbiddenError, NotFoundError, ValidationError
from timetrack.models import TimeOff, TimeOffType
from timetrack.schemas.time_off import TimeOffCreate, TimeOffUpdate
from timetrack.services import user_service
from timetrack.services.working_hours_service import MAX_HOURS_PER_DAY

logger = logging.getLogger(__name__)


def get_time_off(db: Session, time_off_id: uuid.UUID) -> TimeOff | None:
    """Get a time-off entry by ID."""
    return db.query(TimeOff).filter(TimeOff.id == time_off_id).first()


def get_time_off_for_user(
    db: Session, user_id: uuid.UUID, time_off_id: uuid.UUID
) -> TimeOff:
    """Get a time-off entry by ID, ensuring it belongs to the user."""
    time_off = get_time_off(db, time_off_id)
    if not time_off:
        raise NotFoundError("Time off", time_off_id)
    if time_off.user_id != user_id:
        raise ForbiddenError("Time off belongs to another user")
    return time_off


def get_time_off_in_range(
    db: Session,
    user_id: uuid.UUID,
    start: date,
    end: date,
    types: Iterable[TimeOffType] | None = None,
    exclude_types: Iterable[TimeOffType] | None = None,
) -> list[TimeOff]:
    """Get a user's time-off overlapping an inclusive range."""
    query = db.query(TimeOff).filter(
        TimeOff.user_id == user_id,
        TimeOff.start_date <= end,
        TimeOff.end_date >= start,
    )
    if types is not None:
        query = query.filter(TimeOff.time_off_type.in_(list(types)))
    if exclude_types is not None:
        query = query.filter(TimeOff.time_off_type.not_in(list(exclude_types)))
    return query.order_by(TimeOff.start_date).all()


def list_time_off(
    db: Session,
    user_id: uuid.UUID,
    start: date | None = None,
    end: date | None = None,
    time_off_type: TimeOffType | None = None,
) -> list[TimeOff]:
    """List a user's time-off, optionally filtered by range and type."""
    if start is not None and end is not None and end < start:
        raise ValidationError("End date must not be before start date")
    user_service.require_user(db, user_id)

    query = db.query(TimeOff).filter(TimeOff.user_id == user_id)
    if start is not None:
        query = query.filter(TimeOff.end_date >= start)
    if end is not None:
        query = query.filter(TimeOff.start_date <= end)
    if time_off_type is not None:
        query = query.filter(TimeOff.time_off_type == time_off_type)
    return query.order_by(TimeOff.start_date).all()


def validate_period(
    start_date: date | None, end_date: date | None, hours_per_day: Decimal | None
) -> None:
    """Check the invariants of a time-off period."""
    if start_date is None or end_date is None:
        raise ValidationError("Start date and end date are required")
    if end_date < start_date:
        raise ValidationError("End date must not be before start date")
    if hours_per_day is not None and not 0 <= hours_per_day <= MAX_HOURS_PER_DAY:
        raise ValidationError(
            f"Hours per day must be between 0 and 24, got {hours_per_day}"
        )


def _recalculate_balances(
    db: Session, user_id: uuid.UUID, years: set[int], today: date | None
) -> None:
    from timetrack.services import vacation_balance_service

    vacation_balance_service.recalculate_years(db, user_id, years, today)


def create_time_off(
    db: Session, user_id: uuid.UUID, data: TimeOffCreate, today: date | None = None
) -> TimeOff:
    """Record an absence; vacation recalculates the balances it touches."""
    validate_period(data.start_date, data.end_date, data.hours_per_day)
    user_service.require_user(db, user_id)

    with transaction(db):
        time_off = TimeOff(
            user_id=user_id,
            start_date=data.start_date,
            end_date=data.end_date,
            time_off_type=data.time_off_type,
            hours_per_day=data.hours_per_day,
            notes=data.notes,
        )
        db.add(time_off)
        db.flush()
        if time_off.time_off_type == TimeOffType.VACATION:
            _recalculate_balances(
                db,
                user_id,
                years_touched((time_off.start_date, time_off.end_date)),
                today,
            )

    db.refresh(time_off)
    logger.info(
        f"Created {time_off.time_off_type.value} time off {time_off.id} for user "
        f"{user_id}: {time_off.start_date}..{time_off.end_date}"
    )
    return time_off


def update_time_off(
    db: Session,
    user_id: uuid.UUID,
    time_off_id: uuid.UUID,
    data: TimeOffUpdate,
    today: date | None = None,
) -> TimeOff:
    """Update an absence.

    When either the old or the new type is vacation, every year touched
    by the old or the new range is recalculated in the same unit of work.
    """
    time_off = get_time_off_for_user(db, user_id, time_off_id)
    old_range = (time_off.start_date, time_off.end_date)
    old_type = time_off.time_off_type

    start_date = data.start_date or time_off.start_date
    end_date = data.end_date or time_off.end_date
    hours_per_day = (
        data.hours_per_day if data.hours_per_day is not None else time_off.hours_per_day
    )
    validate_period(start_date, end_date, hours_per_day)

    with transaction(db):
        time_off.start_date = start_date
        time_off.end_date = end_date
        time_off.hours_per_day = hours_per_day
        if data.time_off_type is not None:
            time_off.time_off_type = data.time_off_type
        if data.notes is not None:
            time_off.notes = data.notes
        db.flush()

        if TimeOffType.VACATION in (old_type, time_off.time_off_type):
            _recalculate_balances(
                db,
                user_id,
                years_touched(old_range, (start_date, end_date)),
                today,
            )

    db.refresh(time_off)
    logger.info(f"Updated time off {time_off.id} for user {user_id}")
    return time_off


def delete_time_off(
    db: Session,
    user_id: uuid.UUID,
    time_off_id: uuid.UUID,
    today: date | None = None,
) -> None:
    """Delete an absence; vacation recalculates the balances it touched."""
    time_off = get_time_off_for_user(db, user_id, time_off_id)
    was_vacation = time_off.time_off_type == TimeOffType.VACATION
    years = years_touched((time_off.start_date, time_off.end_date))

    with transaction(db):
        db.delete(time_off)
        db.flush()
        if was_vacation:
            _recalculate_balances(db, user_id, years, today)

    logger.info(f"Deleted time off {time_off_id} for user {user_id}")
