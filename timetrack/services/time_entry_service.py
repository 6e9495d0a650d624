# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time entry service: logged work and the conflict checks it triggers."""

import logging
import uuid
from datetime import date

from sqlalchemy.orm import Session

from timetrack.database import transaction
from timetrack.exceptions import ForbiddenError, NotFoundError, ValidationError
from timetrack.models import TimeEntry
from timetrack.schemas.time_entry import TimeEntryCreate, TimeEntryUpdate
from timetrack.services import conflict_service, user_service

logger = logging.getLogger(__name__)


def get_entry(db: Session, entry_id: uuid.UUID) -> TimeEntry | None:
    """Get a time entry by ID."""
    return db.query(TimeEntry).filter(TimeEntry.id == entry_id).first()


def get_entry_for_user(
    db: Session, user_id: uuid.UUID, entry_id: uuid.UUID
) -> TimeEntry:
    """Get a time entry by ID, ensuring it belongs to the user."""
    entry = get_entry(db, entry_id)
    if not entry:
        raise NotFoundError("Time entry", entry_id)
    if entry.user_id != user_id:
        raise ForbiddenError("Time entry belongs to another user")
    return entry


def get_entries_in_range(
    db: Session, user_id: uuid.UUID, start: date | None, end: date | None
) -> list[TimeEntry]:
    """Get a user's entries between two optional inclusive bounds."""
    query = db.query(TimeEntry).filter(TimeEntry.user_id == user_id)
    if start is not None:
        query = query.filter(TimeEntry.entry_date >= start)
    if end is not None:
        query = query.filter(TimeEntry.entry_date <= end)
    return query.order_by(TimeEntry.entry_date, TimeEntry.clock_in).all()


def list_entries(
    db: Session,
    user_id: uuid.UUID,
    start: date | None = None,
    end: date | None = None,
) -> list[TimeEntry]:
    """List a user's time entries, optionally within a date range."""
    if start is not None and end is not None and end < start:
        raise ValidationError("End date must not be before start date")
    user_service.require_user(db, user_id)
    return get_entries_in_range(db, user_id, start, end)


def create_entry(db: Session, user_id: uuid.UUID, data: TimeEntryCreate) -> TimeEntry:
    """Log work and raise a conflict warning if the date is an off-day."""
    user_service.require_user(db, user_id)

    with transaction(db):
        entry = TimeEntry(
            user_id=user_id,
            entry_date=data.entry_date,
            clock_in=data.clock_in,
            clock_out=data.clock_out,
            break_minutes=data.break_minutes,
            notes=data.notes,
        )
        db.add(entry)
        db.flush()
        conflict_service.detect_and_create_warning_if_needed(db, entry)

    db.refresh(entry)
    logger.info(
        f"Created time entry {entry.id} for user {user_id} on {entry.entry_date}"
    )
    return entry


def update_entry(
    db: Session, user_id: uuid.UUID, entry_id: uuid.UUID, data: TimeEntryUpdate
) -> TimeEntry:
    """Update a time entry and run detection for its date.

    Moving the entry to another date first drops the warnings it raised.
    """
    entry = get_entry_for_user(db, user_id, entry_id)
    clock_in = data.clock_in if data.clock_in is not None else entry.clock_in
    clock_out = data.clock_out if data.clock_out is not None else entry.clock_out
    if clock_out is not None and clock_out <= clock_in:
        raise ValidationError("clock_out must be after clock_in")

    date_changed = (
        data.entry_date is not None and data.entry_date != entry.entry_date
    )

    with transaction(db):
        if data.entry_date is not None:
            entry.entry_date = data.entry_date
        entry.clock_in = clock_in
        entry.clock_out = clock_out
        if data.break_minutes is not None:
            entry.break_minutes = data.break_minutes
        if data.notes is not None:
            entry.notes = data.notes
        db.flush()

        if date_changed:
            conflict_service.cleanup_warnings_for_time_entry(db, entry.id)
        conflict_service.detect_and_create_warning_if_needed(db, entry)

    db.refresh(entry)
    logger.info(f"Updated time entry {entry.id} for user {user_id}")
    return entry


def delete_entry(db: Session, user_id: uuid.UUID, entry_id: uuid.UUID) -> None:
    """Delete a time entry and the warnings it raised.

    Other entries on the same date are checked again so the date keeps
    its warning while work remains logged on it.
    """
    entry = get_entry_for_user(db, user_id, entry_id)
    entry_date = entry.entry_date

    with transaction(db):
        conflict_service.cleanup_warnings_for_time_entry(db, entry.id)
        db.delete(entry)
        db.flush()
        remaining = get_entries_in_range(db, user_id, entry_date, entry_date)
        conflict_service.reevaluate_conflicts(db, user_id, remaining)

    logger.info(f"Deleted time entry {entry_id} for user {user_id}")
