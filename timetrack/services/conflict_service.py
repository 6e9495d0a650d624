# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Conflict detection: work logged on a recurring off-day.

A warning moves one way only, from warned to acknowledged. It is never
re-created once one exists for the (user, date) pair, and it disappears
only together with the time entry that raised it.
"""

import logging
import uuid
from collections.abc import Iterable
from datetime import date

from sqlalchemy.orm import Session

from timetrack.calendar.recurrence import applies_to_date, rule_from_record
from timetrack.database import transaction
from timetrack.exceptions import (
    ForbiddenError,
    InvalidRecurrenceRuleError,
    NotFoundError,
)
from timetrack.models import RecurringOffDay, RecurringOffDayConflictWarning, TimeEntry
from timetrack.models.base import utcnow
from timetrack.services import recurring_off_day_service, user_service

logger = logging.getLogger(__name__)


def get_warning(
    db: Session, warning_id: uuid.UUID
) -> RecurringOffDayConflictWarning | None:
    """Get a warning by ID."""
    return (
        db.query(RecurringOffDayConflictWarning)
        .filter(RecurringOffDayConflictWarning.id == warning_id)
        .first()
    )


def get_warning_for_date(
    db: Session, user_id: uuid.UUID, day: date
) -> RecurringOffDayConflictWarning | None:
    """Get the warning of a user for a date, if any."""
    return (
        db.query(RecurringOffDayConflictWarning)
        .filter(
            RecurringOffDayConflictWarning.user_id == user_id,
            RecurringOffDayConflictWarning.conflict_date == day,
        )
        .first()
    )


def get_warnings_for_time_entry(
    db: Session, time_entry_id: uuid.UUID
) -> list[RecurringOffDayConflictWarning]:
    """Get the warnings raised by a time entry."""
    return (
        db.query(RecurringOffDayConflictWarning)
        .filter(RecurringOffDayConflictWarning.time_entry_id == time_entry_id)
        .all()
    )


def list_warnings(
    db: Session, user_id: uuid.UUID, unacknowledged_only: bool = False
) -> list[RecurringOffDayConflictWarning]:
    """List the warnings of a user, latest date first."""
    user_service.require_user(db, user_id)
    query = db.query(RecurringOffDayConflictWarning).filter(
        RecurringOffDayConflictWarning.user_id == user_id
    )
    if unacknowledged_only:
        query = query.filter(
            RecurringOffDayConflictWarning.acknowledged == False  # noqa: E712
        )
    return query.order_by(RecurringOffDayConflictWarning.conflict_date.desc()).all()


def find_conflicting_rule(
    db: Session, user_id: uuid.UUID, day: date
) -> RecurringOffDay | None:
    """Return the first active, non-exempted rule claiming a date."""
    for record in recurring_off_day_service.get_active_rules_for_date(
        db, user_id, day
    ):
        try:
            rule = rule_from_record(record)
        except InvalidRecurrenceRuleError as e:
            logger.warning(f"Skipping malformed recurring off-day {record.id}: {e}")
            continue
        if not applies_to_date(rule, day):
            continue
        if recurring_off_day_service.exemption_exists(db, record.id, day):
            logger.debug(f"Recurring off-day {record.id} is exempted on {day}")
            continue
        return record
    return None


def detect_and_create_warning_if_needed(
    db: Session, entry: TimeEntry
) -> RecurringOffDayConflictWarning | None:
    """Raise a warning when a time entry falls on a recurring off-day.

    An existing warning for the user and date is returned unchanged,
    whatever its state. Runs inside the caller's unit of work.

    Args:
        db: Database session
        entry: The persisted time entry

    Returns:
        The warning for the entry's date, or None when no rule claims it
    """
    existing = get_warning_for_date(db, entry.user_id, entry.entry_date)
    if existing:
        return existing

    record = find_conflicting_rule(db, entry.user_id, entry.entry_date)
    if not record:
        return None

    warning = RecurringOffDayConflictWarning(
        user_id=entry.user_id,
        conflict_date=entry.entry_date,
        time_entry_id=entry.id,
        recurring_off_day_id=record.id,
        acknowledged=False,
    )
    db.add(warning)
    db.flush()
    logger.info(
        f"Conflict warning {warning.id}: user {entry.user_id} logged work on "
        f"{entry.entry_date}, an off-day of recurring off-day {record.id}"
    )
    return warning


def cleanup_warnings_for_time_entry(db: Session, time_entry_id: uuid.UUID) -> int:
    """Delete every warning raised by a time entry; safe to repeat."""
    removed = (
        db.query(RecurringOffDayConflictWarning)
        .filter(RecurringOffDayConflictWarning.time_entry_id == time_entry_id)
        .delete()
    )
    db.flush()
    if removed:
        logger.info(
            f"Removed {removed} conflict warnings of time entry {time_entry_id}"
        )
    return removed


def reevaluate_conflicts(
    db: Session, user_id: uuid.UUID, entries: Iterable[TimeEntry]
) -> list[RecurringOffDayConflictWarning]:
    """Run detection for a batch of a user's time entries."""
    warnings = []
    for entry in entries:
        if entry.user_id != user_id:
            continue
        warning = detect_and_create_warning_if_needed(db, entry)
        if warning:
            warnings.append(warning)
    logger.debug(
        f"Re-evaluated conflicts for user {user_id}: {len(warnings)} warnings"
    )
    return warnings


def acknowledge_warning(
    db: Session, user_id: uuid.UUID, warning_id: uuid.UUID
) -> RecurringOffDayConflictWarning:
    """Acknowledge a warning; repeating keeps the first timestamp.

    Raises:
        NotFoundError: If the warning does not exist
        ForbiddenError: If the warning belongs to another user
    """
    warning = get_warning(db, warning_id)
    if not warning:
        raise NotFoundError("Conflict warning", warning_id)
    if warning.user_id != user_id:
        raise ForbiddenError("Conflict warning belongs to another user")

    if warning.acknowledged:
        return warning

    with transaction(db):
        warning.acknowledged = True
        warning.acknowledged_at = utcnow()

    db.refresh(warning)
    logger.info(f"Acknowledged conflict warning {warning.id} of user {user_id}")
    return warning
