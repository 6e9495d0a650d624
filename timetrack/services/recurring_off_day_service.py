# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Recurring off-day service: rules and their exemptions."""

import logging
import uuid
from collections.abc import Iterable
from datetime import date

from sqlalchemy import or_
from sqlalchemy.orm import Session

from timetrack.calendar.recurrence import applies_to_date, rule_from_record
from timetrack.database import transaction
from timetrack.exceptions import (
    ExemptionAlreadyExistsError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from timetrack.models import (
    RecurrencePattern,
    RecurringOffDay,
    RecurringOffDayExemption,
)
from timetrack.schemas.recurring_off_day import (
    ExemptionCreate,
    RecurringOffDayCreate,
    RecurringOffDayUpdate,
)
from timetrack.services import user_service

logger = logging.getLogger(__name__)


def get_rules(
    db: Session, user_id: uuid.UUID, active_only: bool = False
) -> list[RecurringOffDay]:
    """Get all recurring off-day rules of a user, oldest first."""
    user_service.require_user(db, user_id)
    query = db.query(RecurringOffDay).filter(RecurringOffDay.user_id == user_id)
    if active_only:
        query = query.filter(RecurringOffDay.is_active == True)  # noqa: E712
    return query.order_by(RecurringOffDay.start_date, RecurringOffDay.id).all()


def get_active_rules_for_date(
    db: Session, user_id: uuid.UUID, day: date
) -> list[RecurringOffDay]:
    """Get the active rules whose validity window contains a date."""
    return (
        db.query(RecurringOffDay)
        .filter(
            RecurringOffDay.user_id == user_id,
            RecurringOffDay.is_active == True,  # noqa: E712
            RecurringOffDay.start_date <= day,
            or_(RecurringOffDay.end_date.is_(None), RecurringOffDay.end_date >= day),
        )
        .order_by(RecurringOffDay.start_date, RecurringOffDay.id)
        .all()
    )


def get_rule(db: Session, rule_id: uuid.UUID) -> RecurringOffDay | None:
    """Get a single rule by ID."""
    return db.query(RecurringOffDay).filter(RecurringOffDay.id == rule_id).first()


def get_rule_for_user(
    db: Session, user_id: uuid.UUID, rule_id: uuid.UUID
) -> RecurringOffDay:
    """Get a rule by ID, ensuring it belongs to the user."""
    record = get_rule(db, rule_id)
    if not record:
        raise NotFoundError("Recurring off-day", rule_id)
    if record.user_id != user_id:
        raise ForbiddenError("Recurring off-day belongs to another user")
    return record


def _check_pattern_payload(
    pattern: RecurrencePattern,
    week_interval: int | None,
    reference_date: date | None,
    week_of_month: int | None,
) -> None:
    if pattern == RecurrencePattern.EVERY_NTH_WEEK and week_of_month is not None:
        raise ValidationError(
            "week_of_month is only valid for nth_weekday_of_month rules"
        )
    if pattern == RecurrencePattern.NTH_WEEKDAY_OF_MONTH and (
        week_interval is not None or reference_date is not None
    ):
        raise ValidationError(
            "week_interval and reference_date are only valid for "
            "every_nth_week rules"
        )


def _reevaluate_conflicts_for_rule(db: Session, record: RecurringOffDay) -> None:
    """Re-run conflict detection over the user's work inside the rule window."""
    from timetrack.services import conflict_service, time_entry_service

    entries = time_entry_service.get_entries_in_range(
        db, record.user_id, record.start_date, record.end_date
    )
    if entries:
        conflict_service.reevaluate_conflicts(db, record.user_id, entries)


def create_rule(
    db: Session, user_id: uuid.UUID, data: RecurringOffDayCreate
) -> RecurringOffDay:
    """Create a recurring off-day rule.

    Work already logged on dates the new rule claims gets a conflict
    warning in the same unit of work.

    Raises:
        NotFoundError: If the user does not exist
        InvalidRecurrenceRuleError: If the rule configuration is invalid
    """
    user_service.require_user(db, user_id)
    _check_pattern_payload(
        data.recurrence_pattern,
        data.week_interval,
        data.reference_date,
        data.week_of_month,
    )

    record = RecurringOffDay(
        user_id=user_id,
        recurrence_pattern=data.recurrence_pattern,
        weekday=data.weekday,
        week_interval=data.week_interval,
        reference_date=data.reference_date,
        week_of_month=data.week_of_month,
        start_date=data.start_date,
        end_date=data.end_date,
        is_active=data.is_active,
        description=data.description,
    )
    rule_from_record(record)

    with transaction(db):
        db.add(record)
        db.flush()
        _reevaluate_conflicts_for_rule(db, record)

    db.refresh(record)
    logger.info(
        f"Created recurring off-day {record.id} for user {user_id}: "
        f"{record.recurrence_pattern.value} weekday={record.weekday}"
    )
    return record


def update_rule(
    db: Session,
    user_id: uuid.UUID,
    rule_id: uuid.UUID,
    data: RecurringOffDayUpdate,
) -> RecurringOffDay:
    """Update a rule; the result must still be a valid rule.

    Switching the pattern kind clears the payload of the previous kind
    unless the update sets it explicitly.
    """
    record = get_rule_for_user(db, user_id, rule_id)

    with transaction(db):
        if data.recurrence_pattern is not None:
            if data.recurrence_pattern != record.recurrence_pattern:
                if data.recurrence_pattern == RecurrencePattern.EVERY_NTH_WEEK:
                    record.week_of_month = None
                else:
                    record.week_interval = None
                    record.reference_date = None
            record.recurrence_pattern = data.recurrence_pattern
        if data.weekday is not None:
            record.weekday = data.weekday
        if data.week_interval is not None:
            record.week_interval = data.week_interval
        if data.reference_date is not None:
            record.reference_date = data.reference_date
        if data.week_of_month is not None:
            record.week_of_month = data.week_of_month
        if data.start_date is not None:
            record.start_date = data.start_date
        if data.end_date is not None:
            record.end_date = data.end_date
        if data.clear_end_date:
            record.end_date = None
        if data.is_active is not None:
            record.is_active = data.is_active
        if data.description is not None:
            record.description = data.description

        _check_pattern_payload(
            record.recurrence_pattern,
            record.week_interval,
            record.reference_date,
            record.week_of_month,
        )
        rule_from_record(record)
        db.flush()
        _reevaluate_conflicts_for_rule(db, record)

    db.refresh(record)
    logger.info(f"Updated recurring off-day {record.id} for user {user_id}")
    return record


def delete_rule(db: Session, user_id: uuid.UUID, rule_id: uuid.UUID) -> None:
    """Delete a rule together with its exemptions.

    Conflict warnings raised by the rule are kept; they reference the
    rule by value only.
    """
    record = get_rule_for_user(db, user_id, rule_id)

    with transaction(db):
        removed = (
            db.query(RecurringOffDayExemption)
            .filter(RecurringOffDayExemption.recurring_off_day_id == record.id)
            .delete()
        )
        db.delete(record)

    logger.info(
        f"Deleted recurring off-day {rule_id} for user {user_id} "
        f"({removed} exemptions removed)"
    )


# Exemptions


def get_exemptions(
    db: Session, user_id: uuid.UUID, rule_id: uuid.UUID
) -> list[RecurringOffDayExemption]:
    """Get the exemptions of a rule, earliest date first."""
    get_rule_for_user(db, user_id, rule_id)
    return (
        db.query(RecurringOffDayExemption)
        .filter(RecurringOffDayExemption.recurring_off_day_id == rule_id)
        .order_by(RecurringOffDayExemption.exemption_date)
        .all()
    )


def exemption_exists(db: Session, rule_id: uuid.UUID, day: date) -> bool:
    """Check whether a rule is exempted on a date."""
    return (
        db.query(RecurringOffDayExemption.id)
        .filter(
            RecurringOffDayExemption.recurring_off_day_id == rule_id,
            RecurringOffDayExemption.exemption_date == day,
        )
        .first()
        is not None
    )


def get_exempted_dates(
    db: Session, rule_ids: Iterable[uuid.UUID], start: date, end: date
) -> set[tuple[uuid.UUID, date]]:
    """Get (rule id, date) pairs of all exemptions of the rules in a range."""
    rule_ids = list(rule_ids)
    if not rule_ids:
        return set()
    rows = (
        db.query(
            RecurringOffDayExemption.recurring_off_day_id,
            RecurringOffDayExemption.exemption_date,
        )
        .filter(
            RecurringOffDayExemption.recurring_off_day_id.in_(rule_ids),
            RecurringOffDayExemption.exemption_date >= start,
            RecurringOffDayExemption.exemption_date <= end,
        )
        .all()
    )
    return {(rule_id, day) for rule_id, day in rows}


def create_exemption(
    db: Session, user_id: uuid.UUID, rule_id: uuid.UUID, data: ExemptionCreate
) -> RecurringOffDayExemption:
    """Exempt one date from a rule, turning it back into a working day.

    Raises:
        NotFoundError: If the rule does not exist
        ForbiddenError: If the rule belongs to another user
        ValidationError: If the rule does not claim the date
        ExemptionAlreadyExistsError: If the date is already exempted
    """
    record = get_rule_for_user(db, user_id, rule_id)
    if not applies_to_date(rule_from_record(record), data.exemption_date):
        raise ValidationError(
            f"{data.exemption_date} is not an off-day of recurring off-day {rule_id}"
        )
    if exemption_exists(db, rule_id, data.exemption_date):
        raise ExemptionAlreadyExistsError(
            f"Recurring off-day {rule_id} is already exempted on "
            f"{data.exemption_date}"
        )

    with transaction(db):
        exemption = RecurringOffDayExemption(
            recurring_off_day_id=rule_id,
            exemption_date=data.exemption_date,
            reason=data.reason,
        )
        db.add(exemption)

    db.refresh(exemption)
    logger.info(
        f"Created exemption {exemption.id} for recurring off-day {rule_id} "
        f"on {exemption.exemption_date}"
    )
    return exemption


def delete_exemption(
    db: Session, user_id: uuid.UUID, rule_id: uuid.UUID, exemption_id: uuid.UUID
) -> None:
    """Delete an exemption of a rule.

    Work already logged on the date is checked again, since the rule
    claims the date once more.
    """
    from timetrack.services import conflict_service, time_entry_service

    get_rule_for_user(db, user_id, rule_id)
    exemption = (
        db.query(RecurringOffDayExemption)
        .filter(RecurringOffDayExemption.id == exemption_id)
        .first()
    )
    if not exemption or exemption.recurring_off_day_id != rule_id:
        raise NotFoundError("Exemption", exemption_id)

    day = exemption.exemption_date
    with transaction(db):
        db.delete(exemption)
        db.flush()
        entries = time_entry_service.get_entries_in_range(db, user_id, day, day)
        conflict_service.reevaluate_conflicts(db, user_id, entries)

    logger.info(f"Deleted exemption {exemption_id} of recurring off-day {rule_id}")
