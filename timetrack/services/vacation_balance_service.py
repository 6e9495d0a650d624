# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation balance service: the per-year entitlement ledger."""

import logging
import uuid
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from functools import partial

from sqlalchemy.orm import Session

from timetrack.calendar.classifier import total_working_days
from timetrack.calendar.ledger import split_used_planned
from timetrack.config import get_settings
from timetrack.database import transaction
from timetrack.exceptions import ValidationError
from timetrack.models import TimeOffType, VacationBalance
from timetrack.schemas.vacation_balance import VacationBalanceUpdate
from timetrack.services import time_off_service, user_service, working_days_service

logger = logging.getLogger(__name__)

MIN_YEAR = 1900
MAX_YEAR = 2200


def _check_year(year: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")


def get_or_create_balance(
    db: Session, user_id: uuid.UUID, year: int
) -> VacationBalance:
    """Get the balance row of a year, creating it with the default allowance."""
    balance = (
        db.query(VacationBalance)
        .filter(VacationBalance.user_id == user_id, VacationBalance.year == year)
        .first()
    )
    if balance:
        return balance

    balance = VacationBalance(
        user_id=user_id,
        year=year,
        annual_allowance_days=get_settings().default_annual_allowance_days,
        carried_over_days=Decimal("0"),
        adjustment_days=Decimal("0"),
        used_days=Decimal("0"),
        planned_days=Decimal("0"),
    )
    db.add(balance)
    db.flush()
    logger.info(f"Created vacation balance {year} for user {user_id}")
    return balance


def recalculate(
    db: Session, user_id: uuid.UUID, year: int, today: date | None = None
) -> VacationBalance:
    """Recompute used and planned days of a year from vacation time-off.

    Vacation periods are clipped to the year and split at ``today``:
    days up to and including today are used, later days are planned.
    Runs inside the caller's unit of work.

    Args:
        db: Database session
        user_id: Owner of the balance
        year: Calendar year
        today: Reference date, defaults to the current date

    Returns:
        The updated balance row
    """
    _check_year(year)
    today = today or date.today()
    user = user_service.require_user(db, user_id)
    year_start = date(year, 1, 1)
    year_end = date(year, 12, 31)

    vacations = time_off_service.get_time_off_in_range(
        db, user_id, year_start, year_end, types=[TimeOffType.VACATION]
    )
    calendar = working_days_service.build_user_calendar(
        db, user, year_start, year_end
    )
    used, planned = split_used_planned(
        ((v.start_date, v.end_date) for v in vacations),
        year,
        today,
        partial(total_working_days, calendar),
    )

    balance = get_or_create_balance(db, user_id, year)
    balance.used_days = used
    balance.planned_days = planned
    db.flush()
    logger.info(
        f"Recalculated vacation balance {year} for user {user_id}: "
        f"used={used} planned={planned} remaining={balance.remaining_days}"
    )
    return balance


def recalculate_years(
    db: Session,
    user_id: uuid.UUID,
    years: Iterable[int],
    today: date | None = None,
) -> list[VacationBalance]:
    """Recalculate several years in the caller's unit of work."""
    return [recalculate(db, user_id, year, today) for year in sorted(set(years))]


def get_balance(
    db: Session, user_id: uuid.UUID, year: int, today: date | None = None
) -> VacationBalance:
    """Get the balance of a year, recalculated as of ``today``."""
    with transaction(db):
        balance = recalculate(db, user_id, year, today)
    db.refresh(balance)
    return balance


def update_balance(
    db: Session,
    user_id: uuid.UUID,
    year: int,
    data: VacationBalanceUpdate,
    today: date | None = None,
) -> VacationBalance:
    """Change the allowance, carry-over or adjustment of a year."""
    _check_year(year)
    user_service.require_user(db, user_id)

    with transaction(db):
        balance = get_or_create_balance(db, user_id, year)
        if data.annual_allowance_days is not None:
            balance.annual_allowance_days = data.annual_allowance_days
        if data.carried_over_days is not None:
            balance.carried_over_days = data.carried_over_days
        if data.adjustment_days is not None:
            balance.adjustment_days = data.adjustment_days
        balance = recalculate(db, user_id, year, today)

    db.refresh(balance)
    logger.info(f"Updated vacation balance {year} for user {user_id}")
    return balance
