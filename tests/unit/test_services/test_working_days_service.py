# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for working_days_service."""

import uuid
from datetime import date
from decimal import Decimal

import pytest

from timetrack.exceptions import NotFoundError, ValidationError
from timetrack.models import RecurrencePattern, Region, TimeOffType
from timetrack.schemas.recurring_off_day import RecurringOffDayCreate
from timetrack.schemas.time_off import TimeOffCreate
from timetrack.schemas.working_hours import WorkingHoursUpdate
from timetrack.services import (
    recurring_off_day_service,
    time_off_service,
    working_days_service,
    working_hours_service,
)

WEEK_START = date(2025, 10, 20)
WEEK_END = date(2025, 10, 24)


def add_time_off(db_session, user, start, end, time_off_type):
    return time_off_service.create_time_off(
        db_session,
        user.id,
        TimeOffCreate(start_date=start, end_date=end, time_off_type=time_off_type),
        today=date(2025, 6, 1),
    )


def add_friday_rule(db_session, user):
    return recurring_off_day_service.create_rule(
        db_session,
        user.id,
        RecurringOffDayCreate(
            recurrence_pattern=RecurrencePattern.EVERY_NTH_WEEK,
            weekday=5,
            week_interval=1,
            reference_date=date(2025, 1, 3),
            start_date=date(2025, 1, 1),
        ),
    )


def count(db_session, user, start=WEEK_START, end=WEEK_END, **kwargs):
    region = kwargs.pop("region", None)
    return working_days_service.total_working_days(
        db_session, user.id, region, start, end, **kwargs
    )


def test_plain_week(db_session, test_user):
    assert count(db_session, test_user) == Decimal("5")


def test_region_override(db_session, test_user):
    start, end = date(2025, 10, 27), date(2025, 10, 31)

    assert count(db_session, test_user, start, end) == Decimal("5")
    assert count(
        db_session, test_user, start, end, region=Region.BRANDENBURG
    ) == Decimal("4")


def test_user_region_is_the_default(db_session, make_user):
    user = make_user(email="bb@example.com", region=Region.BRANDENBURG)

    assert count(
        db_session, user, date(2025, 10, 27), date(2025, 10, 31)
    ) == Decimal("4")


def test_sick_day_is_not_a_working_day(db_session, test_user):
    sick = add_time_off(
        db_session, test_user, date(2025, 10, 22), date(2025, 10, 22), TimeOffType.SICK
    )

    assert count(db_session, test_user) == Decimal("4")
    assert count(db_session, test_user, exclude_time_off_id=sick.id) == Decimal("5")


def test_vacation_does_not_reduce_working_days(db_session, test_user):
    add_time_off(db_session, test_user, WEEK_START, WEEK_END, TimeOffType.VACATION)

    assert count(db_session, test_user) == Decimal("5")


def test_recurring_off_day(db_session, test_user):
    add_friday_rule(db_session, test_user)

    assert count(db_session, test_user) == Decimal("4")


def test_sick_leave_takes_precedence_over_recurring_off_day(db_session, test_user):
    add_friday_rule(db_session, test_user)
    sick = add_time_off(
        db_session, test_user, WEEK_START, WEEK_END, TimeOffType.SICK
    )
    vacation = add_time_off(
        db_session,
        test_user,
        date(2025, 11, 3),
        date(2025, 11, 7),
        TimeOffType.VACATION,
    )

    assert working_days_service.count_time_off_days(db_session, sick) == Decimal("5")
    assert working_days_service.count_time_off_days(
        db_session, vacation
    ) == Decimal("4")


def test_custom_working_week(db_session, test_user):
    working_hours_service.update_working_day(
        db_session,
        test_user.id,
        5,
        WorkingHoursUpdate(is_working_day=False, hours=Decimal("0")),
    )

    assert count(db_session, test_user) == Decimal("4")


def test_empty_range(db_session, test_user):
    assert count(db_session, test_user, WEEK_END, WEEK_START) == Decimal("0")


def test_unknown_user(db_session):
    with pytest.raises(NotFoundError):
        working_days_service.total_working_days(
            db_session, uuid.uuid4(), None, WEEK_START, WEEK_END
        )


def test_classify_range(db_session, make_user):
    user = make_user(email="half@example.com", half_day_holidays_enabled=True)

    calendar, days = working_days_service.classify_range(
        db_session, user.id, date(2025, 12, 23), date(2025, 12, 27)
    )

    assert calendar.region == Region.BERLIN
    assert [units for _, units, _ in days] == [
        Decimal("1"),
        Decimal("0.5"),
        Decimal("0"),
        Decimal("0"),
        Decimal("0"),
    ]
    assert days[1][2] == Decimal("4")


def test_classify_range_rejects_inverted_range(db_session, test_user):
    with pytest.raises(ValidationError):
        working_days_service.classify_range(
            db_session, test_user.id, WEEK_END, WEEK_START
        )


def test_classify_range_accepts_a_leap_year(db_session, test_user):
    _, days = working_days_service.classify_range(
        db_session, test_user.id, date(2028, 1, 1), date(2028, 12, 31)
    )

    assert len(days) == working_days_service.MAX_CLASSIFY_DAYS


def test_classify_range_rejects_overlong_range(db_session, test_user):
    with pytest.raises(ValidationError):
        working_days_service.classify_range(
            db_session, test_user.id, date(1, 1, 1), date(9999, 12, 31)
        )
