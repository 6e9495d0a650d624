# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for recurring off-day rule evaluation."""

import uuid
from datetime import date, timedelta
from types import SimpleNamespace

import pytest

from timetrack.calendar.recurrence import (
    EveryNthWeek,
    NthWeekdayOfMonth,
    RecurrenceRule,
    applies_to_date,
    applies_with_exemptions,
    load_rules,
    rule_from_record,
    weeks_between,
)
from timetrack.exceptions import InvalidRecurrenceRuleError, ValidationError
from timetrack.models.enums import RecurrencePattern

MONDAY = 1
TUESDAY = 2
FRIDAY = 5


def every_nth_week(weekday, interval, reference, **kwargs) -> RecurrenceRule:
    kwargs.setdefault("start_date", reference)
    return RecurrenceRule(
        weekday=weekday, pattern=EveryNthWeek(interval, reference), **kwargs
    )


def nth_weekday(weekday, occurrence, **kwargs) -> RecurrenceRule:
    kwargs.setdefault("start_date", date(2025, 1, 1))
    return RecurrenceRule(
        weekday=weekday, pattern=NthWeekdayOfMonth(occurrence), **kwargs
    )


class TestWeeksBetween:
    """Whole weeks, truncated toward zero."""

    def test_forward(self):
        start = date(2025, 1, 6)
        assert weeks_between(start, start) == 0
        assert weeks_between(start, start + timedelta(days=6)) == 0
        assert weeks_between(start, start + timedelta(days=7)) == 1
        assert weeks_between(start, start + timedelta(days=27)) == 3

    def test_backward_truncates_toward_zero(self):
        start = date(2025, 1, 6)
        assert weeks_between(start, start - timedelta(days=6)) == 0
        assert weeks_between(start, start - timedelta(days=7)) == -1
        assert weeks_between(start, start - timedelta(days=13)) == -1


class TestEveryNthWeek:
    def test_every_fourth_monday(self):
        rule = every_nth_week(MONDAY, 4, date(2025, 1, 6))

        assert applies_to_date(rule, date(2025, 2, 3)) is True
        assert applies_to_date(rule, date(2025, 1, 13)) is False
        assert applies_to_date(rule, date(2025, 1, 6)) is True
        assert applies_to_date(rule, date(2025, 3, 3)) is True

    def test_every_other_friday(self):
        rule = every_nth_week(FRIDAY, 2, date(2025, 1, 3))

        hits = [
            d
            for d in (date(2025, 1, 3) + timedelta(weeks=w) for w in range(6))
            if applies_to_date(rule, d)
        ]
        assert hits == [date(2025, 1, 3), date(2025, 1, 17), date(2025, 1, 31)]

    def test_date_before_reference_never_applies(self):
        rule = every_nth_week(
            MONDAY, 4, date(2025, 1, 6), start_date=date(2024, 1, 1)
        )

        assert applies_to_date(rule, date(2024, 12, 9)) is False

    def test_date_days_before_reference_on_other_weekday(self):
        rule = every_nth_week(
            FRIDAY, 1, date(2025, 1, 6), start_date=date(2024, 1, 1)
        )

        assert applies_to_date(rule, date(2025, 1, 3)) is False
        assert applies_to_date(rule, date(2025, 1, 10)) is True

    def test_wrong_weekday(self):
        rule = every_nth_week(MONDAY, 1, date(2025, 1, 6))

        assert applies_to_date(rule, date(2025, 1, 7)) is False

    @pytest.mark.parametrize("interval", [0, -1, None])
    def test_invalid_interval(self, interval):
        with pytest.raises(InvalidRecurrenceRuleError):
            EveryNthWeek(interval, date(2025, 1, 6))

    def test_missing_reference_date(self):
        with pytest.raises(InvalidRecurrenceRuleError):
            EveryNthWeek(2, None)


class TestNthWeekdayOfMonth:
    def test_second_tuesday(self):
        rule = nth_weekday(TUESDAY, 2)

        assert applies_to_date(rule, date(2025, 3, 11)) is True
        assert applies_to_date(rule, date(2025, 3, 4)) is False
        assert applies_to_date(rule, date(2025, 3, 18)) is False

    def test_first_occurrence_on_first_of_month(self):
        # 2025-09-01 is a Monday
        rule = nth_weekday(MONDAY, 1)

        assert applies_to_date(rule, date(2025, 9, 1)) is True
        assert applies_to_date(rule, date(2025, 9, 8)) is False

    def test_last_friday(self):
        rule = nth_weekday(FRIDAY, 5)

        assert applies_to_date(rule, date(2025, 1, 31)) is True
        assert applies_to_date(rule, date(2025, 1, 24)) is False
        assert applies_to_date(rule, date(2025, 2, 28)) is True

    def test_fourth_and_last_coincide_in_four_friday_month(self):
        day = date(2025, 2, 28)

        assert applies_to_date(nth_weekday(FRIDAY, 4), day) is True
        assert applies_to_date(nth_weekday(FRIDAY, 5), day) is True

    def test_last_occurrence_in_five_friday_month(self):
        # January 2025 has five Fridays; the fourth is not the last
        assert applies_to_date(nth_weekday(FRIDAY, 4), date(2025, 1, 24)) is True
        assert applies_to_date(nth_weekday(FRIDAY, 5), date(2025, 1, 24)) is False

    @pytest.mark.parametrize("occurrence", [0, 6, None])
    def test_invalid_occurrence(self, occurrence):
        with pytest.raises(InvalidRecurrenceRuleError):
            NthWeekdayOfMonth(occurrence)


class TestRuleWindow:
    def test_inactive_rule_never_applies(self):
        rule = every_nth_week(MONDAY, 1, date(2025, 1, 6), is_active=False)

        assert applies_to_date(rule, date(2025, 1, 13)) is False

    def test_before_start_and_after_end(self):
        rule = every_nth_week(
            MONDAY,
            1,
            date(2025, 1, 6),
            start_date=date(2025, 2, 1),
            end_date=date(2025, 2, 28),
        )

        assert applies_to_date(rule, date(2025, 1, 27)) is False
        assert applies_to_date(rule, date(2025, 2, 3)) is True
        assert applies_to_date(rule, date(2025, 2, 24)) is True
        assert applies_to_date(rule, date(2025, 3, 3)) is False

    @pytest.mark.parametrize("weekday", [0, 8])
    def test_weekday_out_of_range(self, weekday):
        with pytest.raises(InvalidRecurrenceRuleError):
            every_nth_week(weekday, 1, date(2025, 1, 6))

    def test_end_before_start(self):
        with pytest.raises(ValidationError):
            every_nth_week(
                MONDAY, 1, date(2025, 1, 6), end_date=date(2025, 1, 1)
            )

    def test_applies_with_exemptions(self):
        rule = every_nth_week(MONDAY, 1, date(2025, 1, 6))

        assert applies_with_exemptions(rule, date(2025, 1, 13), set()) is True
        assert (
            applies_with_exemptions(rule, date(2025, 1, 13), {date(2025, 1, 13)})
            is False
        )


def make_record(**overrides):
    values = {
        "id": uuid.uuid4(),
        "user_id": uuid.uuid4(),
        "recurrence_pattern": RecurrencePattern.EVERY_NTH_WEEK,
        "weekday": MONDAY,
        "week_interval": 2,
        "reference_date": date(2025, 1, 6),
        "week_of_month": None,
        "start_date": date(2025, 1, 1),
        "end_date": None,
        "is_active": True,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


class TestRuleFromRecord:
    def test_every_nth_week(self):
        record = make_record()
        rule = rule_from_record(record)

        assert rule.id == record.id
        assert rule.pattern == EveryNthWeek(2, date(2025, 1, 6))

    def test_nth_weekday_of_month(self):
        record = make_record(
            recurrence_pattern=RecurrencePattern.NTH_WEEKDAY_OF_MONTH,
            week_interval=None,
            reference_date=None,
            week_of_month=3,
        )

        assert rule_from_record(record).pattern == NthWeekdayOfMonth(3)

    def test_payload_of_other_kind_is_rejected(self):
        with pytest.raises(InvalidRecurrenceRuleError):
            rule_from_record(make_record(week_of_month=2))

    def test_load_rules_skips_malformed(self, caplog):
        good = make_record()
        bad = make_record(week_interval=0)

        rules = load_rules([good, bad])

        assert [rule.id for rule in rules] == [good.id]
        assert "Skipping malformed recurring off-day" in caplog.text
