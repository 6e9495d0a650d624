# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the calendar, off-day and vacation endpoints."""

import uuid
from decimal import Decimal

import pytest

FRIDAY_RULE = {
    "recurrence_pattern": "every_nth_week",
    "weekday": 5,
    "week_interval": 1,
    "reference_date": "2025-01-03",
    "start_date": "2025-01-01",
}


def rules_url(user):
    return f"/api/v1/users/{user.id}/recurring-off-days"


@pytest.fixture
def friday_rule(client, test_user):
    response = client.post(rules_url(test_user), json=FRIDAY_RULE)
    assert response.status_code == 201
    return response.json()


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestPublicHolidaysEndpoint:
    """Tests for GET /api/v1/public-holidays."""

    def test_brandenburg_has_reformation_day(self, client):
        response = client.get(
            "/api/v1/public-holidays", params={"year": 2025, "region": "brandenburg"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["region"] == "brandenburg"
        assert "2025-10-31" in data["holidays"]
        assert len(data["holidays"]) == 10

    def test_default_region(self, client):
        response = client.get("/api/v1/public-holidays", params={"year": 2025})
        assert response.status_code == 200
        data = response.json()
        assert data["region"] == "berlin"
        assert "2025-03-08" in data["holidays"]
        assert "2025-10-31" not in data["holidays"]

    def test_year_out_of_range(self, client):
        response = client.get("/api/v1/public-holidays", params={"year": 1800})
        assert response.status_code == 422


class TestWorkingDaysEndpoint:
    """Tests for GET /api/v1/users/{user_id}/working-days."""

    def test_half_day_holidays(self, client, make_user):
        user = make_user(email="half@example.com", half_day_holidays_enabled=True)

        response = client.get(
            f"/api/v1/users/{user.id}/working-days",
            params={"start": "2025-12-23", "end": "2025-12-27"},
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["total_working_days"]) == Decimal("1.5")
        assert Decimal(data["total_expected_hours"]) == Decimal("12")
        assert [d["date"] for d in data["days"]][0] == "2025-12-23"
        assert len(data["days"]) == 5

    def test_region_override(self, client, test_user):
        response = client.get(
            f"/api/v1/users/{test_user.id}/working-days",
            params={
                "start": "2025-10-27",
                "end": "2025-10-31",
                "region": "brandenburg",
            },
        )
        assert response.status_code == 200
        assert Decimal(response.json()["total_working_days"]) == Decimal("4")

    def test_inverted_range(self, client, test_user):
        response = client.get(
            f"/api/v1/users/{test_user.id}/working-days",
            params={"start": "2025-10-31", "end": "2025-10-27"},
        )
        assert response.status_code == 422

    def test_overlong_range(self, client, test_user):
        response = client.get(
            f"/api/v1/users/{test_user.id}/working-days",
            params={"start": "0001-01-01", "end": "9999-12-31"},
        )
        assert response.status_code == 422

    def test_unknown_user(self, client):
        response = client.get(
            f"/api/v1/users/{uuid.uuid4()}/working-days",
            params={"start": "2025-10-27", "end": "2025-10-31"},
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"


class TestRecurringOffDayEndpoints:
    """Tests for the recurring off-day and exemption endpoints."""

    def test_create_and_list(self, client, test_user, friday_rule):
        assert friday_rule["recurrence_pattern"] == "every_nth_week"
        assert friday_rule["week_of_month"] is None

        response = client.get(rules_url(test_user))
        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [friday_rule["id"]]

    def test_invalid_rule(self, client, test_user):
        response = client.post(
            rules_url(test_user), json={**FRIDAY_RULE, "week_interval": 0}
        )
        assert response.status_code == 422

    def test_mixed_pattern_payload(self, client, test_user):
        response = client.post(
            rules_url(test_user), json={**FRIDAY_RULE, "week_of_month": 2}
        )
        assert response.status_code == 422

    def test_duplicate_exemption(self, client, test_user, friday_rule):
        url = f"{rules_url(test_user)}/{friday_rule['id']}/exemptions"

        first = client.post(url, json={"exemption_date": "2025-10-24"})
        second = client.post(url, json={"exemption_date": "2025-10-24"})

        assert first.status_code == 201
        assert second.status_code == 409

    def test_exemption_on_non_matching_date(self, client, test_user, friday_rule):
        url = f"{rules_url(test_user)}/{friday_rule['id']}/exemptions"
        response = client.post(url, json={"exemption_date": "2025-10-23"})
        assert response.status_code == 422

    def test_delete_rule_of_other_user(
        self, client, test_user, other_user, friday_rule
    ):
        response = client.delete(f"{rules_url(other_user)}/{friday_rule['id']}")
        assert response.status_code == 403

        response = client.delete(f"{rules_url(test_user)}/{friday_rule['id']}")
        assert response.status_code == 204

    def test_unknown_rule(self, client, test_user):
        response = client.delete(f"{rules_url(test_user)}/{uuid.uuid4()}")
        assert response.status_code == 404


class TestConflictWarningFlow:
    """Logging work on an off-day raises a warning the user can acknowledge."""

    def test_entry_on_off_day(self, client, test_user, friday_rule):
        response = client.post(
            f"/api/v1/users/{test_user.id}/time-entries",
            json={
                "entry_date": "2025-10-24",
                "clock_in": "09:00:00",
                "clock_out": "17:00:00",
            },
        )
        assert response.status_code == 201
        warning = response.json()["conflict_warning"]
        assert warning is not None
        assert warning["recurring_off_day_id"] == friday_rule["id"]
        assert warning["acknowledged"] is False

        response = client.post(
            f"/api/v1/users/{test_user.id}/conflict-warnings/"
            f"{warning['id']}/acknowledge"
        )
        assert response.status_code == 200
        assert response.json()["acknowledged"] is True

        response = client.get(
            f"/api/v1/users/{test_user.id}/conflict-warnings",
            params={"unacknowledged_only": True},
        )
        assert response.json() == []

    def test_entry_on_working_day(self, client, test_user, friday_rule):
        response = client.post(
            f"/api/v1/users/{test_user.id}/time-entries",
            json={"entry_date": "2025-10-23", "clock_in": "09:00:00"},
        )
        assert response.status_code == 201
        assert response.json()["conflict_warning"] is None

    def test_clock_out_before_clock_in(self, client, test_user):
        response = client.post(
            f"/api/v1/users/{test_user.id}/time-entries",
            json={
                "entry_date": "2025-10-23",
                "clock_in": "17:00:00",
                "clock_out": "09:00:00",
            },
        )
        assert response.status_code == 422


class TestVacationEndpoints:
    """Tests for time-off and vacation balance endpoints."""

    def test_vacation_consumes_balance(self, client, test_user):
        response = client.post(
            f"/api/v1/users/{test_user.id}/time-off",
            json={
                "start_date": "2099-10-19",
                "end_date": "2099-10-23",
                "time_off_type": "vacation",
            },
        )
        assert response.status_code == 201
        assert Decimal(response.json()["working_days"]) == Decimal("5")

        response = client.get(f"/api/v1/users/{test_user.id}/vacation-balance/2099")
        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["used_days"]) + Decimal(data["planned_days"]) == 5
        assert Decimal(data["remaining_days"]) == Decimal("25")

    def test_update_allowance(self, client, test_user):
        response = client.put(
            f"/api/v1/users/{test_user.id}/vacation-balance/2099",
            json={"annual_allowance_days": "25", "carried_over_days": "3"},
        )
        assert response.status_code == 200
        assert Decimal(response.json()["remaining_days"]) == Decimal("28")

    def test_negative_allowance(self, client, test_user):
        response = client.put(
            f"/api/v1/users/{test_user.id}/vacation-balance/2099",
            json={"annual_allowance_days": "-1"},
        )
        assert response.status_code == 422

    def test_inverted_time_off(self, client, test_user):
        response = client.post(
            f"/api/v1/users/{test_user.id}/time-off",
            json={
                "start_date": "2099-10-23",
                "end_date": "2099-10-19",
                "time_off_type": "sick",
            },
        )
        assert response.status_code == 422


class TestWorkingHoursEndpoints:
    """Tests for the working-hours endpoints."""

    def test_default_week(self, client, test_user):
        response = client.get(f"/api/v1/users/{test_user.id}/working-hours")
        assert response.status_code == 200
        data = response.json()
        assert [d["weekday"] for d in data] == [1, 2, 3, 4, 5, 6, 7]
        assert [d["is_working_day"] for d in data] == [True] * 5 + [False] * 2

    def test_hours_from_times(self, client, test_user):
        response = client.put(
            f"/api/v1/users/{test_user.id}/working-hours/5",
            json={
                "is_working_day": True,
                "start_time": "08:00:00",
                "end_time": "14:30:00",
                "break_minutes": 30,
            },
        )
        assert response.status_code == 200
        assert Decimal(response.json()["hours"]) == Decimal("6")

    def test_invalid_weekday(self, client, test_user):
        response = client.put(
            f"/api/v1/users/{test_user.id}/working-hours/8",
            json={"is_working_day": True, "hours": "8"},
        )
        assert response.status_code == 422
