# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Recurring off-day and exemption schemas.

Only the request shape is checked here; whether the combination of
pattern, weekday and payload forms a valid rule is decided by the
recurring off-day service.
"""

import datetime
import uuid

from pydantic import BaseModel, Field

from timetrack.models.enums import RecurrencePattern


class RecurringOffDayCreate(BaseModel):
    """Schema for creating a recurring off-day rule."""

    recurrence_pattern: RecurrencePattern
    weekday: int
    week_interval: int | None = None
    reference_date: datetime.date | None = None
    week_of_month: int | None = None
    start_date: datetime.date
    end_date: datetime.date | None = None
    is_active: bool = True
    description: str | None = Field(None, max_length=255)


class RecurringOffDayUpdate(BaseModel):
    """Schema for updating a recurring off-day rule.

    Fields left out keep their stored value. Use ``clear_end_date`` to
    make a bounded rule open-ended again.
    """

    recurrence_pattern: RecurrencePattern | None = None
    weekday: int | None = None
    week_interval: int | None = None
    reference_date: datetime.date | None = None
    week_of_month: int | None = None
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    clear_end_date: bool = False
    is_active: bool | None = None
    description: str | None = Field(None, max_length=255)


class RecurringOffDayResponse(BaseModel):
    """Schema for recurring off-day response."""

    id: uuid.UUID
    user_id: uuid.UUID
    recurrence_pattern: RecurrencePattern
    weekday: int
    week_interval: int | None
    reference_date: datetime.date | None
    week_of_month: int | None
    start_date: datetime.date
    end_date: datetime.date | None
    is_active: bool
    description: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class ExemptionCreate(BaseModel):
    """Schema for exempting one date from a rule."""

    exemption_date: datetime.date
    reason: str | None = Field(None, max_length=255)


class ExemptionResponse(BaseModel):
    """Schema for exemption response."""

    id: uuid.UUID
    recurring_off_day_id: uuid.UUID
    exemption_date: datetime.date
    reason: str | None
    created_at: datetime.datetime

    model_config = {"from_attributes": True}
