# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time-off schemas."""

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, Field

from timetrack.models.enums import TimeOffType


class TimeOffCreate(BaseModel):
    """Schema for recording an absence."""

    start_date: datetime.date
    end_date: datetime.date
    time_off_type: TimeOffType
    hours_per_day: Decimal | None = Field(None, decimal_places=2)
    notes: str | None = None


class TimeOffUpdate(BaseModel):
    """Schema for updating an absence."""

    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    time_off_type: TimeOffType | None = None
    hours_per_day: Decimal | None = Field(None, decimal_places=2)
    notes: str | None = None


class TimeOffResponse(BaseModel):
    """Schema for time-off response.

    ``working_days`` is the number of working days the absence covers.
    """

    id: uuid.UUID
    user_id: uuid.UUID
    start_date: datetime.date
    end_date: datetime.date
    time_off_type: TimeOffType
    hours_per_day: Decimal | None
    notes: str | None
    working_days: Decimal | None = None

    model_config = {"from_attributes": True}
