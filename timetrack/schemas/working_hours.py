# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hours schemas."""

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, Field


class WorkingHoursUpdate(BaseModel):
    """Schema for updating the configuration of one weekday.

    When both start_time and end_time are given the hours are derived
    from them; otherwise ``hours`` is stored as given.
    """

    is_working_day: bool
    hours: Decimal | None = Field(None, decimal_places=2)
    start_time: datetime.time | None = None
    end_time: datetime.time | None = None
    break_minutes: int = Field(default=0, ge=0)


class WorkingHoursResponse(BaseModel):
    """Schema for working hours response."""

    id: uuid.UUID
    user_id: uuid.UUID
    weekday: int
    is_working_day: bool
    hours: Decimal
    start_time: datetime.time | None
    end_time: datetime.time | None
    break_minutes: int

    model_config = {"from_attributes": True}
