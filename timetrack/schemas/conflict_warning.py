# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Conflict warning schemas."""

import datetime
import uuid

from pydantic import BaseModel


class ConflictWarningResponse(BaseModel):
    """Schema for conflict warning response."""

    id: uuid.UUID
    user_id: uuid.UUID
    conflict_date: datetime.date
    time_entry_id: uuid.UUID
    recurring_off_day_id: uuid.UUID
    acknowledged: bool
    acknowledged_at: datetime.datetime | None
    created_at: datetime.datetime

    model_config = {"from_attributes": True}
