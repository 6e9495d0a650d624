# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time entry schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field, model_validator

from timetrack.schemas.conflict_warning import ConflictWarningResponse


class TimeEntryCreate(BaseModel):
    """Schema for logging work on a date."""

    entry_date: datetime.date
    clock_in: datetime.time
    clock_out: datetime.time | None = None
    break_minutes: int = Field(default=0, ge=0)
    notes: str | None = None

    @model_validator(mode="after")
    def validate_times(self) -> "TimeEntryCreate":
        """Clock-out must be after clock-in."""
        if self.clock_out is not None and self.clock_out <= self.clock_in:
            raise ValueError("clock_out must be after clock_in")
        return self


class TimeEntryUpdate(BaseModel):
    """Schema for updating a time entry."""

    entry_date: datetime.date | None = None
    clock_in: datetime.time | None = None
    clock_out: datetime.time | None = None
    break_minutes: int | None = Field(None, ge=0)
    notes: str | None = None


class TimeEntryResponse(BaseModel):
    """Schema for time entry response, with the warning for its date."""

    id: uuid.UUID
    user_id: uuid.UUID
    entry_date: datetime.date
    clock_in: datetime.time
    clock_out: datetime.time | None
    break_minutes: int
    notes: str | None
    conflict_warning: ConflictWarningResponse | None = None

    model_config = {"from_attributes": True}
