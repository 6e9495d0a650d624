# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field, field_validator

from timetrack.models.enums import Region


class UserCreate(BaseModel):
    """Schema for registering a user."""

    email: str = Field(..., min_length=3, max_length=255)
    full_name: str | None = Field(None, max_length=200)
    region: Region | None = None
    half_day_holidays_enabled: bool = False

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Lower-case the email and require an @."""
        if "@" not in v:
            raise ValueError("Email must contain @")
        return v.strip().lower()


class UserResponse(BaseModel):
    """Schema for user response."""

    id: uuid.UUID
    email: str
    full_name: str | None
    region: Region
    half_day_holidays_enabled: bool
    created_at: datetime.datetime

    model_config = {"from_attributes": True}
