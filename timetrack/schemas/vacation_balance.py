# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation balance schemas."""

import uuid
from decimal import Decimal

from pydantic import BaseModel, Field


class VacationBalanceUpdate(BaseModel):
    """Schema for changing the user-set parts of a balance.

    Used and planned days are always derived and cannot be set.
    """

    annual_allowance_days: Decimal | None = Field(None, ge=0, decimal_places=1)
    carried_over_days: Decimal | None = Field(None, ge=0, decimal_places=1)
    adjustment_days: Decimal | None = Field(None, decimal_places=1)


class VacationBalanceResponse(BaseModel):
    """Schema for vacation balance response."""

    id: uuid.UUID
    user_id: uuid.UUID
    year: int
    annual_allowance_days: Decimal
    carried_over_days: Decimal
    adjustment_days: Decimal
    used_days: Decimal
    planned_days: Decimal
    remaining_days: Decimal

    model_config = {"from_attributes": True}
