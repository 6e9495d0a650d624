# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Per-weekday working hours configuration."""

import uuid as uuid_lib
from datetime import time
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Integer,
    Numeric,
    Time,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from timetrack.models.base import Base, TimestampMixin


class WorkingHours(Base, TimestampMixin):
    """Nominal working time of one user on one ISO weekday (1=Monday)."""

    __tablename__ = "working_hours"
    __table_args__ = (
        UniqueConstraint("user_id", "weekday", name="uq_working_hours_user_weekday"),
    )

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    user_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    weekday: Mapped[int] = mapped_column(Integer, nullable=False)
    is_working_day: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False
    )
    hours: Mapped[Decimal] = mapped_column(
        Numeric(4, 2), default=Decimal("0.00"), nullable=False
    )
    start_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    end_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    break_minutes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
