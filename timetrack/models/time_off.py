# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time-off model (vacation, sick leave and other absences)."""

import uuid as uuid_lib
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Enum, ForeignKey, Numeric, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timetrack.models.base import Base, TimestampMixin
from timetrack.models.enums import TimeOffType


class TimeOff(Base, TimestampMixin):
    """An inclusive date range during which the user is absent."""

    __tablename__ = "time_off"

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
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    time_off_type: Mapped[TimeOffType] = mapped_column(
        Enum(TimeOffType), nullable=False
    )
    hours_per_day: Mapped[Decimal | None] = mapped_column(
        Numeric(4, 2), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
