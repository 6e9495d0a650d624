# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Recurring off-day rule model."""

import uuid as uuid_lib
from datetime import date

from sqlalchemy import Boolean, Date, Enum, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timetrack.models.base import Base, TimestampMixin
from timetrack.models.enums import RecurrencePattern


class RecurringOffDay(Base, TimestampMixin):
    """A user's rule declaring certain weekdays as regularly free.

    Which payload columns are populated depends on the pattern:
    week_interval and reference_date for EVERY_NTH_WEEK, week_of_month
    for NTH_WEEKDAY_OF_MONTH.
    """

    __tablename__ = "recurring_off_days"

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
    recurrence_pattern: Mapped[RecurrencePattern] = mapped_column(
        Enum(RecurrencePattern), nullable=False
    )
    # ISO weekday, 1=Monday .. 7=Sunday
    weekday: Mapped[int] = mapped_column(Integer, nullable=False)
    week_interval: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reference_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    # 1..4, or 5 for the last occurrence in the month
    week_of_month: Mapped[int | None] = mapped_column(Integer, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
