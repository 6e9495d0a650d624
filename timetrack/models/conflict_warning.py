# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Conflict warning model: work logged on a recurring off-day."""

import uuid as uuid_lib
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timetrack.models.base import Base, TimestampMixin


class RecurringOffDayConflictWarning(Base, TimestampMixin):
    """At most one warning exists per (user, date).

    The time entry and rule ids are stored by value only; the warning
    outlives a deleted rule and is removed explicitly together with its
    time entry.
    """

    __tablename__ = "recurring_off_day_conflict_warnings"
    __table_args__ = (
        UniqueConstraint("user_id", "conflict_date", name="uq_conflict_user_date"),
    )

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    user_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), nullable=False, index=True
    )
    conflict_date: Mapped[date] = mapped_column(Date, nullable=False)
    time_entry_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), nullable=False, index=True
    )
    recurring_off_day_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True), nullable=False
    )
    acknowledged: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    acknowledged_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
