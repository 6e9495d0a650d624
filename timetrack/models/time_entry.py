# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time entry model for logged work."""

import uuid as uuid_lib
from datetime import date, time

from sqlalchemy import Date, ForeignKey, Integer, Text, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timetrack.models.base import Base, TimestampMixin


class TimeEntry(Base, TimestampMixin):
    """Work logged by a user on a single date."""

    __tablename__ = "time_entries"

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
    entry_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    clock_in: Mapped[time] = mapped_column(Time, nullable=False)
    clock_out: Mapped[time | None] = mapped_column(Time, nullable=True)
    break_minutes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
