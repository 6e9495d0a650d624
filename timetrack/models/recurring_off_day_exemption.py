# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exemption model: a single date on which a recurring off-day is worked."""

import uuid as uuid_lib
from datetime import date

from sqlalchemy import Date, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timetrack.models.base import Base, TimestampMixin


class RecurringOffDayExemption(Base, TimestampMixin):
    """Marks one date as a working day despite its recurring off-day rule."""

    __tablename__ = "recurring_off_day_exemptions"
    __table_args__ = (
        UniqueConstraint(
            "recurring_off_day_id",
            "exemption_date",
            name="uq_exemption_rule_date",
        ),
    )

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    recurring_off_day_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("recurring_off_days.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    exemption_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str | None] = mapped_column(String(255), nullable=True)
