# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation balance model: per-user, per-year entitlement ledger row."""

import uuid as uuid_lib
from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timetrack.calendar.ledger import remaining_days
from timetrack.models.base import Base, TimestampMixin


class VacationBalance(Base, TimestampMixin):
    """Vacation entitlement and consumption for one calendar year.

    used_days and planned_days are derived from the user's vacation
    time-off and rewritten on every recalculation; the other amounts are
    set by the user.
    """

    __tablename__ = "vacation_balances"
    __table_args__ = (
        UniqueConstraint("user_id", "year", name="uq_vacation_balance_user_year"),
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
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    annual_allowance_days: Mapped[Decimal] = mapped_column(
        Numeric(5, 1), nullable=False
    )
    carried_over_days: Mapped[Decimal] = mapped_column(
        Numeric(5, 1), default=Decimal("0"), nullable=False
    )
    adjustment_days: Mapped[Decimal] = mapped_column(
        Numeric(5, 1), default=Decimal("0"), nullable=False
    )
    used_days: Mapped[Decimal] = mapped_column(
        Numeric(5, 1), default=Decimal("0"), nullable=False
    )
    planned_days: Mapped[Decimal] = mapped_column(
        Numeric(5, 1), default=Decimal("0"), nullable=False
    )

    @property
    def remaining_days(self) -> Decimal:
        """Entitlement left after used and planned vacation."""
        return remaining_days(
            Decimal(self.annual_allowance_days),
            Decimal(self.carried_over_days or 0),
            Decimal(self.adjustment_days or 0),
            Decimal(self.used_days or 0),
            Decimal(self.planned_days or 0),
        )
