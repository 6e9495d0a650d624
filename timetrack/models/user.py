# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User model."""

import uuid as uuid_lib

from sqlalchemy import Boolean, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timetrack.models.base import Base, TimestampMixin
from timetrack.models.enums import Region


class User(Base, TimestampMixin):
    """A person whose working days and vacation are tracked."""

    __tablename__ = "users"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    region: Mapped[Region] = mapped_column(
        Enum(Region), default=Region.BERLIN, nullable=False
    )
    # Count Dec 24 and Dec 31 as half working days
    half_day_holidays_enabled: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
