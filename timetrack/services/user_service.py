# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User registry service."""

import logging
import uuid

from sqlalchemy.orm import Session

from timetrack.config import get_settings
from timetrack.database import transaction
from timetrack.exceptions import ConflictError, NotFoundError
from timetrack.models import User
from timetrack.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email.lower()).first()


def require_user(db: Session, user_id: uuid.UUID) -> User:
    """Get a user by ID or raise NotFoundError."""
    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User", user_id)
    return user


def create_user(db: Session, data: UserCreate) -> User:
    """Create a user together with the default working-hours template."""
    from timetrack.services import working_hours_service

    if get_user_by_email(db, data.email):
        raise ConflictError(f"A user with email {data.email} already exists")

    with transaction(db):
        user = User(
            email=data.email,
            full_name=data.full_name,
            region=data.region or get_settings().default_region,
            half_day_holidays_enabled=data.half_day_holidays_enabled,
        )
        db.add(user)
        db.flush()
        working_hours_service.create_default_working_hours(db, user.id)

    db.refresh(user)
    logger.info(f"Created user {user.id} ({user.email}) in {user.region.value}")
    return user
