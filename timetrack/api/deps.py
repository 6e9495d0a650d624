# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import uuid

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from timetrack.database import get_db
from timetrack.models import User
from timetrack.services import user_service

__all__ = ["get_db", "get_path_user"]


def get_path_user(user_id: uuid.UUID, db: Session = Depends(get_db)) -> User:
    """Resolve the acting user from the ``user_id`` path segment."""
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user
