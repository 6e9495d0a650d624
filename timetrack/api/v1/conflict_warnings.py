# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Conflict warning API endpoints."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from timetrack.api.deps import get_db, get_path_user
from timetrack.models import User
from timetrack.schemas.conflict_warning import ConflictWarningResponse
from timetrack.services import conflict_service

router = APIRouter()


@router.get(
    "/{user_id}/conflict-warnings",
    response_model=list[ConflictWarningResponse],
)
def list_conflict_warnings(
    unacknowledged_only: bool = False,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> list[ConflictWarningResponse]:
    """List the conflict warnings of a user."""
    warnings = conflict_service.list_warnings(
        db, user.id, unacknowledged_only=unacknowledged_only
    )
    return [ConflictWarningResponse.model_validate(w) for w in warnings]


@router.post(
    "/{user_id}/conflict-warnings/{warning_id}/acknowledge",
    response_model=ConflictWarningResponse,
)
def acknowledge_conflict_warning(
    warning_id: uuid.UUID,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> ConflictWarningResponse:
    """Acknowledge a conflict warning."""
    warning = conflict_service.acknowledge_warning(db, user.id, warning_id)
    return ConflictWarningResponse.model_validate(warning)
