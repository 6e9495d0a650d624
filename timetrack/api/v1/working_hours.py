# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hours API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from timetrack.api.deps import get_db, get_path_user
from timetrack.models import User
from timetrack.schemas.working_hours import WorkingHoursResponse, WorkingHoursUpdate
from timetrack.services import working_hours_service

router = APIRouter()


@router.get("/{user_id}/working-hours", response_model=list[WorkingHoursResponse])
def list_working_hours(
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> list[WorkingHoursResponse]:
    """List the weekday schedule of a user."""
    rows = working_hours_service.get_working_hours(db, user.id)
    return [WorkingHoursResponse.model_validate(r) for r in rows]


@router.put(
    "/{user_id}/working-hours/{weekday}",
    response_model=WorkingHoursResponse,
)
def update_working_hours(
    weekday: int,
    data: WorkingHoursUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> WorkingHoursResponse:
    """Update the configuration of one weekday."""
    row = working_hours_service.update_working_day(db, user.id, weekday, data)
    return WorkingHoursResponse.model_validate(row)
