# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time-off API endpoints."""

import datetime
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from timetrack.api.deps import get_db, get_path_user
from timetrack.models import TimeOff, TimeOffType, User
from timetrack.schemas.time_off import TimeOffCreate, TimeOffResponse, TimeOffUpdate
from timetrack.services import time_off_service, working_days_service

router = APIRouter()


def _time_off_to_response(db: Session, time_off: TimeOff) -> TimeOffResponse:
    response = TimeOffResponse.model_validate(time_off)
    response.working_days = working_days_service.count_time_off_days(db, time_off)
    return response


@router.get("/{user_id}/time-off", response_model=list[TimeOffResponse])
def list_time_off(
    start: datetime.date | None = None,
    end: datetime.date | None = None,
    time_off_type: TimeOffType | None = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> list[TimeOffResponse]:
    """List the absences of a user."""
    entries = time_off_service.list_time_off(db, user.id, start, end, time_off_type)
    return [_time_off_to_response(db, t) for t in entries]


@router.post(
    "/{user_id}/time-off",
    response_model=TimeOffResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_time_off(
    data: TimeOffCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> TimeOffResponse:
    """Record an absence."""
    time_off = time_off_service.create_time_off(db, user.id, data)
    return _time_off_to_response(db, time_off)


@router.put("/{user_id}/time-off/{time_off_id}", response_model=TimeOffResponse)
def update_time_off(
    time_off_id: uuid.UUID,
    data: TimeOffUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> TimeOffResponse:
    """Update an absence."""
    time_off = time_off_service.update_time_off(db, user.id, time_off_id, data)
    return _time_off_to_response(db, time_off)


@router.delete(
    "/{user_id}/time-off/{time_off_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_time_off(
    time_off_id: uuid.UUID,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> None:
    """Delete an absence."""
    time_off_service.delete_time_off(db, user.id, time_off_id)
