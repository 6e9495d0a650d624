# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time entry API endpoints."""

import datetime
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from timetrack.api.deps import get_db, get_path_user
from timetrack.models import TimeEntry, User
from timetrack.schemas.conflict_warning import ConflictWarningResponse
from timetrack.schemas.time_entry import (
    TimeEntryCreate,
    TimeEntryResponse,
    TimeEntryUpdate,
)
from timetrack.services import conflict_service, time_entry_service

router = APIRouter()


def _entry_to_response(db: Session, entry: TimeEntry) -> TimeEntryResponse:
    """Build the response, attaching the warning for the entry's date."""
    response = TimeEntryResponse.model_validate(entry)
    warning = conflict_service.get_warning_for_date(
        db, entry.user_id, entry.entry_date
    )
    if warning:
        response.conflict_warning = ConflictWarningResponse.model_validate(warning)
    return response


@router.get("/{user_id}/time-entries", response_model=list[TimeEntryResponse])
def list_time_entries(
    start: datetime.date | None = None,
    end: datetime.date | None = None,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> list[TimeEntryResponse]:
    """List the time entries of a user."""
    entries = time_entry_service.list_entries(db, user.id, start, end)
    return [_entry_to_response(db, e) for e in entries]


@router.post(
    "/{user_id}/time-entries",
    response_model=TimeEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_time_entry(
    data: TimeEntryCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> TimeEntryResponse:
    """Log work on a date."""
    entry = time_entry_service.create_entry(db, user.id, data)
    return _entry_to_response(db, entry)


@router.put("/{user_id}/time-entries/{entry_id}", response_model=TimeEntryResponse)
def update_time_entry(
    entry_id: uuid.UUID,
    data: TimeEntryUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> TimeEntryResponse:
    """Update a time entry."""
    entry = time_entry_service.update_entry(db, user.id, entry_id, data)
    return _entry_to_response(db, entry)


@router.delete(
    "/{user_id}/time-entries/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_time_entry(
    entry_id: uuid.UUID,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> None:
    """Delete a time entry."""
    time_entry_service.delete_entry(db, user.id, entry_id)
