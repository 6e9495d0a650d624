# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Recurring off-day and exemption API endpoints."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from timetrack.api.deps import get_db, get_path_user
from timetrack.models import User
from timetrack.schemas.recurring_off_day import (
    ExemptionCreate,
    ExemptionResponse,
    RecurringOffDayCreate,
    RecurringOffDayResponse,
    RecurringOffDayUpdate,
)
from timetrack.services import recurring_off_day_service

router = APIRouter()


@router.get(
    "/{user_id}/recurring-off-days",
    response_model=list[RecurringOffDayResponse],
)
def list_recurring_off_days(
    active_only: bool = False,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> list[RecurringOffDayResponse]:
    """List the recurring off-day rules of a user."""
    records = recurring_off_day_service.get_rules(db, user.id, active_only=active_only)
    return [RecurringOffDayResponse.model_validate(r) for r in records]


@router.post(
    "/{user_id}/recurring-off-days",
    response_model=RecurringOffDayResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_recurring_off_day(
    data: RecurringOffDayCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> RecurringOffDayResponse:
    """Create a recurring off-day rule."""
    record = recurring_off_day_service.create_rule(db, user.id, data)
    return RecurringOffDayResponse.model_validate(record)


@router.put(
    "/{user_id}/recurring-off-days/{rule_id}",
    response_model=RecurringOffDayResponse,
)
def update_recurring_off_day(
    rule_id: uuid.UUID,
    data: RecurringOffDayUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> RecurringOffDayResponse:
    """Update a recurring off-day rule."""
    record = recurring_off_day_service.update_rule(db, user.id, rule_id, data)
    return RecurringOffDayResponse.model_validate(record)


@router.delete(
    "/{user_id}/recurring-off-days/{rule_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_recurring_off_day(
    rule_id: uuid.UUID,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> None:
    """Delete a recurring off-day rule and its exemptions."""
    recurring_off_day_service.delete_rule(db, user.id, rule_id)


@router.get(
    "/{user_id}/recurring-off-days/{rule_id}/exemptions",
    response_model=list[ExemptionResponse],
)
def list_exemptions(
    rule_id: uuid.UUID,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> list[ExemptionResponse]:
    """List the exemptions of a rule."""
    exemptions = recurring_off_day_service.get_exemptions(db, user.id, rule_id)
    return [ExemptionResponse.model_validate(e) for e in exemptions]


@router.post(
    "/{user_id}/recurring-off-days/{rule_id}/exemptions",
    response_model=ExemptionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_exemption(
    rule_id: uuid.UUID,
    data: ExemptionCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> ExemptionResponse:
    """Exempt one date from a rule."""
    exemption = recurring_off_day_service.create_exemption(db, user.id, rule_id, data)
    return ExemptionResponse.model_validate(exemption)


@router.delete(
    "/{user_id}/recurring-off-days/{rule_id}/exemptions/{exemption_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_exemption(
    rule_id: uuid.UUID,
    exemption_id: uuid.UUID,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> None:
    """Delete an exemption."""
    recurring_off_day_service.delete_exemption(db, user.id, rule_id, exemption_id)
