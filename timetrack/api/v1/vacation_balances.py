# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation balance API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from timetrack.api.deps import get_db, get_path_user
from timetrack.models import User
from timetrack.schemas.vacation_balance import (
    VacationBalanceResponse,
    VacationBalanceUpdate,
)
from timetrack.services import vacation_balance_service

router = APIRouter()


@router.get(
    "/{user_id}/vacation-balance/{year}",
    response_model=VacationBalanceResponse,
)
def get_vacation_balance(
    year: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> VacationBalanceResponse:
    """Get the vacation balance of a year, recalculated as of today."""
    balance = vacation_balance_service.get_balance(db, user.id, year)
    return VacationBalanceResponse.model_validate(balance)


@router.put(
    "/{user_id}/vacation-balance/{year}",
    response_model=VacationBalanceResponse,
)
def update_vacation_balance(
    year: int,
    data: VacationBalanceUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_path_user),
) -> VacationBalanceResponse:
    """Change the allowance, carry-over or adjustment of a year."""
    balance = vacation_balance_service.update_balance(db, user.id, year, data)
    return VacationBalanceResponse.model_validate(balance)
