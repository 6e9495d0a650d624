# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from timetrack.api.v1 import (
    calendar,
    conflict_warnings,
    recurring_off_days,
    time_entries,
    time_off,
    vacation_balances,
    working_hours,
)

api_router = APIRouter()

# Public holidays and working-day counts
api_router.include_router(calendar.router, tags=["calendar"])

# Per-user routes
api_router.include_router(
    working_hours.router, prefix="/users", tags=["working-hours"]
)
api_router.include_router(
    recurring_off_days.router, prefix="/users", tags=["recurring-off-days"]
)
api_router.include_router(
    conflict_warnings.router, prefix="/users", tags=["conflict-warnings"]
)
api_router.include_router(time_entries.router, prefix="/users", tags=["time-entries"])
api_router.include_router(time_off.router, prefix="/users", tags=["time-off"])
api_router.include_router(
    vacation_balances.router, prefix="/users", tags=["vacation-balance"]
)
