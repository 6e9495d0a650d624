# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from timetrack import __version__
from timetrack.api.v1.router import api_router
from timetrack.config import get_settings
from timetrack.exceptions import TimetrackError
from timetrack.schemas.common import ErrorResponse, HealthResponse

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Timetrack",
    description="Working-time calendar rules and vacation entitlement ledger",
    version=__version__,
)


@app.exception_handler(TimetrackError)
async def timetrack_error_handler(
    request: Request, exc: TimetrackError
) -> JSONResponse:
    """Map domain errors to their HTTP status codes."""
    logger.info(
        f"{request.method} {request.url.path} rejected "
        f"({exc.status_code}): {exc.message}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.message).model_dump(),
    )


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


app.include_router(api_router, prefix="/api/v1")
