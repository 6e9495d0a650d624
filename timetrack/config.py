# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache

from dotenv import load_dotenv

from timetrack.models.enums import Region


@dataclass(slots=True)
class Settings:
    """Runtime configuration values loaded from environment variables."""

    database_url: str
    default_annual_allowance_days: Decimal
    default_region: Region
    log_level: str


def load_settings(env_file: str | None = None) -> Settings:
    """Load settings from the environment, optionally from a specific file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    raw_allowance = os.getenv("DEFAULT_ANNUAL_ALLOWANCE_DAYS", "30.0")
    try:
        allowance = Decimal(raw_allowance)
    except InvalidOperation:
        raise RuntimeError(
            f"DEFAULT_ANNUAL_ALLOWANCE_DAYS must be a number, got {raw_allowance!r}"
        ) from None

    raw_region = os.getenv("DEFAULT_REGION", Region.BERLIN.value)
    try:
        region = Region(raw_region.lower())
    except ValueError:
        raise RuntimeError(
            f"DEFAULT_REGION must be one of "
            f"{', '.join(r.value for r in Region)}, got {raw_region!r}"
        ) from None

    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./timetrack.db"),
        default_annual_allowance_days=allowance,
        default_region=region,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return load_settings()
