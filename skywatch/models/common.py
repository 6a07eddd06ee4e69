"""Common types and helpers shared across models."""

import math
from datetime import UTC, date, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def today_iso() -> str:
    """Local calendar date as YYYY-MM-DD."""
    return date.today().isoformat()


def round_half_up(value: float) -> int:
    """Round halves toward +inf, matching how temperatures are displayed."""
    return math.floor(value + 0.5)
