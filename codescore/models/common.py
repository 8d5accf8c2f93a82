"""Shared helpers for model defaults."""

from datetime import UTC, datetime


def _utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)
