"""Datetime utility functions."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from pos_orders.config import settings

# Timezone for displayed dates (from config)
LOCAL_TIMEZONE = ZoneInfo(settings.timezone)


def to_local_timezone(dt: datetime | None) -> datetime | None:
    """Convert a datetime to the configured local timezone.

    Args:
        dt: Datetime to convert (can be None)

    Returns:
        Datetime in local timezone, or None if input was None
    """
    if dt is None:
        return None
    # Ensure datetime is timezone-aware (assume UTC if naive)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(LOCAL_TIMEZONE)


def format_assign_date(dt: datetime | None) -> str | None:
    """Format an order number assignment time as e.g. "11/01/2015 3:07 PM"."""
    local = to_local_timezone(dt)
    if local is None:
        return None
    hour = local.hour % 12 or 12
    return f"{local:%m/%d/%Y} {hour}:{local:%M %p}"
