from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import DISPLAY_TIME_FORMAT

logger = logging.getLogger(__name__)


def now_utc() -> datetime:
    """Current time in UTC.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the store."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def load_display_zone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown display timezone %r, falling back to UTC", name)
        return timezone.utc


def format_for_display(value: datetime, zone: tzinfo) -> str:
    """Render a stored UTC timestamp as ``YYYY-MM-DD HH:MM:SS ZONE``."""
    return as_utc(value).astimezone(zone).strftime(DISPLAY_TIME_FORMAT)
