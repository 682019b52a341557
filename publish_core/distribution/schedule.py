from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from publish_core.errors import InvalidSchedule


def normalize_schedule_string(raw: str) -> str:
    """
    Makes a trimmed schedule string explicit about UTC.

    Strings ending in ``Z`` or carrying a ``+`` offset are left alone. Otherwise
    three or more colon-separated segments mean seconds are present and ``Z`` is
    appended; fewer means seconds were omitted and ``:00Z`` is appended.
    """
    if raw.endswith("Z") or "+" in raw:
        return raw
    if len(raw.split(":")) >= 3:
        return f"{raw}Z"
    return f"{raw}:00Z"


def parse_schedule(raw: Optional[str]) -> Optional[datetime]:
    """
    Parses an optional schedule string into an aware UTC datetime.

    Returns None for missing or blank input. Raises InvalidSchedule when the
    string does not describe a real instant.
    """
    if raw is None:
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None

    normalized = normalize_schedule_string(trimmed)
    # fromisoformat only understands a trailing Z from 3.11 on
    iso = normalized[:-1] + "+00:00" if normalized.endswith("Z") else normalized
    try:
        instant = datetime.fromisoformat(iso)
    except ValueError as e:
        logger.warning(f"Rejected schedule time {raw!r} (normalized to {normalized!r})")
        raise InvalidSchedule("Invalid schedule time provided.") from e

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def format_readable(instant: Optional[datetime]) -> Optional[str]:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix, e.g. ``2024-06-01T10:00:00.000Z``."""
    if instant is None:
        return None
    utc = instant.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
