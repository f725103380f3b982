import logging
import re
from collections.abc import Mapping
from datetime import MAXYEAR, MINYEAR, date, datetime, timezone
from functools import lru_cache
from typing import Any
from zoneinfo import ZoneInfo

from config import settings

logger = logging.getLogger(__name__)

# ISO-8601 expanded years, the form BC dates take in the store: -000750-01-01
EXPANDED_YEAR_RE = re.compile(r"^([+-]\d{6})-\d{2}-\d{2}")
YEAR_MONTH_RE = re.compile(r"^(\d{4})(?:-(\d{2}))?$")
DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@lru_cache(maxsize=8)
def display_zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def author_display_name(author: Mapping) -> str:
    first_name = author.get("first_name")
    family_name = author.get("family_name")
    if first_name and family_name:
        return f"{family_name}, {first_name}"
    return ""


def populated_field(ref: Any, field_name: str) -> str:
    """Read a field from a populated reference; unpopulated refs give ''."""
    if isinstance(ref, Mapping):
        return ref.get(field_name) or ""
    return ""


def parse_instant(value: Any, tz: ZoneInfo) -> datetime | None:
    """Parse a loosely typed date value into an aware datetime.

    Year, year-month and date-only strings are UTC midnight. Timestamps without
    an offset are wall time in ``tz``. Numbers are epoch milliseconds.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str):
        return None

    raw = value.strip()
    if m := YEAR_MONTH_RE.match(raw):
        try:
            return datetime(int(m.group(1)), int(m.group(2) or 1), 1, tzinfo=timezone.utc)
        except ValueError:
            return None

    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        return parsed
    if DATE_ONLY_RE.match(raw):
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.replace(tzinfo=tz)


def year_of(value: Any, tz_name: str | None = None) -> str:
    """Year of a date-like value for display, '' when absent or unreadable."""
    if value is None:
        return ""
    if isinstance(value, date):
        return str(value.year)
    if isinstance(value, str) and (m := EXPANDED_YEAR_RE.match(value.strip())):
        return str(int(m.group(1)))

    tz = display_zone(tz_name or settings.display_timezone)
    instant = parse_instant(value, tz)
    if instant is None:
        logger.debug("Unreadable date value %r", value)
        return ""
    try:
        return str(instant.astimezone(tz).year)
    except (OverflowError, ValueError):
        # the zone shift crossed the edge of the datetime range
        if instant.year == MINYEAR:
            return str(MINYEAR - 1)
        if instant.year == MAXYEAR:
            return str(MAXYEAR + 1)
        logger.debug("Date value %r out of range for %s", value, tz)
        return ""
