# calcsuite/core/convert/timezones.py

from __future__ import annotations

from collections.abc import Collection
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from calcsuite.core.errors import UnknownTimeZoneError
from calcsuite.schemas.models import TimeZoneDifference


def available_time_zones() -> list[str]:
    """Sorted IANA zone names known to the local tz database."""
    return sorted(available_timezones())


def _zone(name: str, zones: Collection[str] | None) -> ZoneInfo:
    if zones is not None and name not in zones:
        raise UnknownTimeZoneError(name)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimeZoneError(name) from e


def utc_offset(zone: str, at: datetime | None = None, *, zones: Collection[str] | None = None) -> timedelta:
    """UTC offset of ``zone`` at instant ``at`` (defaults to now); DST-aware."""
    instant = at if at is not None else datetime.now(tz=timezone.utc)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    offset = instant.astimezone(_zone(zone, zones)).utcoffset()
    return offset if offset is not None else timedelta(0)


def _plural(n: int, word: str) -> str:
    return f"{n} {word}{'s' if n != 1 else ''}"


def describe_difference(from_zone: str, to_zone: str, minutes: int) -> str:
    """Human-readable sentence, e.g. "Asia/Kolkata is ahead by 5 hours and 30 minutes."."""
    if minutes == 0:
        return f"{from_zone} and {to_zone} are in the same time zone."
    ahead = to_zone if minutes > 0 else from_zone
    hours, mins = divmod(abs(minutes), 60)
    parts = []
    if hours:
        parts.append(_plural(hours, "hour"))
    if mins:
        parts.append(_plural(mins, "minute"))
    return f"{ahead} is ahead by {' and '.join(parts)}."


def time_zone_difference(
    from_zone: str,
    to_zone: str,
    *,
    at: datetime | None = None,
    zones: Collection[str] | None = None,
) -> TimeZoneDifference:
    """
    Difference offset(to_zone) - offset(from_zone) at one instant.

    ``zones`` is the accepted list of zone names; pass ``available_time_zones()``
    (or any narrower list) to validate input. When None, any zone the tz
    database can load is accepted.
    """
    instant = at if at is not None else datetime.now(tz=timezone.utc)
    delta = utc_offset(to_zone, instant, zones=zones) - utc_offset(from_zone, instant, zones=zones)
    minutes = int(delta.total_seconds() // 60)
    return TimeZoneDifference(
        from_zone=from_zone,
        to_zone=to_zone,
        difference_minutes=minutes,
        description=describe_difference(from_zone, to_zone, minutes),
    )
