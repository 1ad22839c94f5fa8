"""Time zone resolution and wall-clock localization.

Zone names are resolved with zoneinfo, falling back to pytz when zoneinfo
does not know the name. Localizing a wall-clock time refuses times that fall
in a DST gap and resolves ambiguous (repeated) times to the earliest instant.
"""

import logging
from datetime import date, datetime, time, timezone as dt_timezone, tzinfo
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytz

logger = logging.getLogger(__name__)

TimeZoneLike = Union[str, tzinfo]


class TimezoneError(Exception):
    """Raised when timezone operations fail."""


class NonexistentLocalTimeError(TimezoneError):
    """Raised when a wall-clock time does not exist in a zone (DST gap)."""


def resolve_timezone(zone: TimeZoneLike) -> tzinfo:
    """Turn a zone name or tzinfo into a tzinfo.

    Args:
        zone: IANA zone name (e.g. "Europe/Berlin"), "UTC", or a tzinfo instance

    Returns:
        tzinfo for the zone

    Raises:
        TimezoneError: If the name is unknown to both zoneinfo and pytz
    """
    if isinstance(zone, tzinfo):
        return zone

    name = str(zone).strip()
    if not name:
        raise TimezoneError("Time zone name must not be empty")
    if name.upper() == "UTC":
        return dt_timezone.utc

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.debug(f"zoneinfo does not know {name!r}, trying pytz")

    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError as e:
        raise TimezoneError(f"Unknown time zone: {name!r}") from e


def _localize_pytz(wall_clock: datetime, zone: tzinfo) -> datetime:
    try:
        return zone.localize(wall_clock, is_dst=None)  # type: ignore[attr-defined]
    except pytz.exceptions.AmbiguousTimeError:
        # The first occurrence of a repeated hour is the DST one
        return zone.localize(wall_clock, is_dst=True)  # type: ignore[attr-defined]
    except pytz.exceptions.NonExistentTimeError as e:
        raise NonexistentLocalTimeError(
            f"{wall_clock.isoformat()} does not exist in {zone}"
        ) from e


def localize(day: date, wall_time: time, zone: tzinfo) -> datetime:
    """Combine a date and wall-clock time into an aware instant in ``zone``.

    Args:
        day: Calendar date
        wall_time: Wall-clock time of day (any tzinfo on it is ignored)
        zone: Target time zone

    Returns:
        Aware datetime; for an ambiguous wall-clock time, the earliest instant

    Raises:
        NonexistentLocalTimeError: If the wall-clock time falls in a DST gap
    """
    wall_clock = datetime.combine(day, wall_time.replace(tzinfo=None))

    if hasattr(zone, "localize"):
        return _localize_pytz(wall_clock, zone)

    candidate = wall_clock.replace(tzinfo=zone, fold=0)
    # A gap time does not survive a round trip through UTC
    round_trip = candidate.astimezone(dt_timezone.utc).astimezone(zone)
    if round_trip.replace(tzinfo=None, fold=0) != wall_clock:
        raise NonexistentLocalTimeError(f"{wall_clock.isoformat()} does not exist in {zone}")
    return candidate


def zone_name(zone: tzinfo) -> str:
    """Human-readable name of a tzinfo for logs."""
    return getattr(zone, "key", None) or getattr(zone, "zone", None) or str(zone)
