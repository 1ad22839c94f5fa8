"""Time zone handling for cast_schedule."""

from .service import (
    NonexistentLocalTimeError,
    TimezoneError,
    localize,
    resolve_timezone,
    zone_name,
)

__all__ = [
    "NonexistentLocalTimeError",
    "TimezoneError",
    "localize",
    "resolve_timezone",
    "zone_name",
]
