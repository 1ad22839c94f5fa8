"""Domain models: time ranges, calendar events and application state."""

from .event import CalendarEvent, CurrentStatus, ScheduleModel
from .time_range import (
    UNBOUNDED,
    Bound,
    BoundedAt,
    DefiniteTimeRange,
    IndefiniteTimeRange,
    Unbounded,
)

__all__ = [
    "UNBOUNDED",
    "Bound",
    "BoundedAt",
    "CalendarEvent",
    "CurrentStatus",
    "DefiniteTimeRange",
    "IndefiniteTimeRange",
    "ScheduleModel",
    "Unbounded",
]
