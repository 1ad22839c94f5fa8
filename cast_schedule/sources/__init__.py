"""Calendar sources that feed events to the layout."""

from .protocol import CalendarError, CalendarFetchError, CalendarSource, EventFileError
from .static import StaticCalendarSource, load_events_file, parse_events

__all__ = [
    "CalendarError",
    "CalendarFetchError",
    "CalendarSource",
    "EventFileError",
    "StaticCalendarSource",
    "load_events_file",
    "parse_events",
]
