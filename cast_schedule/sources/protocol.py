"""Calendar source protocol and errors."""

from typing import List, Protocol

from ..models.event import CalendarEvent
from ..models.time_range import DefiniteTimeRange


class CalendarError(Exception):
    """Base exception for calendar source errors."""


class CalendarFetchError(CalendarError):
    """Raised when a source cannot deliver events."""


class EventFileError(CalendarError):
    """Raised when an events file cannot be read or parsed."""


class CalendarSource(Protocol):
    """Protocol defining the interface that all calendar sources must implement."""

    async def get_events_on(self, window: DefiniteTimeRange) -> List[CalendarEvent]:
        """Fetch the events that overlap a time window.

        Args:
            window: Definite time window to query

        Returns:
            Events overlapping the window, in the source's order

        Raises:
            CalendarFetchError: If the events cannot be fetched
        """
        ...
