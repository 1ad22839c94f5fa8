"""Layout of events inside a single day column."""

import logging
from datetime import datetime, timedelta, tzinfo

from ..models.event import CalendarEvent
from ..models.time_range import DefiniteTimeRange, as_utc, shift
from .bounds import DrawingBounds
from .drawing import Drawing, Rectangle, Style
from .interpolation import lerp

logger = logging.getLogger(__name__)

MINUTE = timedelta(minutes=1)


def _whole_minutes(span: timedelta) -> int:
    """Count whole minutes in a span, truncating toward zero."""
    minutes = abs(span) // MINUTE
    return minutes if span >= timedelta(0) else -minutes


class DayLayout:
    """Place events on one day's visible window ``[start, start + duration)``.

    Each event becomes at most one rectangle spanning the full column width,
    positioned and sized in proportion to the part of the event that falls
    inside the window.
    """

    def __init__(self, start: datetime, duration: timedelta, style: Style) -> None:
        """Initialize the day layout.

        Args:
            start: First visible instant of the day (timezone-aware)
            duration: Length of the visible window, at least one minute
            style: Style applied to every rectangle of this day
        """
        if duration < MINUTE:
            raise ValueError(f"Day duration must be at least one minute, got {duration}")
        self.start = start
        self.duration = duration
        self.style = style

    def __repr__(self) -> str:
        return f"DayLayout(start={self.start.isoformat()}, duration={self.duration})"

    @property
    def end(self) -> datetime:
        return shift(self.start, self.duration)

    @property
    def timezone(self) -> tzinfo:
        return self.start.tzinfo  # type: ignore[return-value]

    @property
    def window(self) -> DefiniteTimeRange:
        return DefiniteTimeRange(start=self.start, end=self.end)

    def draw(self, event: CalendarEvent, bounds: DrawingBounds) -> list[Drawing]:
        """Lay out one event in this day's column.

        Args:
            event: Event to place
            bounds: Pixel area of this day's column

        Returns:
            A single rectangle, or an empty list when the event has no
            visible extent on this day
        """
        times = event.times
        day_end = self.end

        if times.start_instant is not None and as_utc(times.start_instant) >= as_utc(day_end):
            return []
        if times.end_instant is not None and as_utc(times.end_instant) <= as_utc(self.start):
            return []

        visible = times.with_timezone(self.timezone).clamp_to(
            DefiniteTimeRange(start=self.start, end=day_end)
        )
        event_duration = visible.duration()
        if event_duration <= timedelta(0):
            logger.debug(f"Skipping {event.name!r} on {self.start.date()}: no visible extent")
            return []

        day_minutes = _whole_minutes(self.duration)
        event_minutes = _whole_minutes(event_duration)
        offset_minutes = _whole_minutes(as_utc(visible.start) - as_utc(self.start))

        event_height = lerp(event_minutes, 0, day_minutes, 0, bounds.height)
        event_top = lerp(offset_minutes, 0, day_minutes, bounds.top, bounds.top + bounds.height)

        return [
            Drawing(shape=Rectangle(width=bounds.width, height=event_height))
            .with_xy(bounds.left, event_top)
            .with_style(self.style)
        ]
