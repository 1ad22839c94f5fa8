"""Multi-day calendar layout.

Splits a drawing area into one equal-width column per day and lays out
every event in every column. The result is ordered day-major, then by input
event order, and renderers paint it in that order.
"""

import logging
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, ValidationError, field_validator

from ..models.event import CalendarEvent
from ..models.time_range import DefiniteTimeRange
from ..timezone.service import NonexistentLocalTimeError, TimezoneError, localize, resolve_timezone, zone_name
from .bounds import DrawingBounds
from .day_layout import DayLayout
from .drawing import Drawing, Style
from .exceptions import LayoutConfigurationError, UnrepresentableTimeError

logger = logging.getLogger(__name__)


class CalendarViewConfig(BaseModel):
    """What an N-day calendar view shows and how it looks."""

    start_date: date = Field(..., description="Date shown in the first column")
    num_days: int = Field(..., gt=0, description="Number of day columns")
    day_start_time: time = Field(..., description="Wall-clock time at the top of each column")
    day_duration: timedelta = Field(..., description="Length of the visible part of each day")
    time_zone: InstanceOf[tzinfo] = Field(..., description="Zone the wall-clock times are in")
    base_style: InstanceOf[Style] = Field(..., description="Style of every event rectangle")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("day_duration")
    @classmethod
    def validate_day_duration(cls, v: timedelta) -> timedelta:
        if v < timedelta(minutes=1):
            raise ValueError("day_duration must be at least one minute")
        return v

    @field_validator("time_zone", mode="before")
    @classmethod
    def validate_time_zone(cls, v: Any) -> Any:
        if isinstance(v, str):
            try:
                return resolve_timezone(v)
            except TimezoneError as e:
                raise ValueError(str(e)) from e
        return v


class CalendarLayout:
    """Lay out calendar events over ``num_days`` consecutive day columns.

    Every day window is computed up front, so a configuration that cannot be
    laid out fails here rather than halfway through drawing.
    """

    def __init__(self, config: CalendarViewConfig) -> None:
        """Initialize the calendar layout.

        Args:
            config: Validated view configuration

        Raises:
            UnrepresentableTimeError: If a day start falls in a DST gap
        """
        self.config = config
        self._days = [self._build_day(day_num) for day_num in range(config.num_days)]
        logger.debug(
            f"Calendar layout: {config.num_days} day(s) from {config.start_date} "
            f"at {config.day_start_time} for {config.day_duration} in {zone_name(config.time_zone)}"
        )

    def __repr__(self) -> str:
        return (
            f"CalendarLayout(start_date={self.config.start_date}, num_days={self.config.num_days})"
        )

    @property
    def num_days(self) -> int:
        return self.config.num_days

    def day_date(self, day_num: int) -> date:
        return self.config.start_date + timedelta(days=day_num)

    def _build_day(self, day_num: int) -> DayLayout:
        day = self.day_date(day_num)
        try:
            start = localize(day, self.config.day_start_time, self.config.time_zone)
        except NonexistentLocalTimeError as e:
            raise UnrepresentableTimeError(
                f"Day {day_num} ({day}) starts at {self.config.day_start_time}, "
                f"which does not exist in {zone_name(self.config.time_zone)}"
            ) from e
        # TODO: different styles for past and future days
        return DayLayout(start=start, duration=self.config.day_duration, style=self.config.base_style)

    def single_day_layout(self, day_num: int) -> DayLayout:
        """Get the layout of one day column.

        Raises:
            IndexError: If ``day_num`` is outside ``0..num_days``
        """
        if not 0 <= day_num < self.num_days:
            raise IndexError(f"day_num {day_num} outside 0..{self.num_days}")
        return self._days[day_num]

    def day_window(self, day_num: int) -> DefiniteTimeRange:
        """Visible time window of one day."""
        return self.single_day_layout(day_num).window

    def start_of_first_day(self) -> datetime:
        return self._days[0].start

    def end_of_last_day(self) -> datetime:
        return self._days[-1].end

    def visible_range(self) -> DefiniteTimeRange:
        """Span from the top of the first column to the bottom of the last one."""
        return DefiniteTimeRange(start=self.start_of_first_day(), end=self.end_of_last_day())

    def draw(self, events: Sequence[CalendarEvent], bounds: DrawingBounds) -> list[Drawing]:
        """Lay out all events over all day columns.

        Args:
            events: Events in the order they should be painted within a day
            bounds: Pixel area covering all day columns

        Returns:
            Rectangles for day 0, then day 1, and so on; within a day in
            input event order
        """
        drawings: list[Drawing] = []
        for day_num, day_layout in enumerate(self._days):
            column = bounds.column(day_num, self.num_days)
            for event in events:
                drawings.extend(day_layout.draw(event, column))

        logger.debug(f"Laid out {len(events)} event(s) as {len(drawings)} rectangle(s)")
        return drawings


def create_calendar_layout(**options: Any) -> CalendarLayout:
    """Validate view options and build a ``CalendarLayout``.

    Args:
        **options: Fields of ``CalendarViewConfig``

    Returns:
        Ready-to-use calendar layout

    Raises:
        LayoutConfigurationError: If any option is invalid or a day start is
            unrepresentable
    """
    try:
        config = CalendarViewConfig(**options)
    except ValidationError as e:
        raise LayoutConfigurationError(f"Invalid calendar view configuration: {e}") from e
    return CalendarLayout(config)
