"""Calendar event and application state models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from .time_range import IndefiniteTimeRange


class CalendarEvent(BaseModel):
    """A named event whose start and/or end may be unknown."""

    name: str = Field(..., description="Event title; not used for layout")
    times: InstanceOf[IndefiniteTimeRange] = Field(
        default_factory=IndefiniteTimeRange, description="When the event happens"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("times")
    @classmethod
    def validate_times_aware(cls, v: IndefiniteTimeRange) -> IndefiniteTimeRange:
        for instant in (v.start_instant, v.end_instant):
            if instant is not None and (instant.tzinfo is None or instant.utcoffset() is None):
                raise ValueError(f"Event times must be timezone-aware, got {instant!r}")
        return v

    @classmethod
    def create(
        cls, name: str, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> "CalendarEvent":
        """Create an event from optional start/end instants.

        Raises:
            pydantic.ValidationError: If a given instant is timezone-naive
        """
        return cls(name=name, times=IndefiniteTimeRange.between(start=start, end=end))

    @property
    def start(self) -> Optional[datetime]:
        return self.times.start_instant

    @property
    def end(self) -> Optional[datetime]:
        return self.times.end_instant


class CurrentStatus(BaseModel):
    """Meeting state shown alongside the calendar."""

    has_meeting: bool = False
    mic_active: bool = False
    in_meeting: bool = False


class ScheduleModel(BaseModel):
    """Everything a display frame is built from."""

    events: list[CalendarEvent] = Field(default_factory=list)
    status: CurrentStatus = Field(default_factory=CurrentStatus)
