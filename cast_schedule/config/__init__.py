"""Configuration for cast_schedule."""

from .settings import (
    CalendarViewSettings,
    CastScheduleSettings,
    DisplaySettings,
    LoggingSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "CalendarViewSettings",
    "CastScheduleSettings",
    "DisplaySettings",
    "LoggingSettings",
    "get_settings",
    "reset_settings",
]
