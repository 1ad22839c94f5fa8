"""Calendar layout engine: events in, positioned rectangles out."""

from .bounds import DrawingBounds
from .calendar_layout import CalendarLayout, CalendarViewConfig, create_calendar_layout
from .day_layout import DayLayout
from .drawing import Drawing, Fill, Point, Rectangle, Stroke, Style
from .exceptions import LayoutConfigurationError, LayoutError, UnrepresentableTimeError
from .interpolation import lerp

__all__ = [
    "CalendarLayout",
    "CalendarViewConfig",
    "DayLayout",
    "Drawing",
    "DrawingBounds",
    "Fill",
    "LayoutConfigurationError",
    "LayoutError",
    "Point",
    "Rectangle",
    "Stroke",
    "Style",
    "UnrepresentableTimeError",
    "create_calendar_layout",
    "lerp",
]
