"""Composition of a full display frame."""

import logging
from typing import TYPE_CHECKING, Optional

from ..layout.bounds import DrawingBounds
from ..layout.calendar_layout import CalendarLayout
from ..layout.drawing import Drawing, Rectangle, Stroke, Style
from ..models.event import ScheduleModel
from .canvas import Canvas

if TYPE_CHECKING:
    from ..config.settings import DisplaySettings

logger = logging.getLogger(__name__)


def frame_background(width: int, height: int, background: str, border: Optional[Stroke]) -> Drawing:
    """Full-canvas rectangle painted underneath the calendar."""
    return Drawing(shape=Rectangle(width=width, height=height)).with_style(
        Style.filled(background, stroke=border)
    )


def compose_frame(
    model: ScheduleModel,
    layout: CalendarLayout,
    display: "DisplaySettings",
    bounds: Optional[DrawingBounds] = None,
) -> Canvas:
    """Build a canvas with the background first and the calendar on top.

    Args:
        model: Events and status to show
        layout: Calendar layout for the visible days
        display: Canvas size, colors and image mode
        bounds: Area the calendar occupies; the whole canvas by default

    Returns:
        Canvas whose display list is ready to render
    """
    canvas = Canvas(
        width=display.width,
        height=display.height,
        mode=display.image_mode,
        background=display.background_color,
    )

    border = None
    if display.border_width > 0:
        border = Stroke(width=display.border_width, color=display.border_color)
    canvas.add(frame_background(display.width, display.height, display.background_color, border))

    if bounds is None:
        bounds = DrawingBounds(left=0, top=0, width=display.width, height=display.height)

    drawings = layout.draw(model.events, bounds)
    canvas.extend(drawings)

    logger.debug(
        f"Composed frame with {len(drawings)} event rectangle(s); "
        f"in_meeting={model.status.in_meeting}"
    )
    return canvas
