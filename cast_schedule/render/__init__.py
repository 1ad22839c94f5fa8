"""Rasterization of display lists into images."""

from .canvas import Canvas, RenderError
from .colors import ScheduleColors, convert_to_pil_color, get_default_colors
from .frame import compose_frame

__all__ = [
    "Canvas",
    "RenderError",
    "ScheduleColors",
    "compose_frame",
    "convert_to_pil_color",
    "get_default_colors",
]
