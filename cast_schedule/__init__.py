"""Cast Schedule - lay out calendar events as positioned rectangles on a multi-day grid.

The layout engine turns events whose start and/or end may be unknown into
rectangles for an N-day view; a small Pillow rasterizer turns those into
preview images for networked screens.
"""

__version__ = "0.1.0"
__author__ = "Cast Schedule Team"
__description__ = "Multi-day calendar layout for networked displays"

__all__ = [
    "__author__",
    "__description__",
    "__version__",
]
