"""
Color constants and conversion for calendar frames.

Colors are carried through the layout as ``#rrggbb`` strings and converted
to the representation Pillow expects only when a frame is rasterized.
"""

from typing import Dict, Tuple, Union

PILColor = Union[int, Tuple[int, int, int]]


class ScheduleColors:
    """Default palette for calendar frames.

    Grayscale-friendly so frames stay legible on e-ink and monochrome screens.
    """

    WHITE = "#ffffff"
    LIGHT_GRAY = "#cccccc"
    MEDIUM_GRAY = "#666666"
    DARK_GRAY = "#333333"
    BLACK = "#000000"

    BACKGROUND = WHITE
    BORDER = BLACK
    EVENT_FILL = MEDIUM_GRAY
    EVENT_OUTLINE = DARK_GRAY


def get_default_colors() -> Dict[str, str]:
    """
    Get the colors used when settings do not override them.

    Returns:
        Dictionary of colors for common rendering scenarios
    """
    return {
        "background": ScheduleColors.BACKGROUND,
        "border": ScheduleColors.BORDER,
        "event_fill": ScheduleColors.EVENT_FILL,
        "event_outline": ScheduleColors.EVENT_OUTLINE,
    }


def parse_hex_color(hex_color: str) -> Tuple[int, int, int]:
    """
    Split a ``#rrggbb`` string into its components.

    Raises:
        ValueError: If hex_color format is invalid
    """
    if not isinstance(hex_color, str) or not hex_color.startswith("#") or len(hex_color) != 7:
        raise ValueError(f"Invalid hex color format: {hex_color}")

    try:
        return (int(hex_color[1:3], 16), int(hex_color[3:5], 16), int(hex_color[5:7], 16))
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {hex_color}") from e


def convert_to_pil_color(hex_color: str, mode: str = "RGB") -> PILColor:
    """
    Convert hex color to PIL-compatible format based on image mode.

    Args:
        hex_color: Hex color string (e.g., "#333333")
        mode: PIL image mode ("1", "L", "RGB")

    Returns:
        Color in appropriate format for PIL

    Raises:
        ValueError: If hex_color format is invalid or the mode is unsupported
    """
    r, g, b = parse_hex_color(hex_color)
    luminance = 0.299 * r + 0.587 * g + 0.114 * b

    if mode == "1":  # Monochrome (1-bit)
        return 0 if luminance < 128 else 1

    if mode == "L":  # Grayscale (8-bit)
        return int(luminance)

    if mode == "RGB":
        return (r, g, b)

    raise ValueError(f"Unsupported PIL image mode: {mode}")
