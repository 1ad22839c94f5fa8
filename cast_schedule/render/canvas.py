"""Pillow rasterizer for display lists."""

import logging
from pathlib import Path
from typing import Iterable, Union

from PIL import Image, ImageDraw

from ..layout.drawing import Drawing
from .colors import PILColor, ScheduleColors, convert_to_pil_color

logger = logging.getLogger(__name__)

SUPPORTED_MODES = ("1", "L", "RGB")


class RenderError(Exception):
    """Raised when a display list cannot be rasterized or saved."""


class Canvas:
    """A fixed-size image surface with an ordered display list.

    Drawings are painted in list order, so later drawings cover earlier ones.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mode: str = "RGB",
        background: str = ScheduleColors.BACKGROUND,
    ) -> None:
        """Initialize the canvas.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            mode: PIL image mode ("1", "L", "RGB")
            background: Hex color the image starts out filled with

        Raises:
            ValueError: If the size is not positive or the mode is unsupported
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if mode not in SUPPORTED_MODES:
            raise ValueError(f"Unsupported PIL image mode: {mode}")

        self.width = width
        self.height = height
        self.mode = mode
        self.background = background
        self.display_list: list[Drawing] = []

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height}, mode={self.mode!r}, drawings={len(self.display_list)})"

    def add(self, drawing: Drawing) -> None:
        self.display_list.append(drawing)

    def extend(self, drawings: Iterable[Drawing]) -> None:
        self.display_list.extend(drawings)

    def render(self) -> Image.Image:
        """Rasterize the display list.

        Returns:
            New PIL Image of the canvas size

        Raises:
            RenderError: If a drawing carries an invalid color
        """
        image = Image.new(self.mode, (self.width, self.height), self._color(self.background))
        draw = ImageDraw.Draw(image)

        skipped = 0
        for drawing in self.display_list:
            if not self._paint(draw, drawing):
                skipped += 1

        logger.debug(
            f"Rendered {len(self.display_list) - skipped} drawing(s) on {self.width}x{self.height} "
            f"{self.mode} canvas, skipped {skipped} empty"
        )
        return image

    def save(self, path: Union[str, Path], image_format: str = "PNG") -> Path:
        """Render and write the image to ``path``.

        Returns:
            The path written

        Raises:
            RenderError: If rendering or writing fails
        """
        output = Path(path)
        image = self.render()
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            image.save(output, format=image_format)
        except (OSError, ValueError) as e:
            raise RenderError(f"Could not save image to {output}: {e}") from e

        logger.info(f"Saved {self.width}x{self.height} image to {output}")
        return output

    def _color(self, hex_color: str) -> PILColor:
        try:
            return convert_to_pil_color(hex_color, self.mode)
        except ValueError as e:
            raise RenderError(str(e)) from e

    def _paint(self, draw: ImageDraw.ImageDraw, drawing: Drawing) -> bool:
        shape = drawing.shape
        if shape.is_empty():
            return False

        x1 = int(round(drawing.position.x))
        y1 = int(round(drawing.position.y))
        # PIL rectangle corners are inclusive
        x2 = x1 + shape.width - 1
        y2 = y1 + shape.height - 1

        style = drawing.style
        fill = self._color(style.fill.color) if style.fill is not None else None
        outline = None
        outline_width = 0
        if style.stroke is not None and style.stroke.width > 0:
            outline = self._color(style.stroke.color)
            outline_width = style.stroke.width

        if fill is None and outline is None:
            return False

        draw.rectangle((x1, y1, x2, y2), fill=fill, outline=outline, width=max(outline_width, 1))
        return True
