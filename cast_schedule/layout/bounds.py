"""Pixel-space drawing areas."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DrawingBounds:
    """A rectangular sub-area of the output canvas, in pixels."""

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("left", "top", "width", "height"):
            if getattr(self, name) < 0:
                raise ValueError(f"DrawingBounds.{name} must be non-negative, got {getattr(self, name)}")

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def column(self, index: int, count: int) -> "DrawingBounds":
        """Get the ``index``-th of ``count`` equal-width columns.

        Widths are truncated, so the columns may fall up to ``count - 1``
        pixels short of the right edge.

        Args:
            index: Zero-based column number
            count: Total number of columns

        Returns:
            Bounds of the column, same top and height as this area
        """
        return DrawingBounds(
            left=self.left + index * self.width // count,
            top=self.top,
            width=self.width // count,
            height=self.height,
        )

    def cropped_subshape(self, relative_offset: "DrawingBounds") -> "DrawingBounds":
        """Offset every edge of this area by ``relative_offset``."""
        return DrawingBounds(
            left=self.left + relative_offset.left,
            top=self.top + relative_offset.top,
            width=self.width + relative_offset.width,
            height=self.height + relative_offset.height,
        )

    def get_coordinates(self) -> tuple[int, int, int, int]:
        """Get coordinates of the area.

        Returns:
            Tuple of (left, top, width, height)
        """
        return (self.left, self.top, self.width, self.height)
