"""Unit tests for the Pillow canvas."""

from pathlib import Path

import pytest
from PIL import Image

from cast_schedule.layout.drawing import Drawing, Rectangle, Stroke, Style
from cast_schedule.render.canvas import Canvas, RenderError

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (102, 102, 102)


def rect(x: int, y: int, width: int, height: int, style: Style) -> Drawing:
    return Drawing(shape=Rectangle(width=width, height=height)).with_xy(x, y).with_style(style)


class TestCanvasInit:
    """Tests for Canvas construction."""

    @pytest.mark.parametrize(("width", "height"), [(0, 10), (10, 0), (-5, 10)])
    def test_init_when_size_not_positive_then_raises_value_error(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="positive"):
            Canvas(width, height)

    def test_init_when_unsupported_mode_then_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unsupported"):
            Canvas(10, 10, mode="CMYK")


class TestCanvasRender:
    """Tests for rasterizing display lists."""

    def test_render_when_empty_then_background_only(self) -> None:
        image = Canvas(8, 6).render()

        assert image.size == (8, 6)
        assert image.mode == "RGB"
        assert image.getpixel((0, 0)) == WHITE
        assert image.getpixel((7, 5)) == WHITE

    def test_render_when_filled_rectangle_then_covers_exact_pixels(self) -> None:
        """A 4x5 rectangle at (2, 3) covers columns 2-5 and rows 3-7."""
        # Arrange
        canvas = Canvas(10, 10)
        canvas.add(rect(2, 3, 4, 5, Style.filled("#000000")))

        # Act
        image = canvas.render()

        # Assert
        assert image.getpixel((2, 3)) == BLACK
        assert image.getpixel((5, 7)) == BLACK
        assert image.getpixel((6, 3)) == WHITE
        assert image.getpixel((2, 8)) == WHITE
        assert image.getpixel((1, 3)) == WHITE

    def test_render_when_drawings_overlap_then_later_paints_over_earlier(self) -> None:
        canvas = Canvas(10, 10)
        canvas.extend(
            [
                rect(0, 0, 10, 10, Style.filled("#000000")),
                rect(0, 0, 5, 5, Style.filled("#666666")),
            ]
        )

        image = canvas.render()

        assert image.getpixel((0, 0)) == GRAY
        assert image.getpixel((9, 9)) == BLACK

    def test_render_when_outline_only_then_interior_untouched(self) -> None:
        canvas = Canvas(10, 10)
        canvas.add(rect(0, 0, 10, 10, Style(stroke=Stroke(width=1, color="#000000"))))

        image = canvas.render()

        assert image.getpixel((0, 0)) == BLACK
        assert image.getpixel((9, 5)) == BLACK
        assert image.getpixel((5, 5)) == WHITE

    @pytest.mark.parametrize(
        "drawing",
        [
            rect(0, 0, 0, 5, Style.filled("#000000")),
            rect(0, 0, 5, 0, Style.filled("#000000")),
            rect(0, 0, 5, 5, Style()),
        ],
    )
    def test_render_when_nothing_to_paint_then_skipped(self, drawing: Drawing) -> None:
        canvas = Canvas(6, 6)
        canvas.add(drawing)

        image = canvas.render()

        assert image.getpixel((0, 0)) == WHITE

    def test_render_when_color_invalid_then_raises_render_error(self) -> None:
        canvas = Canvas(4, 4)
        canvas.add(rect(0, 0, 2, 2, Style.filled("not-a-color")))

        with pytest.raises(RenderError, match="hex color"):
            canvas.render()

    def test_render_when_grayscale_mode_then_single_channel(self) -> None:
        canvas = Canvas(4, 4, mode="L")
        canvas.add(rect(0, 0, 2, 2, Style.filled("#000000")))

        image = canvas.render()

        assert image.mode == "L"
        assert image.getpixel((0, 0)) == 0


class TestCanvasSave:
    """Tests for writing images."""

    def test_save_when_directory_missing_then_created(self, tmp_path: Path) -> None:
        # Arrange
        canvas = Canvas(12, 8)
        output = tmp_path / "nested" / "frame.png"

        # Act
        result = canvas.save(output)

        # Assert
        assert result == output
        with Image.open(output) as image:
            assert image.size == (12, 8)
            assert image.format == "PNG"

    def test_save_when_parent_is_a_file_then_raises_render_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(RenderError, match="Could not save"):
            Canvas(4, 4).save(blocker / "frame.png")
