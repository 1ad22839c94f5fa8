"""Unit tests for frame colors."""

import pytest

from cast_schedule.render.colors import (
    ScheduleColors,
    convert_to_pil_color,
    get_default_colors,
    parse_hex_color,
)


class TestScheduleColors:
    """Tests for the default palette."""

    def test_grayscale_palette_when_accessed_then_returns_expected_values(self) -> None:
        assert ScheduleColors.WHITE == "#ffffff"
        assert ScheduleColors.MEDIUM_GRAY == "#666666"
        assert ScheduleColors.BLACK == "#000000"

    def test_default_colors_when_requested_then_semantic_roles_mapped(self) -> None:
        colors = get_default_colors()

        assert colors == {
            "background": ScheduleColors.WHITE,
            "border": ScheduleColors.BLACK,
            "event_fill": ScheduleColors.MEDIUM_GRAY,
            "event_outline": ScheduleColors.DARK_GRAY,
        }


class TestColorConversion:
    """Tests for hex parsing and PIL conversion."""

    def test_parse_hex_color_when_valid_then_components(self) -> None:
        assert parse_hex_color("#1a2B3c") == (0x1A, 0x2B, 0x3C)

    @pytest.mark.parametrize("value", ["666666", "#66666", "#gggggg", "", "#6666666"])
    def test_parse_hex_color_when_invalid_then_raises_value_error(self, value: str) -> None:
        with pytest.raises(ValueError, match="hex color"):
            parse_hex_color(value)

    @pytest.mark.parametrize(
        ("hex_color", "mode", "expected"),
        [
            ("#666666", "RGB", (102, 102, 102)),
            ("#000000", "L", 0),
            ("#666666", "1", 0),
            ("#cccccc", "1", 1),
        ],
    )
    def test_convert_to_pil_color_when_mode_given_then_matching_format(
        self, hex_color: str, mode: str, expected: object
    ) -> None:
        assert convert_to_pil_color(hex_color, mode) == expected

    def test_convert_to_pil_color_when_grayscale_then_luminance(self) -> None:
        result = convert_to_pil_color("#666666", "L")

        assert isinstance(result, int)
        assert 101 <= result <= 102

    def test_convert_to_pil_color_when_unsupported_mode_then_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unsupported"):
            convert_to_pil_color("#000000", "CMYK")
