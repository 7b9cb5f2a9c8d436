import pytest

from sclgui.colors import (
    BLACK,
    WHITE,
    Color,
    get_contrast_yiq,
    gray_color,
    invert_color,
    mix_color,
)


def test_from_rgba32_splits_channels():
    assert Color.from_rgba32(0x0078D4FF) == Color(0x00, 0x78, 0xD4, 0xFF)


@pytest.mark.parametrize("value", [0x0078D4FF, 0xF74C00FF, 0xFFFFFF00, 0x12345678])
def test_rgba32_round_trip(value):
    assert Color.from_rgba32(value).as_rgba32() == value


def test_from_rgba32_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.from_rgba32(-1)
    with pytest.raises(ValueError):
        Color.from_rgba32(0x1_0000_0000)


def test_channel_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_as_rgba_of_white():
    assert WHITE.as_rgba() == (1.0, 1.0, 1.0, 1.0)


def test_rgba_clamps():
    assert Color.rgba(2.0, -1.0, 0.0, 1.0) == Color(255, 0, 0, 255)


def test_with_alpha_keeps_colour():
    color = Color.from_rgba32(0x0078D4FF).with_alpha(0.0)
    assert (color.red, color.green, color.blue, color.alpha) == (0x00, 0x78, 0xD4, 0)


def test_contrast_picks_opposite():
    assert get_contrast_yiq(WHITE) == BLACK
    assert get_contrast_yiq(BLACK.with_alpha(0.5)) == WHITE.with_alpha(0.5)


def test_invert_round_trip():
    color = Color.from_rgba32(0x12345680)
    assert invert_color(invert_color(color)) == color
    assert invert_color(WHITE) == BLACK


def test_gray_has_equal_channels():
    gray = gray_color(Color.from_rgba32(0x0078D4FF))
    assert gray.red == gray.green == gray.blue
    assert gray.alpha == 255
    assert gray_color(Color(10, 20, 30)) == Color(20, 20, 20)


def test_mix_opaque_cover():
    base = Color.from_rgba32(0x0078D4FF)
    assert mix_color(base, WHITE) == WHITE


def test_mix_transparent_add_keeps_base():
    base = Color.from_rgba32(0x0078D4FF)
    assert mix_color(base, WHITE.with_alpha(0.0)) == base


def test_mix_over_opaque_is_opaque():
    base = Color.from_rgba32(0x0078D4FF)
    assert mix_color(base, BLACK.with_alpha(0.5)).alpha == 255


def test_mix_both_transparent():
    result = mix_color(BLACK.with_alpha(0.0), WHITE.with_alpha(0.0))
    assert result.alpha == 0
    assert result.as_rgba32() == 0