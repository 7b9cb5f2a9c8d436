"""An 8-bit RGBA colour and helpers for colour arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    clamped = min(max(value, 0.0), 1.0)
    return int(math.floor(clamped * 255.0 + 0.5))


@dataclass(frozen=True)
class Color:
    """A colour with 8-bit red, green, blue and alpha channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel!r}")

    @classmethod
    def from_rgba32(cls, value: int) -> Color:
        """Build a colour from a 0xRRGGBBAA integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"not a 32-bit RGBA value: {value!r}")
        return cls((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def rgba(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
        """Build a colour from channels in [0.0, 1.0]; values outside are clamped."""
        return cls(_to_u8(red), _to_u8(green), _to_u8(blue), _to_u8(alpha))

    def with_alpha(self, alpha: float) -> Color:
        """The same colour with alpha set from a value in [0.0, 1.0]."""
        return replace(self, alpha=_to_u8(alpha))

    def as_rgba(self) -> tuple[float, float, float, float]:
        """The channels as floats in [0.0, 1.0]."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0, self.alpha / 255.0)

    def as_rgba32(self) -> int:
        """The colour as a 0xRRGGBBAA integer."""
        return (self.red << 24) | (self.green << 16) | (self.blue << 8) | self.alpha


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)


def get_contrast_yiq(color: Color) -> Color:
    """Black or white, whichever reads best on ``color``, keeping its alpha."""
    red, green, blue, alpha = color.as_rgba()
    yiq = 255.0 * ((red * 299.0) + (green * 587.0) + (blue * 114.0)) / 1000.0
    return (BLACK if yiq >= 128.0 else WHITE).with_alpha(alpha)


def invert_color(color: Color) -> Color:
    """Invert the colour channels, keeping alpha."""
    red, green, blue, alpha = color.as_rgba()
    return Color.rgba(1.0 - red, 1.0 - green, 1.0 - blue, alpha)


def gray_color(color: Color) -> Color:
    """Turn the colour grey by averaging its channels, keeping alpha."""
    red, green, blue, alpha = color.as_rgba()
    gray = (red + green + blue) / 3.0
    return Color.rgba(gray, gray, gray, alpha)


def mix_color(base: Color, add: Color) -> Color:
    """Composite ``add`` over ``base``."""
    bg_r, bg_g, bg_b, bg_a = base.as_rgba()
    fg_r, fg_g, fg_b, fg_a = add.as_rgba()
    col_a = fg_a + bg_a * (1.0 - fg_a)
    if col_a == 0:
        return TRANSPARENT
    col_r = fg_r * fg_a + bg_r * bg_a * (1.0 - fg_a)
    col_g = fg_g * fg_a + bg_g * bg_a * (1.0 - fg_a)
    col_b = fg_b * fg_a + bg_b * bg_a * (1.0 - fg_a)
    return Color.rgba(col_r / col_a, col_g / col_a, col_b / col_a, col_a)