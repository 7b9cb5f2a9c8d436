"""Theme keys and the light and dark colour and font sets that fill them."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Any, Union

from .colors import BLACK, WHITE, Color

_PREFIX = "net.stevexmh.scl.fluent.color"

# Base colours: content shown on top of a background.
BASE_LOW = f"{_PREFIX}.light.base.low"
BASE_MEDIUM_LOW = f"{_PREFIX}.light.base.medium-low"
BASE_MEDIUM = f"{_PREFIX}.light.base.medium"
BASE_MEDIUM_HIGH = f"{_PREFIX}.light.base.medium-high"
BASE_HIGH = f"{_PREFIX}.light.base.high"

# Alternative colours: the inverse of the base set, used for backgrounds.
ALT_LOW = f"{_PREFIX}.light.alt.low"
ALT_MEDIUM_LOW = f"{_PREFIX}.light.alt.medium-low"
ALT_MEDIUM = f"{_PREFIX}.light.alt.medium"
ALT_MEDIUM_HIGH = f"{_PREFIX}.light.alt.medium-high"
ALT_HIGH = f"{_PREFIX}.light.alt.high"

# Chrome colours, partly solid.
CHROME_WHITE_HIGH = f"{_PREFIX}.chrome.white-high"
CHROME_MEDIUM_LOW = f"{_PREFIX}.chrome.medium-low"
CHROME_LOW = f"{_PREFIX}.chrome.low"
CHROME_DISABLED_HIGH = f"{_PREFIX}.chrome.disabled-high"
CHROME_MEDIUM = f"{_PREFIX}.chrome.medium"
CHROME_HIGH = f"{_PREFIX}.chrome.high"
CHROME_BLACK_LOW = f"{_PREFIX}.chrome.black-low"
CHROME_BLACK_MEDIUM_LOW = f"{_PREFIX}.chrome.black-medium-low"
CHROME_DISABLED_LOW = f"{_PREFIX}.chrome.disabled-low"
CHROME_BLACK_MEDIUM = f"{_PREFIX}.chrome.black-medium"
CHROME_ALT_LOW = f"{_PREFIX}.chrome.alt-low"
CHROME_BLACK_HIGH = f"{_PREFIX}.chrome.black-high"
CHROME_WHITE = f"{_PREFIX}.chrome.white"

# List colours.
LIST_ACCENT_HIGH = f"{_PREFIX}.chrome.accent-high"
LIST_ACCENT_MEDIUM = f"{_PREFIX}.chrome.accent-medium"
LIST_ACCENT_LOW = f"{_PREFIX}.chrome.accent-low"
LIST_LOW = f"{_PREFIX}.chrome.list-low"
LIST_MEDIUM = f"{_PREFIX}.chrome.list-medium"

# Border colours.
BORDER_EDGE_HIGHTLIGHT = f"{_PREFIX}.chrome.edge-hightlight"
BORDER_TRANSIENT = f"{_PREFIX}.chrome.transient"

# Accent colours.
ACCENT = f"{_PREFIX}.chrome.accent"
ACCENT_1 = f"{_PREFIX}.chrome.accent-1"
ACCENT_DARK_1 = f"{_PREFIX}.chrome.accent-dark-1"
ACCENT_LIGHT_1 = f"{_PREFIX}.chrome.accent-light-1"

# Typography.
FONT_COLOR = f"{_PREFIX}.typography.font-color"
SUBHEADER = f"{_PREFIX}.typography.subheader"
HEADER = f"{_PREFIX}.typography.header"
TITLE = f"{_PREFIX}.typography.title"
CAPTION = f"{_PREFIX}.typography.caption"
CAPTION_ALT = f"{_PREFIX}.typography.caption-alt"
BODY = f"{_PREFIX}.typography.body"
SUBTITLE_ALT = f"{_PREFIX}.typography.subtitle-alt"
SUBTITLE = f"{_PREFIX}.typography.subtitle"
BASE = f"{_PREFIX}.typography.base"
BASE_ALT = f"{_PREFIX}.typography.base-alt"

# Application keys, unrelated to the design system.
PRIMARY = "net.stevexmh.scl.primary"
SECONDARY = "net.stevexmh.scl.secondary"
TITLE_BAR = "net.stevexmh.scl.titlebar"
IS_DARK = "net.stevexmh.scl.is-dark"

# Toolkit-wide keys.
UI_FONT = "theme.ui-font"
UI_FONT_BOLD = "theme.ui-font-bold"
UI_FONT_ITALIC = "theme.ui-font-italic"
WINDOW_BACKGROUND_COLOR = "theme.window-background-color"

SYSTEM_UI = "system-ui"
DEFAULT_FONT_SIZE = 12.0


class Theme(Enum):
    """Light or dark page theme."""

    LIGHT = "Light"
    DARK = "Dark"


class FontWeight(IntEnum):
    """Font weight on the usual 100-900 scale."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


class FontStyle(Enum):
    """Upright or italic."""

    REGULAR = "Regular"
    ITALIC = "Italic"


@dataclass(frozen=True)
class FontDescriptor:
    """A font family with size, weight and style."""

    family: str
    size: float = DEFAULT_FONT_SIZE
    weight: FontWeight = FontWeight.REGULAR
    style: FontStyle = FontStyle.REGULAR

    def with_size(self, size: float) -> FontDescriptor:
        """A copy with another size."""
        return replace(self, size=float(size))

    def with_weight(self, weight: FontWeight) -> FontDescriptor:
        """A copy with another weight."""
        return replace(self, weight=FontWeight(weight))

    def with_style(self, style: FontStyle) -> FontDescriptor:
        """A copy with another style."""
        return replace(self, style=FontStyle(style))


def get_font() -> str:
    """The font family the theme uses."""
    return SYSTEM_UI


def _rgba(value: int) -> Color:
    return Color.from_rgba32(value)


_MICROSOFT_BLUE = 0x0078D4FF

_COMMON_COLORS: dict[str, Color] = {
    CHROME_WHITE_HIGH: _rgba(0xFFFFFFFF),
    CHROME_BLACK_LOW: BLACK.with_alpha(0.2),
    CHROME_BLACK_MEDIUM_LOW: BLACK.with_alpha(0.4),
    CHROME_BLACK_MEDIUM: BLACK.with_alpha(0.8),
    CHROME_BLACK_HIGH: BLACK,
    CHROME_WHITE: WHITE,
    LIST_ACCENT_HIGH: _rgba(_MICROSOFT_BLUE).with_alpha(0.2),
    LIST_ACCENT_MEDIUM: _rgba(_MICROSOFT_BLUE).with_alpha(0.4),
    LIST_ACCENT_LOW: _rgba(_MICROSOFT_BLUE).with_alpha(0.6),
    LIST_MEDIUM: BLACK.with_alpha(0.2),
    BORDER_EDGE_HIGHTLIGHT: WHITE.with_alpha(0.6),
    BORDER_TRANSIENT: BLACK.with_alpha(0.14),
    ACCENT: _rgba(0x0078D4FF),
    ACCENT_1: _rgba(0x429CE3FF),
    ACCENT_DARK_1: _rgba(0x005A9EFF),
    ACCENT_LIGHT_1: _rgba(0xFF7233FF),
    PRIMARY: _rgba(0xF74C00FF),
    SECONDARY: _rgba(0xCC3F00FF),
}


def _graded(keys: tuple[str, ...], color: Color) -> dict[str, Color]:
    alphas = (0.2, 0.4, 0.6, 0.8)
    graded = {key: color.with_alpha(alpha) for key, alpha in zip(keys, alphas)}
    graded[keys[-1]] = color
    return graded


_BASE_KEYS = (BASE_LOW, BASE_MEDIUM_LOW, BASE_MEDIUM, BASE_MEDIUM_HIGH, BASE_HIGH)
_ALT_KEYS = (ALT_LOW, ALT_MEDIUM_LOW, ALT_MEDIUM, ALT_MEDIUM_HIGH, ALT_HIGH)

_LIGHT_COLORS: dict[str, Color] = {
    **_graded(_BASE_KEYS, BLACK),
    **_graded(_ALT_KEYS, WHITE),
    CHROME_MEDIUM_LOW: _rgba(0xF2F2F2FF),
    CHROME_LOW: _rgba(0xF2F2F2FF),
    CHROME_DISABLED_HIGH: _rgba(0xCCCCCCFF),
    CHROME_MEDIUM: _rgba(0xE6E6E6FF),
    CHROME_HIGH: _rgba(0xCCCCCCFF),
    CHROME_DISABLED_LOW: _rgba(0x7A7A7AFF),
    CHROME_ALT_LOW: BLACK.with_alpha(0.4),
    LIST_LOW: BLACK.with_alpha(0.1),
    TITLE_BAR: _rgba(0xFFFFFF00),
    FONT_COLOR: _rgba(0x201F1EFF),
    WINDOW_BACKGROUND_COLOR: _rgba(0xF3F3F3FF),
}

_DARK_COLORS: dict[str, Color] = {
    **_graded(_BASE_KEYS, WHITE),
    **_graded(_ALT_KEYS, BLACK),
    CHROME_LOW: _rgba(0x373737FF),
    CHROME_MEDIUM_LOW: _rgba(0x2B2B2BFF),
    CHROME_MEDIUM: _rgba(0x1F1F1FFF),
    CHROME_HIGH: _rgba(0x767676FF),
    CHROME_ALT_LOW: _rgba(0xF2F2F2FF),
    CHROME_DISABLED_LOW: _rgba(0x858585FF),
    CHROME_DISABLED_HIGH: _rgba(0x333333FF),
    LIST_LOW: _rgba(0x3C3C3CFF),
    TITLE_BAR: _rgba(0x00000000),
    FONT_COLOR: _rgba(0xFFFFFFFF),
    WINDOW_BACKGROUND_COLOR: _rgba(0x202020FF),
}

_FONT_SPECS: tuple[tuple[str, float, FontWeight], ...] = (
    (SUBHEADER, 34.0, FontWeight.EXTRA_LIGHT),
    (HEADER, 46.0, FontWeight.EXTRA_LIGHT),
    (TITLE, 24.0, FontWeight.EXTRA_LIGHT),
    (CAPTION, 12.0, FontWeight.LIGHT),
    (CAPTION_ALT, 13.0, FontWeight.LIGHT),
    (BODY, 14.0, FontWeight.REGULAR),
    (SUBTITLE_ALT, 18.0, FontWeight.REGULAR),
    (SUBTITLE, 20.0, FontWeight.REGULAR),
    (BASE, 14.0, FontWeight.REGULAR),
    (BASE_ALT, 14.0, FontWeight.SEMI_BOLD),
    (UI_FONT, 15.0, FontWeight.REGULAR),
    (UI_FONT_BOLD, 15.0, FontWeight.BOLD),
)


def _fonts(family: str) -> dict[str, FontDescriptor]:
    fonts = {
        key: FontDescriptor(family).with_size(size).with_weight(weight)
        for key, size, weight in _FONT_SPECS
    }
    fonts[UI_FONT_ITALIC] = (
        FontDescriptor(family)
        .with_size(15.0)
        .with_style(FontStyle.ITALIC)
        .with_weight(FontWeight.REGULAR)
    )
    return fonts


def set_color_to_env(
    env: MutableMapping[str, Any], theme: Union[Theme, str] = Theme.LIGHT
) -> None:
    """Fill ``env`` with every colour and font of ``theme``."""
    theme = Theme(theme)
    env[IS_DARK] = theme is Theme.DARK
    env.update(_COMMON_COLORS)
    env.update(_DARK_COLORS if theme is Theme.DARK else _LIGHT_COLORS)
    env.update(_fonts(get_font()))