"""Background and border colours shared by the button widgets."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from . import theme
from .colors import Color

FLAT_IDLE_COLOR = Color.from_rgba32(0x303030FF)
"""Background of a flat button that is neither hot nor pressed."""

BORDER_WIDTH = 1.0
CORNER_RADIUS = 5.0

BORDER_GRADIENT: tuple[tuple[float, Color], ...] = (
    (0.9067, Color.from_rgba32(0xFFFFFF14)),
    (1.0, Color.from_rgba32(0x00000066)),
)
"""Stops of the top-to-bottom border gradient drawn around non-flat buttons."""


def button_background_key(
    accent: bool = False,
    flat: bool = False,
    active: bool = False,
    hot: bool = False,
    disabled: bool = False,
) -> Union[str, Color]:
    """The theme key for a button's background, or a fixed colour.

    A disabled button always takes the low base colour; an accent button
    takes the accent set; a flat idle button has a fixed colour.
    """
    if disabled:
        return theme.BASE_LOW
    if accent:
        if active:
            return theme.ACCENT_DARK_1
        if hot:
            return theme.ACCENT_LIGHT_1
        return theme.ACCENT
    if flat:
        if active:
            return theme.BASE_LOW
        if hot:
            return theme.LIST_LOW
        return FLAT_IDLE_COLOR
    if active:
        return theme.BASE_MEDIUM_LOW
    if hot:
        return theme.LIST_LOW
    return theme.BASE_LOW


def button_background(
    env: Mapping[str, Any],
    accent: bool = False,
    flat: bool = False,
    active: bool = False,
    hot: bool = False,
    disabled: bool = False,
) -> Color:
    """The background colour of a button, looked up in ``env``."""
    key = button_background_key(accent, flat, active, hot, disabled)
    if isinstance(key, Color):
        return key
    return env[key]