"""Icon data and the theme keys that locate an icon."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Union

_DEFAULT_LIGHT = 0x000000FF
_DEFAULT_DARK = 0xFFFFFFFF


@dataclass(frozen=True)
class IconData:
    """Light colour, dark colour (0xRRGGBBAA) and SVG fill path of an icon."""

    light: int
    dark: int
    path: str

    def __post_init__(self) -> None:
        for color in (self.light, self.dark):
            if not isinstance(color, int) or not 0 <= color <= 0xFFFFFFFF:
                raise ValueError(f"not a 32-bit RGBA value: {color!r}")

    @classmethod
    def from_value(cls, value: Union[str, tuple[int, str]]) -> IconData:
        """Build icon data from a path alone, or from a (colour, path) pair."""
        if isinstance(value, str):
            return cls(_DEFAULT_LIGHT, _DEFAULT_DARK, value)
        if (
            isinstance(value, tuple)
            and len(value) == 2
            and isinstance(value[0], int)
            and not isinstance(value[0], bool)
            and isinstance(value[1], str)
        ):
            color, path = value
            return cls(color, color, path)
        raise TypeError(f"cannot build icon data from {value!r}")


class IconKeyPair(NamedTuple):
    """Theme keys for an icon's fill path and its two colours."""

    path: str
    light: str
    dark: str