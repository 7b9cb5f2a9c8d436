"""A password entry field that shows a mask glyph for every character."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Physical keys the editing widgets react to."""

    BACKSPACE = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    TAB = auto()
    ENTER = auto()
    V = auto()
    OTHER = auto()


class FocusMove(Enum):
    """Where keyboard focus should go after a Tab press."""

    NEXT = auto()
    PREVIOUS = auto()


class PasswordBox:
    """Editing state of a password field.

    The cursor counts characters and exists only while the field has focus.
    """

    MASK = "•"

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor: Optional[int] = None
        self.paste_requested = False

    @property
    def text(self) -> str:
        """The entered password."""
        return self._text

    @property
    def cursor(self) -> Optional[int]:
        """Character index of the cursor, or None when unfocused."""
        return self._cursor

    @property
    def focused(self) -> bool:
        """Whether the field has keyboard focus."""
        return self._cursor is not None

    @property
    def mask(self) -> str:
        """What the field shows: one mask glyph per character."""
        return self.MASK * len(self._text)

    def focus_changed(self, focused: bool) -> None:
        """Gaining focus puts the cursor at the end; losing it removes the cursor."""
        self._cursor = len(self._text) if focused else None

    def _insert(self, inserted: str) -> None:
        cursor = self._cursor
        assert cursor is not None
        position = cursor if 0 < cursor <= len(self._text) else 0
        self._text = self._text[:position] + inserted + self._text[position:]
        self._cursor = cursor + len(inserted)

    def key_down(
        self,
        key: Key,
        character: Optional[str] = None,
        ctrl: bool = False,
        shift: bool = False,
        alt: bool = False,
    ) -> Optional[FocusMove]:
        """Handle a key press; returns where focus should move on Tab."""
        cursor = self._cursor
        if cursor is None:
            return None
        if key is Key.BACKSPACE:
            if cursor > 0:
                if ctrl:
                    self._text = self._text[cursor:]
                    self._cursor = 0
                elif cursor - 1 < len(self._text):
                    self._text = self._text[: cursor - 1] + self._text[cursor:]
                    self._cursor = cursor - 1
        elif key is Key.ARROW_LEFT:
            if 0 < cursor <= len(self._text):
                self._cursor = cursor - 1
        elif key is Key.ARROW_RIGHT:
            if cursor < len(self._text):
                self._cursor = cursor + 1
        elif key is Key.ARROW_UP:
            self._cursor = 0
        elif key is Key.ARROW_DOWN:
            self._cursor = len(self._text)
        elif key is Key.TAB:
            return FocusMove.PREVIOUS if shift else FocusMove.NEXT
        elif key is Key.ENTER:
            pass
        elif ctrl and key is Key.V:
            self.paste_requested = True
        elif not ctrl and not alt and character:
            self._insert(character)
        return None

    def paste(self, text: str) -> None:
        """Insert pasted text at the cursor; ignored without focus."""
        if self._cursor is None:
            return
        self.paste_requested = False
        self._insert(text)

    def click(self, x: float, glyph_width: float, inset: float = 0.0) -> int:
        """Place the cursor under a click at ``x`` and return its index."""
        if glyph_width <= 0:
            raise ValueError(f"glyph width must be positive: {glyph_width!r}")
        index = max((x - inset) / glyph_width, 0.0)
        self._cursor = min(int(index), len(self._text))
        return self._cursor

    def set_text(self, text: str) -> None:
        """Replace the text, keeping the cursor within it."""
        self._text = text
        if self._cursor is not None:
            self._cursor = min(self._cursor, len(text))