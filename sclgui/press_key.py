"""Runs an action when a focused widget has a given key pressed and released."""

from __future__ import annotations

from typing import Any, Callable, Hashable


class PressKey:
    """Fires ``action`` on release of ``key_code`` after it was pressed while focused."""

    def __init__(self, key_code: Hashable, action: Callable[[Any], Any]) -> None:
        self.key_code = key_code
        self._action = action
        self.is_key_down = False

    def key_down(self, code: Hashable, focused: bool = True, disabled: bool = False) -> None:
        """Record a key press."""
        if not focused or disabled:
            self.is_key_down = False
        elif code == self.key_code:
            self.is_key_down = True

    def key_up(
        self, code: Hashable, data: Any = None, focused: bool = True, disabled: bool = False
    ) -> bool:
        """Record a key release; returns whether the action ran."""
        if not focused or disabled:
            self.is_key_down = False
            return False
        if code == self.key_code and self.is_key_down:
            self._action(data)
            self.is_key_down = False
            return True
        return False

    def reset(self) -> None:
        """Forget a pending press, as when focus moves away."""
        self.is_key_down = False