"""Selecting a single value out of a labelled list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable, Generic, Optional, TypeVar

from .password import Key

T = TypeVar("T")


class ListSelect(Generic[T]):
    """A list of labelled values of which one is the current selection."""

    def __init__(self, values: Iterable[tuple[Any, T]]) -> None:
        pairs = list(values)
        self.labels: list[Any] = [label for label, _ in pairs]
        self.variants: list[T] = [variant for _, variant in pairs]
        self._action: Optional[Callable[[T], None]] = None

    def on_select(self, callback: Callable[[T], None]) -> ListSelect[T]:
        """Call ``callback`` with the new value whenever an item is selected."""
        self._action = callback
        return self

    def change_index(self, data: T, forward: bool) -> T:
        """The value after (or before) ``data``, or ``data`` at the ends."""
        try:
            index = self.variants.index(data)
        except ValueError:
            return data
        index = index + 1 if forward else max(index - 1, 0)
        if index < len(self.variants):
            return self.variants[index]
        return data

    def _select(self, data: T) -> None:
        if self._action is not None:
            self._action(data)

    def key_down(self, data: T, key: Key) -> T:
        """Move the selection with the up and down arrows."""
        if key is Key.ARROW_UP:
            data = self.change_index(data, False)
        elif key is Key.ARROW_DOWN:
            data = self.change_index(data, True)
        else:
            return data
        self._select(data)
        return data

    def click(self, data: T, index: int) -> T:
        """Select the item at ``index``."""
        if not 0 <= index < len(self.variants):
            raise IndexError(f"no item at index {index}")
        data = self.variants[index]
        self._select(data)
        return data