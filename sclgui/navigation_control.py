"""A pivot-style navigation bar with a spring-animated selection underline."""

from __future__ import annotations

import time
from collections.abc import Sequence
from enum import Enum, auto
from typing import Optional

from . import theme
from .spring import Clock, Spring

FONT_SIZE = 14.0
BUTTON_PADDING = 12.0
NAV_HEIGHT = 40.0
RESPONSE_DELAY = 0.15
"""Seconds between a click and the second half of the underline moving."""

_BAR_DAMPER = 0.8


class SpringState(Enum):
    """What the underline springs should do on the next layout."""

    INIT = auto()
    STATIC = auto()
    UPDATE_BOTH = auto()
    UPDATE_START = auto()
    UPDATE_END = auto()


class NavigationControl:
    """Navigation between pages indexed from 0 in the order they were added.

    Each page is drawn as its label with padding on both sides; the selected
    page is underlined by a bar whose two ends follow springs.
    """

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self.pages: list[str] = []
        self._widths: list[Optional[float]] = []
        self.hovering_page: Optional[int] = None
        self.spring_state = SpringState.INIT
        self._start = Spring(0.0, clock)
        self._end = Spring(0.0, clock)

    def add_page(self, page_name: str) -> None:
        """Add a page; its index is the number of pages before it."""
        self.pages.append(page_name)
        self._widths.append(None)

    def with_page(self, page_name: str) -> NavigationControl:
        """Add a page and return the control."""
        self.add_page(page_name)
        return self

    def set_text_widths(self, widths: Sequence[Optional[float]]) -> None:
        """Record the laid-out label width of every page; None for unmeasured."""
        if len(widths) != len(self.pages):
            raise ValueError(f"expected {len(self.pages)} widths, got {len(widths)}")
        self._widths = [None if width is None else float(width) for width in widths]

    def _buttons(self):
        start = 0.0
        for index, width in enumerate(self._widths):
            if width is None:
                continue
            yield index, start, width
            start += width + BUTTON_PADDING * 2.0

    def page_at(self, x: float) -> Optional[int]:
        """The page whose button lies under ``x``, or None."""
        for index, start, width in self._buttons():
            if x - start < width + BUTTON_PADDING * 2.0:
                return index
        return None

    def mouse_move(self, x: float, hot: bool = True) -> bool:
        """Track the hovered page; returns whether it changed."""
        last = self.hovering_page
        self.hovering_page = self.page_at(x) if hot else None
        return last != self.hovering_page

    def mouse_up(self, selected: int) -> int:
        """Select the hovered page; returns the new selection."""
        page = self.hovering_page
        if page is None:
            return selected
        self.spring_state = SpringState.UPDATE_START if selected > page else SpringState.UPDATE_END
        return page

    def timer_fired(self) -> None:
        """After the response delay, let both ends of the bar move."""
        self.spring_state = SpringState.UPDATE_BOTH

    def layout_bar(self, selected: int) -> None:
        """Point the underline springs at the selected page's label."""
        for index, start, width in self._buttons():
            if index != selected:
                continue
            bar_start = start + BUTTON_PADDING
            bar_end = bar_start + width
            state = self.spring_state
            if state is SpringState.INIT:
                self._start = Spring(bar_start, self._clock).with_damper(_BAR_DAMPER)
                self._end = Spring(bar_end, self._clock).with_damper(_BAR_DAMPER)
            elif state is SpringState.UPDATE_BOTH:
                if self._start.target() != bar_start:
                    self._start.set_target(bar_start)
                if self._end.target() != bar_end:
                    self._end.set_target(bar_end)
            elif state is SpringState.UPDATE_START:
                self._start.set_target(bar_start)
            elif state is SpringState.UPDATE_END:
                self._end.set_target(bar_end)
            self.spring_state = SpringState.STATIC
            return

    def bar_extent(self) -> tuple[float, float]:
        """Left and right ends of the underline, rounded."""
        return self._start.position_rounded(), self._end.position_rounded()

    @property
    def animating(self) -> bool:
        """Whether further frames are needed to settle the underline."""
        return self.spring_state is not SpringState.STATIC or not (
            self._end.arrived() and self._start.arrived()
        )

    def text_color_key(self, index: int, selected: int, active: bool = False) -> str:
        """The theme key for the label colour of page ``index``."""
        if index == selected:
            return theme.BASE_HIGH
        if self.hovering_page == index:
            return theme.BASE_MEDIUM_HIGH if active else theme.BASE_HIGH
        return theme.BASE_MEDIUM