"""Page navigation with queued push and pop transitions."""

from __future__ import annotations

import warnings
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional

from .tween import ease_out_expo

ANIMATION_TIME = 300_000_000
"""Length of a page transition in nanoseconds."""

ON_PAGE = "net.stevexmh.scl.on-page"
"""Notification sent with the page that has just been shown."""

POP_PAGE = "net.stevexmh.scl.pop-page"
"""Notification sent with the page that is about to be left."""

PageBuilder = Callable[[], Any]
Notification = tuple[str, str]


class AnimationKind(Enum):
    """The transitions a page switch can use."""

    PUSH_ZOOM = auto()
    POP_ZOOM = auto()
    PUSH_SLIDE = auto()
    POP_SLIDE = auto()
    PUSH_MOVE_UP = auto()

    @property
    def is_push(self) -> bool:
        """Whether the transition brings a new page onto the chain."""
        return self in (AnimationKind.PUSH_ZOOM, AnimationKind.PUSH_SLIDE, AnimationKind.PUSH_MOVE_UP)


@dataclass(frozen=True)
class Animation:
    """A queued transition towards ``page``."""

    kind: AnimationKind
    page: str


class PageSwitcherError(Exception):
    """Raised for pages registered twice or pushed without being registered."""


class PageSwitcher:
    """Shows one page out of many, with animated transitions between them.

    Pages are built on demand from their builders, and pages no longer on the
    chain are dropped. The first registered page is shown first.
    """

    def __init__(self, skip_frames: int = 1) -> None:
        if skip_frames < 0:
            raise ValueError(f"skip_frames must not be negative: {skip_frames!r}")
        self._skip_frames = skip_frames
        self._timer = 0
        self._active_page = ""
        self._page_chain: list[str] = []
        self._queue: deque[Animation] = deque()
        self._builders: dict[str, PageBuilder] = {}
        self._inner: dict[str, Any] = {}
        self._slide = False
        self._skip = 0

    @property
    def active_page(self) -> str:
        """The page currently shown, or an empty string before the first."""
        return self._active_page

    @property
    def page_chain(self) -> tuple[str, ...]:
        """The pages shown so far, oldest first."""
        return tuple(self._page_chain)

    @property
    def slide_animation(self) -> bool:
        """Whether transitions slide rather than zoom."""
        return self._slide

    def page(self, key: str) -> Any:
        """The built page ``key``; raises KeyError when it is not loaded."""
        return self._inner[key]

    def _load_page(self, key: str) -> None:
        if key not in self._inner:
            builder = self._builders.get(key)
            if builder is not None:
                self._inner[key] = builder()

    def _clean_unused_pages(self) -> None:
        self._inner = {key: page for key, page in self._inner.items() if key in self._page_chain}

    def add_page(self, key: str, builder: PageBuilder) -> None:
        """Register a page under ``key`` with a function that builds it."""
        if not self._page_chain and not self._builders:
            self._queue.append(Animation(AnimationKind.PUSH_MOVE_UP, key))
            self._load_page(key)
        if key in self._builders:
            raise PageSwitcherError(f"Page {key} has already registered")
        self._builders[key] = builder

    def with_page(self, key: str, builder: PageBuilder) -> PageSwitcher:
        """Register a page and return the switcher."""
        self.add_page(key, builder)
        return self

    def push_page(self, key: str) -> None:
        """Queue a transition to the page ``key``."""
        self._load_page(key)
        if key not in self._inner:
            raise PageSwitcherError(f"Can't find inner page called {key}")
        kind = AnimationKind.PUSH_SLIDE if self._slide else AnimationKind.PUSH_ZOOM
        self._queue.append(Animation(kind, key))
        self._skip = self._skip_frames

    def query_pop_page(self, to_page: str = "") -> bool:
        """Go back to ``to_page``, or to the previous page when it is empty.

        Returns whether a transition was queued.
        """
        if self._queue:
            return False
        if not self._page_chain:
            raise PageSwitcherError("no page is shown yet")
        if to_page == self._page_chain[-1]:
            return False
        if len(self._page_chain) <= 1:
            warnings.warn("Back page invoked when the page is only one!", stacklevel=2)
            return False
        target = to_page or self._page_chain[-2]
        kind = AnimationKind.POP_SLIDE if self._slide else AnimationKind.POP_ZOOM
        self._queue.append(Animation(kind, target))
        self._skip = 1
        return True

    def set_slide_animation(self, value: bool) -> bool:
        """Choose sliding over zooming transitions; returns whether it changed."""
        value = bool(value)
        if self._slide == value:
            return False
        self._slide = value
        return True

    def _finish(self, animation: Animation) -> list[Notification]:
        page = animation.page
        if animation.kind.is_push:
            self._load_page(page)
            self._active_page = page
            self._page_chain.append(page)
            return [(ON_PAGE, page)]
        if not page or page not in self._page_chain:
            return []
        notifications = [(POP_PAGE, self._active_page), (ON_PAGE, page)]
        self._active_page = page
        while self._page_chain[-1] != page:
            self._page_chain.pop()
        self._clean_unused_pages()
        return notifications

    def anim_frame(self, interval: int) -> list[Notification]:
        """Advance the running transition by ``interval`` nanoseconds.

        Returns the notifications raised by a transition that completed.
        """
        if not self._queue:
            return []
        if self._skip:
            self._skip -= 1
            return []
        if self._timer == 0:
            self._timer += interval
            front = self._queue[0]
            if front.kind in (AnimationKind.PUSH_ZOOM, AnimationKind.PUSH_MOVE_UP):
                self._load_page(front.page)
            return []
        self._timer += interval
        if self._timer <= ANIMATION_TIME:
            return []
        self._timer = 0
        return self._finish(self._queue.popleft())

    def progress(self) -> float:
        """Eased progress of the running transition, from 0.0 to 1.0."""
        if not self._queue:
            return 0.0
        return ease_out_expo(min(self._timer, ANIMATION_TIME) / ANIMATION_TIME)

    def current_animation(self) -> Optional[Animation]:
        """The transition under way, or None when idle."""
        return self._queue[0] if self._queue else None

    def loaded_pages(self) -> list[str]:
        """Keys of the pages built and kept in memory."""
        return list(self._inner)