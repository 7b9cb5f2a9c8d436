"""One- and two-dimensional springs whose state depends only on elapsed time."""

from __future__ import annotations

import math
import sys
import time
from typing import Callable

Clock = Callable[[], float]

_ROUND_MAGIC = 12582912.0


def fast_round(x: float) -> float:
    """Add and remove 1.5 * 2**23, snapping ``x`` to the grid that sum leaves."""
    return (x + _ROUND_MAGIC) - _ROUND_MAGIC


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def _div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


class Spring:
    """A damped one-dimensional spring for animation.

    The position can be computed at any moment from the time elapsed since
    the last change, so the result does not depend on how often it is asked.
    """

    def __init__(self, start_position: float = 0.0, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._start_time = clock()
        self._position = float(start_position)
        self._target = float(start_position)
        self._velocity = 0.0
        self._damper = 0.95
        self._speed = 1.0

    def _elapsed(self) -> float:
        return self._clock() - self._start_time

    def _reset_time(self) -> None:
        self._start_time = self._clock()

    def _position_velocity(self) -> tuple[float, float]:
        x = self._elapsed()
        c0 = self._position - self._target
        speed = self._speed
        damper = self._damper
        if speed == 0:
            return self._position, 0.0
        if damper < 1:
            c = _sqrt(1.0 - damper**2)
            c1 = (self._velocity / speed + damper * c0) / c
            co = math.cos(c * speed * x)
            si = math.sin(c * speed * x)
            e = _exp(damper * speed * x)
            position = self._target + _div(c0 * co + c1 * si, e)
            velocity = _div(
                speed * ((c * c1 - damper * c0) * co - (c * c0 + damper * c1) * si), e
            )
            return position, velocity
        c1 = self._velocity / speed + c0
        e = _exp(speed * x)
        position = self._target + _div(c0 + c1 * speed * x, e)
        velocity = _div(speed * (c1 - c0 - c1 * speed * x), e)
        return position, velocity

    def _refresh(self) -> tuple[float, float]:
        position, velocity = self._position_velocity()
        self._position = position
        self._velocity = velocity
        return position, velocity

    def arrived(self) -> bool:
        """Whether the spring sits on its target with no velocity left."""
        position, velocity = self._position_velocity()
        close = abs(fast_round(position * 10.0) - fast_round(self._target * 10.0))
        return close < sys.float_info.epsilon and fast_round(velocity * 10.0) == 0.0

    def position(self) -> float:
        """The current position."""
        return self._refresh()[0]

    def position_rounded(self) -> float:
        """The current position passed through :func:`fast_round`."""
        return fast_round(self._refresh()[0])

    def velocity(self) -> float:
        """The current velocity."""
        return self._refresh()[1]

    def acceleration(self) -> float:
        """The current acceleration."""
        x = self._elapsed()
        c0 = self._position - x
        speed = self._speed
        damper = self._damper
        if speed == 0:
            return 0.0
        if damper < 1:
            c = _sqrt(1.0 - damper**2)
            c1 = (self._velocity / speed + damper * c0) / c
            cosine = math.cos(c * speed * x)
            numerator = speed**2 * (
                (damper**2 * c0 - 2.0 * c * damper * c1 - c**2 * c0) * cosine
                + (damper * damper * c1 + 2.0 * c * damper * c0 - c**2 * c1) * cosine
            )
            return _div(numerator, _exp(damper * speed * x))
        c1 = self._velocity / speed + c0
        return _div(speed**2 * (c0 - 2.0 * c1 + c1 * speed * x), _exp(speed * x))

    def set_position(self, value: float) -> None:
        """Move the spring to ``value``; it then heads back to its target."""
        _, velocity = self._position_velocity()
        self._position = float(value)
        self._velocity = velocity
        self._reset_time()

    def set_velocity(self, value: float) -> None:
        """Give the spring a new velocity at once."""
        position, _ = self._position_velocity()
        self._position = position
        self._velocity = float(value)
        self._reset_time()

    def with_velocity(self, value: float) -> Spring:
        """Set the velocity and return the spring."""
        self.set_velocity(value)
        return self

    def set_damper(self, value: float) -> None:
        """Set the damping; below 1.0 the spring overshoots, from 1.0 it does not."""
        self._refresh()
        self._damper = float(value)
        self._reset_time()

    def with_damper(self, value: float) -> Spring:
        """Set the damping and return the spring."""
        self.set_damper(value)
        return self

    def set_speed(self, value: float) -> None:
        """Set how fast the spring moves; larger is faster."""
        self._refresh()
        self._speed = float(value)
        self._reset_time()

    def target(self) -> float:
        """The position the spring is heading to."""
        return self._target

    def set_target(self, value: float) -> None:
        """Start moving towards ``value``."""
        self._refresh()
        self._target = float(value)
        self._reset_time()


class Spring2D:
    """A two-dimensional spring made of two one-dimensional springs."""

    def __init__(
        self, start_pos: tuple[float, float] = (0.0, 0.0), clock: Clock = time.monotonic
    ) -> None:
        self._x = Spring(start_pos[0], clock)
        self._y = Spring(start_pos[1], clock)

    def position(self) -> tuple[float, float]:
        """The current position."""
        return self._x.position(), self._y.position()

    def position_rounded(self) -> tuple[float, float]:
        """The current position passed through :func:`fast_round`."""
        return self._x.position_rounded(), self._y.position_rounded()

    def velocity(self) -> tuple[float, float]:
        """The current velocity."""
        return self._x.velocity(), self._y.velocity()

    def damper(self) -> float:
        """The damping of the spring."""
        return self._x._damper

    def speed(self) -> float:
        """The combined speed of both axes."""
        return math.sqrt(self._x._speed**2 + self._y._speed**2)

    def target(self) -> tuple[float, float]:
        """The position the spring is heading to."""
        return self._x.target(), self._y.target()

    def set_position(self, value: tuple[float, float]) -> None:
        """Move the spring to ``value``; it then heads back to its target."""
        self._x._position = float(value[0])
        self._y._position = float(value[1])

    def set_velocity(self, value: tuple[float, float]) -> None:
        """Give the spring a new velocity."""
        self._x._velocity = float(value[0])
        self._y._velocity = float(value[1])

    def set_damper(self, value: float) -> None:
        """Set the damping of both axes."""
        self._x._damper = float(value)
        self._y._damper = float(value)

    def set_speed(self, value: float) -> None:
        """Set the speed of both axes."""
        self._x.set_speed(value)
        self._y.set_speed(value)

    def set_target(self, value: tuple[float, float]) -> None:
        """Start moving towards ``value``."""
        self._x.set_target(value[0])
        self._y.set_target(value[1])

    def arrived(self) -> bool:
        """Whether both axes have settled on their targets."""
        return self._x.arrived() and self._y.arrived()