"""Easing curves; inputs and outputs lie in [0.0, 1.0]."""

from __future__ import annotations

import math


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def ease_in_circ(x: float) -> float:
    """Circular ease-in."""
    return 1.0 - _sqrt(1.0 - x**2)


def ease_out_circ(x: float) -> float:
    """Circular ease-out."""
    return _sqrt(1.0 - (x - 1.0) ** 2)


def ease_inout_circ(x: float) -> float:
    """Circular ease-in for the first half, then the second half."""
    if x < 0.5:
        return ease_in_circ(x * 2.0) / 2.0
    return ease_out_circ((0.5 - x) * 2.0) / 2.0 + 0.5


def ease_in_expo(x: float) -> float:
    """Exponential ease-in."""
    if x == 0:
        return 0.0
    return 2.0 ** (10.0 * x - 10.0)


def ease_out_expo(x: float) -> float:
    """Exponential ease-out."""
    if x >= 1:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * x)