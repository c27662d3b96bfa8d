"""Easing functions for tween interpolation."""
from __future__ import annotations

from typing import Callable

BACK_OVERSHOOT = 1.70158


def linear(t: float) -> float:
    return t


def cubic_out(t: float) -> float:
    u = t - 1
    return u * u * u + 1


def back_out(t: float) -> float:
    """Decelerate past the target, then settle back onto it."""
    s = BACK_OVERSHOOT
    u = t - 1
    return 1 + u * u * ((s + 1) * u + s)


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "cubic_out": cubic_out,
    "back_out": back_out,
}
