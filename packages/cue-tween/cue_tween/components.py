"""TweenTask: one in-flight interpolation of numeric fields on a target."""
from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any, Callable


def read_field(target: Any, key: str) -> float:
    if isinstance(target, MutableMapping):
        return float(target[key])
    return float(getattr(target, key))


def write_field(target: Any, key: str, value: float) -> None:
    if isinstance(target, MutableMapping):
        target[key] = value
    else:
        setattr(target, key, value)


@dataclass(eq=False)
class TweenTask:
    """Interpolates ``target`` from ``start_values`` to ``to_values``.

    ``start_values`` is captured once by the scheduler at submission and is
    never re-read from the target while the task is in flight.
    """

    target: Any
    to_values: dict[str, float]
    start_values: dict[str, float]
    start: float
    duration: float
    easing: Callable[[float], float]
    on_complete: Callable[[TweenTask], None] | None = None
    done: bool = field(default=False, init=False)

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(max((now - self.start) / self.duration, 0.0), 1.0)

    def apply(self, now: float) -> bool:
        """Write interpolated values for ``now``. Returns True once finished."""
        t = self.progress(now)
        if t >= 1.0:
            for key, end in self.to_values.items():
                write_field(self.target, key, end)
            self.done = True
            return True

        eased = self.easing(t)
        for key, end in self.to_values.items():
            start = self.start_values[key]
            write_field(self.target, key, start + (end - start) * eased)
        return False
