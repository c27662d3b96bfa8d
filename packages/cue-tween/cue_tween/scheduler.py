"""Scheduler that advances every in-flight tween once per frame."""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from cue_tween.components import TweenTask, read_field
from cue_tween.easing import EASINGS

logger = logging.getLogger(__name__)

Easing = Callable[[float], float]


class TweenScheduler:
    """Holds the active tween set.

    ``now`` returns the current time in milliseconds and stamps each task's
    start at submission. ``tick`` is driven by the frame clock; it never
    submits new work, so the active set is only mutated by ``submit`` and by
    completion inside ``tick``.
    """

    def __init__(self, now: Callable[[], float]) -> None:
        self._now = now
        self._active: list[TweenTask] = []

    @property
    def active(self) -> tuple[TweenTask, ...]:
        return tuple(self._active)

    def __len__(self) -> int:
        return len(self._active)

    def submit(
        self,
        target: Any,
        to_values: Mapping[str, float],
        duration_ms: float,
        easing: str | Easing = "linear",
        *,
        on_complete: Callable[[TweenTask], None] | None = None,
    ) -> TweenTask:
        """Register a tween and return its handle without waiting on it."""
        easing_fn = EASINGS[easing] if isinstance(easing, str) else easing
        task = TweenTask(
            target=target,
            to_values={k: float(v) for k, v in to_values.items()},
            start_values={k: read_field(target, k) for k in to_values},
            start=self._now(),
            duration=float(duration_ms),
            easing=easing_fn,
            on_complete=on_complete,
        )
        self._active.append(task)
        logger.debug(
            "tween submitted: %s over %.0fms", sorted(task.to_values), task.duration
        )
        return task

    def tick(self, now: float) -> None:
        for task in list(self._active):
            if task.apply(now):
                self._active.remove(task)
                if task.on_complete is not None:
                    task.on_complete(task)
