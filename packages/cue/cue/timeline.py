"""Timeline runner: strictly sequential stages with a settle delay after each."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence

from cue.types import Stage, TimelineError, TimeSource

if TYPE_CHECKING:
    from cue.context import Presentation

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    SETTLING = "settling"
    DONE = "done"


@dataclass(frozen=True)
class TimelineEntry:
    name: str
    stage: Stage
    delay_ms: float


TransitionFn = Callable[["Timeline", Phase, Phase], None]


class Timeline:
    """Runs entries one at a time: stage, then its settle delay, then the next.

    ``cursor`` points at the entry being run or settled. It only advances
    after both the stage and its delay have finished, and never moves back.
    ``DONE`` is terminal; a finished or running timeline cannot be re-run.
    """

    def __init__(
        self,
        entries: Sequence[TimelineEntry],
        time: TimeSource,
        on_transition: TransitionFn | None = None,
    ) -> None:
        self._entries = tuple(entries)
        self._time = time
        self._on_transition = on_transition
        self._phase = Phase.IDLE
        self._cursor = 0

    @property
    def entries(self) -> tuple[TimelineEntry, ...]:
        return self._entries

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> TimelineEntry | None:
        if self._cursor < len(self._entries) and self._phase is not Phase.DONE:
            return self._entries[self._cursor]
        return None

    def _enter(self, phase: Phase) -> None:
        old = self._phase
        self._phase = phase
        logger.debug("timeline %s -> %s (cursor=%d)", old.value, phase.value, self._cursor)
        if self._on_transition is not None:
            self._on_transition(self, old, phase)

    async def run(self, ctx: Presentation) -> None:
        if self._phase is not Phase.IDLE:
            raise TimelineError(f"timeline already {self._phase.value}; it runs once")

        while self._cursor < len(self._entries):
            entry = self._entries[self._cursor]
            self._enter(Phase.RUNNING)
            logger.info("stage %d/%d: %s", self._cursor + 1, len(self._entries), entry.name)
            await entry.stage(ctx)

            self._enter(Phase.SETTLING)
            await self._time.sleep(entry.delay_ms)
            self._cursor += 1

        self._enter(Phase.DONE)
        logger.info("timeline finished")
