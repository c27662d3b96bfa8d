"""Presenter: wires subject loading, the frame clock and the timeline."""

from __future__ import annotations

import asyncio
import logging

from cue.assets import load_subject
from cue.clock import FrameClock
from cue.context import Presentation
from cue.stages import default_timeline
from cue.timeline import Timeline

logger = logging.getLogger(__name__)


class Presenter:
    """Plays one presentation from setup to the final beat.

    The frame clock is started before the timeline and keeps running after
    the timeline is done, until ``stop`` is called. If the clock dies, the
    failure is logged when it happens and re-raised by ``play`` once the
    timeline returns.
    """

    def __init__(self, ctx: Presentation, timeline: Timeline | None = None) -> None:
        self._ctx = ctx
        self._timeline = timeline or default_timeline(ctx.config, ctx.time)
        self._clock = FrameClock(ctx)
        self._clock_task: asyncio.Task[None] | None = None

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def clock(self) -> FrameClock:
        return self._clock

    def prepare(self) -> None:
        """Load the subject (or its fallback), hidden, into the scene."""
        ctx = self._ctx
        if ctx.subject is not None:
            return
        subject = load_subject(ctx.loader, ctx.config.subject_url)
        subject.visible = False
        ctx.scene.add(subject)
        ctx.subject = subject

    def _start_clock(self) -> asyncio.Task[None]:
        if self._clock_task is None:
            self._clock_task = asyncio.create_task(self._clock.run())
            self._clock_task.add_done_callback(self._log_clock_failure)
        return self._clock_task

    async def play(self) -> None:
        self.prepare()
        clock_task = self._start_clock()
        await self._timeline.run(self._ctx)
        if clock_task.done() and not clock_task.cancelled():
            clock_task.result()

    async def run_forever(self) -> None:
        await self.play()
        await self._start_clock()

    def _log_clock_failure(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "frame clock failed at frame %d", self._clock.frame_number, exc_info=exc
            )

    def stop(self) -> None:
        logger.debug("stop requested")
        self._clock.stop()
