"""Time sources and the per-frame clock."""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import time
from typing import TYPE_CHECKING

from cue.types import TimelineError

if TYPE_CHECKING:
    from cue.context import Presentation

logger = logging.getLogger(__name__)

# Loop iterations granted to woken tasks before the next sleeper is released.
_SETTLE_ROUNDS = 8


class RealTime:
    """Monotonic wall clock in milliseconds, paired with asyncio.sleep."""

    def now(self) -> float:
        return time.monotonic() * 1000.0

    async def sleep(self, ms: float) -> None:
        await asyncio.sleep(max(ms, 0.0) / 1000.0)


class SteppedTime:
    """Virtual clock that only moves when advanced.

    Sleepers park on futures ordered by wake time. ``advance`` releases them
    one at a time in that order, setting ``now`` to each wake time first, so
    playback is deterministic and independent of wall-clock speed.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._sleepers: list[tuple[float, int, asyncio.Future[None]]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._sleepers)

    async def sleep(self, ms: float) -> None:
        fut: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        heapq.heappush(self._sleepers, (self._now + max(ms, 0.0), next(self._seq), fut))
        await fut

    async def advance(self, ms: float) -> None:
        await self.advance_to(self._now + ms)

    async def advance_to(self, target: float) -> None:
        await _settle()
        while self._sleepers and self._sleepers[0][0] <= target:
            wake, _, fut = heapq.heappop(self._sleepers)
            self._now = max(self._now, wake)
            if not fut.done():
                fut.set_result(None)
            await _settle()
        self._now = max(self._now, target)

    async def drive(self, task: asyncio.Future) -> None:
        """Advance from wake to wake until ``task`` finishes."""
        await _settle()
        while not task.done():
            if not self._sleepers:
                raise TimelineError("task stalled with no pending sleepers")
            await self.advance_to(self._sleepers[0][0])
        task.result()


async def _settle() -> None:
    for _ in range(_SETTLE_ROUNDS):
        await asyncio.sleep(0)


class FrameClock:
    """Spins the subject, ticks tweens, and draws, once per frame.

    Per-frame order is fixed: rotation and tween writes land before the draw
    call reads object state.
    """

    def __init__(self, ctx: Presentation, fps: float | None = None) -> None:
        fps = ctx.config.fps if fps is None else fps
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._ctx = ctx
        self._fps = fps
        self._interval = 1000.0 / fps
        self._frame_number = 0
        self._stop_requested = False

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def stop(self) -> None:
        self._stop_requested = True

    def tick_frame(self, now: float) -> None:
        ctx = self._ctx
        self._frame_number += 1
        subject = ctx.subject
        if subject is not None and subject.visible:
            subject.rotation.y += ctx.config.spin_per_frame
        ctx.tweens.tick(now)
        ctx.renderer.draw(ctx.scene, ctx.camera)

    async def run(self) -> None:
        self._stop_requested = False
        clock = self._ctx.time
        logger.debug("frame clock started at %.1f fps", self._fps)
        while not self._stop_requested:
            start = clock.now()
            self.tick_frame(start)
            elapsed = clock.now() - start
            await clock.sleep(max(self._interval - elapsed, 0.0))
        logger.debug("frame clock stopped after %d frames", self._frame_number)
