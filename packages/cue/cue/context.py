"""Presentation context shared by the stages and the frame clock."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from cue_tween import TweenScheduler

from cue.clock import RealTime
from cue.config import PresentationConfig
from cue.types import (
    AssetLoader,
    Camera,
    Overlay,
    Renderable,
    Renderer,
    SceneGraph,
    TextSink,
    TimeSource,
)


@dataclass(eq=False)
class Presentation:
    """Every reference a stage or the frame clock touches.

    Built once at startup and passed by reference; stages never reach for
    module-level state. ``subject`` stays ``None`` until the presenter has
    loaded it (or its fallback).
    """

    scene: SceneGraph
    camera: Camera
    renderer: Renderer
    loader: AssetLoader
    sinks: Sequence[TextSink]
    text_area: Overlay
    caption: Overlay
    card: Overlay
    config: PresentationConfig = field(default_factory=PresentationConfig)
    time: TimeSource = field(default_factory=RealTime)
    tweens: TweenScheduler = field(init=False)
    subject: Renderable | None = None

    def __post_init__(self) -> None:
        if len(self.sinks) < 4:
            raise ValueError(f"need 4 text sinks, got {len(self.sinks)}")
        self.tweens = TweenScheduler(self.time.now)

    async def sleep(self, ms: float) -> None:
        await self.time.sleep(ms)
