"""Stage routines: one visual beat each, composed by the timeline.

Every stage takes the shared ``Presentation`` and returns once the effects it
waits on have finished. Tweens that are meant to keep moving into later
stages (the subject pop, the caption fade, the card transition, the subject
drop) are submitted and left to the frame clock.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cue_typewriter import type_text

from cue.assets import apply_background, spawn_photos
from cue.config import PresentationConfig
from cue.timeline import Timeline, TimelineEntry, TransitionFn
from cue.types import TimeSource

if TYPE_CHECKING:
    from cue.context import Presentation

logger = logging.getLogger(__name__)


async def show_name(ctx: Presentation) -> None:
    cfg = ctx.config
    await type_text(ctx.sinks[0], cfg.name_text, cfg.name_char_ms, ctx.sleep)


async def show_greeting(ctx: Presentation) -> None:
    cfg = ctx.config
    await type_text(ctx.sinks[1], cfg.greeting_text, cfg.greeting_char_ms, ctx.sleep)


async def show_message(ctx: Presentation) -> None:
    """Type a wrong prefix, pause, wipe the line and type it properly."""
    cfg = ctx.config
    sink = ctx.sinks[2]
    await type_text(sink, cfg.message_typo, cfg.typo_char_ms, ctx.sleep)
    await ctx.sleep(cfg.typo_pause_ms)
    sink.text = ""
    await type_text(sink, cfg.message_text, cfg.message_char_ms, ctx.sleep)


async def hold(ctx: Presentation) -> None:
    """Empty beat; the pause comes entirely from its settle delay."""


async def show_decoration(ctx: Presentation) -> None:
    cfg = ctx.config
    await type_text(ctx.sinks[3], cfg.decoration_text, cfg.decoration_char_ms, ctx.sleep)


async def reveal_subject(ctx: Presentation) -> None:
    cfg = ctx.config
    ctx.tweens.submit(ctx.text_area, {"opacity": 0.0}, cfg.text_fade_ms)
    await ctx.sleep(cfg.text_fade_wait_ms)

    subject = ctx.subject
    if subject is None:
        logger.warning("no subject loaded; skipping reveal")
        return
    subject.visible = True
    subject.position.set(*cfg.subject_position)
    s = cfg.subject_pop_from
    subject.scale.set(s, s, s)
    ctx.tweens.submit(
        subject.scale, {"x": 1.0, "y": 1.0, "z": 1.0}, cfg.subject_pop_ms, "back_out"
    )


async def reveal_scene(ctx: Presentation) -> None:
    cfg = ctx.config
    apply_background(ctx)
    photos = spawn_photos(ctx)
    logger.debug("spawned %d of %d photos", len(photos), len(cfg.photo_urls))

    ctx.caption.visible = True
    ctx.caption.opacity = 0.0
    await ctx.sleep(cfg.caption_delay_ms)
    ctx.tweens.submit(ctx.caption, {"opacity": 1.0}, cfg.caption_fade_ms)

    x, y, z = cfg.camera_target
    ctx.tweens.submit(
        ctx.camera.position, {"x": x, "y": y, "z": z}, cfg.camera_pan_ms, "cubic_out"
    )
    await ctx.sleep(cfg.camera_pan_ms)


async def zoom_card(ctx: Presentation) -> None:
    cfg = ctx.config
    card = ctx.card
    card.visible = True
    card.opacity = 0.0
    card.scale = cfg.card_from_scale
    await ctx.sleep(cfg.card_delay_ms)
    ctx.tweens.submit(card, {"opacity": 1.0}, cfg.card_fade_ms)
    ctx.tweens.submit(card, {"scale": cfg.card_to_scale}, cfg.card_scale_ms, "cubic_out")

    if ctx.subject is not None:
        ctx.tweens.submit(ctx.subject.position, {"y": cfg.subject_drop_y}, cfg.subject_drop_ms)
    await ctx.sleep(cfg.card_hold_ms)


STAGES = {
    "name": show_name,
    "greeting": show_greeting,
    "message": show_message,
    "hold": hold,
    "decoration": show_decoration,
    "reveal_subject": reveal_subject,
    "reveal_scene": reveal_scene,
    "card_zoom": zoom_card,
}


def default_entries(config: PresentationConfig) -> list[TimelineEntry]:
    return [
        TimelineEntry(name, stage, config.settle_ms[name])
        for name, stage in STAGES.items()
    ]


def default_timeline(
    config: PresentationConfig,
    time: TimeSource,
    on_transition: TransitionFn | None = None,
) -> Timeline:
    """The fixed eight-beat presentation sequence."""
    return Timeline(default_entries(config), time, on_transition)
