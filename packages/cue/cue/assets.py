"""Asset loading with fallbacks so a missing file never stalls playback."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cue.scene import Mesh, SceneNode, Texture, Vec3
from cue.types import AssetLoader, AssetNotFound

if TYPE_CHECKING:
    from cue.context import Presentation

logger = logging.getLogger(__name__)

PINK = (255, 192, 214)
YELLOW = (255, 226, 122)
PLATE = (246, 246, 246)
WAX = (255, 255, 255)
FLAME = (255, 166, 0)

CANDLE_COUNT = 6
CANDLE_RING = 0.7

PHOTO_SIZE = (0.9, 0.6)


class DirectoryLoader:
    """Resolves asset URLs as paths relative to ``root``."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def _resolve(self, url: str) -> Path:
        path = self._root / url
        if not path.is_file():
            raise AssetNotFound(url, f"asset not found: {path}")
        return path

    def load_object(self, url: str) -> SceneNode:
        path = self._resolve(url)
        return SceneNode(name=path.stem, mesh=Mesh("model", source=path))

    def load_texture(self, url: str) -> Texture:
        return Texture(self._resolve(url))


def build_fallback_subject() -> SceneNode:
    """Three-layer cake on a plate with a ring of lit candles."""
    group = SceneNode(name="cake")
    layers = [
        (1.4, 0.6, 0.2, PINK),
        (1.15, 0.45, 0.65, YELLOW),
        (0.9, 0.35, 1.0, PINK),
    ]
    for i, (radius, height, y, color) in enumerate(layers):
        group.add(SceneNode(
            name=f"layer{i}",
            mesh=Mesh("cylinder", (radius, height), color),
            position=Vec3(0.0, y, 0.0),
        ))

    group.add(SceneNode(
        name="plate",
        mesh=Mesh("cylinder", (2.2, 0.12), PLATE),
        position=Vec3(0.0, -0.02, 0.0),
    ))

    for i in range(CANDLE_COUNT):
        angle = i / CANDLE_COUNT * math.pi * 2
        x = math.cos(angle) * CANDLE_RING
        z = math.sin(angle) * CANDLE_RING
        group.add(SceneNode(
            name=f"candle{i}",
            mesh=Mesh("cylinder", (0.03, 0.45), WAX),
            position=Vec3(x, 1.28, z),
        ))
        group.add(SceneNode(
            name=f"flame{i}",
            mesh=Mesh("sphere", (0.07,), FLAME),
            position=Vec3(x, 1.52, z),
        ))
    return group


def load_subject(loader: AssetLoader, url: str) -> Any:
    """Load the primary object, substituting the built-in cake on any failure."""
    try:
        obj = loader.load_object(url)
    except AssetNotFound as exc:
        logger.warning("%s; using fallback subject", exc)
        return build_fallback_subject()
    except Exception as exc:
        logger.warning("failed to load %s; using fallback subject", url, exc_info=exc)
        return build_fallback_subject()
    obj.scale.set(1.2, 1.2, 1.2)
    obj.position.y = 0.1
    return obj


def apply_background(ctx: Presentation) -> bool:
    """Swap the scene background. A missing texture leaves it unchanged."""
    url = ctx.config.background_url
    try:
        texture = ctx.loader.load_texture(url)
    except AssetNotFound:
        logger.warning("background missing: %s", url)
        return False
    ctx.scene.set_background(texture)
    return True


def spawn_photos(ctx: Presentation) -> list[SceneNode]:
    """Add one framed photo plane per URL; each missing photo is skipped."""
    spawned = []
    for i, url in enumerate(ctx.config.photo_urls):
        try:
            texture = ctx.loader.load_texture(url)
        except AssetNotFound:
            logger.warning("photo missing, omitted: %s", url)
            continue
        plane = SceneNode(
            name=f"photo{i}",
            mesh=Mesh("plane", PHOTO_SIZE, texture=texture),
            position=Vec3(-2.0 + i * 2.0, 0.1, -1.8 + (i % 2) * 0.2),
            rotation=Vec3(0.0, 0.05 * (i - 1), 0.0),
        )
        ctx.scene.add(plane)
        spawned.append(plane)
    return spawned
