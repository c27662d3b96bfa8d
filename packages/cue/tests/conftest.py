"""Shared fixtures: in-memory collaborators and a stepped clock."""

import asyncio
from dataclasses import dataclass

import pytest

from cue import (
    AssetNotFound,
    PerspectiveCamera,
    Presentation,
    PresentationConfig,
    Scene,
    SceneNode,
    SteppedTime,
    Texture,
)


class Sink:
    """Text sink that keeps every displayed state."""

    def __init__(self) -> None:
        self._text = ""
        self.history: list[str] = []

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self.history.append(value)


@dataclass
class Panel:
    """Overlay stand-in for the text area, caption and card."""

    visible: bool = False
    opacity: float = 1.0
    scale: float = 1.0


class RecordingRenderer:
    """Records what each draw call would have seen."""

    def __init__(self) -> None:
        self.frames: list[dict] = []
        self.subject = None

    def draw(self, scene, camera) -> None:
        subject = self.subject
        self.frames.append({
            "camera": camera.position.as_tuple(),
            "rotation_y": subject.rotation.y if subject is not None else None,
            "scale_x": subject.scale.x if subject is not None else None,
        })


class MemoryLoader:
    """Loader backed by dicts; anything absent raises AssetNotFound."""

    def __init__(self, objects=None, textures=None) -> None:
        self.objects = dict(objects or {})
        self.textures = dict(textures or {})
        self.requests: list[str] = []

    def load_object(self, url):
        self.requests.append(url)
        if url not in self.objects:
            raise AssetNotFound(url)
        return self.objects[url]

    def load_texture(self, url):
        self.requests.append(url)
        if url not in self.textures:
            raise AssetNotFound(url)
        return self.textures[url]


@pytest.fixture
def clock():
    return SteppedTime()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def make_loader():
    return MemoryLoader


@pytest.fixture
def loader():
    return MemoryLoader()


@pytest.fixture
def full_loader():
    config = PresentationConfig()
    textures = {url: Texture(url) for url in (config.background_url, *config.photo_urls)}
    return MemoryLoader({config.subject_url: SceneNode("model")}, textures)


@pytest.fixture
def make_ctx(clock, renderer):
    def _make(loader=None, config=None):
        return Presentation(
            scene=Scene(),
            camera=PerspectiveCamera(),
            renderer=renderer,
            loader=loader if loader is not None else MemoryLoader(),
            sinks=[Sink() for _ in range(4)],
            text_area=Panel(visible=True),
            caption=Panel(opacity=0.0),
            card=Panel(opacity=0.0),
            config=config or PresentationConfig(),
            time=clock,
        )

    return _make


@pytest.fixture
def ctx(make_ctx, loader):
    return make_ctx(loader)


@pytest.fixture
def drive(clock):
    """Run a coroutine to completion on a fresh loop under stepped time."""

    def _drive(coro):
        async def main():
            task = asyncio.ensure_future(coro)
            await clock.drive(task)
            return task.result()

        return asyncio.run(main())

    return _drive
