"""Shared protocols, aliases and exceptions for the presentation core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Protocol, runtime_checkable


class AssetNotFound(LookupError):
    """Raised by an asset loader when the requested asset is unavailable."""

    def __init__(self, url: str, message: str | None = None) -> None:
        self.url = url
        super().__init__(message or f"asset not found: {url}")


class TimelineError(RuntimeError):
    """Raised when a timeline is re-run, or a driven task can make no progress."""


class ConfigError(ValueError):
    """Raised when presentation configuration cannot be built from input data."""


@runtime_checkable
class TextSink(Protocol):
    text: str


@runtime_checkable
class Overlay(Protocol):
    """UI element with visibility toggling and numeric style state."""

    visible: bool
    opacity: float
    scale: float


@runtime_checkable
class Vector(Protocol):
    x: float
    y: float
    z: float

    def set(self, x: float, y: float, z: float) -> None: ...


@runtime_checkable
class Renderable(Protocol):
    visible: bool
    position: Vector
    scale: Vector
    rotation: Vector


class Camera(Protocol):
    position: Vector


class SceneGraph(Protocol):
    def add(self, obj: Any) -> None: ...

    def set_background(self, texture: Any) -> None: ...


class Renderer(Protocol):
    def draw(self, scene: Any, camera: Any) -> None: ...


@runtime_checkable
class AssetLoader(Protocol):
    """Loads scene objects and textures by URL.

    Both methods raise ``AssetNotFound`` when the asset is missing. The primary
    subject falls back to the built-in cake on any loader exception.
    """

    def load_object(self, url: str) -> Any: ...

    def load_texture(self, url: str) -> Any: ...


class TimeSource(Protocol):
    """Millisecond clock plus the matching cooperative sleep."""

    def now(self) -> float: ...

    async def sleep(self, ms: float) -> None: ...


if TYPE_CHECKING:
    from cue.context import Presentation

Stage = Callable[["Presentation"], Awaitable[None]]
