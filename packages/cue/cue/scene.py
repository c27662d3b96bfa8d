"""Minimal scene graph: vectors, nodes, and an in-memory scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = x, y, z

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Mesh:
    """Geometry description handed to the renderer.

    ``kind`` is one of ``"cylinder"``, ``"sphere"``, ``"plane"`` or
    ``"model"``; ``size`` holds the kind-specific dimensions.
    """

    kind: str
    size: tuple[float, ...] = ()
    color: tuple[int, int, int] = (255, 255, 255)
    source: Path | None = None
    texture: Any = None


@dataclass(frozen=True)
class Texture:
    source: Path


@dataclass(eq=False)
class SceneNode:
    name: str
    mesh: Mesh | None = None
    position: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    rotation: Vec3 = field(default_factory=Vec3)
    visible: bool = True
    children: list[SceneNode] = field(default_factory=list)

    def add(self, child: SceneNode) -> SceneNode:
        self.children.append(child)
        return child

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


class Scene:
    """Flat list of top-level objects plus an optional background texture."""

    def __init__(self) -> None:
        self.objects: list[Any] = []
        self.background: Any = None

    def add(self, obj: Any) -> None:
        self.objects.append(obj)

    def set_background(self, texture: Any) -> None:
        self.background = texture


@dataclass(eq=False)
class PerspectiveCamera:
    fov: float = 35.0
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 2.2, 7.0))
