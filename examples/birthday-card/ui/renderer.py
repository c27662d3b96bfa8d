"""Pygame renderer: projects the scene graph and paints the overlays."""
from __future__ import annotations

import math
from typing import Callable, Sequence

import pygame

from cue import SceneNode, Vec3

from ui.constants import (
    BG_COLOR,
    BG_PHOTO,
    CAPTION_COLOR,
    CAPTION_TEXT,
    CARD_BG,
    CARD_BORDER,
    CARD_H,
    CARD_TEXT,
    CARD_W,
    FOCAL,
    HORIZON_Y,
    LINE_H,
    MODEL_COLOR,
    PHOTO_COLOR,
    SCREEN_H,
    SCREEN_W,
    TEXT_COLOR,
    TEXT_X,
    TEXT_Y,
)
from ui.overlays import Panel, TextLine


def _rotate_y(x: float, z: float, angle: float) -> tuple[float, float]:
    c, s = math.cos(angle), math.sin(angle)
    return x * c + z * s, -x * s + z * c


def _project(p: tuple[float, float, float], camera: Vec3) -> tuple[float, float, float] | None:
    """World point to (screen x, screen y, pixels per unit), or None if behind."""
    depth = camera.z - p[2]
    if depth <= 0.1:
        return None
    k = FOCAL / depth
    return SCREEN_W / 2 + (p[0] - camera.x) * k, HORIZON_Y - (p[1] - camera.y) * k, k


class PygameRenderer:
    """Implements ``draw(scene, camera)`` on a pygame surface.

    Pumps the event queue every frame; a window close or Esc calls
    ``on_quit``.
    """

    def __init__(
        self,
        screen: pygame.Surface,
        font: pygame.font.Font,
        lines: Sequence[TextLine],
        text_area: Panel,
        caption: Panel,
        card: Panel,
    ) -> None:
        self._screen = screen
        self._font = font
        self._lines = lines
        self._text_area = text_area
        self._caption = caption
        self._card = card
        self.on_quit: Callable[[], None] | None = None

    def draw(self, scene, camera) -> None:
        for event in pygame.event.get():
            quit_key = event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            if (event.type == pygame.QUIT or quit_key) and self.on_quit is not None:
                self.on_quit()

        self._screen.fill(BG_PHOTO if scene.background is not None else BG_COLOR)
        for obj in scene.objects:
            if obj.visible:
                self._draw_node(obj, camera.position, (0.0, 0.0, 0.0), 1.0, 0.0)

        self._draw_text_area()
        self._draw_caption()
        self._draw_card()
        pygame.display.flip()

    def _draw_node(
        self,
        node: SceneNode,
        camera: Vec3,
        origin: tuple[float, float, float],
        parent_scale: float,
        parent_yaw: float,
    ) -> None:
        lx, lz = _rotate_y(node.position.x, node.position.z, parent_yaw)
        world = (
            origin[0] + lx * parent_scale,
            origin[1] + node.position.y * parent_scale,
            origin[2] + lz * parent_scale,
        )
        scale = parent_scale * node.scale.x
        yaw = parent_yaw + node.rotation.y

        if node.mesh is not None:
            self._draw_mesh(node, world, scale, camera)
        for child in node.children:
            self._draw_node(child, camera, world, scale, yaw)

    def _draw_mesh(self, node: SceneNode, world, scale: float, camera: Vec3) -> None:
        projected = _project(world, camera)
        if projected is None:
            return
        sx, sy, k = projected
        mesh = node.mesh
        if mesh.kind == "cylinder":
            radius, height = mesh.size
            w = max(int(radius * 2 * scale * k), 1)
            h = max(int(height * scale * k), 1)
            pygame.draw.rect(self._screen, mesh.color, (sx - w / 2, sy - h / 2, w, h))
            pygame.draw.ellipse(self._screen, mesh.color, (sx - w / 2, sy - h / 2 - w / 8, w, w / 4))
        elif mesh.kind == "sphere":
            pygame.draw.circle(self._screen, mesh.color, (sx, sy), max(int(mesh.size[0] * scale * k), 1))
        elif mesh.kind == "plane":
            w, h = (int(d * scale * k) for d in mesh.size)
            pygame.draw.rect(self._screen, PHOTO_COLOR, (sx - w / 2, sy - h / 2, w, h))
        else:
            pygame.draw.circle(self._screen, MODEL_COLOR, (sx, sy), max(int(scale * k), 1))

    def _blit_text(self, text: str, color, pos, opacity: float) -> None:
        surf = self._font.render(text, True, color)
        surf.set_alpha(int(max(0.0, min(opacity, 1.0)) * 255))
        self._screen.blit(surf, pos)

    def _draw_text_area(self) -> None:
        area = self._text_area
        if not area.visible or area.opacity <= 0:
            return
        for i, line in enumerate(self._lines):
            self._blit_text(line.text, TEXT_COLOR, (TEXT_X, TEXT_Y + i * LINE_H), area.opacity)

    def _draw_caption(self) -> None:
        caption = self._caption
        if not caption.visible:
            return
        w, _ = self._font.size(CAPTION_TEXT)
        self._blit_text(CAPTION_TEXT, CAPTION_COLOR, ((SCREEN_W - w) / 2, 40), caption.opacity)

    def _draw_card(self) -> None:
        card = self._card
        if not card.visible or card.opacity <= 0:
            return
        w, h = int(CARD_W * card.scale), int(CARD_H * card.scale)
        panel = pygame.Surface((w, h), pygame.SRCALPHA)
        alpha = int(min(card.opacity, 1.0) * 255)
        panel.fill((*CARD_BG, alpha))
        pygame.draw.rect(panel, (*CARD_BORDER, alpha), panel.get_rect(), 3)
        self._screen.blit(panel, ((SCREEN_W - w) / 2, (SCREEN_H - h) / 2))
        tw, th = self._font.size(CARD_TEXT)
        self._blit_text(CARD_TEXT, TEXT_COLOR, ((SCREEN_W - tw) / 2, (SCREEN_H - th) / 2), card.opacity)
