"""Scrolling background layers."""

from __future__ import annotations

from typing import Tuple

from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Vec3
from .scene import ObjectType, Scene, SceneObject, Sprite

MAX_BG = 3
SCROLL_SPEED = 0.001

LAYER_TEXTURES = (
    "data/TEXTURE/BG001.jpg",
    "data/TEXTURE/bg101.png",
    "data/TEXTURE/bg102.png",
)


class Background(Sprite):
    """A full-screen image whose texture scrolls horizontally."""

    TEXTURE = "data/BG.jpg"
    PRIORITY = 2

    def __init__(
        self, pos: Vec3 = Vec3(), width: float = 0.0, height: float = 0.0, scroll: float = 0.0
    ) -> None:
        super().__init__(pos, width, height, priority=self.PRIORITY, kind=ObjectType.BG)
        self.scroll = scroll
        self.offset = 0.0

    @staticmethod
    def create(
        scene: Scene, pos: Vec3, width: float, height: float, scroll: float
    ) -> Background:
        """Add a scrolling background to the scene."""
        background = Background(pos, width, height, scroll)
        background.texture = Background.TEXTURE
        scene.add(background)
        return background

    def update(self) -> None:
        """Shift the texture by the scroll speed."""
        if self.scroll == 0:
            return
        self.offset -= self.scroll
        m = self.offset
        self.tex_coords = ((m, 0.0), (1.0 + m, 0.0), (m, 1.0), (1.0 + m, 1.0))
        if self.offset > 1.0:
            self.offset -= 1.0


class BackgroundLayers(SceneObject):
    """Owns the parallax layers, each scrolling faster than the one before."""

    PRIORITY = 1

    def __init__(self) -> None:
        super().__init__(priority=self.PRIORITY, kind=ObjectType.BG)
        self.layers: Tuple[Background, ...] = ()

    @staticmethod
    def create(scene: Scene, pos: Vec3) -> BackgroundLayers:
        """Add the layer manager and its full-screen layers to the scene."""
        manager = BackgroundLayers()
        scene.add(manager)
        layers = []
        for index, texture in enumerate(LAYER_TEXTURES[:MAX_BG]):
            layer = Background.create(
                scene, pos, SCREEN_WIDTH, SCREEN_HEIGHT, SCROLL_SPEED * (index + 1)
            )
            layer.texture = texture
            layers.append(layer)
        manager.layers = tuple(layers)
        return manager