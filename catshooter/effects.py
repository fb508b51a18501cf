"""Short-lived glow effects in screen space and in the 3D world."""

from __future__ import annotations

from typing import Optional

from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Vec3
from .scene import DEFAULT_PRIORITY, Scene, Sprite


def _on_screen(pos: Vec3) -> bool:
    return 0.0 < pos.x < SCREEN_WIDTH and 0.0 < pos.y < SCREEN_HEIGHT


class Effect(Sprite):
    """A moving glow that shrinks and disappears when its life runs out."""

    TEXTURE = "data/TEXTURE/effect000.jpg"
    PRIORITY = 2

    def __init__(
        self,
        pos: Vec3 = Vec3(),
        move: Vec3 = Vec3(),
        radius: float = 0.0,
        life: int = 0,
        shrink: float = 0.0,
    ) -> None:
        super().__init__(pos, radius, radius, priority=self.PRIORITY)
        self.move = move
        self.life = life
        self.shrink = shrink

    @staticmethod
    def create(
        scene: Scene, pos: Vec3, move: Vec3, radius: float, life: int, shrink: float
    ) -> Optional[Effect]:
        """Add an effect, or return None if the scene is full or life is not positive."""
        if scene.is_full() or life <= 0:
            return None
        effect = Effect(pos, move, radius, life, shrink)
        effect.texture = Effect.TEXTURE
        scene.add(effect)
        return effect

    def update(self) -> None:
        """Age, and either disappear or shrink and move."""
        self.life -= 1
        if self.life <= 0 or not _on_screen(self.pos):
            self.release()
            return
        if self.shrink != 0:
            radius = self.width * self.shrink
            self.set_size(radius, radius)
        self.pos = self.pos + self.move


class Effect3D(Sprite):
    """A camera-facing glow placed in the 3D world."""

    TEXTURE = "effect"

    def __init__(
        self,
        pos: Vec3 = Vec3(),
        move: Vec3 = Vec3(),
        radius: float = 0.0,
        life: int = 0,
        shrink: float = 0.0,
    ) -> None:
        super().__init__(pos, radius, radius, priority=DEFAULT_PRIORITY)
        self.move = move
        self.life = life
        self.shrink = shrink
        self.origin = Vec3(radius * 0.5, radius * 0.5, 0.0)

    @staticmethod
    def create(
        scene: Scene, pos: Vec3, move: Vec3, radius: float, life: int, shrink: float
    ) -> Effect3D:
        """Add a 3D effect to the scene."""
        effect = Effect3D(pos, move, radius, life, shrink)
        effect.texture = Effect3D.TEXTURE
        scene.add(effect)
        return effect

    def update(self) -> None:
        """Age, and either disappear or shrink and move."""
        self.life -= 1
        if self.life <= 0:
            self.release()
            return
        if self.shrink != 0.0:
            radius = self.width * self.shrink
            self.set_size(radius, radius)
        self.pos = self.pos + self.move