"""Animated explosion sprites."""

from __future__ import annotations

from .geometry import Vec3
from .scene import ObjectType, Scene, Sprite

EXPLOSION_ANIME_SPAN = 4
EXPLOSION_DIVI_X = 8
EXPLOSION_DIVI_Y = 1


class Explosion(Sprite):
    """A sprite that plays a strip of frames once and then disappears."""

    TEXTURE = "data/TEXTURE/explosion000.png"
    PRIORITY = 4

    def __init__(self, pos: Vec3 = Vec3(), radius: float = 0.0) -> None:
        super().__init__(pos, radius, radius, priority=self.PRIORITY, kind=ObjectType.EXPLOSION)
        self.counter = 0
        self.pattern = 0
        self.set_tex_uv(EXPLOSION_DIVI_X, EXPLOSION_DIVI_Y)

    @staticmethod
    def create(scene: Scene, pos: Vec3, radius: float) -> Explosion:
        """Add an explosion to the scene."""
        explosion = Explosion(pos, radius)
        explosion.texture = Explosion.TEXTURE
        scene.add(explosion)
        return explosion

    def update(self) -> None:
        """Advance the animation by one frame."""
        self.animate(EXPLOSION_DIVI_X, EXPLOSION_DIVI_Y)

    def animate(self, divi_x: int, divi_y: int) -> None:
        """Step through a divi_x by divi_y sheet; release after the last cell."""
        if divi_x <= 0 or divi_y <= 0:
            raise ValueError(f"animation divisions must be positive, got {divi_x}x{divi_y}")
        self.counter += 1
        if (self.counter + 1) % EXPLOSION_ANIME_SPAN != 0:
            return
        self.counter = 0
        self.pattern = (self.pattern + 1) % divi_x * divi_y

        u = 1.0 / divi_x
        v = 1.0 / divi_y
        column = self.pattern
        row = self.pattern // divi_x
        self.tex_coords = (
            (u * column, v * row),
            (u * (column + 1), v * row),
            (u * column, v * (row + 1)),
            (u * (column + 1), v * (row + 1)),
        )
        if self.pattern >= divi_x * divi_y - 1:
            self.release()