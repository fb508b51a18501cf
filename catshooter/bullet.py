"""Bullets that fly left, leave a trail and destroy enemies they touch."""

from __future__ import annotations

from typing import Callable, Optional

from .effects import Effect
from .explosion import Explosion
from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Color, Vec3
from .scene import ObjectType, Scene, Sprite

MAX_BULLET = 128
BULLET_SPEED = 12.0
HIT_SCORE = 5
EXPLOSION_RADIUS = 50.0
TRAIL_RADIUS = 50.0
TRAIL_LIFE = 20
TRAIL_SHRINK = 0.97
TRAIL_COLOR = Color(0.2, 0.5, 1.0, 1.0)


class Bullet(Sprite):
    """A projectile with a limited life."""

    TEXTURE = "data/TEXTURE/fish.png"

    def __init__(self, pos: Vec3 = Vec3(), radius: float = 0.0, life: int = 0) -> None:
        super().__init__(pos, radius, radius, kind=ObjectType.BULLET)
        self.move = Vec3()
        self.life = life
        self.score_listener: Optional[Callable[[int], None]] = None

    @staticmethod
    def create(scene: Scene, pos: Vec3, radius: float, life: int) -> Optional[Bullet]:
        """Add a bullet, or return None if the scene is full."""
        if scene.is_full():
            return None
        bullet = Bullet(pos, radius, life)
        bullet.texture = Bullet.TEXTURE
        scene.add(bullet)
        return bullet

    def _explode(self, scene: Scene) -> None:
        if not scene.is_full():
            Explosion.create(scene, self.pos, EXPLOSION_RADIUS)

    def update(self) -> None:
        """Move, leave a trail, and disappear on a hit, on expiry or off screen."""
        scene = self.scene
        if scene is None:
            return
        self.move = Vec3(-BULLET_SPEED, self.move.y, self.move.z)
        self.pos = self.pos + self.move

        trail = Effect.create(scene, self.pos, Vec3(), TRAIL_RADIUS, TRAIL_LIFE, TRAIL_SHRINK)
        if trail is not None:
            trail.color = TRAIL_COLOR

        self.life -= 1
        if self.collide_enemy(self.pos):
            return
        if self.life <= 0:
            self._explode(scene)
            self.release()
        elif (
            self.pos.x <= 0.0
            or self.pos.x >= SCREEN_WIDTH
            or self.pos.y <= 0.0
            or self.pos.y >= SCREEN_HEIGHT
        ):
            self.release()

    def collide_enemy(self, pos: Vec3) -> bool:
        """Destroy the first enemy whose box holds pos, together with this bullet."""
        scene = self.scene
        if scene is None:
            return False
        for enemy in scene.objects(ObjectType.ENEMY):
            half_w = enemy.width * 0.5
            half_h = enemy.height * 0.5
            if (
                enemy.pos.x - half_w <= pos.x <= enemy.pos.x + half_w
                and enemy.pos.y - half_h <= pos.y <= enemy.pos.y + half_h
            ):
                self._explode(scene)
                if self.score_listener is not None:
                    self.score_listener(HIT_SCORE)
                enemy.release()
                self.release()
                return True
        return False