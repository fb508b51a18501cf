"""Scene objects, sprites, the prioritised object registry and enemies."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .geometry import Color, Vec3

DEFAULT_CAPACITY = 1024
PRIORITY_LEVELS = 8
DEFAULT_PRIORITY = 3

TexCoords = Tuple[Tuple[float, float], ...]
FULL_UV: TexCoords = ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0))


class ObjectType(Enum):
    """What kind of thing a scene object is."""

    NONE = 0
    BG = 1
    ENEMY = 2
    BULLET = 3
    EXPLOSION = 4


class SceneFullError(Exception):
    """Raised when an object is added to a scene that has no room left."""


class SceneObject:
    """Something that lives in a scene and is updated once per frame."""

    def __init__(
        self,
        priority: int = DEFAULT_PRIORITY,
        kind: ObjectType = ObjectType.NONE,
        pos: Vec3 = Vec3(),
        width: float = 0.0,
        height: float = 0.0,
    ) -> None:
        self.priority = priority
        self.kind = kind
        self.pos = pos
        self.width = width
        self.height = height
        self.scene: Optional[Scene] = None
        self.age = 0

    @property
    def alive(self) -> bool:
        return self.scene is not None

    def update(self) -> None:
        """Advance one frame, counting the frames the object has lived."""
        self.age += 1

    def release(self) -> None:
        """Remove the object from its scene; releasing twice is harmless."""
        if self.scene is not None:
            self.scene._discard(self)
            self.scene = None


class Sprite(SceneObject):
    """A textured, coloured screen-space quad centred on its position."""

    def __init__(
        self,
        pos: Vec3 = Vec3(),
        width: float = 0.0,
        height: float = 0.0,
        priority: int = DEFAULT_PRIORITY,
        kind: ObjectType = ObjectType.NONE,
    ) -> None:
        super().__init__(priority, kind, pos, width, height)
        self.color = Color()
        self.texture: Optional[str] = None
        self.tex_coords: TexCoords = FULL_UV

    def set_size(self, width: float, height: float) -> None:
        """Change the quad's width and height."""
        self.width = width
        self.height = height

    def set_tex_uv(self, divi_x: float, divi_y: float) -> None:
        """Show the first cell of a texture split into divi_x by divi_y cells."""
        if divi_x <= 0 or divi_y <= 0:
            raise ValueError(f"texture divisions must be positive, got {divi_x}x{divi_y}")
        u, v = 1.0 / divi_x, 1.0 / divi_y
        self.tex_coords = ((0.0, 0.0), (u, 0.0), (0.0, v), (u, v))


class Scene:
    """Holds every live object, grouped by priority, up to a fixed capacity."""

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, priorities: int = PRIORITY_LEVELS
    ) -> None:
        if capacity < 1 or priorities < 1:
            raise ValueError("capacity and priorities must be positive")
        self.capacity = capacity
        self._layers: List[List[SceneObject]] = [[] for _ in range(priorities)]

    def add(self, obj: SceneObject) -> SceneObject:
        """Register an object and return it."""
        if not 0 <= obj.priority < len(self._layers):
            raise ValueError(f"priority {obj.priority} out of range")
        if obj.scene is self:
            return obj
        if self.count() >= self.capacity:
            raise SceneFullError(f"scene holds at most {self.capacity} objects")
        if obj.scene is not None:
            obj.release()
        self._layers[obj.priority].append(obj)
        obj.scene = self
        return obj

    def _discard(self, obj: SceneObject) -> None:
        layer = self._layers[obj.priority]
        if obj in layer:
            layer.remove(obj)

    def _iter(self) -> Iterator[SceneObject]:
        for layer in self._layers:
            yield from layer

    def objects(self, kind: Optional[ObjectType] = None) -> List[SceneObject]:
        """Objects in priority order, optionally only those of one kind."""
        return [obj for obj in self._iter() if kind is None or obj.kind is kind]

    def count(self) -> int:
        """Number of live objects."""
        return sum(len(layer) for layer in self._layers)

    def is_full(self) -> bool:
        return self.count() >= self.capacity

    def update(self) -> None:
        """Update every object once, skipping any released along the way."""
        for obj in self.objects():
            if obj.scene is self:
                obj.update()

    def release_all(self) -> None:
        """Release every object."""
        for obj in self.objects():
            obj.release()


class Enemy(Sprite):
    """A stationary target that bullets can hit."""

    TEXTURE = "data/TEXTURE/cat001.png"
    PRIORITY = 4

    def __init__(self, pos: Vec3 = Vec3(), width: float = 0.0, height: float = 0.0) -> None:
        super().__init__(pos, width, height, priority=self.PRIORITY, kind=ObjectType.ENEMY)
        self.move = Vec3()
        self.life = 0.0

    @staticmethod
    def create(scene: Scene, pos: Vec3, width: float, height: float) -> Enemy:
        """Make an enemy and add it to the scene."""
        enemy = Enemy(pos, width, height)
        enemy.texture = Enemy.TEXTURE
        scene.add(enemy)
        return enemy