"""Vectors, colours, vertices and 4x4 row-major matrices for the scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Tuple

CLASS_NAME = "WindowClass"
WINDOW_NAME = "DirectX(c++)"
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

Matrix = Tuple[Tuple[float, float, float, float], ...]


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vec3:
        return self.scaled(factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vec3()
        return Vec3(self.x / size, self.y / size, self.z / size)

    def scaled(self, factor: float) -> Vec3:
        """Vector multiplied by a scalar."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


@dataclass
class Vertex:
    """A vertex: position, normal, colour, texture coordinate and rhw."""

    pos: Vec3 = field(default_factory=Vec3)
    nor: Vec3 = field(default_factory=Vec3)
    col: Color = field(default_factory=Color)
    tex: Tuple[float, float] = (0.0, 0.0)
    rhw: float = 1.0


def matrix_identity() -> Matrix:
    """The 4x4 identity matrix."""
    return tuple(
        tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4)
    )


def matrix_multiply(a: Matrix, b: Matrix) -> Matrix:
    """The product a * b."""
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, column)) for column in columns)
        for row in a
    )


def matrix_translation(x: float, y: float, z: float) -> Matrix:
    """A translation matrix for row vectors."""
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (float(x), float(y), float(z), 1.0),
    )


def _rotation_x(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return ((1.0, 0.0, 0.0, 0.0), (0.0, c, s, 0.0), (0.0, -s, c, 0.0), (0.0, 0.0, 0.0, 1.0))


def _rotation_y(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return ((c, 0.0, -s, 0.0), (0.0, 1.0, 0.0, 0.0), (s, 0.0, c, 0.0), (0.0, 0.0, 0.0, 1.0))


def _rotation_z(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return ((c, s, 0.0, 0.0), (-s, c, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))


def matrix_rotation_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Matrix:
    """Rotation by roll about z, then pitch about x, then yaw about y."""
    return matrix_multiply(
        matrix_multiply(_rotation_z(roll), _rotation_x(pitch)), _rotation_y(yaw)
    )