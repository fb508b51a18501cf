"""Grid meshes: a flat textured field and an upright cylinder wall."""

from __future__ import annotations

import math
from typing import List, Tuple

from .geometry import (
    Color,
    Matrix,
    Vec3,
    Vertex,
    matrix_identity,
    matrix_multiply,
    matrix_rotation_yaw_pitch_roll,
    matrix_translation,
)

MESH_NUM_MAX = 32
MAX_TEX_FIELD = 64

_UP = Vec3(0.0, 1.0, 0.0)
_WHITE = Color(1.0, 1.0, 1.0, 1.0)


def _check_divisions(divi_x: int, divi_y: int) -> None:
    if divi_x < 1 or divi_y < 1:
        raise ValueError(f"mesh divisions must be at least 1, got {divi_x}x{divi_y}")


def strip_indices(divi_x: int, divi_y: int) -> List[int]:
    """Triangle-strip indices for a (divi_x + 1) x (divi_y + 1) vertex grid.

    Rows are joined by two degenerate indices.
    """
    _check_divisions(divi_x, divi_y)
    row = divi_x + 1
    indices: List[int] = []
    for y in range(divi_y):
        for x in range(row):
            indices.append(row * (y + 1) + x)
            indices.append(x + y * row)
        if y < divi_y - 1:
            indices.append(divi_x + y * row)
            indices.append(row * (y + 2))
    return indices


def _world_matrix(pos: Vec3, rot: Vec3) -> Matrix:
    world = matrix_identity()
    world = matrix_multiply(world, matrix_rotation_yaw_pitch_roll(rot.y, rot.x, rot.z))
    return matrix_multiply(world, matrix_translation(pos.x, pos.y, pos.z))


def _polygon_count(divi_x: int, divi_y: int) -> int:
    return 2 * divi_x * divi_y + (divi_y - 1) * 4


class MeshField:
    """A flat grid on the XZ plane, centred on its position."""

    def __init__(
        self,
        pos: Vec3 = Vec3(),
        rot: Vec3 = Vec3(),
        tex_index: int = -1,
        divi_x: int = 1,
        divi_z: int = 1,
        width: float = 0,
        height: float = 0,
    ) -> None:
        _check_divisions(divi_x, divi_z)
        self.pos = pos
        self.rot = rot
        self.tex_index = tex_index
        self.divi_x = divi_x
        self.divi_z = divi_z
        self.width = int(width)
        self.height = int(height)
        self.max_vtx = (divi_x + 1) * (divi_z + 1)
        self.poly_num = _polygon_count(divi_x, divi_z)
        self.vertices: List[Vertex] = self._build_vertices()
        self.indices: List[int] = strip_indices(divi_x, divi_z)

    def _build_vertices(self) -> List[Vertex]:
        center_x = self.width * (self.divi_x - 2) * 0.5
        center_z = self.height * (self.divi_z - 2) * 0.5
        return [
            Vertex(
                pos=Vec3(
                    float(-self.width + self.width * x - center_x),
                    0.0,
                    float(self.height - self.height * z + center_z),
                ),
                nor=_UP,
                col=_WHITE,
                tex=(float(x), float(z)),
            )
            for z in range(self.divi_z + 1)
            for x in range(self.divi_x + 1)
        ]

    def world_matrix(self) -> Matrix:
        """Rotation followed by translation to the field's position."""
        return _world_matrix(self.pos, self.rot)


class MeshCylinder:
    """An open cylinder wall standing on the XZ plane."""

    def __init__(
        self,
        pos: Vec3 = Vec3(),
        rot: Vec3 = Vec3(),
        divi_x: int = 1,
        divi_y: int = 1,
        height: float = 0.0,
        radius: float = 0.0,
    ) -> None:
        _check_divisions(divi_x, divi_y)
        self.pos = pos
        self.rot = rot
        self.tex_index = -1
        self.culling = True
        self.divi_x = divi_x
        self.divi_y = divi_y
        self.height = height
        self.radius = radius
        self.max_vtx = (divi_x + 1) * (divi_y + 1)
        self.poly_num = _polygon_count(divi_x, divi_y)
        self.vertices: List[Vertex] = self._build_vertices()
        self.indices: List[int] = strip_indices(divi_x, divi_y)

    def _build_vertices(self) -> List[Vertex]:
        vertices = []
        step = math.pi * 2.0 / self.divi_x
        for y in range(self.divi_y + 1):
            level = (self.height / self.divi_y) * (self.divi_y - y)
            for x in range(self.divi_x + 1):
                angle = step * x
                position = Vec3(
                    self.radius * math.sin(angle), level, self.radius * math.cos(angle)
                )
                vertices.append(
                    Vertex(
                        pos=position,
                        nor=(self.pos - position).normalized(),
                        col=_WHITE,
                        tex=(float(x), float(y)),
                    )
                )
        return vertices

    @property
    def colors(self) -> Tuple[Color, ...]:
        return tuple(vertex.col for vertex in self.vertices)

    def set_color(self, color: Color) -> None:
        """Give every vertex the same colour."""
        for vertex in self.vertices:
            vertex.col = color

    def world_matrix(self) -> Matrix:
        """Rotation followed by translation to the cylinder's position."""
        return _world_matrix(self.pos, self.rot)