"""A model part that sits in a parent-child hierarchy."""

from __future__ import annotations

from typing import Optional

from .geometry import (
    Matrix,
    Vec3,
    matrix_identity,
    matrix_multiply,
    matrix_rotation_yaw_pitch_roll,
    matrix_translation,
)


class Model:
    """One part of a hierarchical model, placed relative to its parent."""

    def __init__(
        self,
        pos: Vec3 = Vec3(),
        rot: Vec3 = Vec3(),
        filename: Optional[str] = None,
    ) -> None:
        self.pos = pos
        self.rot = rot
        self.filename = filename
        self.parent: Optional[Model] = None
        self.world: Matrix = matrix_identity()

    def set_parent(self, parent: Optional[Model]) -> None:
        """Attach to a parent part, or detach with None."""
        self.parent = parent

    def local_matrix(self) -> Matrix:
        """Rotation followed by translation, relative to the parent."""
        local = matrix_multiply(
            matrix_identity(),
            matrix_rotation_yaw_pitch_roll(self.rot.y, self.rot.x, self.rot.z),
        )
        return matrix_multiply(local, matrix_translation(self.pos.x, self.pos.y, self.pos.z))

    def update_world(self, base: Optional[Matrix] = None) -> Matrix:
        """Recompute the world matrix from the parent's, or from base without one."""
        if self.parent is not None:
            reference = self.parent.world
        else:
            reference = base if base is not None else matrix_identity()
        self.world = matrix_multiply(self.local_matrix(), reference)
        return self.world