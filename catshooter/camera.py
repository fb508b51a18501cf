"""A look-at camera that can orbit freely or follow a target."""

from __future__ import annotations

import math
from dataclasses import replace
from enum import Enum
from typing import Optional, Protocol

from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Matrix, Vec3
from .input import Key, Keyboard

FOLLOW_RATE = 0.09
TURN_STEP = 0.01
MOVE_STEP = 1.0
FOV_DEGREES = 40.0
NEAR_PLANE = 10.0
FAR_PLANE = 2000.0


class CameraMode(Enum):
    """How the camera chooses its points."""

    NORMAL = 0
    FOLLOW = 1


class _Target(Protocol):
    pos: Vec3
    rot: Vec3


def _dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


def look_at_lh(eye: Vec3, at: Vec3, up: Vec3) -> Matrix:
    """Left-handed view matrix looking from eye towards at."""
    z_axis = (at - eye).normalized()
    x_axis = _cross(up, z_axis).normalized()
    if z_axis.length() == 0.0 or x_axis.length() == 0.0:
        raise ValueError("eye, target and up vector do not define a view")
    y_axis = _cross(z_axis, x_axis)
    return (
        (x_axis.x, y_axis.x, z_axis.x, 0.0),
        (x_axis.y, y_axis.y, z_axis.y, 0.0),
        (x_axis.z, y_axis.z, z_axis.z, 0.0),
        (-_dot(x_axis, eye), -_dot(y_axis, eye), -_dot(z_axis, eye), 1.0),
    )


def perspective_fov_lh(fovy: float, aspect: float, near: float, far: float) -> Matrix:
    """Left-handed perspective projection with a vertical field of view."""
    if aspect == 0.0 or near == far or math.sin(fovy / 2.0) == 0.0:
        raise ValueError("invalid projection parameters")
    y_scale = 1.0 / math.tan(fovy / 2.0)
    x_scale = y_scale / aspect
    depth = far / (far - near)
    return (
        (x_scale, 0.0, 0.0, 0.0),
        (0.0, y_scale, 0.0, 0.0),
        (0.0, 0.0, depth, 1.0),
        (0.0, 0.0, -near * depth, 0.0),
    )


def _wrap_angle(angle: float) -> float:
    if angle < -math.pi:
        return angle + math.pi * 2.0
    if angle > math.pi:
        return angle - math.pi * 2.0
    return angle


class Camera:
    """Viewpoint, focus point and orientation of the scene camera."""

    def __init__(self) -> None:
        self.pos_v = Vec3()
        self.pos_r = Vec3()
        self.pos_v_dest = Vec3()
        self.pos_r_dest = Vec3()
        self.vec_u = Vec3(0.0, 1.0, 0.0)
        self.rot = Vec3()
        self.mode = CameraMode.NORMAL
        self.distance = 0.0
        self.follow = False
        self.reset()

    def reset(self) -> None:
        """Return to the starting view."""
        self.pos_v = Vec3(0.0, 200.0, -300.0)
        self.pos_r = Vec3(0.0, 0.0, 0.0)
        self.vec_u = Vec3(0.0, 1.0, 0.0)
        self.rot = Vec3(0.0, 0.0, 0.0)
        self.follow = False
        self.mode = CameraMode.NORMAL
        self.distance = (self.pos_r - self.pos_v).length()
        self.rot = replace(self.rot, x=math.atan2(self.pos_v.z, self.pos_v.y) + math.pi)

    def _orbit_offset(self) -> Vec3:
        rx, ry, d = self.rot.x, self.rot.y, self.distance
        return Vec3(
            math.sin(rx) * math.sin(ry) * d,
            math.cos(rx) * d,
            math.sin(rx) * math.cos(ry) * d,
        )

    def _focus_ahead(self) -> None:
        ry = self.rot.y
        self.pos_r = replace(
            self.pos_r,
            x=self.pos_v.x + math.sin(ry) * self.distance,
            z=self.pos_v.z + math.cos(ry) * self.distance,
        )

    def _move(self, angle: float, sign: float) -> None:
        self.pos_v = replace(
            self.pos_v,
            x=self.pos_v.x + sign * math.sin(angle) * MOVE_STEP,
            z=self.pos_v.z + sign * math.cos(angle) * MOVE_STEP,
        )
        self._focus_ahead()

    def _debug_controls(self, keyboard: Keyboard) -> None:
        if keyboard.is_pressed(Key.LEFT):
            self.rot = replace(self.rot, y=_wrap_angle(self.rot.y - TURN_STEP))
            self._focus_ahead()
        elif keyboard.is_pressed(Key.RIGHT):
            self.rot = replace(self.rot, y=_wrap_angle(self.rot.y + TURN_STEP))
            self._focus_ahead()

        side = self.rot.y + math.pi / 2.0
        if keyboard.is_pressed(Key.I):
            self._move(self.rot.y, 1.0)
        elif keyboard.is_pressed(Key.K):
            self._move(self.rot.y, -1.0)
        elif keyboard.is_pressed(Key.J):
            self._move(side, -1.0)
        elif keyboard.is_pressed(Key.L):
            self._move(side, 1.0)

    def _chase(self, target: _Target) -> None:
        self.pos_r_dest = Vec3(
            target.pos.x + math.sin(target.rot.y),
            target.pos.y,
            target.pos.z + math.cos(target.rot.y),
        )
        self.pos_v_dest = target.pos - self._orbit_offset()
        self.pos_r = self.pos_r + (self.pos_r_dest - self.pos_r) * FOLLOW_RATE
        self.pos_v = self.pos_v + (self.pos_v_dest - self.pos_v) * FOLLOW_RATE

    def update(
        self, keyboard: Keyboard, target: Optional[_Target] = None, debug: bool = False
    ) -> None:
        """Apply one frame of input; target is followed in follow mode."""
        if keyboard.is_triggered(Key.R):
            self.reset()
        if keyboard.is_triggered(Key.F):
            self.follow = not self.follow
        self.mode = CameraMode.FOLLOW if self.follow else CameraMode.NORMAL

        if debug and self.mode is CameraMode.NORMAL:
            self._debug_controls(keyboard)

        if self.mode is CameraMode.FOLLOW:
            if target is None:
                raise ValueError("follow mode needs a target")
            self._chase(target)

        orbit = True
        if keyboard.is_pressed(Key.E):
            self.rot = replace(self.rot, y=_wrap_angle(self.rot.y - TURN_STEP))
        elif keyboard.is_pressed(Key.Q):
            self.rot = replace(self.rot, y=_wrap_angle(self.rot.y + TURN_STEP))
        elif keyboard.is_pressed(Key.Y):
            if self.rot.x + TURN_STEP <= math.pi:
                self.rot = replace(self.rot, x=self.rot.x + TURN_STEP)
        elif keyboard.is_pressed(Key.H):
            if self.rot.x - TURN_STEP >= 0.0:
                self.rot = replace(self.rot, x=self.rot.x - TURN_STEP)
        else:
            orbit = False
        if orbit:
            self.pos_v = self.pos_r - self._orbit_offset()

    def view_matrix(self) -> Matrix:
        """View matrix from the viewpoint towards the focus point."""
        return look_at_lh(self.pos_v, self.pos_r, self.vec_u)

    def projection_matrix(self) -> Matrix:
        """Perspective projection for the screen."""
        return perspective_fov_lh(
            math.radians(FOV_DEGREES),
            SCREEN_WIDTH / SCREEN_HEIGHT,
            NEAR_PLANE,
            FAR_PLANE,
        )