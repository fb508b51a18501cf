"""A single on-screen digit drawn from a 0-9 texture strip."""

from __future__ import annotations

from typing import Tuple

from .geometry import Color, Vec3

TexCoords = Tuple[Tuple[float, float], ...]
DIGIT_UV_STEP = 0.1


def _trunc_div10(value: int) -> int:
    quotient = abs(value) // 10
    return quotient if value >= 0 else -quotient


def _trunc_mod10(value: int) -> int:
    return value - _trunc_div10(value) * 10


class Digit:
    """One digit of a number display."""

    def __init__(self, pos: Vec3 = Vec3(), width: float = 0.0, height: float = 0.0) -> None:
        self.pos = pos
        self.width = width
        self.height = height
        self.tex_index = -1
        self.color = Color(1.0, 1.0, 1.0, 1.0)
        self.tex_coords: TexCoords = (
            (0.0, 0.0),
            (DIGIT_UV_STEP, 0.0),
            (0.0, 1.0),
            (DIGIT_UV_STEP, 1.0),
        )

    @property
    def corners(self) -> Tuple[Vec3, Vec3, Vec3, Vec3]:
        """Top-left, top-right, bottom-left and bottom-right corners."""
        hw, hh = self.width * 0.5, self.height * 0.5
        x, y, z = self.pos
        return (
            Vec3(x - hw, y - hh, z),
            Vec3(x + hw, y - hh, z),
            Vec3(x - hw, y + hh, z),
            Vec3(x + hw, y + hh, z),
        )

    def set_number(self, number: int, digit: int) -> int:
        """Show the given decimal place of number (0 is the units) and return it."""
        value = int(number)
        for _ in range(digit):
            value = _trunc_div10(value)
        shown = _trunc_mod10(value)
        left = DIGIT_UV_STEP * shown
        right = DIGIT_UV_STEP * (shown + 1)
        self.tex_coords = ((left, 0.0), (right, 0.0), (left, 1.0), (right, 1.0))
        return shown