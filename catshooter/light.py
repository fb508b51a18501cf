"""Directional lights for the 3D scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .geometry import Color, Vec3

MAX_LIGHT = 3

_DIRECTIONS = (
    Vec3(0.22, -0.87, 0.44),
    Vec3(-0.18, 0.88, -0.44),
    Vec3(0.89, -0.11, 0.44),
)


@dataclass
class DirectionalLight:
    """A parallel light source."""

    diffuse: Color = field(default_factory=Color)
    direction: Vec3 = field(default_factory=Vec3)
    enabled: bool = False


class LightRig:
    """The fixed set of scene lights."""

    def __init__(self) -> None:
        self.lights: Tuple[DirectionalLight, ...] = ()
        self.reset()

    def reset(self) -> None:
        """Set up the three white lights; only the first one is switched on."""
        self.lights = tuple(
            DirectionalLight(
                diffuse=Color(1.0, 1.0, 1.0, 1.0),
                direction=direction.normalized(),
                enabled=index == 0,
            )
            for index, direction in enumerate(_DIRECTIONS)
        )