"""Light parameter blocks laid out as the shaders expect them."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

from scenekit3d.vectors import Vector3, Vector4


class LightingMode(IntEnum):
    """Shading model selected per material."""

    HALF_LAMBERT = 0
    LAMBERT = 1
    SPECULAR_REFLECTION = 2
    NO_LIGHTING = 3


def _white() -> Vector4:
    return Vector4(1.0, 1.0, 1.0, 1.0)


@dataclass
class DirectionalLightData:
    """Colour, direction and intensity of a directional light."""

    ROOT_PARAMETER_INDEX: ClassVar[int] = 4
    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<8f")

    color: Vector4 = field(default_factory=_white)
    direction: Vector3 = field(default_factory=lambda: Vector3(0.0, -1.0, 0.0))
    intensity: float = 1.0

    def pack(self) -> bytes:
        """Constant-buffer bytes: colour, direction, intensity as 32-bit floats."""
        return self.LAYOUT.pack(*self.color, *self.direction, self.intensity)


@dataclass
class PointLightData:
    """Colour, position and falloff of a point light."""

    ROOT_PARAMETER_INDEX: ClassVar[int] = 6
    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<12f")

    color: Vector4 = field(default_factory=_white)
    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 2.0, 0.0))
    intensity: float = 1.0
    radius: float = 4.0
    decay: float = 1.0

    def pack(self) -> bytes:
        """Constant-buffer bytes, with two padding floats at the end."""
        return self.LAYOUT.pack(
            *self.color,
            *self.position,
            self.intensity,
            self.radius,
            self.decay,
            0.0,
            0.0,
        )