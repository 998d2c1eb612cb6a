"""Two-, three- and four-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from scenekit3d.matrix import Matrix4x4


@dataclass
class Vector2:
    """A 2D vector, used for texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Vector4:
    """A 4D vector, used for colours and homogeneous positions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


@dataclass
class Vector3:
    """A 3D vector with component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vector3:
        """Return a unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.length()
        return Vector3(self.x / length, self.y / length, self.z / length)

    @staticmethod
    def dot(v1: Vector3, v2: Vector3) -> float:
        """Dot product of two vectors."""
        return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z

    @staticmethod
    def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
        """Transform a point by a row-vector matrix, dividing by w."""
        m = matrix.m
        x, y, z = vector
        hx = x * m[0][0] + y * m[1][0] + z * m[2][0] + m[3][0]
        hy = x * m[0][1] + y * m[1][1] + z * m[2][1] + m[3][1]
        hz = x * m[0][2] + y * m[1][2] + z * m[2][2] + m[3][2]
        hw = x * m[0][3] + y * m[1][3] + z * m[2][3] + m[3][3]
        return Vector3(hx / hw, hy / hw, hz / hw)

    def _combine(self, other, op) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, Real):
            return Vector3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other):
        # A scalar on the left subtracts from each component, same as on the right.
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        # A scalar on the left divides each component, same as on the right.
        return self._combine(other, lambda a, b: a / b)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)