"""4x4 and 3x3 matrices in row-vector convention."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence


def cot(angle: float) -> float:
    """Cotangent of an angle in radians."""
    return 1.0 / math.tan(angle)


def _square(rows: Sequence[Sequence[float]], size: int) -> List[List[float]]:
    result = [[float(value) for value in row] for row in rows]
    if len(result) != size or any(len(row) != size for row in result):
        raise ValueError(f"matrix must be {size}x{size}")
    return result


def _det3(a: Sequence[Sequence[float]]) -> float:
    return (
        a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
        - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
        + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0])
    )


def _cofactor(m: Sequence[Sequence[float]], row: int, col: int) -> float:
    minor = [
        [value for c, value in enumerate(line) if c != col]
        for r, line in enumerate(m)
        if r != row
    ]
    sign = -1.0 if (row + col) % 2 else 1.0
    return sign * _det3(minor)


@dataclass
class Matrix4x4:
    """A 4x4 matrix; rows default to all zeros."""

    m: List[List[float]] = field(default_factory=lambda: [[0.0] * 4 for _ in range(4)])

    def __post_init__(self) -> None:
        self.m = _square(self.m, 4)

    @staticmethod
    def multiply(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
        """Matrix product m1 * m2."""
        columns = list(zip(*m2.m))
        return Matrix4x4(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in m1.m]
        )

    @staticmethod
    def identity() -> Matrix4x4:
        """The identity matrix."""
        return Matrix4x4([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])

    @staticmethod
    def inverse(mat: Matrix4x4) -> Matrix4x4:
        """Inverse by the adjugate; raises ZeroDivisionError if singular."""
        m = mat.m
        cofactors = [[_cofactor(m, i, j) for j in range(4)] for i in range(4)]
        determinant = sum(value * c for value, c in zip(m[0], cofactors[0]))
        if determinant == 0.0:
            raise ZeroDivisionError("matrix is singular")
        scale = 1.0 / determinant
        return Matrix4x4([[cofactors[j][i] * scale for j in range(4)] for i in range(4)])

    def __matmul__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4.multiply(self, other)


@dataclass
class Mat3:
    """A 3x3 matrix; rows default to all zeros."""

    m: List[List[float]] = field(default_factory=lambda: [[0.0] * 3 for _ in range(3)])

    def __post_init__(self) -> None:
        self.m = _square(self.m, 3)