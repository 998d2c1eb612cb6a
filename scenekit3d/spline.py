"""Catmull-Rom spline evaluation."""

from __future__ import annotations

from typing import Sequence

from scenekit3d.vectors import Vector3


def catmull_rom_interpolation(
    p0: Vector3, p1: Vector3, p2: Vector3, p3: Vector3, t: float
) -> Vector3:
    """Point on the Catmull-Rom segment between p1 and p2 at parameter t."""
    t2 = t * t
    t3 = t2 * t
    e3 = -1 * p0 + 3 * p1 - 3 * p2 + p3
    e2 = 2 * p0 - 5 * p1 + 4 * p2 - p3
    e1 = -1 * p0 + p2
    e0 = 2 * p1
    return (e3 * t3 + e2 * t2 + e1 * t + e0) * 0.5


def _clamp(value, low, high):
    return max(low, min(value, high))


def catmull_rom_position(points: Sequence[Vector3], t: float) -> Vector3:
    """Point on the spline through all control points, t in [0, 1].

    Raises ValueError when fewer than four control points are given.
    """
    if len(points) < 4:
        raise ValueError("at least four control points are required")

    division = len(points) - 1
    area_width = 1.0 / division

    index = _clamp(max(int(t / area_width), 0), 0, division - 1)
    local_t = _clamp((t - index * area_width) * division, 0.0, 1.0)

    index0 = index if index == 0 else index - 1
    index2 = min(index + 1, division)
    index3 = min(index + 2, division)

    return catmull_rom_interpolation(
        points[index0], points[index], points[index2], points[index3], local_t
    )