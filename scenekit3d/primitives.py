"""Batching of debug line primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, ClassVar, List, Optional, Sequence, Tuple

from scenekit3d.transforms import euler_to_matrix
from scenekit3d.vectors import Vector3, Vector4

RED = (1.0, 0.0, 0.0, 1.0)

_BOX_OFFSETS = (
    (-1, -1, -1), (-1, 1, -1), (1, -1, -1), (1, 1, -1),
    (-1, -1, 1), (-1, 1, 1), (1, -1, 1), (1, 1, 1),
)

_BOX_EDGES = (
    (0, 1), (1, 3), (3, 2), (2, 0),
    (4, 5), (5, 7), (7, 6), (6, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


@dataclass
class LineVertex:
    """A coloured line endpoint."""

    pos: Vector3
    color: Vector4


class PrimitiveDrawer:
    """Collects line segments each frame and hands them to a renderer."""

    MAX_LINE_COUNT: ClassVar[int] = 4096
    VERTEX_COUNT_LINE: ClassVar[int] = 2
    INDEX_COUNT_LINE: ClassVar[int] = 0

    _instance: ClassVar[Optional["PrimitiveDrawer"]] = None

    def __init__(self) -> None:
        self._vertices: List[LineVertex] = []

    @classmethod
    def get_instance(cls) -> "PrimitiveDrawer":
        """The shared drawer."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def line_count(self) -> int:
        """Number of lines queued for the next render."""
        return len(self._vertices) // self.VERTEX_COUNT_LINE

    @property
    def vertices(self) -> Tuple[LineVertex, ...]:
        """Queued line endpoints, two per line."""
        return tuple(self._vertices)

    def draw_line_3d(self, p1: Vector3, p2: Vector3, color: Vector4) -> None:
        """Queue a line; lines beyond the capacity are dropped."""
        if self.line_count >= self.MAX_LINE_COUNT:
            return
        self._vertices.append(LineVertex(Vector3(*p1), Vector4(*color)))
        self._vertices.append(LineVertex(Vector3(*p2), Vector4(*color)))

    def draw_obb(self, center: Vector3, rotate: Vector3, size: Vector3, color: Vector4) -> None:
        """Queue the twelve edges of an oriented box of full extents size."""
        rotation = euler_to_matrix(rotate)
        half_x = Vector3.transform(Vector3(1.0, 0.0, 0.0), rotation) * size.x * 0.5
        half_y = Vector3.transform(Vector3(0.0, 1.0, 0.0), rotation) * size.y * 0.5
        half_z = Vector3.transform(Vector3(0.0, 0.0, 1.0), rotation) * size.z * 0.5

        corners = [
            center + (ox * half_x + oy * half_y + oz * half_z)
            for ox, oy, oz in _BOX_OFFSETS
        ]
        for start, end in _BOX_EDGES:
            self.draw_line_3d(corners[start], corners[end], color)

    def draw_sphere(
        self,
        center: Vector3,
        radius: float,
        subdivision: int = 8,
        color: Vector4 = Vector4(*RED),
    ) -> None:
        """Queue a wireframe sphere made of latitude and longitude lines."""
        if subdivision <= 0:
            return
        lon_every = 2.0 * math.pi / subdivision
        lat_every = math.pi / subdivision

        def point(lat: float, lon: float) -> Vector3:
            return Vector3(
                radius * (math.cos(lat) * math.cos(lon)) + center.x,
                radius * math.sin(lat) + center.y,
                radius * (math.cos(lat) * math.sin(lon)) + center.z,
            )

        for lat_index in range(subdivision):
            lat = -math.pi / 2.0 + lat_every * lat_index
            next_lat = lat + lat_every
            for lon_index in range(subdivision):
                lon = lon_index * lon_every
                next_lon = lon + lon_every
                a = point(lat, lon)
                b = point(next_lat, lon)
                c = point(lat, next_lon)
                d = point(next_lat, next_lon)
                self.draw_line_3d(a, c, color)
                self.draw_line_3d(a, b, color)
                self.draw_line_3d(b, d, color)
                self.draw_line_3d(c, d, color)

    def render(self, submit: Callable[[Sequence[LineVertex]], object]) -> int:
        """Pass queued vertices to submit, clear the queue, return the vertex count."""
        if not self._vertices:
            return 0
        batch = list(self._vertices)
        submit(batch)
        self.reset()
        return len(batch)

    def reset(self) -> None:
        """Discard all queued lines."""
        self._vertices.clear()