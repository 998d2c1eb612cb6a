"""Axis-aligned boxes, oriented boxes and spheres used for collision and debug drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from scenekit3d.primitives import RED, PrimitiveDrawer
from scenekit3d.transforms import euler_to_matrix
from scenekit3d.vectors import Vector3, Vector4

_CORNER_SIGNS = (
    (-1, -1, -1),
    (-1, -1, 1),
    (-1, 1, -1),
    (-1, 1, 1),
    (1, -1, -1),
    (1, -1, 1),
    (1, 1, -1),
    (1, 1, 1),
)


def _drawer_or_shared(drawer: Optional[PrimitiveDrawer]) -> PrimitiveDrawer:
    return drawer if drawer is not None else PrimitiveDrawer.get_instance()


@dataclass
class AABB:
    """An axis-aligned bounding box given by its minimum and maximum corners."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)
    color: int = 0

    def update(self) -> None:
        """Keep min below max on every axis.

        Each axis is fixed in turn: min takes the smaller value, then max the
        larger of the new min and the old max.
        """
        for axis in ("x", "y", "z"):
            low = min(getattr(self.min, axis), getattr(self.max, axis))
            setattr(self.min, axis, low)
            setattr(self.max, axis, max(low, getattr(self.max, axis)))

    def contains(self, point: Vector3) -> bool:
        """True if the point lies inside the box or on its surface."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
            and self.min.z <= point.z <= self.max.z
        )


def is_collision(aabb: AABB, point: Vector3) -> bool:
    """True if the point lies inside the box or on its surface."""
    return aabb.contains(point)


@dataclass
class OBB:
    """An oriented box: extents, Euler rotation and centre."""

    size: Vector3 = field(default_factory=Vector3)
    rotate: Vector3 = field(default_factory=Vector3)
    center: Vector3 = field(default_factory=Vector3)

    def vertices(self) -> List[Vector3]:
        """The eight corners in world space, taking size as half extents."""
        rotation = euler_to_matrix(self.rotate)
        return [
            Vector3.transform(
                Vector3(sx * self.size.x, sy * self.size.y, sz * self.size.z), rotation
            )
            + self.center
            for sx, sy, sz in _CORNER_SIGNS
        ]

    def draw(self, drawer: Optional[PrimitiveDrawer] = None) -> None:
        """Queue the box's twelve edges in red, taking size as full extents."""
        _drawer_or_shared(drawer).draw_obb(self.center, self.rotate, self.size, Vector4(*RED))


@dataclass
class Sphere:
    """A sphere given by its centre and radius."""

    center: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0

    def draw(
        self,
        drawer: Optional[PrimitiveDrawer] = None,
        subdivision: int = 8,
        color: Optional[Vector4] = None,
    ) -> None:
        """Queue a wireframe of the sphere, red unless a colour is given."""
        _drawer_or_shared(drawer).draw_sphere(
            self.center,
            self.radius,
            subdivision,
            color if color is not None else Vector4(*RED),
        )