"""Placement of hex cells in host world space.

A :class:`HexLayout` maps axial coordinates onto a 2D plane with one of two
orientation matrices, scales by the cell size, then lifts the planar point
into a 3D :class:`~hexcore.coords.WorldPosition` on either the ground plane
(``XZ``, y = 0) or the screen plane (``XY``, z = 0). Orientation only
changes the trigonometric constants; grid algebra is unaffected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from math import sqrt
from typing import Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .coords import Axial, HexCoordinate, WorldPosition
from .rounding import axial_round, cube_round_array


# Orientation matrices from Red Blob (do not alter)
@dataclass(frozen=True)
class Orientation:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> planar
    b0: float; b1: float; b2: float; b3: float  # planar -> axial
    start_angle: float                           # first corner, in sixths of a turn


POINTY_TOP = Orientation(
    f0 =  sqrt(3.0), f1 =  sqrt(3.0)/2.0,
    f2 =  0.0,       f3 =  3.0/2.0,
    b0 =  sqrt(3.0)/3.0, b1 = -1.0/3.0,
    b2 =  0.0,            b3 =  2.0/3.0,
    start_angle = 0.5,  # 30°
)
FLAT_TOP = Orientation(
    f0 =  3.0/2.0,  f1 = 0.0,
    f2 =  sqrt(3.0)/2.0, f3 = sqrt(3.0),
    b0 =  2.0/3.0,  b1 = 0.0,
    b2 = -1.0/3.0,  b3 = sqrt(3.0)/3.0,
    start_angle = 0.0,  # 0°
)


class WorldPlane(str, Enum):
    """World plane the hex grid is laid on."""

    XZ = "xz"
    XY = "xy"


@dataclass(frozen=True)
class HexLayout:
    orientation: Orientation = POINTY_TOP
    size: float = 1.0  # centre-to-corner distance
    origin: WorldPosition = field(default_factory=lambda: WorldPosition(0.0, 0.0, 0.0))
    plane: WorldPlane = WorldPlane.XZ

    def __post_init__(self) -> None:
        if not self.size > 0:
            raise ValueError("size must be positive")

    # -- Plane mapping ---------------------------------------------------

    def _lift(self, u: float, v: float) -> WorldPosition:
        ox, oy, oz = self.origin
        if self.plane == WorldPlane.XZ:
            return WorldPosition(u + ox, oy, v + oz)
        return WorldPosition(u + ox, v + oy, oz)

    def _flatten(self, position: Iterable[float]) -> tuple[float, float]:
        x, y, z = position
        ox, oy, oz = self.origin
        if self.plane == WorldPlane.XZ:
            return x - ox, z - oz
        return x - ox, y - oy

    # -- Grid <-> world --------------------------------------------------

    def to_world(self, coord: HexCoordinate) -> WorldPosition:
        a = coord.to_axial()
        M = self.orientation
        u = (M.f0 * a.q + M.f1 * a.r) * self.size
        v = (M.f2 * a.q + M.f3 * a.r) * self.size
        return self._lift(u, v)

    def fractional_axial(self, position: Iterable[float]) -> tuple[float, float]:
        M = self.orientation
        u, v = self._flatten(position)
        pu, pv = u / self.size, v / self.size
        return M.b0 * pu + M.b1 * pv, M.b2 * pu + M.b3 * pv

    def to_axial(self, position: Iterable[float]) -> Axial:
        """Cell containing ``position``."""
        return axial_round(*self.fractional_axial(position))

    def corners(self, coord: HexCoordinate) -> list[WorldPosition]:
        """The six corner positions of ``coord``'s cell, counter-clockwise."""
        cx, cy, cz = self.to_world(coord)
        cu, cv = (cx, cz) if self.plane == WorldPlane.XZ else (cx, cy)
        out: list[WorldPosition] = []
        for i in range(6):
            angle = 2.0 * math.pi * (self.orientation.start_angle + i) / 6.0
            u = cu + self.size * math.cos(angle)
            v = cv + self.size * math.sin(angle)
            out.append(WorldPosition(u, cy, v) if self.plane == WorldPlane.XZ else WorldPosition(u, v, cz))
        return out

    def angle_between(self, a: HexCoordinate, b: HexCoordinate) -> float:
        """Heading from ``a`` to ``b`` on the grid plane, degrees in ``[0, 360)``."""
        ua, va = self._flatten(self.to_world(a))
        ub, vb = self._flatten(self.to_world(b))
        degrees = math.degrees(math.atan2(vb - va, ub - ua))
        return degrees % 360.0

    def world_distance(self, a: HexCoordinate, b: HexCoordinate) -> float:
        return math.dist(self.to_world(a), self.to_world(b))

    # -- Batch -----------------------------------------------------------

    def to_world_array(self, coords: Iterable[HexCoordinate]) -> NDArray[np.float64]:
        """World positions of many cells as an ``(N, 3)`` array."""
        qr = np.array([(a.q, a.r) for a in (c.to_axial() for c in coords)], dtype=np.float64)
        out = np.empty((len(qr), 3), dtype=np.float64)
        if len(qr) == 0:
            return out
        M = self.orientation
        u = (M.f0 * qr[:, 0] + M.f1 * qr[:, 1]) * self.size
        v = (M.f2 * qr[:, 0] + M.f3 * qr[:, 1]) * self.size
        ox, oy, oz = self.origin
        if self.plane == WorldPlane.XZ:
            out[:, 0], out[:, 1], out[:, 2] = u + ox, oy, v + oz
        else:
            out[:, 0], out[:, 1], out[:, 2] = u + ox, v + oy, oz
        return out

    def to_axial_array(self, points: ArrayLike) -> list[Axial]:
        """Cells containing each row of an ``(N, 3)`` array of world positions."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        ox, oy, oz = self.origin
        if self.plane == WorldPlane.XZ:
            u, v = pts[:, 0] - ox, pts[:, 2] - oz
        else:
            u, v = pts[:, 0] - ox, pts[:, 1] - oy
        M = self.orientation
        pu, pv = u / self.size, v / self.size
        fq = M.b0 * pu + M.b1 * pv
        fr = M.b2 * pu + M.b3 * pv
        q, r, _ = cube_round_array(fq, fr, -fq - fr)
        return [Axial(int(a), int(b)) for a, b in zip(q, r)]


DEFAULT_LAYOUT = HexLayout()


__all__ = [
    "DEFAULT_LAYOUT",
    "FLAT_TOP",
    "HexLayout",
    "Orientation",
    "POINTY_TOP",
    "WorldPlane",
]
