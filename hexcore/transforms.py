"""Rotation and reflection, done in cube space where both are permutations."""

from __future__ import annotations

from typing import TypeVar

from .conversions import cube_to_axial
from .coords import Cube, HexCoordinate

H = TypeVar("H", bound=HexCoordinate)


def rotate_cube(c: Cube, steps: int) -> Cube:
    """Rotate about the origin by ``steps`` sixths of a turn.

    Positive steps advance direction indices: rotating ``cube_direction(i)``
    by ``k`` gives ``cube_direction((i + k) % 6)``.
    """
    x, y, z = c.x, c.y, c.z
    for _ in range(steps % 6):
        x, y, z = -y, -z, -x
    return Cube(x, y, z)


def reflect_cube(c: Cube, axis: int) -> Cube:
    """Mirror across the line through the origin that keeps ``axis`` (0=x, 1=y, 2=z) fixed."""
    if axis == 0:
        return Cube(c.x, c.z, c.y)
    if axis == 1:
        return Cube(c.z, c.y, c.x)
    if axis == 2:
        return Cube(c.y, c.x, c.z)
    raise ValueError(f"axis must be 0, 1 or 2, got {axis!r}")


def rotate(coord: H, steps: int, center: HexCoordinate | None = None) -> H:
    """Rotate ``coord`` around ``center`` (origin by default), keeping its representation."""
    c = coord.to_cube()
    if center is None:
        rotated = rotate_cube(c, steps)
    else:
        pivot = center.to_cube()
        rotated = rotate_cube(c - pivot, steps) + pivot
    return coord.project(cube_to_axial(rotated))


def reflect(coord: H, axis: int, center: HexCoordinate | None = None) -> H:
    c = coord.to_cube()
    if center is None:
        mirrored = reflect_cube(c, axis)
    else:
        pivot = center.to_cube()
        mirrored = reflect_cube(c - pivot, axis) + pivot
    return coord.project(cube_to_axial(mirrored))


__all__ = ["reflect", "reflect_cube", "rotate", "rotate_cube"]
