from __future__ import annotations

from .coords import Axial, Cube, Doubled, HexCoordinate, Offset


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def hex_distance_axial(a: Axial, b: Axial) -> int:
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


def hex_distance_doubled(a: Doubled, b: Doubled) -> int:
    dcol = abs(a.col - b.col)
    drow = abs(a.row - b.row)
    return dcol + max(0, (drow - dcol) // 2)


def hex_distance_offset(a: Offset, b: Offset) -> int:
    return hex_distance_axial(a.to_axial(), b.to_axial())


def hex_distance(a: HexCoordinate, b: HexCoordinate) -> int:
    """Distance between two cells in any pair of representations."""
    if isinstance(a, Axial) and isinstance(b, Axial):
        return hex_distance_axial(a, b)
    if isinstance(a, Cube) and isinstance(b, Cube):
        return hex_distance_cube(a, b)
    if isinstance(a, Doubled) and isinstance(b, Doubled) and a.is_valid() and b.is_valid():
        return hex_distance_doubled(a, b)
    return hex_distance_axial(a.to_axial(), b.to_axial())


__all__ = [
    "hex_distance",
    "hex_distance_axial",
    "hex_distance_cube",
    "hex_distance_doubled",
    "hex_distance_offset",
]
