"""Direction tables and neighbour enumeration.

Direction indices are a fixed contract, counter-clockwise from east:

====  ========  ========  =========
idx   name      axial     cube
====  ========  ========  =========
0     E         (+1,  0)  (+1,-1, 0)
1     NE        (+1, -1)  (+1, 0,-1)
2     NW        ( 0, -1)  ( 0,+1,-1)
3     W         (-1,  0)  (-1,+1, 0)
4     SW        (-1, +1)  (-1, 0,+1)
5     SE        ( 0, +1)  ( 0,-1,+1)
====  ========  ========  =========

Offset coordinates are not translation invariant, so each offset layout has
two tables selected by column parity (``*_Q``) or row parity (``*_R``).
Every table is ordered so that ``neighbor_offset(o, i)`` is the offset form
of ``neighbor_axial(o.to_axial(), i)``.
"""

from __future__ import annotations

from typing import Iterable

from .conversions import axial_to_offset, offset_to_axial
from .coords import Axial, Cube, Doubled, HexCoordinate, Offset, OffsetLayout
from .errors import InvalidCoordinateError, InvalidDirectionError

DIRECTION_NAMES = ("E", "NE", "NW", "W", "SW", "SE")

AXIAL_DIRECTIONS = (
    Axial(+1, 0),
    Axial(+1, -1),
    Axial(0, -1),
    Axial(-1, 0),
    Axial(-1, +1),
    Axial(0, +1),
)

CUBE_DIRECTIONS = (
    (+1, -1, 0),
    (+1, 0, -1),
    (0, +1, -1),
    (-1, +1, 0),
    (-1, 0, +1),
    (0, -1, +1),
)

# (dcol, drow) with row = 2r + q
DOUBLED_DIRECTIONS = (
    (+1, +1),
    (+1, -1),
    (0, -2),
    (-1, -1),
    (-1, +1),
    (0, +2),
)

# Column-shifted tables: the "down" table applies to columns sitting half a
# cell lower than their left neighbour.
_Q_UP = (
    (+1, 0),
    (+1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (0, +1),
)
_Q_DOWN = (
    (+1, +1),
    (+1, 0),
    (0, -1),
    (-1, 0),
    (-1, +1),
    (0, +1),
)

# Row-shifted tables, same idea along rows.
_R_LEFT = (
    (+1, 0),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, +1),
    (0, +1),
)
_R_RIGHT = (
    (+1, 0),
    (+1, -1),
    (0, -1),
    (-1, 0),
    (0, +1),
    (+1, +1),
)

# Indexed by parity (0 = even, 1 = odd) of the shifted axis.
_OFFSET_DIRS = {
    OffsetLayout.ODD_Q: (_Q_UP, _Q_DOWN),
    OffsetLayout.EVEN_Q: (_Q_DOWN, _Q_UP),
    OffsetLayout.ODD_R: (_R_LEFT, _R_RIGHT),
    OffsetLayout.EVEN_R: (_R_RIGHT, _R_LEFT),
}


def _check_direction(direction: int) -> int:
    if isinstance(direction, bool) or not isinstance(direction, int) or not 0 <= direction < 6:
        raise InvalidDirectionError(direction)
    return direction


def axial_direction(direction: int) -> Axial:
    return AXIAL_DIRECTIONS[_check_direction(direction)]


def cube_direction(direction: int) -> Cube:
    return Cube(*CUBE_DIRECTIONS[_check_direction(direction)])


def offset_directions(o: Offset) -> tuple[tuple[int, int], ...]:
    """The ``(dcol, drow)`` table that applies at ``o``."""
    even_table, odd_table = _OFFSET_DIRS[o.layout]
    parity = (o.col if o.layout.shifts_columns else o.row) & 1
    return odd_table if parity else even_table


# -- Single neighbour ------------------------------------------------------


def neighbor_axial(a: Axial, direction: int) -> Axial:
    d = AXIAL_DIRECTIONS[_check_direction(direction)]
    return Axial(a.q + d.q, a.r + d.r)


def neighbor_cube(c: Cube, direction: int) -> Cube:
    dx, dy, dz = CUBE_DIRECTIONS[_check_direction(direction)]
    return Cube(c.x + dx, c.y + dy, c.z + dz)


def neighbor_offset(o: Offset, direction: int) -> Offset:
    dc, dr = offset_directions(o)[_check_direction(direction)]
    return Offset(o.col + dc, o.row + dr, o.layout)


def _check_doubled(d: Doubled) -> None:
    if not d.is_valid():
        raise InvalidCoordinateError(f"Doubled coordinate requires (row - col) to be even, got {d!r}")


def neighbor_doubled(d: Doubled, direction: int) -> Doubled:
    _check_doubled(d)
    dc, dr = DOUBLED_DIRECTIONS[_check_direction(direction)]
    return Doubled(d.col + dc, d.row + dr)


# -- All neighbours --------------------------------------------------------


def neighbors_axial(a: Axial) -> Iterable[Axial]:
    for d in AXIAL_DIRECTIONS:
        yield Axial(a.q + d.q, a.r + d.r)


def neighbors_cube(c: Cube) -> Iterable[Cube]:
    for dx, dy, dz in CUBE_DIRECTIONS:
        yield Cube(c.x + dx, c.y + dy, c.z + dz)


def neighbors_offset(o: Offset) -> Iterable[Offset]:
    for dc, dr in offset_directions(o):
        yield Offset(o.col + dc, o.row + dr, o.layout)


def neighbors_doubled(d: Doubled) -> Iterable[Doubled]:
    _check_doubled(d)
    for dc, dr in DOUBLED_DIRECTIONS:
        yield Doubled(d.col + dc, d.row + dr)


def neighbors_axial_bounded(a: Axial, width: int, height: int) -> Iterable[Axial]:
    for n in neighbors_axial(a):
        if 0 <= n.q < width and 0 <= n.r < height:
            yield n


def neighbors_offset_bounded(o: Offset, width: int, height: int) -> Iterable[Offset]:
    for n in neighbors_offset(o):
        if 0 <= n.col < width and 0 <= n.row < height:
            yield n


# -- Inverse lookup --------------------------------------------------------


def direction_between(a: HexCoordinate, b: HexCoordinate) -> int:
    """Index ``i`` such that ``a.neighbor(i) == b``.

    Raises:
        ValueError: if ``b`` is not adjacent to ``a``.
    """
    start, end = a.to_axial(), b.to_axial()
    delta = Axial(end.q - start.q, end.r - start.r)
    try:
        return AXIAL_DIRECTIONS.index(delta)
    except ValueError:
        raise ValueError(f"{b!r} is not adjacent to {a!r}") from None


def offset_neighbor_via_axial(o: Offset, direction: int) -> Offset:
    """Reference route through axial, used to cross-check the parity tables."""
    return axial_to_offset(neighbor_axial(offset_to_axial(o), direction), o.layout)


__all__ = [
    "AXIAL_DIRECTIONS",
    "CUBE_DIRECTIONS",
    "DIRECTION_NAMES",
    "DOUBLED_DIRECTIONS",
    "axial_direction",
    "cube_direction",
    "direction_between",
    "neighbor_axial",
    "neighbor_cube",
    "neighbor_doubled",
    "neighbor_offset",
    "neighbors_axial",
    "neighbors_axial_bounded",
    "neighbors_cube",
    "neighbors_doubled",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "offset_directions",
    "offset_neighbor_via_axial",
]
