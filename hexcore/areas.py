"""Area queries: filled ranges, rings and offset rectangles.

Results are returned in the representation of ``center``. Callers on a hot
path can pass ``out`` (typically a buffer from :class:`~hexcore.pool.BufferPool`)
to have results appended to it instead of a new list.
"""

from __future__ import annotations

from typing import Iterator, TypeVar

from .coords import Axial, HexCoordinate, Offset, OffsetLayout
from .heuristics import hex_distance
from .neighbors import AXIAL_DIRECTIONS

H = TypeVar("H", bound=HexCoordinate)

# Rings start from this direction, scaled by the radius, and then walk
# directions 0..5 in order.
RING_START_DIRECTION = 4


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError("radius must be non-negative")


def iter_range_axial(center: Axial, radius: int) -> Iterator[Axial]:
    _check_radius(radius)
    for dq in range(-radius, radius + 1):
        for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
            yield Axial(center.q + dq, center.r + dr)


def iter_ring_axial(center: Axial, radius: int) -> Iterator[Axial]:
    _check_radius(radius)
    if radius == 0:
        yield center
        return
    start = AXIAL_DIRECTIONS[RING_START_DIRECTION]
    q, r = center.q + start.q * radius, center.r + start.r * radius
    for d in AXIAL_DIRECTIONS:
        for _ in range(radius):
            yield Axial(q, r)
            q, r = q + d.q, r + d.r


def hex_range(center: H, radius: int, *, out: list | None = None) -> list[H]:
    """All cells within ``radius`` steps of ``center`` (``3N² + 3N + 1`` of them)."""
    results: list = [] if out is None else out
    hub = center.to_axial()
    if isinstance(center, Axial):
        results.extend(iter_range_axial(hub, radius))
    else:
        results.extend(center.project(a) for a in iter_range_axial(hub, radius))
    return results


def hex_ring(center: H, radius: int, *, out: list | None = None) -> list[H]:
    """Cells at exactly ``radius`` steps; ``[center]`` for radius 0, else ``6N`` cells."""
    results: list = [] if out is None else out
    hub = center.to_axial()
    if isinstance(center, Axial):
        results.extend(iter_ring_axial(hub, radius))
    else:
        results.extend(center.project(a) for a in iter_ring_axial(hub, radius))
    return results


def in_range(coord: HexCoordinate, center: HexCoordinate, radius: int) -> bool:
    return hex_distance(coord, center) <= radius


def in_rectangle(o: Offset, min_col: int, max_col: int, min_row: int, max_row: int) -> bool:
    return min_col <= o.col <= max_col and min_row <= o.row <= max_row


def offset_rectangle(
    min_col: int,
    max_col: int,
    min_row: int,
    max_row: int,
    layout: OffsetLayout,
    *,
    out: list | None = None,
) -> list[Offset]:
    """Every offset cell of an inclusive ``col × row`` block, column by column."""
    results: list = [] if out is None else out
    for col in range(min_col, max_col + 1):
        for row in range(min_row, max_row + 1):
            results.append(Offset(col, row, layout))
    return results


__all__ = [
    "RING_START_DIRECTION",
    "hex_range",
    "hex_ring",
    "in_range",
    "in_rectangle",
    "iter_range_axial",
    "iter_ring_axial",
    "offset_rectangle",
]
