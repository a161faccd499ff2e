"""Straight-line paths between two cells."""

from __future__ import annotations

from typing import Iterator, TypeVar

from .coords import Axial, HexCoordinate
from .heuristics import hex_distance_axial
from .rounding import axial_lerp, axial_round

H = TypeVar("H", bound=HexCoordinate)

# (q, r) offset applied to both endpoints when nudging, so samples
# that land exactly on a cell edge all resolve towards the same side.
_NUDGE = (1e-6, 2e-6)


def iter_line_axial(a: Axial, b: Axial, *, nudge: bool = False) -> Iterator[Axial]:
    n = hex_distance_axial(a, b)
    if n == 0:
        yield a
        return
    aq, ar = float(a.q), float(a.r)
    bq, br = float(b.q), float(b.r)
    if nudge:
        eq, er = _NUDGE
        aq, ar = aq + eq, ar + er
        bq, br = bq + eq, br + er
    for i in range(n + 1):
        t = i / n
        yield axial_round(aq + (bq - aq) * t, ar + (br - ar) * t)


def hex_line(start: H, end: HexCoordinate, *, nudge: bool = False, out: list | None = None) -> list[H]:
    """Cells on the straight line from ``start`` to ``end``, both inclusive.

    Interpolates in axial space at ``t = i / D`` for ``i`` in ``0..D`` (``D``
    is the hex distance) and rounds every sample with :func:`axial_round`, so
    the result holds exactly ``D + 1`` cells with each one adjacent to or
    equal to the previous one. ``start == end`` yields ``[start]``.

    Results use the representation of ``start``.
    """
    results: list = [] if out is None else out
    cells = iter_line_axial(start.to_axial(), end.to_axial(), nudge=nudge)
    if isinstance(start, Axial):
        results.extend(cells)
    else:
        results.extend(start.project(a) for a in cells)
    return results


def hex_lerp(a: HexCoordinate, b: HexCoordinate, t: float) -> Axial:
    """Cell nearest to the point a fraction ``t`` of the way from ``a`` to ``b``."""
    return axial_round(*axial_lerp(a.to_axial(), b.to_axial(), t))


__all__ = ["hex_lerp", "hex_line", "iter_line_axial"]
