"""Closed-form conversions between hex coordinate representations.

Axial is the hub: every route that is not implemented directly goes
through it. All functions are pure. Offset formulas use ``& 1`` for parity
and floor division, both of which behave correctly for negative columns and
rows in Python.
"""

from __future__ import annotations

from .coords import Axial, Cube, Doubled, Offset, OffsetLayout
from .errors import InvalidCoordinateError


def axial_to_cube(a: Axial) -> Cube:
    x = a.q
    z = a.r
    y = -x - z
    return Cube(x, y, z)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.x, c.z)


def axial_to_offset(a: Axial, layout: OffsetLayout) -> Offset:
    q, r = a.q, a.r
    if layout == OffsetLayout.EVEN_R:
        col = q + (r + (r & 1)) // 2
        row = r
    elif layout == OffsetLayout.ODD_R:
        col = q + (r - (r & 1)) // 2
        row = r
    elif layout == OffsetLayout.EVEN_Q:
        col = q
        row = r + (q + (q & 1)) // 2
    elif layout == OffsetLayout.ODD_Q:
        col = q
        row = r + (q - (q & 1)) // 2
    else:
        raise ValueError(f"Unknown offset layout: {layout!r}")
    return Offset(col, row, layout)


def offset_to_axial(o: Offset) -> Axial:
    col, row, layout = o.col, o.row, o.layout
    if layout == OffsetLayout.EVEN_R:
        q = col - (row + (row & 1)) // 2
        r = row
    elif layout == OffsetLayout.ODD_R:
        q = col - (row - (row & 1)) // 2
        r = row
    elif layout == OffsetLayout.EVEN_Q:
        q = col
        r = row - (col + (col & 1)) // 2
    elif layout == OffsetLayout.ODD_Q:
        q = col
        r = row - (col - (col & 1)) // 2
    else:
        raise ValueError(f"Unknown offset layout: {layout!r}")
    return Axial(q, r)


def axial_to_doubled(a: Axial) -> Doubled:
    return Doubled(a.q, 2 * a.r + a.q)


def doubled_to_axial(d: Doubled) -> Axial:
    if (d.row - d.col) % 2 != 0:
        raise InvalidCoordinateError(
            f"Doubled coordinate requires (row - col) to be even, got {d!r}"
        )
    return Axial(d.col, (d.row - d.col) // 2)


# -- Composed routes -------------------------------------------------------


def cube_to_offset(c: Cube, layout: OffsetLayout) -> Offset:
    return axial_to_offset(cube_to_axial(c), layout)


def offset_to_cube(o: Offset) -> Cube:
    return axial_to_cube(offset_to_axial(o))


def cube_to_doubled(c: Cube) -> Doubled:
    return axial_to_doubled(cube_to_axial(c))


def doubled_to_cube(d: Doubled) -> Cube:
    return axial_to_cube(doubled_to_axial(d))


def offset_to_doubled(o: Offset) -> Doubled:
    return axial_to_doubled(offset_to_axial(o))


def doubled_to_offset(d: Doubled, layout: OffsetLayout) -> Offset:
    return axial_to_offset(doubled_to_axial(d), layout)


def convert_offset(o: Offset, layout: OffsetLayout) -> Offset:
    """Re-express ``o`` under another offset convention."""
    if o.layout == layout:
        return o
    return axial_to_offset(offset_to_axial(o), layout)


__all__ = [
    "axial_to_cube",
    "axial_to_doubled",
    "axial_to_offset",
    "convert_offset",
    "cube_to_axial",
    "cube_to_doubled",
    "cube_to_offset",
    "doubled_to_axial",
    "doubled_to_cube",
    "doubled_to_offset",
    "offset_to_axial",
    "offset_to_cube",
    "offset_to_doubled",
]
