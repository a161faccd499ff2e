"""Fractional-to-integer hex rounding.

Each component is rounded on its own, then the component that moved the
most is rebuilt from the other two so the result lands back on the
zero-sum plane. When deltas tie, the first component is only rebuilt if its
delta is strictly the largest, then the second if strictly larger than the
third, otherwise the third.

:func:`cube_round` applies that order to ``(x, y, z)``. :func:`axial_round`
applies it to ``(q, r, s)``, so ties in axial space favour keeping ``q``,
then ``r``.

Rounding uses Python's :func:`round` (half to even); the numpy variant uses
:func:`numpy.rint`, which follows the same rule, so both agree on exact
half-cell inputs.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .coords import Axial, Cube


def _round_triple(fa: float, fb: float, fc: float) -> tuple[int, int, int]:
    ai, bi, ci = round(fa), round(fb), round(fc)
    da, db, dc = abs(ai - fa), abs(bi - fb), abs(ci - fc)
    if da > db and da > dc:
        ai = -bi - ci
    elif db > dc:
        bi = -ai - ci
    else:
        ci = -ai - bi
    return ai, bi, ci


def cube_round(fx: float, fy: float, fz: float) -> Cube:
    return Cube(*_round_triple(fx, fy, fz))


def axial_round(fq: float, fr: float) -> Axial:
    """Round a fractional axial position to the cell containing it."""
    q, r, _ = _round_triple(fq, fr, -fq - fr)
    return Axial(q, r)


def axial_lerp(a: Axial, b: Axial, t: float) -> tuple[float, float]:
    return a.q + (b.q - a.q) * t, a.r + (b.r - a.r) * t

def cube_round_array(
    fx: ArrayLike, fy: ArrayLike, fz: ArrayLike
) -> tuple[NDArray[np.int64], NDArray[np.int64], NDArray[np.int64]]:
    """Vectorised :func:`cube_round` over equally shaped arrays.

    The tie order follows argument order, so passing ``(q, r, s)`` matches
    :func:`axial_round`.
    """
    fx = np.asarray(fx, dtype=np.float64)
    fy = np.asarray(fy, dtype=np.float64)
    fz = np.asarray(fz, dtype=np.float64)

    rx, ry, rz = np.rint(fx), np.rint(fy), np.rint(fz)
    dx, dy, dz = np.abs(rx - fx), np.abs(ry - fy), np.abs(rz - fz)

    fix_x = (dx > dy) & (dx > dz)
    fix_y = ~fix_x & (dy > dz)
    fix_z = ~fix_x & ~fix_y

    rx = np.where(fix_x, -ry - rz, rx)
    ry = np.where(fix_y, -rx - rz, ry)
    rz = np.where(fix_z, -rx - ry, rz)
    return rx.astype(np.int64), ry.astype(np.int64), rz.astype(np.int64)


__all__ = ["axial_lerp", "axial_round", "cube_round", "cube_round_array"]
