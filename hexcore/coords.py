"""Hex coordinate value types.

Four interchangeable representations of the same hex cell:

* :class:`Axial` ``(q, r)``, the canonical form every algorithm works in.
  The third cube component ``s = -q - r`` is derived, never stored.
* :class:`Cube` ``(x, y, z)`` with ``x + y + z == 0`` enforced on
  construction. Maps to axial as ``x = q``, ``z = r``.
* :class:`Offset` ``(col, row)`` under one of four :class:`OffsetLayout`
  conventions, matching a rectangular array.
* :class:`Doubled` ``(col, row)`` in double-height form, ``row = 2r + q``.

All of them are frozen value objects implementing :class:`HexCoordinate`, so
code written against "any hex coordinate" can accept each of them.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Protocol, runtime_checkable

from .errors import InvalidCoordinateError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .layout import HexLayout


class WorldPosition(NamedTuple):
    """Continuous 3-component position in host world space."""

    x: float
    y: float
    z: float


@runtime_checkable
class HexCoordinate(Protocol):
    """Capability set shared by every hex coordinate representation."""

    def to_axial(self) -> Axial: ...

    def to_cube(self) -> Cube: ...

    def to_world_position(self, layout: HexLayout | None = None) -> WorldPosition: ...

    def neighbor(self, direction: int) -> HexCoordinate: ...

    def neighbors(self) -> list[HexCoordinate]: ...

    def distance_to(self, other: HexCoordinate) -> int: ...

    def is_valid(self) -> bool: ...

    def project(self, axial: Axial) -> HexCoordinate: ...


class _HexBase:
    """Behaviour every representation derives from its own primitives."""

    __slots__ = ()

    def to_world_position(self, layout: HexLayout | None = None) -> WorldPosition:
        """Centre of this cell in world space (unit pointy-top layout by default)."""
        from .layout import DEFAULT_LAYOUT

        return (layout or DEFAULT_LAYOUT).to_world(self)  # type: ignore[arg-type]

    def neighbors(self) -> list:
        """The six adjacent cells, in direction order 0..5."""
        return [self.neighbor(i) for i in range(6)]  # type: ignore[attr-defined]

    def distance_to(self, other: HexCoordinate) -> int:
        """Hex distance to ``other``, which may use any representation."""
        from .heuristics import hex_distance

        return hex_distance(self, other)  # type: ignore[arg-type]


def _is_int(*values: object) -> bool:
    return all(isinstance(v, int) and not isinstance(v, bool) for v in values)


@dataclass(frozen=True, slots=True)
class Axial(_HexBase):
    q: int
    r: int

    @property
    def s(self) -> int:
        """Implicit cube coordinate: s = -q - r."""
        return -self.q - self.r

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: object) -> Axial:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: object) -> Axial:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q - other.q, self.r - other.r)

    def __neg__(self) -> Axial:
        return Axial(-self.q, -self.r)

    def __mul__(self, factor: object) -> Axial:
        if not isinstance(factor, int):
            return NotImplemented
        return Axial(self.q * factor, self.r * factor)

    __rmul__ = __mul__

    # -- HexCoordinate ---------------------------------------------------

    def to_axial(self) -> Axial:
        return self

    def to_cube(self) -> Cube:
        from .conversions import axial_to_cube

        return axial_to_cube(self)

    def neighbor(self, direction: int) -> Axial:
        from .neighbors import neighbor_axial

        return neighbor_axial(self, direction)

    def is_valid(self) -> bool:
        return _is_int(self.q, self.r)

    def project(self, axial: Axial) -> Axial:
        return axial

    def __repr__(self) -> str:
        return f"Axial({self.q}, {self.r})"


ORIGIN = Axial(0, 0)


@dataclass(frozen=True, slots=True)
class Cube(_HexBase):
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise InvalidCoordinateError(
                "For cube coords, x + y + z must be 0 "
                f"(got {self.x} + {self.y} + {self.z} = {self.x + self.y + self.z})"
            )

    def __add__(self, other: object) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Cube:
        return Cube(-self.x, -self.y, -self.z)

    def __mul__(self, factor: object) -> Cube:
        if not isinstance(factor, int):
            return NotImplemented
        return Cube(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def to_axial(self) -> Axial:
        from .conversions import cube_to_axial

        return cube_to_axial(self)

    def to_cube(self) -> Cube:
        return self

    def neighbor(self, direction: int) -> Cube:
        from .neighbors import neighbor_cube

        return neighbor_cube(self, direction)

    def is_valid(self) -> bool:
        return _is_int(self.x, self.y, self.z) and self.x + self.y + self.z == 0

    def project(self, axial: Axial) -> Cube:
        from .conversions import axial_to_cube

        return axial_to_cube(axial)

    def __repr__(self) -> str:
        return f"Cube({self.x}, {self.y}, {self.z})"


class OffsetLayout(Enum):
    """Which columns (``*_Q``) or rows (``*_R``) are shoved by half a cell."""

    ODD_Q = "odd_q"
    EVEN_Q = "even_q"
    ODD_R = "odd_r"
    EVEN_R = "even_r"

    @property
    def shifts_columns(self) -> bool:
        return self in (OffsetLayout.ODD_Q, OffsetLayout.EVEN_Q)


@dataclass(frozen=True, slots=True)
class Offset(_HexBase):
    col: int  # q-like
    row: int  # r-like
    layout: OffsetLayout

    def to_axial(self) -> Axial:
        from .conversions import offset_to_axial

        return offset_to_axial(self)

    def to_cube(self) -> Cube:
        from .conversions import offset_to_cube

        return offset_to_cube(self)

    def neighbor(self, direction: int) -> Offset:
        from .neighbors import neighbor_offset

        return neighbor_offset(self, direction)

    def is_valid(self) -> bool:
        return _is_int(self.col, self.row) and isinstance(self.layout, OffsetLayout)

    def project(self, axial: Axial) -> Offset:
        from .conversions import axial_to_offset

        return axial_to_offset(axial, self.layout)

    def __repr__(self) -> str:
        return f"Offset({self.col}, {self.row}, {self.layout.name})"


@dataclass(frozen=True, slots=True)
class Doubled(_HexBase):
    """Double-height coordinate: ``col = q`` and ``row = 2 * r + q``.

    Only pairs with ``(row - col) % 2 == 0`` name a cell. Construction does
    not reject other pairs and :meth:`is_valid` reports them. Converting one,
    or asking it for a neighbour, raises
    :class:`~hexcore.errors.InvalidCoordinateError`.
    """

    col: int
    row: int

    @classmethod
    def nearest_valid(cls, col: int, row: int) -> Doubled:
        """Snap ``(col, row)`` onto a valid pair by nudging the smaller component away from zero."""
        if (row - col) % 2 == 0:
            return cls(col, row)
        if abs(col) <= abs(row):
            col += 1 if col >= 0 else -1
        else:
            row += 1 if row >= 0 else -1
        return cls(col, row)

    def to_axial(self) -> Axial:
        from .conversions import doubled_to_axial

        return doubled_to_axial(self)

    def to_cube(self) -> Cube:
        from .conversions import doubled_to_cube

        return doubled_to_cube(self)

    def neighbor(self, direction: int) -> Doubled:
        from .neighbors import neighbor_doubled

        return neighbor_doubled(self, direction)

    def is_valid(self) -> bool:
        return _is_int(self.col, self.row) and (self.row - self.col) % 2 == 0

    def project(self, axial: Axial) -> Doubled:
        from .conversions import axial_to_doubled

        return axial_to_doubled(axial)

    def __repr__(self) -> str:
        return f"Doubled({self.col}, {self.row})"


__all__ = [
    "Axial",
    "Cube",
    "Doubled",
    "HexCoordinate",
    "ORIGIN",
    "Offset",
    "OffsetLayout",
    "WorldPosition",
]
