from .errors import HexCoreError, InvalidCoordinateError, InvalidDirectionError
from .coords import Axial, Cube, Doubled, HexCoordinate, Offset, OffsetLayout, WorldPosition
from .conversions import (
    axial_to_cube,
    axial_to_doubled,
    axial_to_offset,
    cube_to_axial,
    doubled_to_axial,
    offset_to_axial,
)
from .rounding import axial_round, cube_round
from .heuristics import hex_distance, hex_distance_axial, hex_distance_cube
from .neighbors import (
    AXIAL_DIRECTIONS,
    axial_direction,
    direction_between,
    neighbors_axial,
    neighbors_cube,
    neighbors_offset,
    neighbors_axial_bounded,
    neighbors_offset_bounded,
)
from .areas import hex_range, hex_ring
from .lines import hex_line
from .transforms import reflect, rotate
from .layout import FLAT_TOP, POINTY_TOP, HexLayout, WorldPlane
from .cache import CachePolicy, CoordinateCache
from .pool import BufferPool
from .config import HexGridSettings, HexOrientation
from .diagnostics import ValidationReport, validate_conversions, validate_distances
from .grid import GridStats, HexGrid

__version__ = "0.1.0"

__all__ = [
    "HexCoreError",
    "InvalidCoordinateError",
    "InvalidDirectionError",
    "Axial",
    "Cube",
    "Doubled",
    "HexCoordinate",
    "Offset",
    "OffsetLayout",
    "WorldPosition",
    "axial_to_cube",
    "axial_to_doubled",
    "axial_to_offset",
    "cube_to_axial",
    "doubled_to_axial",
    "offset_to_axial",
    "axial_round",
    "cube_round",
    "hex_distance",
    "hex_distance_axial",
    "hex_distance_cube",
    "AXIAL_DIRECTIONS",
    "axial_direction",
    "direction_between",
    "neighbors_axial",
    "neighbors_cube",
    "neighbors_offset",
    "neighbors_axial_bounded",
    "neighbors_offset_bounded",
    "hex_range",
    "hex_ring",
    "hex_line",
    "reflect",
    "rotate",
    "FLAT_TOP",
    "POINTY_TOP",
    "HexLayout",
    "WorldPlane",
    "CachePolicy",
    "CoordinateCache",
    "BufferPool",
    "HexGridSettings",
    "HexOrientation",
    "ValidationReport",
    "validate_conversions",
    "validate_distances",
    "GridStats",
    "HexGrid",
    "__version__",
]
