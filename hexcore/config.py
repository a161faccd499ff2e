"""Validated settings for a :class:`~hexcore.grid.HexGrid`."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .cache import CachePolicy
from .coords import OffsetLayout, WorldPosition
from .layout import FLAT_TOP, POINTY_TOP, HexLayout, WorldPlane


class HexOrientation(str, Enum):
    """Which way the hexagons point."""

    POINTY = "pointy"
    FLAT = "flat"


class HexGridSettings(BaseModel):
    """Configuration surface of the hex grid core."""

    model_config = ConfigDict(extra="forbid")

    orientation: HexOrientation = Field(default=HexOrientation.POINTY)
    cell_size: float = Field(default=1.0, gt=0.0)
    plane: WorldPlane = Field(default=WorldPlane.XZ)
    origin: tuple[float, float, float] = Field(default=(0.0, 0.0, 0.0))
    offset_layout: OffsetLayout = Field(default=OffsetLayout.ODD_Q)

    cache_enabled: bool = Field(default=True)
    cache_capacity: int = Field(default=1000, ge=0)
    cache_policy: CachePolicy = Field(default=CachePolicy.BOUNDED)

    pool_enabled: bool = Field(default=True)
    pool_capacity: int = Field(default=10, ge=0)

    @property
    def pointy_top(self) -> bool:
        return self.orientation == HexOrientation.POINTY

    def layout(self) -> HexLayout:
        """Build the :class:`~hexcore.layout.HexLayout` these settings describe."""

        return HexLayout(
            orientation=POINTY_TOP if self.pointy_top else FLAT_TOP,
            size=self.cell_size,
            origin=WorldPosition(*self.origin),
            plane=self.plane,
        )


__all__ = ["HexGridSettings", "HexOrientation"]
