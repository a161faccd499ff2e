"""Single entry point that owns a grid's settings, layout, cache and pool.

Engine-side code normally talks to one :class:`HexGrid` instead of the free
functions: it applies :class:`~hexcore.config.HexGridSettings`, memoises hot
conversions in a :class:`~hexcore.cache.CoordinateCache` and serves list
results out of a :class:`~hexcore.pool.BufferPool`. List results may be handed
back with :meth:`HexGrid.release` once the caller is done with them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, TypeVar

from .areas import hex_range, hex_ring
from .cache import CoordinateCache
from .config import HexGridSettings
from .conversions import axial_to_cube, axial_to_offset
from .coords import Axial, Cube, HexCoordinate, Offset, OffsetLayout, WorldPosition
from .diagnostics import ValidationReport, validate_conversions, validate_distances
from .heuristics import hex_distance
from .layout import HexLayout
from .lines import hex_line
from .pool import BufferPool

log = logging.getLogger(__name__)

H = TypeVar("H", bound=HexCoordinate)


@dataclass(frozen=True)
class GridStats:
    cache_entries: int
    cache_usage: float
    cache_hits: int
    cache_misses: int
    pool_free: int
    pool_created: int
    pool_reused: int
    pool_discarded: int


class HexGrid:
    def __init__(self, settings: HexGridSettings | None = None) -> None:
        self._settings = settings or HexGridSettings()
        self._layout = self._settings.layout()
        self._cache = CoordinateCache(self._settings.cache_capacity, self._settings.cache_policy)
        self._pool = BufferPool(self._settings.pool_capacity)

    # -- Owned state -----------------------------------------------------

    @property
    def settings(self) -> HexGridSettings:
        return self._settings

    @property
    def layout(self) -> HexLayout:
        return self._layout

    @property
    def cache(self) -> CoordinateCache:
        return self._cache

    @property
    def pool(self) -> BufferPool:
        return self._pool

    def configure(self, settings: HexGridSettings) -> None:
        """Apply new settings. Cached entries and pooled buffers are dropped."""
        self._settings = settings
        self._layout = settings.layout()
        self._cache.resize(settings.cache_capacity, settings.cache_policy)
        self._pool = BufferPool(settings.pool_capacity)
        log.debug(
            "hex grid configured: %s, size %.3f, plane %s, cache %d (%s), pool %d",
            settings.orientation.value,
            settings.cell_size,
            settings.plane.value,
            settings.cache_capacity,
            settings.cache_policy.value,
            settings.pool_capacity,
        )

    def _buffer(self) -> list:
        return self._pool.acquire() if self._settings.pool_enabled else []

    def release(self, buffer: list) -> None:
        """Return a list previously produced by this grid."""
        if self._settings.pool_enabled:
            self._pool.release(buffer)

    def reset_cache(self) -> None:
        self._cache.clear()
        log.debug("hex grid cache cleared")

    def reset_pool(self) -> None:
        self._pool.clear()
        log.debug("hex grid pool cleared")

    # -- World space -----------------------------------------------------

    def world_to_axial(self, position: Iterable[float]) -> Axial:
        return self._layout.to_axial(position)

    def world_to_offset(self, position: Iterable[float], layout: OffsetLayout | None = None) -> Offset:
        return self.to_offset(self.world_to_axial(position), layout)

    def axial_to_world(self, coord: HexCoordinate) -> WorldPosition:
        a = coord.to_axial()
        if self._settings.cache_enabled:
            return self._cache.world(a, self._layout)
        return self._layout.to_world(a)

    # -- Conversion ------------------------------------------------------

    def to_cube(self, coord: HexCoordinate) -> Cube:
        a = coord.to_axial()
        if self._settings.cache_enabled:
            return self._cache.cube(a)
        return axial_to_cube(a)

    def to_offset(self, coord: HexCoordinate, layout: OffsetLayout | None = None) -> Offset:
        """``coord`` in offset form, using the configured layout unless one is given."""
        target = layout or self._settings.offset_layout
        a = coord.to_axial()
        if self._settings.cache_enabled:
            return self._cache.offset(a, target)
        return axial_to_offset(a, target)

    # -- Queries ---------------------------------------------------------

    def neighbors(self, coord: H) -> list[H]:
        out = self._buffer()
        a = coord.to_axial()
        if not self._settings.cache_enabled:
            out.extend(coord.neighbors())
        elif isinstance(coord, Axial):
            out.extend(self._cache.neighbors(a))
        else:
            out.extend(coord.project(n) for n in self._cache.neighbors(a))
        return out

    def distance(self, a: HexCoordinate, b: HexCoordinate) -> int:
        if self._settings.cache_enabled:
            return self._cache.distance(a.to_axial(), b.to_axial())
        return hex_distance(a, b)

    def filled_range(self, center: H, radius: int) -> list[H]:
        return hex_range(center, radius, out=self._buffer())

    def ring(self, center: H, radius: int) -> list[H]:
        return hex_ring(center, radius, out=self._buffer())

    def line(self, start: H, end: HexCoordinate, *, nudge: bool = False) -> list[H]:
        return hex_line(start, end, nudge=nudge, out=self._buffer())

    # -- Introspection ---------------------------------------------------

    def stats(self) -> GridStats:
        status = self._cache.status().values()
        pool = self._pool.stats
        return GridStats(
            cache_entries=len(self._cache),
            cache_usage=self._cache.usage,
            cache_hits=sum(s.hits for s in status),
            cache_misses=sum(s.misses for s in status),
            pool_free=len(self._pool),
            pool_created=pool.created,
            pool_reused=pool.reused,
            pool_discarded=pool.discarded,
        )

    def validate(self, samples: int = 1000, seed: int | None = None) -> ValidationReport:
        """Run the conversion and distance self-checks."""
        return validate_conversions(samples, seed=seed).merge(validate_distances(samples, seed=seed))


__all__ = ["GridStats", "HexGrid"]
