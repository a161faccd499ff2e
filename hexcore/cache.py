"""Bounded memoization for conversions, distances and neighbour sets.

Every table has a hard capacity. Under :attr:`CachePolicy.BOUNDED` a full
table simply stops accepting entries and later misses are computed directly;
under :attr:`CachePolicy.LRU` the least recently used entry is evicted
instead. Neither structure is safe for concurrent mutation.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Generic, Hashable, TypeVar

from .conversions import axial_to_cube, axial_to_offset
from .coords import Axial, Cube, Offset, OffsetLayout, WorldPosition
from .heuristics import hex_distance_axial
from .neighbors import neighbors_axial

if TYPE_CHECKING:  # pragma: no cover - imported only for type checkers
    from .layout import HexLayout

log = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class CachePolicy(str, Enum):
    """What a full table does with a new entry."""

    BOUNDED = "bounded"  # keep what is there, stop storing
    LRU = "lru"  # evict the least recently used entry


class CacheKind(str, Enum):
    CUBE = "cube"
    OFFSET = "offset"
    WORLD = "world"
    DISTANCE = "distance"
    NEIGHBORS = "neighbors"


class BoundedMemo(Generic[K, V]):
    """Key/value table with a hard capacity."""

    def __init__(self, capacity: int, policy: CachePolicy = CachePolicy.BOUNDED, *, name: str = "memo") -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self.policy = CachePolicy(policy)
        self.name = name
        self.hits = 0
        self.misses = 0
        self.evictions = 0
        self._data: OrderedDict[K, V] = OrderedDict()
        self._saturated_logged = False

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    @property
    def full(self) -> bool:
        return len(self._data) >= self.capacity

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def lookup(self, key: K) -> V | None:
        """Return the cached value for ``key`` (counting a hit) or ``None``."""
        try:
            value = self._data[key]
        except KeyError:
            return None
        if self.policy == CachePolicy.LRU:
            self._data.move_to_end(key)
        self.hits += 1
        return value

    def store(self, key: K, value: V) -> None:
        if self.capacity == 0:
            return
        if key in self._data:
            self._data[key] = value
            if self.policy == CachePolicy.LRU:
                self._data.move_to_end(key)
            return
        if self.full:
            if self.policy == CachePolicy.BOUNDED:
                if not self._saturated_logged:
                    log.debug("%s cache full at %d entries; computing directly from now on", self.name, self.capacity)
                    self._saturated_logged = True
                return
            self._data.popitem(last=False)
            self.evictions += 1
        self._data[key] = value

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        value = self.lookup(key)
        if value is not None:
            return value
        self.misses += 1
        value = compute()
        self.store(key, value)
        return value

    def clear(self) -> None:
        self._data.clear()
        self.hits = self.misses = self.evictions = 0
        self._saturated_logged = False


@dataclass(frozen=True)
class CacheStatus:
    kind: CacheKind
    entries: int
    capacity: int
    hits: int
    misses: int
    evictions: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class CoordinateCache:
    """One :class:`BoundedMemo` per :class:`CacheKind`, sharing capacity and policy.

    World positions are keyed by ``(axial, layout)`` so a layout change never
    serves stale placements, though owners normally clear the cache anyway.
    Neighbour sets are stored as tuples so callers cannot mutate cached state.
    """

    def __init__(self, capacity: int = 1000, policy: CachePolicy = CachePolicy.BOUNDED) -> None:
        self._capacity = capacity
        self._policy = CachePolicy(policy)
        self._tables: dict[CacheKind, BoundedMemo] = {
            kind: BoundedMemo(capacity, self._policy, name=kind.value) for kind in CacheKind
        }

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def policy(self) -> CachePolicy:
        return self._policy

    def resize(self, capacity: int, policy: CachePolicy | None = None) -> None:
        """Change capacity and policy; existing entries are dropped."""
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        if policy is not None:
            self._policy = CachePolicy(policy)
        self._tables = {kind: BoundedMemo(capacity, self._policy, name=kind.value) for kind in CacheKind}

    def table(self, kind: CacheKind) -> BoundedMemo:
        return self._tables[kind]

    # -- Cached operations -----------------------------------------------

    def cube(self, a: Axial) -> Cube:
        return self._tables[CacheKind.CUBE].get_or_compute(a, lambda: axial_to_cube(a))

    def offset(self, a: Axial, layout: OffsetLayout) -> Offset:
        return self._tables[CacheKind.OFFSET].get_or_compute((a, layout), lambda: axial_to_offset(a, layout))

    def world(self, a: Axial, layout: HexLayout) -> WorldPosition:
        return self._tables[CacheKind.WORLD].get_or_compute((a, layout), lambda: layout.to_world(a))

    def distance(self, a: Axial, b: Axial) -> int:
        table = self._tables[CacheKind.DISTANCE]
        reverse = table.lookup((b, a))
        if reverse is not None:
            return reverse
        return table.get_or_compute((a, b), lambda: hex_distance_axial(a, b))

    def neighbors(self, a: Axial) -> tuple[Axial, ...]:
        return self._tables[CacheKind.NEIGHBORS].get_or_compute(a, lambda: tuple(neighbors_axial(a)))

    # -- Management ------------------------------------------------------

    def clear(self, kind: CacheKind | None = None) -> None:
        if kind is None:
            for table in self._tables.values():
                table.clear()
        else:
            self._tables[kind].clear()

    def __len__(self) -> int:
        return sum(len(t) for t in self._tables.values())

    @property
    def usage(self) -> float:
        """Fraction of the combined capacity in use."""
        total = self._capacity * len(self._tables)
        return len(self) / total if total else 0.0

    def status(self) -> dict[CacheKind, CacheStatus]:
        return {
            kind: CacheStatus(kind, len(t), t.capacity, t.hits, t.misses, t.evictions)
            for kind, t in self._tables.items()
        }


__all__ = ["BoundedMemo", "CacheKind", "CachePolicy", "CacheStatus", "CoordinateCache"]
