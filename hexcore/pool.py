"""Reusable list buffers for range, ring, line and neighbour results."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

log = logging.getLogger(__name__)


@dataclass
class PoolStats:
    created: int = 0
    reused: int = 0
    released: int = 0
    discarded: int = 0


class BufferPool:
    """Free list of empty ``list`` buffers, capped at ``capacity``.

    :meth:`acquire` never fails: an empty pool hands out a fresh list.
    :meth:`release` clears the buffer and keeps it for reuse unless the pool
    already holds ``capacity`` buffers, in which case it is dropped.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self.stats = PoolStats()
        self._free: list[list] = []

    def __len__(self) -> int:
        return len(self._free)

    def acquire(self) -> list:
        if self._free:
            self.stats.reused += 1
            return self._free.pop()
        self.stats.created += 1
        return []

    def release(self, buffer: list) -> None:
        buffer.clear()
        if any(held is buffer for held in self._free):
            return
        if len(self._free) >= self.capacity:
            self.stats.discarded += 1
            log.debug("buffer pool at capacity %d; discarding released buffer", self.capacity)
            return
        self.stats.released += 1
        self._free.append(buffer)

    @contextmanager
    def borrowed(self) -> Iterator[list]:
        """Lend a buffer for the duration of a ``with`` block."""
        buffer = self.acquire()
        try:
            yield buffer
        finally:
            self.release(buffer)

    def clear(self) -> None:
        self._free.clear()
        self.stats = PoolStats()


__all__ = ["BufferPool", "PoolStats"]
