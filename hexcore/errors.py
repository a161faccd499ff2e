"""Exception types raised by the hex coordinate core."""

from __future__ import annotations


class HexCoreError(Exception):
    """Base class for errors raised by :mod:`hexcore`."""


class InvalidCoordinateError(HexCoreError, ValueError):
    """A coordinate value breaks the invariant of its representation."""


class InvalidDirectionError(HexCoreError, ValueError):
    """A direction index outside ``0..5`` was supplied."""

    def __init__(self, direction: object) -> None:
        super().__init__(f"direction must be an integer in 0..5, got {direction!r}")
        self.direction = direction


__all__ = ["HexCoreError", "InvalidCoordinateError", "InvalidDirectionError"]
