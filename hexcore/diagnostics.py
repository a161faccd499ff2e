"""Randomised self-checks for conversions, neighbour tables and distances.

Both validators draw axial samples from a seeded ``numpy.random.Generator``
so any failure they report can be reproduced with the same ``seed``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from numpy.random import PCG64, Generator

from .conversions import (
    axial_to_cube,
    axial_to_doubled,
    axial_to_offset,
    cube_to_axial,
    doubled_to_axial,
    offset_to_axial,
)
from .coords import Axial, OffsetLayout
from .heuristics import hex_distance_axial, hex_distance_cube, hex_distance_doubled, hex_distance_offset
from .layout import FLAT_TOP, POINTY_TOP, HexLayout, WorldPlane
from .neighbors import neighbor_axial, neighbor_offset, offset_neighbor_via_axial

log = logging.getLogger(__name__)

_WORLD_LAYOUTS = tuple(
    HexLayout(orientation=o, size=1.0, plane=p) for o in (POINTY_TOP, FLAT_TOP) for p in WorldPlane
)


@dataclass
class ValidationReport:
    checked: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def check(self, condition: bool, describe: Callable[[], str]) -> None:
        self.checked += 1
        if not condition:
            message = describe()
            log.error("hex validation failed: %s", message)
            self.failures.append(message)

    def merge(self, other: ValidationReport) -> ValidationReport:
        return ValidationReport(self.checked + other.checked, [*self.failures, *other.failures])


def _sample_axials(samples: int, span: int, seed: int | None) -> list[Axial]:
    if samples < 0:
        raise ValueError("samples must be non-negative")
    if span < 0:
        raise ValueError("span must be non-negative")
    rng = Generator(PCG64(seed))
    qr = rng.integers(-span, span + 1, size=(samples, 2))
    return [Axial(int(q), int(r)) for q, r in qr]


def validate_conversions(samples: int = 1000, *, span: int = 1000, seed: int | None = None) -> ValidationReport:
    """Round-trip random cells through every representation and world layout.

    Also checks that each offset layout's parity neighbour table agrees with
    neighbours computed through axial space.
    """

    report = ValidationReport()
    for a in _sample_axials(samples, span, seed):
        back = cube_to_axial(axial_to_cube(a))
        report.check(back == a, lambda: f"cube round trip {a!r} -> {back!r}")

        back_d = doubled_to_axial(axial_to_doubled(a))
        report.check(back_d == a, lambda: f"doubled round trip {a!r} -> {back_d!r}")

        for layout in OffsetLayout:
            o = axial_to_offset(a, layout)
            back_o = offset_to_axial(o)
            report.check(back_o == a, lambda: f"{layout.value} round trip {a!r} -> {back_o!r}")
            for direction in range(6):
                direct = neighbor_offset(o, direction)
                via = offset_neighbor_via_axial(o, direction)
                report.check(
                    direct == via,
                    lambda: f"{layout.value} neighbour {direction} of {o!r}: table {direct!r}, axial {via!r}",
                )

        for hex_layout in _WORLD_LAYOUTS:
            back_w = hex_layout.to_axial(hex_layout.to_world(a))
            report.check(back_w == a, lambda: f"world round trip {a!r} -> {back_w!r} ({hex_layout.plane.value})")

    log.info("conversion check: %d checks, %d failures", report.checked, len(report.failures))
    return report


def validate_distances(samples: int = 1000, *, span: int = 1000, seed: int | None = None) -> ValidationReport:
    """Check the metric laws and cross-representation agreement of hex distance."""

    report = ValidationReport()
    cells = _sample_axials(samples * 3, span, seed)
    for a, b, c in zip(cells[0::3], cells[1::3], cells[2::3]):
        ab = hex_distance_axial(a, b)
        ba = hex_distance_axial(b, a)
        report.check(hex_distance_axial(a, a) == 0, lambda: f"distance {a!r} to itself is not 0")
        report.check(ab == ba, lambda: f"asymmetric distance {a!r}/{b!r}: {ab} vs {ba}")
        report.check(ab >= 0 and (ab == 0) == (a == b), lambda: f"distance {a!r}/{b!r} = {ab}")

        ac = hex_distance_axial(a, c)
        cb = hex_distance_axial(c, b)
        report.check(ab <= ac + cb, lambda: f"triangle inequality {a!r}/{b!r} via {c!r}: {ab} > {ac} + {cb}")

        cube = hex_distance_cube(axial_to_cube(a), axial_to_cube(b))
        report.check(cube == ab, lambda: f"cube distance {a!r}/{b!r}: {cube} vs {ab}")
        doubled = hex_distance_doubled(axial_to_doubled(a), axial_to_doubled(b))
        report.check(doubled == ab, lambda: f"doubled distance {a!r}/{b!r}: {doubled} vs {ab}")
        for layout in OffsetLayout:
            off = hex_distance_offset(axial_to_offset(a, layout), axial_to_offset(b, layout))
            report.check(off == ab, lambda: f"{layout.value} distance {a!r}/{b!r}: {off} vs {ab}")

        for direction in range(6):
            step = hex_distance_axial(a, neighbor_axial(a, direction))
            report.check(step == 1, lambda: f"neighbour {direction} of {a!r} at distance {step}")

    log.info("distance check: %d checks, %d failures", report.checked, len(report.failures))
    return report


__all__ = ["ValidationReport", "validate_conversions", "validate_distances"]
