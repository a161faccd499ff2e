import itertools

import pytest

from hexcore import Axial, Cube, Doubled, Offset, OffsetLayout
from hexcore import hex_distance, hex_distance_axial, hex_distance_cube
from hexcore.conversions import axial_to_doubled, axial_to_offset
from hexcore.heuristics import hex_distance_doubled, hex_distance_offset

CELLS = [Axial(q, r) for q in range(-3, 4) for r in range(-3, 4)]


def test_hex_distance_axial():
    a = Axial(0, 0)
    b = Axial(2, -1)
    assert hex_distance_axial(a, b) == 2


def test_hex_distance_cube():
    a = Cube(0, 0, 0)
    b = Cube(1, -2, 1)
    assert hex_distance_cube(a, b) == 2


def test_known_distance():
    assert hex_distance(Axial(0, 0), Axial(3, -2)) == 3


def test_identity_and_symmetry():
    for a, b in itertools.product(CELLS, repeat=2):
        d = hex_distance_axial(a, b)
        assert d == hex_distance_axial(b, a)
        assert (d == 0) == (a == b)


def test_triangle_inequality():
    sample = CELLS[::5]
    for a, b, c in itertools.product(sample, repeat=3):
        assert hex_distance_axial(a, b) <= hex_distance_axial(a, c) + hex_distance_axial(c, b)


def test_doubled_distance_matches_axial():
    for a, b in itertools.product(CELLS[::3], repeat=2):
        assert hex_distance_doubled(axial_to_doubled(a), axial_to_doubled(b)) == hex_distance_axial(a, b)


@pytest.mark.parametrize("layout", list(OffsetLayout))
def test_offset_distance_matches_axial(layout: OffsetLayout) -> None:
    for a, b in itertools.product(CELLS[::3], repeat=2):
        assert hex_distance_offset(axial_to_offset(a, layout), axial_to_offset(b, layout)) == hex_distance_axial(a, b)


def test_mixed_representations():
    a = Axial(0, 0)
    assert hex_distance(a, Cube(3, -1, -2)) == 3
    assert hex_distance(Doubled(3, -1), a) == 3
    assert hex_distance(Offset(3, -1, OffsetLayout.ODD_Q), a) == 3
