import pytest

from hexcore import Axial, Cube, Doubled, Offset, OffsetLayout
from hexcore import InvalidCoordinateError, InvalidDirectionError, direction_between, neighbors_axial, neighbors_offset
from hexcore.conversions import axial_to_doubled, axial_to_offset
from hexcore.heuristics import hex_distance_axial
from hexcore.neighbors import (
    AXIAL_DIRECTIONS,
    axial_direction,
    cube_direction,
    neighbor_axial,
    neighbor_cube,
    neighbor_doubled,
    neighbor_offset,
    neighbors_axial_bounded,
    neighbors_cube,
    neighbors_doubled,
    neighbors_offset_bounded,
    offset_neighbor_via_axial,
)


def test_neighbors_axial_six():
    n = list(neighbors_axial(Axial(0, 0)))
    assert len(n) == 6
    assert Axial(1, 0) in n
    assert Axial(0, 1) in n


def test_direction_order_is_counter_clockwise_from_east():
    assert [neighbor_axial(Axial(0, 0), i) for i in range(6)] == [
        Axial(1, 0),
        Axial(1, -1),
        Axial(0, -1),
        Axial(-1, 0),
        Axial(-1, 1),
        Axial(0, 1),
    ]


def test_cube_directions_match_axial():
    for i in range(6):
        a = axial_direction(i)
        assert cube_direction(i) == Cube(a.q, -a.q - a.r, a.r)
        assert neighbor_cube(Cube(0, 0, 0), i).to_axial() == a
    assert len(set(neighbors_cube(Cube(2, -1, -1)))) == 6


@pytest.mark.parametrize("direction", [-1, 6, 7, True, 1.0, "2"])
def test_invalid_direction_is_rejected(direction) -> None:
    with pytest.raises(InvalidDirectionError) as excinfo:
        neighbor_axial(Axial(0, 0), direction)
    assert excinfo.value.direction == direction
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (
            Offset(4, 4, OffsetLayout.EVEN_R),
            {
                (3, 4),
                (4, 3),
                (4, 5),
                (5, 3),
                (5, 4),
                (5, 5),
            },
        ),
        (
            Offset(4, 5, OffsetLayout.EVEN_R),
            {
                (3, 4),
                (3, 5),
                (3, 6),
                (4, 4),
                (4, 6),
                (5, 5),
            },
        ),
        (
            Offset(4, 4, OffsetLayout.ODD_R),
            {
                (3, 3),
                (3, 4),
                (3, 5),
                (4, 3),
                (4, 5),
                (5, 4),
            },
        ),
        (
            Offset(4, 5, OffsetLayout.ODD_R),
            {
                (3, 5),
                (4, 4),
                (4, 6),
                (5, 4),
                (5, 5),
                (5, 6),
            },
        ),
        (
            Offset(4, 4, OffsetLayout.EVEN_Q),
            {
                (3, 4),
                (3, 5),
                (4, 3),
                (4, 5),
                (5, 4),
                (5, 5),
            },
        ),
        (
            Offset(5, 4, OffsetLayout.EVEN_Q),
            {
                (4, 3),
                (4, 4),
                (5, 3),
                (5, 5),
                (6, 3),
                (6, 4),
            },
        ),
        (
            Offset(4, 4, OffsetLayout.ODD_Q),
            {
                (3, 3),
                (3, 4),
                (4, 3),
                (4, 5),
                (5, 3),
                (5, 4),
            },
        ),
        (
            Offset(5, 4, OffsetLayout.ODD_Q),
            {
                (4, 4),
                (4, 5),
                (5, 3),
                (5, 5),
                (6, 4),
                (6, 5),
            },
        ),
    ],
)
def test_neighbors_offset_exact_neighbor_sets(offset: Offset, expected: set[tuple[int, int]]):
    actual = {(n.col, n.row) for n in neighbors_offset(offset)}
    assert actual == expected


@pytest.mark.parametrize("layout", list(OffsetLayout))
def test_offset_tables_agree_with_axial(layout: OffsetLayout) -> None:
    for col in range(-3, 4):
        for row in range(-3, 4):
            o = Offset(col, row, layout)
            for i in range(6):
                assert neighbor_offset(o, i) == offset_neighbor_via_axial(o, i)


def test_doubled_neighbors_match_axial():
    a = Axial(2, -3)
    d = axial_to_doubled(a)
    assert list(neighbors_doubled(d)) == [axial_to_doubled(n) for n in neighbors_axial(a)]
    assert neighbor_doubled(d, 2) == Doubled(d.col, d.row - 2)


def test_doubled_neighbors_reject_odd_parity():
    with pytest.raises(InvalidCoordinateError):
        neighbor_doubled(Doubled(0, 1), 3)
    with pytest.raises(InvalidCoordinateError):
        list(neighbors_doubled(Doubled(1, 2)))


def test_every_neighbor_is_one_step_away():
    a = Axial(-4, 7)
    assert all(hex_distance_axial(a, n) == 1 for n in neighbors_axial(a))


def test_direction_between_inverts_neighbor():
    center = Axial(3, -1)
    for i in range(6):
        assert direction_between(center, neighbor_axial(center, i)) == i
    o = axial_to_offset(center, OffsetLayout.EVEN_Q)
    assert direction_between(o, neighbor_offset(o, 4)) == 4


def test_direction_between_requires_adjacency():
    with pytest.raises(ValueError):
        direction_between(Axial(0, 0), Axial(2, 0))
    with pytest.raises(ValueError):
        direction_between(Axial(0, 0), Axial(0, 0))


def test_bounded_neighbors_clip_to_grid():
    corner = list(neighbors_axial_bounded(Axial(0, 0), 5, 5))
    assert set(corner) == {Axial(1, 0), Axial(0, 1)}
    edge = list(neighbors_offset_bounded(Offset(0, 0, OffsetLayout.ODD_Q), 5, 5))
    assert all(0 <= n.col < 5 and 0 <= n.row < 5 for n in edge)
    assert len(edge) == 2


def test_direction_table_has_six_distinct_unit_steps():
    assert len(set(AXIAL_DIRECTIONS)) == 6
    assert all(hex_distance_axial(Axial(0, 0), d) == 1 for d in AXIAL_DIRECTIONS)
