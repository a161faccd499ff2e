import pytest

from hexcore import Axial, Cube, Offset, OffsetLayout, hex_distance, reflect, rotate
from hexcore.neighbors import axial_direction, cube_direction
from hexcore.transforms import reflect_cube, rotate_cube


@pytest.mark.parametrize("steps", range(-6, 7))
def test_rotation_advances_direction_index(steps: int) -> None:
    for i in range(6):
        assert rotate_cube(cube_direction(i), steps) == cube_direction((i + steps) % 6)


def test_full_turn_is_identity():
    c = Cube(3, -5, 2)
    assert rotate_cube(c, 6) == c
    assert rotate_cube(rotate_cube(c, 2), -2) == c


def test_rotate_around_center_preserves_distance():
    center = Axial(2, -1)
    a = Axial(5, -3)
    for k in range(6):
        rotated = rotate(a, k, center)
        assert hex_distance(rotated, center) == hex_distance(a, center)
    assert rotate(a, 1, center) == Axial(3, -4)


def test_rotate_keeps_representation():
    o = Offset(2, 1, OffsetLayout.EVEN_R)
    rotated = rotate(o, 3)
    assert isinstance(rotated, Offset)
    assert rotated.layout is OffsetLayout.EVEN_R
    assert rotated.to_axial() == -o.to_axial()


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_reflection_is_an_involution(axis: int) -> None:
    c = Cube(4, -1, -3)
    assert reflect_cube(reflect_cube(c, axis), axis) == c


def test_reflection_keeps_axis_component():
    c = Cube(4, -1, -3)
    assert reflect_cube(c, 0).x == 4
    assert reflect_cube(c, 1).y == -1
    assert reflect_cube(c, 2).z == -3


def test_reflect_around_center():
    center = Axial(1, 1)
    a = Axial(3, 0)
    mirrored = reflect(a, 2, center)
    assert hex_distance(mirrored, center) == hex_distance(a, center)
    assert reflect(mirrored, 2, center) == a


def test_reflect_rejects_unknown_axis():
    with pytest.raises(ValueError):
        reflect_cube(Cube(0, 0, 0), 3)


def test_rotating_a_direction_vector():
    assert rotate(axial_direction(0), 2) == axial_direction(2)
