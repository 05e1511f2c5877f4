from array import array

import pytest

from enginetools.world.arrays import (
    coordinate_in_bounds,
    decrease_array_size,
    default_value,
    get_2d_array_as_list,
    grid_extents,
    increase_array_size,
    index_in_bounds,
)
from enginetools.world.vectors import Vector2, Vector2Int


def make_grid(width, height):
    return [[(x, y) for y in range(height)] for x in range(width)]


# ---- redimensionado ----

def test_increase_copies_and_appends_default():
    src = [1, 2, 3]
    out = increase_array_size(src, int)
    assert out == [1, 2, 3, 0]
    assert out is not src
    assert src == [1, 2, 3]


def test_increase_reference_type_gets_none():
    assert increase_array_size(["a", "b"], str) == ["a", "b", None]
    assert increase_array_size(["a"]) == ["a", None]


@pytest.mark.parametrize("empty", [None, []])
def test_increase_degenerate_input_gives_length_one(empty):
    assert increase_array_size(empty, int) == [0]
    assert increase_array_size(empty, float) == [0.0]


@pytest.mark.parametrize("empty", [None, []])
def test_decrease_degenerate_input_gives_length_zero(empty):
    assert decrease_array_size(empty) == []


def test_decrease_drops_last():
    src = ["a", "b", "c"]
    assert decrease_array_size(src) == ["a", "b"]
    assert src == ["a", "b", "c"]
    assert decrease_array_size(["only"]) == []


def test_grow_then_shrink_keeps_length_and_prefix():
    src = [4, 5, 6, 7]
    out = decrease_array_size(increase_array_size(src, int))
    assert len(out) == len(src)
    assert out[:-1] == src[:-1]


def test_typed_array_keeps_typecode():
    src = array("i", [1, 2])
    grown = increase_array_size(src)
    assert grown.typecode == "i"
    assert list(grown) == [1, 2, 0]
    shrunk = decrease_array_size(src)
    assert shrunk.typecode == "i"
    assert list(shrunk) == [1]
    assert list(increase_array_size(array("d"))) == [0.0]


def test_default_value():
    assert default_value(int) == 0
    assert default_value(bool) is False
    assert default_value(str) is None
    assert default_value(None) is None


# ---- grids ----

def test_flatten_none_is_none():
    assert get_2d_array_as_list(None) is None


def test_flatten_row_major_first_dimension_outer():
    grid = make_grid(3, 2)
    out = get_2d_array_as_list(grid)
    assert out == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]
    assert len(out) == 3 * 2


def test_flatten_empty_grid():
    assert get_2d_array_as_list([]) == []
    assert get_2d_array_as_list([[], []]) == []


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        grid_extents([[1, 2], [3]])
    with pytest.raises(ValueError):
        get_2d_array_as_list([[1], [2, 3]])


def test_grid_extents():
    assert grid_extents(make_grid(4, 3)) == (4, 3)
    assert grid_extents([]) == (0, 0)


def test_coordinate_in_bounds_exhaustive():
    grid = make_grid(3, 2)
    for x in range(-2, 5):
        for y in range(-2, 4):
            expected = 0 <= x < 3 and 0 <= y < 2
            assert coordinate_in_bounds(x, y, grid) is expected


def test_index_in_bounds_int_and_float():
    grid = make_grid(3, 2)
    assert index_in_bounds(Vector2Int(2, 1), grid)
    assert not index_in_bounds(Vector2Int(3, 1), grid)
    assert index_in_bounds((0, 0), grid)
    # truncado hacia cero
    assert index_in_bounds(Vector2(2.9, 1.9), grid)
    assert index_in_bounds(Vector2(-0.5, 0.0), grid)
    assert not index_in_bounds(Vector2(-1.0, 0.0), grid)
    assert not index_in_bounds(Vector2(3.0, 0.0), grid)


def test_increase_infers_element_type_from_contents():
    assert increase_array_size([1, 2, 3]) == [1, 2, 3, 0]
    assert increase_array_size([0.5]) == [0.5, 0.0]
    assert increase_array_size([True]) == [True, False]
    assert increase_array_size([]) == [None]


def test_typed_char_array_gets_nul_slot():
    grown = increase_array_size(array("u", "ab"))
    assert grown.typecode == "u"
    assert grown.tolist() == ["a", "b", "\0"]


def test_coordinate_in_bounds_reads_first_row_extent():
    # los límites salen de len(grid) y len(grid[0]); no se recorre el grid entero
    grid = [[1, 2], [3]]
    assert coordinate_in_bounds(0, 1, grid)
    assert not coordinate_in_bounds(0, 2, grid)
    assert not coordinate_in_bounds(0, 0, [])
