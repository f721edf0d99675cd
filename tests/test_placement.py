import numpy as np
import pytest
from errors import OutOfBounds, ParseError
from grid import Grid
from placement import AUTO, BoundingBox, bounding_box, grid_center, place_shape, translate
from shapes import parse_shape


def _alive(grid):
    return {(int(r), int(c)) for r, c in zip(*np.nonzero(grid.snapshot()))}


def test_empty_grid_has_no_bounding_box():
    assert bounding_box(Grid(4, 4)) is None


def test_bounding_box():
    grid = Grid(6, 6)
    grid.set_alive(3, 2)
    grid.set_alive(1, 4)
    box = bounding_box(grid)
    assert box == BoundingBox(min_x=2, min_y=1, max_x=4, max_y=3)
    assert box.center == (3, 2)


def test_grid_center():
    assert grid_center(Grid(10, 10)) == (4, 4)
    assert grid_center(Grid(22, 78)) == (38, 10)


def test_line_centred_on_small_grid():
    grid = Grid(10, 10)
    shift = place_shape(grid, parse_shape("#Life 1.06\n0 0\n1 0\n-1 0\n"))
    assert shift == (0, 0)
    assert _alive(grid) == {(4, 3), (4, 4), (4, 5)}


def test_auto_centre_lands_box_on_grid_centre():
    grid = Grid(20, 30)
    shift = place_shape(grid, parse_shape("#Life 1.06\n0 0\n5 0\n5 2\n"))
    assert shift == (-2, -1)
    assert bounding_box(grid).center == grid_center(grid)
    assert grid.alive == 3


def test_auto_centre_ignores_header_offset():
    grid = Grid(10, 10)
    place_shape(grid, parse_shape("#Life 1.05\n#P 2 1\n*\n"))
    assert _alive(grid) == {(4, 4)}


def test_explicit_offset_is_applied_verbatim():
    grid = Grid(10, 10)
    shift = place_shape(grid, parse_shape("#Life 1.06\n0 0\n"), (2, -1))
    assert shift == (2, -1)
    assert _alive(grid) == {(3, 6)}


def test_explicit_offset_on_top_of_header_offset():
    grid = Grid(10, 10)
    place_shape(grid, parse_shape("#Life 1.05\n#P 2 1\n*\n"), (1, 1))
    assert _alive(grid) == {(6, 7)}


def test_later_105_block_keeps_its_own_offset():
    grid = Grid(20, 20)
    place_shape(grid, parse_shape("#Life 1.05\n*\n#P 5 0\n*\n"), (1, 1))
    assert _alive(grid) == {(10, 10), (11, 15)}


def test_translate_keeps_ages_and_drops_off_grid_cells():
    grid = Grid(5, 5)
    grid.set_alive(0, 0, age=3)
    grid.set_alive(4, 4, age=7)
    shift = translate(grid, bounding_box(grid), (1, 1))
    assert shift == (1, 1)
    assert _alive(grid) == {(1, 1)}
    assert grid.snapshot()[1, 1] == 3
    assert grid.alive == 1


def test_translate_everything_off_grid():
    grid = Grid(3, 3)
    grid.set_alive(1, 1)
    translate(grid, bounding_box(grid), (-5, 0))
    assert grid.alive == 0
    assert bounding_box(grid) is None


def test_translate_without_box_is_noop():
    grid = Grid(3, 3)
    assert translate(grid, None, AUTO) == (0, 0)
    assert grid.alive == 0


def test_shape_too_large_for_grid():
    grid = Grid(10, 10)
    with pytest.raises(OutOfBounds):
        place_shape(grid, parse_shape("#Life 1.06\n0 0\n20 0\n"))
    assert grid.alive == 0
    assert not grid.snapshot().any()


def test_header_offset_can_push_shape_off_grid():
    with pytest.raises(OutOfBounds) as exc:
        place_shape(Grid(10, 10), parse_shape("#Life 1.05\n#P 10 0\n*\n"))
    assert "cols" in str(exc.value)


def test_parse_error_leaves_grid_untouched():
    grid = Grid(10, 10)
    with pytest.raises(ParseError):
        place_shape(grid, parse_shape("#Life 1.06\n0 0\n1 x\n"))
    assert grid.alive == 0
    assert not grid.snapshot().any()
