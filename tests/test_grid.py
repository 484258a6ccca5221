import math

import pytest

from iconsheet.errors import InvalidConfigurationError
from iconsheet.grid import Placement, pack


@pytest.mark.parametrize("count", [0, 1, 31, 32, 33, 64, 65, 1000])
def test_rows_is_ceil_of_count_over_row_width(count):
    assert pack(count, 64, 32).rows == math.ceil(count / 32)


@pytest.mark.parametrize("per_row", [1, 2, 7, 32])
def test_placements_are_unique_and_within_row(per_row):
    grid = pack(50, 16, per_row)
    placements = grid.placements()
    assert len(set(placements)) == 50
    assert all(0 <= p.col < per_row for p in placements)
    assert all(0 <= p.row < grid.rows for p in placements)


def test_placements_fill_rows_in_order():
    grid = pack(5, 10, 2)
    assert grid.placements() == [
        Placement(0, 0), Placement(0, 1),
        Placement(1, 0), Placement(1, 1),
        Placement(2, 0),
    ]


def test_one_based_coordinates():
    p = pack(40, 64, 32).placement(5)
    assert (p.row, p.col) == (0, 5)
    assert (p.x, p.y) == (6, 1)
    p = pack(40, 64, 32).placement(33)
    assert (p.x, p.y) == (2, 2)


def test_canvas_size():
    grid = pack(3, 64, 2)
    assert (grid.width, grid.height) == (128, 128)
    assert grid.offset(2) == (0, 64)
    assert grid.offset(1) == (64, 0)


def test_exact_multiple_has_no_trailing_row():
    grid = pack(64, 64, 32)
    assert grid.rows == 2
    assert grid.height == 128


def test_empty_grid_keeps_one_row_of_canvas():
    grid = pack(0, 64, 32)
    assert grid.rows == 0
    assert grid.placements() == []
    assert (grid.width, grid.height) == (2048, 64)


def test_placement_out_of_range():
    grid = pack(3, 64, 2)
    with pytest.raises(IndexError):
        grid.placement(3)
    with pytest.raises(IndexError):
        grid.placement(-1)


@pytest.mark.parametrize("cell_size,per_row,count", [(0, 32, 1), (64, 0, 1), (-1, 1, 1), (64, 32, -1)])
def test_invalid_configuration(cell_size, per_row, count):
    with pytest.raises(InvalidConfigurationError):
        pack(count, cell_size, per_row)
