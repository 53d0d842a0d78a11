from cave_constants import FLOOR, OUT_OF_BOUNDS, WALL
from geometry import TilePos
from grid import Grid, changed_cells, dimensions, get_cell, get_cell_at, set_cell


def test_get_cell_returns_sentinel_outside_bounds(cross_grid):
    assert get_cell(0, 0, cross_grid) == FLOOR
    assert get_cell(2, 0, cross_grid) == WALL
    assert get_cell(-1, 0, cross_grid) == OUT_OF_BOUNDS
    assert get_cell(5, 0, cross_grid) == OUT_OF_BOUNDS
    assert get_cell(0, 5, cross_grid) == OUT_OF_BOUNDS
    assert get_cell_at(TilePos(2, 2), cross_grid) == WALL


def test_set_cell_returns_new_grid_and_leaves_original(cross_grid):
    updated = set_cell(2, 2, FLOOR, cross_grid)

    assert updated.get(2, 2) == FLOOR
    assert cross_grid.get(2, 2) == WALL
    assert changed_cells(cross_grid, updated) == [TilePos(2, 2)]


def test_set_cell_outside_bounds_is_dropped(cross_grid):
    assert set_cell(9, 9, FLOOR, cross_grid) == cross_grid
    assert set_cell(-1, 0, FLOOR, cross_grid) == cross_grid


def test_dimensions_report_height_then_width():
    grid = Grid.filled(7, 3, WALL)

    assert dimensions(grid) == (3, 7)
    assert grid.count(WALL) == 21


def test_from_rows_uses_first_row_width():
    grid = Grid.from_rows([[1, 1, 1], [1], [1, 1, 1, 1, 1]], fill=WALL)

    assert grid.dimensions() == (3, 3)
    assert grid.rows[1] == (1, WALL, WALL)
    assert grid.rows[2] == (1, 1, 1)


def test_zero_size_grid_is_empty():
    assert Grid.from_rows([]).dimensions() == (0, 0)
    assert Grid.filled(0, 4).dimensions() == (0, 0)
    assert get_cell(0, 0, Grid.from_rows([])) == OUT_OF_BOUNDS


def test_builder_writes_are_isolated_until_frozen(cross_grid):
    builder = cross_grid.builder()

    assert builder.set(2, 2, FLOOR) is True
    assert builder.set(-3, 2, FLOOR) is False
    assert builder.cells_written == 1
    assert cross_grid.get(2, 2) == WALL

    frozen = builder.freeze()
    assert frozen.get(2, 2) == FLOOR
    assert frozen.dimensions() == cross_grid.dimensions()


def test_positions_are_row_major():
    grid = Grid.filled(2, 2, FLOOR)

    assert list(grid.positions()) == [TilePos(0, 0), TilePos(1, 0), TilePos(0, 1), TilePos(1, 1)]
