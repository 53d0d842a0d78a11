import pytest

from cave_constants import FLOOR, WALL
from corridor_rasterizer import bresenham_line, draw_corridor, paint_corridor, paint_square
from geometry import TilePos
from grid import Grid, changed_cells


def _painted(before: Grid, after: Grid) -> set:
    return set(changed_cells(before, after))


@pytest.mark.parametrize("thickness", [0, 1, 2])
def test_start_equal_to_end_paints_one_neighborhood(walled_grid, thickness):
    grid = walled_grid(width=9, height=9)

    result = draw_corridor((4, 4), (4, 4), FLOOR, thickness, grid)

    expected = {
        TilePos(4 + dx, 4 + dy)
        for dx in range(-thickness, thickness + 1)
        for dy in range(-thickness, thickness + 1)
    }
    assert _painted(grid, result) == expected
    assert len(expected) == (2 * thickness + 1) ** 2


def test_self_paint_near_the_corner_is_clipped(walled_grid):
    grid = walled_grid(width=5, height=5)

    result = draw_corridor((0, 0), (0, 0), FLOOR, 1, grid)

    assert _painted(grid, result) == {TilePos(0, 0), TilePos(1, 0), TilePos(0, 1), TilePos(1, 1)}


def test_bresenham_line_includes_both_endpoints():
    assert bresenham_line((0, 0), (4, 0)) == [TilePos(x, 0) for x in range(5)]
    assert bresenham_line((2, 5), (2, 1)) == [TilePos(2, y) for y in range(5, 0, -1)]
    assert bresenham_line((0, 0), (3, 3)) == [TilePos(i, i) for i in range(4)]
    assert bresenham_line((1, 1), (1, 1)) == [TilePos(1, 1)]


@pytest.mark.parametrize(
    "start,end",
    [((0, 0), (7, 3)), ((7, 3), (0, 0)), ((2, 9), (5, 0)), ((9, 1), (0, 8))],
)
def test_bresenham_line_steps_one_cell_at_a_time(start, end):
    line = bresenham_line(start, end)

    assert line[0] == TilePos(*start)
    assert line[-1] == TilePos(*end)
    assert len(line) == max(abs(end[0] - start[0]), abs(end[1] - start[1])) + 1
    for a, b in zip(line, line[1:]):
        assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


def test_thin_corridor_paints_exactly_the_line(walled_grid):
    grid = walled_grid(width=10, height=10)

    result = draw_corridor((1, 1), (8, 5), FLOOR, 0, grid)

    assert _painted(grid, result) == set(bresenham_line((1, 1), (8, 5)))
    assert grid.count(FLOOR) == 0


def test_thick_corridor_covers_a_band(walled_grid):
    grid = walled_grid(width=12, height=7)

    result = draw_corridor((2, 3), (9, 3), FLOOR, 1, grid)

    for x in range(1, 11):
        for y in (2, 3, 4):
            assert result.get(x, y) == FLOOR
    assert result.count(FLOOR) == 10 * 3


def test_negative_thickness_is_clamped_to_zero(walled_grid):
    grid = walled_grid(width=6, height=6)

    clamped = draw_corridor((0, 0), (5, 0), FLOOR, -2, grid)

    assert clamped == draw_corridor((0, 0), (5, 0), FLOOR, 0, grid)


def test_endpoints_outside_the_grid_are_clipped(walled_grid):
    grid = walled_grid(width=5, height=5)

    result = draw_corridor((-3, 2), (8, 2), FLOOR, 0, grid)

    assert _painted(grid, result) == {TilePos(x, 2) for x in range(5)}


def test_paint_helpers_report_their_work(walled_grid):
    builder = walled_grid(width=5, height=5).builder()

    assert paint_square(builder, (4, 4), 1, FLOOR) == 4
    assert paint_corridor(builder, (0, 0), (0, 3), FLOOR, 0) == 4
    assert builder.freeze().get(0, 2) == FLOOR
    assert builder.get(2, 2) == WALL
