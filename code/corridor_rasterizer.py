"""Paint thick straight corridors between two tiles."""

from __future__ import annotations

from typing import List

from cave_config import clamp_minimum
from geometry import PointLike, TilePos
from grid import Grid, GridBuilder


def bresenham_line(start: PointLike, end: PointLike) -> List[TilePos]:
    """Return the integer points from ``start`` to ``end`` inclusive."""
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    error = dx + dy

    points = [TilePos(x0, y0)]
    x, y = x0, y0
    while (x, y) != (x1, y1):
        doubled = 2 * error
        if doubled >= dy:
            error += dy
            x += sx
        if doubled <= dx:
            error += dx
            y += sy
        points.append(TilePos(x, y))
    return points


def paint_square(builder: GridBuilder, center: PointLike, half_width: int, cell_type: int) -> int:
    """Paint the ``(2 * half_width + 1)`` square around ``center``; return cells written."""
    cx, cy = center
    written = 0
    for dy in range(-half_width, half_width + 1):
        for dx in range(-half_width, half_width + 1):
            if builder.set(cx + dx, cy + dy, cell_type):
                written += 1
    return written


def paint_corridor(
    builder: GridBuilder,
    start: PointLike,
    end: PointLike,
    cell_type: int,
    thickness: int,
) -> int:
    """Paint a corridor into an existing builder; return the number of stepped points."""
    thickness = clamp_minimum("thickness", thickness, 0)
    line = bresenham_line(start, end)
    for point in line:
        paint_square(builder, point, thickness, cell_type)
    return len(line)


def draw_corridor(
    start: PointLike,
    end: PointLike,
    cell_type: int,
    thickness: int,
    grid: Grid,
) -> Grid:
    """Return a copy of ``grid`` with a corridor of ``cell_type`` from ``start`` to ``end``.

    Cells outside the grid are skipped. Thickness 0 paints a one-cell line and
    a negative thickness is clamped to 0.
    """
    builder = grid.builder()
    paint_corridor(builder, start, end, cell_type, thickness)
    return builder.freeze()
