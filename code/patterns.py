"""Pattern generators that produce classified grids for the engine to consume."""

from __future__ import annotations

import random
from typing import List, Optional

from cave_config import clamp_minimum, clamp_unit_interval
from cave_constants import DEFAULT_WALL_THRESHOLD, FLOOR, WALL
from grid import Grid


def random_fill(
    width: int,
    height: int,
    fill_probability: float,
    wall_type: int = WALL,
    floor_type: int = FLOOR,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Noise fill: each cell becomes wall with probability ``fill_probability``."""
    generator = rng if rng is not None else random
    fill_probability = clamp_unit_interval("fill_probability", fill_probability)
    rows = [
        [wall_type if generator.random() < fill_probability else floor_type for _ in range(width)]
        for _ in range(height)
    ]
    return Grid.from_rows(rows)


def _count_walls(grid: Grid, x: int, y: int, wall_type: int) -> int:
    """Count walls in the 3x3 neighbourhood, treating out-of-bounds cells as wall."""
    count = 0
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            nx, ny = x + dx, y + dy
            if not grid.in_bounds(nx, ny) or grid.rows[ny][nx] == wall_type:
                count += 1
    return count


def smooth_cellular(
    grid: Grid,
    iterations: int,
    wall_type: int = WALL,
    floor_type: int = FLOOR,
    wall_threshold: int = DEFAULT_WALL_THRESHOLD,
) -> Grid:
    """Cellular-automaton smoothing: a cell becomes wall when enough neighbours are."""
    iterations = clamp_minimum("iterations", iterations, 0)
    for _ in range(iterations):
        rows: List[List[int]] = []
        for y in range(grid.height):
            rows.append(
                [
                    wall_type if _count_walls(grid, x, y, wall_type) >= wall_threshold else floor_type
                    for x in range(grid.width)
                ]
            )
        grid = Grid.from_rows(rows)
    return grid


def checkerboard(width: int, height: int, first: int, second: int, cell_size: int = 1) -> Grid:
    cell_size = clamp_minimum("cell_size", cell_size, 1)
    rows = [
        [first if ((x // cell_size) + (y // cell_size)) % 2 == 0 else second for x in range(width)]
        for y in range(height)
    ]
    return Grid.from_rows(rows)


def stripes(
    width: int,
    height: int,
    first: int,
    second: int,
    stripe_width: int = 1,
    vertical: bool = False,
) -> Grid:
    """Alternating bands of ``first`` and ``second``; horizontal unless ``vertical``."""
    stripe_width = clamp_minimum("stripe_width", stripe_width, 1)
    rows = []
    for y in range(height):
        row = []
        for x in range(width):
            band = (x if vertical else y) // stripe_width
            row.append(first if band % 2 == 0 else second)
        rows.append(row)
    return Grid.from_rows(rows)


def maze(
    width: int,
    height: int,
    wall_type: int = WALL,
    floor_type: int = FLOOR,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Perfect maze carved by an iterative recursive backtracker.

    Rooms sit on odd coordinates inside a solid wall border, so the floor
    forms one region with no loops. Grids narrower than three cells in
    either direction stay solid wall.
    """
    generator = rng if rng is not None else random
    builder = Grid.filled(width, height, wall_type).builder()
    if width < 3 or height < 3:
        return builder.freeze()

    start = (1, 1)
    builder.set(*start, floor_type)
    visited = {start}
    stack = [start]
    while stack:
        x, y = stack[-1]
        options = []
        for dx, dy in ((0, -2), (2, 0), (0, 2), (-2, 0)):
            nx, ny = x + dx, y + dy
            if 1 <= nx <= width - 2 and 1 <= ny <= height - 2 and (nx, ny) not in visited:
                options.append((nx, ny))
        if not options:
            stack.pop()
            continue
        nx, ny = generator.choice(options)
        builder.set((x + nx) // 2, (y + ny) // 2, floor_type)
        builder.set(nx, ny, floor_type)
        visited.add((nx, ny))
        stack.append((nx, ny))
    return builder.freeze()
