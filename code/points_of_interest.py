"""Place points of interest inside floor regions, away from the walls."""

from __future__ import annotations

from typing import List

from cave_config import clamp_minimum
from cave_constants import FLOOR, POINT_OF_INTEREST, WALL
from geometry import TilePos
from grid import Grid
from region_geometry import cells_of_type, farthest_point_sample_constrained
from segmentation import segment


def select_points_of_interest(
    grid: Grid,
    floor_type: int = FLOOR,
    wall_type: int = WALL,
    per_region: int = 1,
    min_wall_distance: float = 2.0,
) -> List[TilePos]:
    """Spread ``per_region`` points over each floor region, keeping clear of walls."""
    walls = cells_of_type(grid, wall_type)
    selected: List[TilePos] = []
    for region in segment(grid, floor_type):
        selected.extend(
            farthest_point_sample_constrained(region, walls, per_region, min_wall_distance)
        )
    return selected


def place_points_of_interest(
    grid: Grid,
    floor_type: int = FLOOR,
    wall_type: int = WALL,
    poi_type: int = POINT_OF_INTEREST,
    per_region: int = 1,
    min_wall_distance: float = 2.0,
) -> Grid:
    per_region = clamp_minimum("per_region", per_region, 1)
    points = select_points_of_interest(grid, floor_type, wall_type, per_region, min_wall_distance)
    if not points:
        return grid
    builder = grid.builder()
    for point in points:
        builder.set(point.x, point.y, poi_type)
    return builder.freeze()
