"""Geometric descriptors and representative-point sampling for regions."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from cave_config import clamp_minimum
from geometry import INVALID_POS, PointLike, Rect, TilePos, distance
from grid import Grid


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def centroid(points: Iterable[PointLike]) -> TilePos:
    """Rounded mean coordinate; ``INVALID_POS`` for an empty point set.

    The result need not be a member of the set (concave regions).
    """
    total_x = 0
    total_y = 0
    count = 0
    for px, py in points:
        total_x += px
        total_y += py
        count += 1
    if count == 0:
        return INVALID_POS
    return TilePos(_round_half_up(total_x / count), _round_half_up(total_y / count))


def bounding_box(points: Iterable[PointLike]) -> Tuple[int, int]:
    """Return the ``(width, height)`` in cells of the tight box around ``points``."""
    rect = Rect.from_points(points)
    if rect is None:
        return 0, 0
    return rect.width, rect.height


def bounds(points: Iterable[PointLike]) -> Optional[Rect]:
    return Rect.from_points(points)


def cells_of_type(grid: Grid, cell_type: int) -> List[TilePos]:
    """Collect every coordinate holding ``cell_type`` in row-major order."""
    return [
        TilePos(x, y)
        for y, row in enumerate(grid.rows)
        for x, cell in enumerate(row)
        if cell == cell_type
    ]


def _greedy_farthest(points: Sequence[TilePos], count: int) -> List[TilePos]:
    if not points:
        return []
    if count >= len(points):
        return list(points)

    selected = [points[0]]
    # Distance from each point to its nearest selected point; -1 marks selected.
    nearest = [distance(point, points[0]) for point in points]
    nearest[0] = -1.0
    while len(selected) < count:
        best_index = 0
        best_distance = -1.0
        for index, value in enumerate(nearest):
            if value > best_distance:
                best_distance = value
                best_index = index
        chosen = points[best_index]
        selected.append(chosen)
        nearest[best_index] = -1.0
        for index, value in enumerate(nearest):
            if value < 0:
                continue
            candidate = distance(points[index], chosen)
            if candidate < value:
                nearest[index] = candidate
    return selected


def farthest_point_sample(region: Iterable[PointLike], count: int) -> List[TilePos]:
    """Greedy farthest-point sampling starting from the first point.

    Each round picks the point whose distance to the closest already-selected
    point is largest (lowest index on ties). ``count`` below 1 is clamped to 1.
    """
    count = clamp_minimum("count", count, 1)
    points = [TilePos.from_tuple(point) for point in region]
    return _greedy_farthest(points, count)


def distance_to_nearest(point: PointLike, others: Sequence[PointLike]) -> float:
    """Euclidean distance from ``point`` to the closest of ``others`` (inf if none)."""
    best = math.inf
    for other in others:
        value = distance(point, other)
        if value < best:
            best = value
    return best


def farthest_point_sample_constrained(
    region: Iterable[PointLike],
    wall_points: Iterable[PointLike],
    count: int,
    min_wall_distance: float,
) -> List[TilePos]:
    """Farthest-point sampling over the region points that keep clear of walls.

    Only points whose distance to the nearest wall point is at least
    ``min_wall_distance`` take part; when none qualify the result is empty.
    """
    count = clamp_minimum("count", count, 1)
    min_wall_distance = clamp_minimum("min_wall_distance", min_wall_distance, 0)
    walls = [TilePos.from_tuple(point) for point in wall_points]
    eligible = [
        point
        for point in (TilePos.from_tuple(p) for p in region)
        if distance_to_nearest(point, walls) >= min_wall_distance
    ]
    return _greedy_farthest(eligible, count)


def min_pairwise_distance(points: Sequence[PointLike]) -> float:
    """Smallest distance between any two of ``points``; inf for fewer than two."""
    best = math.inf
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            value = distance(points[i], points[j])
            if value < best:
                best = value
    return best
