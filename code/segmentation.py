"""Split a grid into maximal 4-connected regions of uniform cell type."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from cave_config import clamp_minimum
from geometry import PointLike, TilePos
from grid import Grid


@dataclass(frozen=True)
class Region:
    """Connected set of same-typed cells.

    Point order follows flood-fill visit order and carries no meaning beyond
    ``seed`` being the first cell visited.
    """

    cell_type: int
    points: Tuple[TilePos, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[TilePos]:
        return iter(self.points)

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, TilePos):
            try:
                point = TilePos.from_tuple(point)  # type: ignore[arg-type]
            except (TypeError, ValueError):
                return False
        return point in self.point_set

    @cached_property
    def point_set(self) -> FrozenSet[TilePos]:
        return frozenset(self.points)

    @property
    def seed(self) -> TilePos:
        return self.points[0]

    @property
    def size(self) -> int:
        return len(self.points)


def _flood_fill(grid: Grid, seed: TilePos, visited: Set[TilePos]) -> List[TilePos]:
    region_type = grid.get(seed.x, seed.y)
    stack = [seed]
    visited.add(seed)
    collected: List[TilePos] = []
    while stack:
        current = stack.pop()
        collected.append(current)
        for neighbor in current.neighbors():
            if neighbor in visited:
                continue
            if grid.get(neighbor.x, neighbor.y) != region_type:
                continue
            visited.add(neighbor)
            stack.append(neighbor)
    return collected


def segment(grid: Grid, target_type: Optional[int] = None) -> List[Region]:
    """Return the regions of ``grid`` in row-major order of their seed cell.

    Without ``target_type`` every cell lands in exactly one region. With it,
    only regions of that type are built and other cells are never visited.
    """
    visited: Set[TilePos] = set()
    regions: List[Region] = []
    for y in range(grid.height):
        row = grid.rows[y]
        for x in range(grid.width):
            cell_type = row[x]
            if target_type is not None and cell_type != target_type:
                continue
            seed = TilePos(x, y)
            if seed in visited:
                continue
            points = _flood_fill(grid, seed, visited)
            if points:
                regions.append(Region(cell_type=cell_type, points=tuple(points)))
    return regions


def regions_by_type(grid: Grid) -> Dict[int, List[Region]]:
    """Group a full segmentation of ``grid`` by cell type."""
    grouped: Dict[int, List[Region]] = defaultdict(list)
    for region in segment(grid):
        grouped[region.cell_type].append(region)
    return dict(grouped)


def filter_regions(regions: Iterable[Region], min_size: int = 1) -> List[Region]:
    """Drop regions smaller than ``min_size`` cells, keeping the original order."""
    min_size = clamp_minimum("min_size", min_size, 1)
    return [region for region in regions if len(region) >= min_size]


def region_index_at(regions: Iterable[Region], point: PointLike) -> Optional[int]:
    """Return the index of the region containing ``point``, if any."""
    tile = TilePos.from_tuple(point)
    for index, region in enumerate(regions):
        if tile in region.point_set:
            return index
    return None
