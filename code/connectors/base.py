from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from cave_config import clamp_minimum
from corridor_rasterizer import paint_corridor
from geometry import TilePos
from grid import Grid, GridBuilder
from logging_config import get_logger
from region_geometry import centroid
from segmentation import Region

logger = get_logger(__name__)

RegionPair = Tuple[int, int]


def normalize_pair(a: int, b: int) -> RegionPair:
    """Unordered pair key with the smaller index first."""
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class ConnectionPlan:
    """Centroids of the regions and the index pairs chosen to join them."""

    centroids: Tuple[TilePos, ...]
    pairs: Tuple[RegionPair, ...]


@dataclass(frozen=True)
class ConnectionOutcome:
    """Result of running a connector once."""

    grid: Grid
    plan: ConnectionPlan
    corridors_painted: int
    cells_written: int


class PairSelector:
    """Decide which centroid pairs a strategy joins."""

    def select_pairs(self, centroids: Sequence[TilePos]) -> List[RegionPair]:
        raise NotImplementedError


class CorridorPainter:
    """Commit one chosen pair to the grid as a straight corridor."""

    def paint(
        self,
        builder: GridBuilder,
        start: TilePos,
        end: TilePos,
        cell_type: int,
        thickness: int,
    ) -> None:
        paint_corridor(builder, start, end, cell_type, thickness)


class RegionConnector:
    """Coordinates centroid computation, pair selection, and painting."""

    def __init__(
        self,
        name: str,
        selector: PairSelector,
        painter: Optional[CorridorPainter] = None,
    ) -> None:
        self.name = name
        self.selector = selector
        self.painter = painter if painter is not None else CorridorPainter()

    def plan(self, regions: Iterable[Region]) -> ConnectionPlan:
        centroids = tuple(centroid(region) for region in regions)
        if len(centroids) < 2:
            return ConnectionPlan(centroids=centroids, pairs=())
        pairs = tuple(self.selector.select_pairs(centroids))
        return ConnectionPlan(centroids=centroids, pairs=pairs)

    def run(
        self,
        regions: Iterable[Region],
        corridor_thickness: int,
        cell_type: int,
        grid: Grid,
    ) -> ConnectionOutcome:
        corridor_thickness = clamp_minimum("corridor_thickness", corridor_thickness, 0)
        plan = self.plan(regions)
        if not plan.pairs:
            return ConnectionOutcome(grid=grid, plan=plan, corridors_painted=0, cells_written=0)

        builder = grid.builder()
        for index_a, index_b in plan.pairs:
            self.painter.paint(
                builder,
                plan.centroids[index_a],
                plan.centroids[index_b],
                cell_type,
                corridor_thickness,
            )
        logger.debug(
            "%s connected %d regions with %d corridors",
            self.name,
            len(plan.centroids),
            len(plan.pairs),
        )
        return ConnectionOutcome(
            grid=builder.freeze(),
            plan=plan,
            corridors_painted=len(plan.pairs),
            cells_written=builder.cells_written,
        )

    def connect(
        self,
        regions: Iterable[Region],
        corridor_thickness: int,
        cell_type: int,
        grid: Grid,
    ) -> Grid:
        return self.run(regions, corridor_thickness, cell_type, grid).grid
