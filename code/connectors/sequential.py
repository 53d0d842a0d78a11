from __future__ import annotations

from typing import Iterable, List, Sequence

from geometry import TilePos
from grid import Grid
from segmentation import Region

from connectors.base import PairSelector, RegionConnector, RegionPair


class SequentialSelector(PairSelector):
    """Join each region to the next one in discovery order."""

    def select_pairs(self, centroids: Sequence[TilePos]) -> List[RegionPair]:
        return [(index, index + 1) for index in range(len(centroids) - 1)]


def connect_sequential(
    regions: Iterable[Region],
    corridor_thickness: int,
    cell_type: int,
    grid: Grid,
) -> Grid:
    connector = RegionConnector("sequential", SequentialSelector())
    return connector.connect(regions, corridor_thickness, cell_type, grid)
