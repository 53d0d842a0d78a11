from __future__ import annotations

from typing import Iterable, List, Sequence

from geometry import TilePos
from grid import Grid
from segmentation import Region

from connectors.base import PairSelector, RegionConnector, RegionPair


class LinearChainSelector(PairSelector):
    """Walk the regions from left to right, visiting each once."""

    def select_pairs(self, centroids: Sequence[TilePos]) -> List[RegionPair]:
        # sorted() is stable, so equal x keeps discovery order.
        order = sorted(range(len(centroids)), key=lambda index: centroids[index].x)
        return [(order[i], order[i + 1]) for i in range(len(order) - 1)]


def connect_linear_chain(
    regions: Iterable[Region],
    corridor_thickness: int,
    cell_type: int,
    grid: Grid,
) -> Grid:
    connector = RegionConnector("linear_chain", LinearChainSelector())
    return connector.connect(regions, corridor_thickness, cell_type, grid)
