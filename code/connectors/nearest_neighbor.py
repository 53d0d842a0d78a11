from __future__ import annotations

from typing import Iterable, List, Sequence, Set

from cave_config import clamp_minimum
from cave_constants import DEFAULT_MAX_CONNECTIONS
from geometry import TilePos, distance
from grid import Grid
from segmentation import Region

from connectors.base import PairSelector, RegionConnector, RegionPair, normalize_pair


class NearestNeighborSelector(PairSelector):
    """Each region reaches for its ``max_connections`` closest regions.

    Neighbours are ranked by centroid distance, then by index. A neighbour
    that is already paired still occupies one of the slots, so no region
    initiates more than ``max_connections`` corridors.
    """

    def __init__(self, max_connections: int = DEFAULT_MAX_CONNECTIONS) -> None:
        self.max_connections = clamp_minimum("max_connections", max_connections, 1)

    def select_pairs(self, centroids: Sequence[TilePos]) -> List[RegionPair]:
        connected: Set[RegionPair] = set()
        pairs: List[RegionPair] = []
        for index, origin in enumerate(centroids):
            ranked = sorted(
                (other for other in range(len(centroids)) if other != index),
                key=lambda other: (distance(origin, centroids[other]), other),
            )
            for other in ranked[: self.max_connections]:
                key = normalize_pair(index, other)
                if key in connected:
                    continue
                connected.add(key)
                pairs.append((index, other))
        return pairs


def connect_nearest_neighbors(
    regions: Iterable[Region],
    corridor_thickness: int,
    cell_type: int,
    grid: Grid,
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
) -> Grid:
    connector = RegionConnector("nearest_neighbor", NearestNeighborSelector(max_connections))
    return connector.connect(regions, corridor_thickness, cell_type, grid)
