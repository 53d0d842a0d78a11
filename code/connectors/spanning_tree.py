from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from disjoint_set import DisjointSet
from geometry import TilePos, distance
from grid import Grid
from segmentation import Region

from connectors.base import PairSelector, RegionConnector, RegionPair


def candidate_edges(centroids: Sequence[TilePos]) -> List[Tuple[float, int, int]]:
    """All ``(distance, i, j)`` edges with ``i < j``, shortest first."""
    edges = []
    for i in range(len(centroids)):
        for j in range(i + 1, len(centroids)):
            edges.append((distance(centroids[i], centroids[j]), i, j))
    edges.sort()
    return edges


class SpanningTreeSelector(PairSelector):
    """Kruskal's minimum spanning tree over centroid distances."""

    def select_pairs(self, centroids: Sequence[TilePos]) -> List[RegionPair]:
        needed = len(centroids) - 1
        if needed <= 0:
            return []
        components = DisjointSet(len(centroids))
        accepted: List[RegionPair] = []
        for _, i, j in candidate_edges(centroids):
            if not components.union(i, j):
                continue
            accepted.append((i, j))
            if len(accepted) == needed:
                break
        return accepted


def connect_minimum_spanning_tree(
    regions: Iterable[Region],
    corridor_thickness: int,
    cell_type: int,
    grid: Grid,
) -> Grid:
    connector = RegionConnector("minimum_spanning_tree", SpanningTreeSelector())
    return connector.connect(regions, corridor_thickness, cell_type, grid)
