"""Graph statistics for the region links a connector produced."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from grid import Grid
from segmentation import Region, segment


@dataclass(frozen=True)
class ConnectivitySummary:
    """Shape of the region graph after one connection pass."""

    region_count: int
    edge_count: int
    component_count: int
    cycle_count: int
    largest_component_fraction: float
    diameter: int

    def to_dict(self) -> Dict[str, float | int]:
        return {
            "region_count": self.region_count,
            "edge_count": self.edge_count,
            "component_count": self.component_count,
            "cycle_count": self.cycle_count,
            "largest_component_fraction": self.largest_component_fraction,
            "diameter": self.diameter,
        }


def build_region_graph(region_count: int, pairs: Iterable[Tuple[int, int]]) -> nx.Graph:
    graph = nx.Graph()
    graph.add_nodes_from(range(region_count))
    for region_a, region_b in pairs:
        graph.add_edge(region_a, region_b)
    return graph


def summarize_region_graph(graph: nx.Graph) -> ConnectivitySummary:
    node_count = graph.number_of_nodes()
    if node_count == 0:
        return ConnectivitySummary(0, 0, 0, 0, 0.0, 0)

    components = list(nx.connected_components(graph))
    largest_component_nodes = max(components, key=len)
    largest_size = len(largest_component_nodes)

    diameter = 0
    if largest_size >= 2:
        subgraph = graph.subgraph(largest_component_nodes).copy()
        try:
            diameter = int(nx.diameter(subgraph))
        except nx.NetworkXError:
            diameter = 0

    return ConnectivitySummary(
        region_count=node_count,
        edge_count=graph.number_of_edges(),
        component_count=len(components),
        cycle_count=len(nx.cycle_basis(graph)),
        largest_component_fraction=largest_size / node_count,
        diameter=diameter,
    )


def is_spanning_tree(graph: nx.Graph) -> bool:
    """True when the graph touches every node, is connected, and has no cycles."""
    if graph.number_of_nodes() == 0:
        return False
    return nx.is_tree(graph)


def region_adjacency_after_carving(
    regions: Sequence[Region],
    grid: Grid,
    carved_type: int,
) -> List[Optional[int]]:
    """For each original region, the index of the ``carved_type`` region its seed now lies in.

    Regions whose seed no longer holds ``carved_type`` map to None.
    """
    components = segment(grid, carved_type)
    lookup = {}
    for index, component in enumerate(components):
        for point in component:
            lookup[point] = index
    return [lookup.get(region.seed) for region in regions]
