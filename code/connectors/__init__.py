from __future__ import annotations

import random
from typing import Callable, Dict, Iterable, Optional

from cave_constants import DEFAULT_MAX_CONNECTIONS, DEFAULT_WALK_BIAS, DEFAULT_WALK_STEPS
from grid import Grid
from segmentation import Region

from .base import ConnectionOutcome, ConnectionPlan, RegionConnector, normalize_pair
from .linear_chain import LinearChainSelector, connect_linear_chain
from .nearest_neighbor import NearestNeighborSelector, connect_nearest_neighbors
from .random_walk import RandomWalkPainter, RandomWalkSelector, connect_random_walk, random_walk_path
from .sequential import SequentialSelector, connect_sequential
from .spanning_tree import SpanningTreeSelector, connect_minimum_spanning_tree

CONNECTION_STRATEGIES: Dict[str, Callable[..., Grid]] = {
    "sequential": connect_sequential,
    "nearest_neighbor": connect_nearest_neighbors,
    "linear_chain": connect_linear_chain,
    "minimum_spanning_tree": connect_minimum_spanning_tree,
    "random_walk": connect_random_walk,
}


def build_connector(
    strategy: str,
    *,
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
    walk_steps: int = DEFAULT_WALK_STEPS,
    bias: float = DEFAULT_WALK_BIAS,
    rng: Optional[random.Random] = None,
) -> RegionConnector:
    """Return a configured connector for ``strategy``."""
    if strategy == "sequential":
        return RegionConnector(strategy, SequentialSelector())
    if strategy == "nearest_neighbor":
        return RegionConnector(strategy, NearestNeighborSelector(max_connections))
    if strategy == "linear_chain":
        return RegionConnector(strategy, LinearChainSelector())
    if strategy == "minimum_spanning_tree":
        return RegionConnector(strategy, SpanningTreeSelector())
    if strategy == "random_walk":
        return RegionConnector(
            strategy,
            RandomWalkSelector(),
            RandomWalkPainter(walk_steps=walk_steps, bias=bias, rng=rng),
        )
    raise ValueError(f"Unknown connection strategy {strategy!r}")


def connect_regions(
    strategy: str,
    regions: Iterable[Region],
    corridor_thickness: int,
    cell_type: int,
    grid: Grid,
    **params,
) -> Grid:
    """Dispatch to the named strategy's entry point."""
    try:
        func = CONNECTION_STRATEGIES[strategy]
    except KeyError as exc:
        raise ValueError(f"Unknown connection strategy {strategy!r}") from exc
    return func(regions, corridor_thickness, cell_type, grid, **params)


__all__ = [
    "CONNECTION_STRATEGIES",
    "ConnectionOutcome",
    "ConnectionPlan",
    "LinearChainSelector",
    "NearestNeighborSelector",
    "RandomWalkPainter",
    "RandomWalkSelector",
    "RegionConnector",
    "SequentialSelector",
    "SpanningTreeSelector",
    "build_connector",
    "connect_linear_chain",
    "connect_minimum_spanning_tree",
    "connect_nearest_neighbors",
    "connect_random_walk",
    "connect_regions",
    "connect_sequential",
    "normalize_pair",
    "random_walk_path",
]
