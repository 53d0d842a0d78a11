"""CaveGenerator runs the fill, segmentation, and connection stages in order."""

from __future__ import annotations

import random
from time import perf_counter
from typing import Callable, List, Optional

from cave_config import CaveConfig
from connectivity_analysis import ConnectivitySummary, build_region_graph, summarize_region_graph
from connectors import ConnectionOutcome, build_connector
from grid import Grid, changed_cells
from logging_config import get_logger
from metrics import GenerationMetrics
from patterns import random_fill, smooth_cellular
from points_of_interest import place_points_of_interest
from segmentation import Region, filter_regions, segment

logger = get_logger(__name__)


class CaveGenerator:
    """Manages the overall process of generating one cave grid."""

    def __init__(self, config: CaveConfig) -> None:
        self.config = config
        self.metrics = GenerationMetrics() if config.collect_metrics else None
        self.connectivity: Optional[ConnectivitySummary] = None
        self.regions: List[Region] = []
        self.grid: Optional[Grid] = None

        seed = config.random_seed
        if seed is None:
            # Pick a seed and log it, so a cave can be reproduced by setting it in CaveConfig.
            seed = random.randint(0, 1000000)
            config.random_seed = seed
        logger.info("Using random seed %s", seed)
        self.rng = random.Random(seed)

    def _run_stage(
        self,
        name: str,
        func: Callable[..., Grid],
        grid: Grid,
        *args,
        corridors: Callable[[], int] = lambda: 0,
        **kwargs,
    ) -> Grid:
        if self.metrics is None:
            return func(grid, *args, **kwargs)

        start = perf_counter()
        result = func(grid, *args, **kwargs)
        duration = perf_counter() - start
        cells_changed = len(changed_cells(grid, result)) if result.dimensions() == grid.dimensions() else 0
        self.metrics.record_stage_run(name, duration, cells_changed, corridors())
        return result

    def _fill(self, width: int, height: int) -> Grid:
        config = self.config
        return random_fill(
            width,
            height,
            config.fill_probability,
            wall_type=config.wall_type,
            floor_type=config.floor_type,
            rng=self.rng,
        )

    def generate(self) -> Grid:
        """Generates the cave and returns the finished grid."""
        config = self.config

        start = perf_counter()
        grid = self._fill(config.width, config.height)
        if self.metrics is not None:
            self.metrics.record_stage_run("random_fill", perf_counter() - start, grid.width * grid.height)

        grid = self._run_stage(
            "smooth_cellular",
            smooth_cellular,
            grid,
            config.smoothing_iterations,
            wall_type=config.wall_type,
            floor_type=config.floor_type,
        )

        self.regions = filter_regions(segment(grid, config.floor_type), config.min_region_size)
        logger.debug("Found %d floor regions", len(self.regions))

        connector = build_connector(
            config.strategy,
            max_connections=config.max_connections,
            walk_steps=config.walk_steps,
            bias=config.walk_bias,
            rng=self.rng,
        )
        outcome: List[ConnectionOutcome] = []

        def connect(current: Grid) -> Grid:
            result = connector.run(self.regions, config.corridor_thickness, config.floor_type, current)
            outcome.append(result)
            return result.grid

        grid = self._run_stage(
            config.strategy,
            connect,
            grid,
            corridors=lambda: outcome[-1].corridors_painted,
        )
        if outcome:
            plan = outcome[-1].plan
            self.connectivity = summarize_region_graph(
                build_region_graph(len(plan.centroids), plan.pairs)
            )

        if config.poi_per_region > 0:
            grid = self._run_stage(
                "points_of_interest",
                place_points_of_interest,
                grid,
                floor_type=config.floor_type,
                wall_type=config.wall_type,
                poi_type=config.poi_type,
                per_region=config.poi_per_region,
                min_wall_distance=config.poi_min_wall_distance,
            )

        self.grid = grid
        return grid
