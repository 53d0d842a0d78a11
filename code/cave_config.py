"""Configuration container for the cave generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar

from cave_constants import (
    DEFAULT_CORRIDOR_THICKNESS,
    DEFAULT_MAX_CONNECTIONS,
    DEFAULT_WALK_BIAS,
    DEFAULT_WALK_STEPS,
    FLOOR,
    POINT_OF_INTEREST,
    WALL,
)
from logging_config import get_logger

logger = get_logger(__name__)

Number = TypeVar("Number", int, float)

STRATEGY_NAMES = (
    "sequential",
    "nearest_neighbor",
    "linear_chain",
    "minimum_spanning_tree",
    "random_walk",
)


def clamp_minimum(name: str, value: Number, minimum: Number) -> Number:
    """Clamp an engine parameter up to ``minimum``, warning when it was too small."""
    if value < minimum:
        logger.warning("%s=%s is below the minimum of %s; clamping", name, value, minimum)
        return minimum
    return value


def clamp_unit_interval(name: str, value: float) -> float:
    value = float(value)
    if value < 0.0 or value > 1.0:
        clamped = min(1.0, max(0.0, value))
        logger.warning("%s=%s is outside [0, 1]; clamping to %s", name, value, clamped)
        return clamped
    return value


@dataclass
class CaveConfig:
    """Aggregates all tunable parameters for cave generation."""

    width: int
    height: int

    # Chance that a cell starts as wall before smoothing.
    fill_probability: float = 0.45
    # Cellular-automaton passes applied to the random fill.
    smoothing_iterations: int = 4
    # Name of the connectivity strategy used to join floor regions.
    strategy: str = "minimum_spanning_tree"
    # Half-width of carved corridors; 0 carves one-cell-wide corridors.
    corridor_thickness: int = DEFAULT_CORRIDOR_THICKNESS
    # Nearest-neighbour strategy: how many neighbours each region looks at.
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    # Random-walk strategy: moves per walk and chance each move heads toward the target.
    walk_steps: int = DEFAULT_WALK_STEPS
    walk_bias: float = DEFAULT_WALK_BIAS
    # Floor regions smaller than this are left unconnected.
    min_region_size: int = 1
    # Points of interest sampled per floor region; 0 disables placement.
    poi_per_region: int = 0
    # Sampled points must be at least this far from any wall.
    poi_min_wall_distance: float = 2.0

    wall_type: int = WALL
    floor_type: int = FLOOR
    poi_type: int = POINT_OF_INTEREST
    random_seed: Optional[int] = None
    collect_metrics: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("CaveConfig width and height must be positive")
        if not (0.0 <= self.fill_probability <= 1.0):
            raise ValueError("CaveConfig fill_probability must lie within [0, 1]")
        if self.smoothing_iterations < 0:
            raise ValueError("CaveConfig smoothing_iterations cannot be negative")
        if self.strategy not in STRATEGY_NAMES:
            raise ValueError(
                f"CaveConfig strategy must be one of {', '.join(STRATEGY_NAMES)}, got {self.strategy!r}"
            )
        if len({self.wall_type, self.floor_type, self.poi_type}) != 3:
            raise ValueError("CaveConfig wall, floor, and poi types must be distinct")

        # Engine parameters are clamped rather than rejected.
        self.corridor_thickness = clamp_minimum("corridor_thickness", self.corridor_thickness, 0)
        self.max_connections = clamp_minimum("max_connections", self.max_connections, 1)
        self.walk_steps = clamp_minimum("walk_steps", self.walk_steps, 0)
        self.walk_bias = clamp_unit_interval("walk_bias", self.walk_bias)
        self.min_region_size = clamp_minimum("min_region_size", self.min_region_size, 1)
        self.poi_per_region = clamp_minimum("poi_per_region", self.poi_per_region, 0)
        self.poi_min_wall_distance = clamp_minimum(
            "poi_min_wall_distance", self.poi_min_wall_distance, 0.0
        )
