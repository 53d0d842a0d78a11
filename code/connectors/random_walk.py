"""Organic links: biased random walks that head toward, but need not reach, a target."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from cave_config import clamp_minimum, clamp_unit_interval
from cave_constants import DEFAULT_WALK_BIAS, DEFAULT_WALK_STEPS
from corridor_rasterizer import paint_square
from geometry import CARDINAL_DIRECTIONS, Direction, TilePos
from grid import Grid, GridBuilder
from segmentation import Region

from connectors.base import CorridorPainter, RegionConnector
from connectors.sequential import SequentialSelector


def _step_toward(current: TilePos, target: TilePos) -> Optional[Direction]:
    dx = target.x - current.x
    dy = target.y - current.y
    if dx == 0 and dy == 0:
        return None
    if abs(dx) >= abs(dy):
        return Direction.EAST if dx > 0 else Direction.WEST
    return Direction.SOUTH if dy > 0 else Direction.NORTH


def _clamp(value: int, upper: int) -> int:
    if upper <= 0:
        return value
    return max(0, min(upper - 1, value))


def random_walk_path(
    start: TilePos,
    target: TilePos,
    steps: int,
    bias: float,
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> List[TilePos]:
    """Positions visited by a walk of exactly ``steps`` moves, start included.

    Each move heads toward ``target`` along its longer axis with probability
    ``bias`` and otherwise picks a random cardinal direction. The walker stays
    inside a ``width`` x ``height`` grid.
    """
    generator = rng if rng is not None else random
    steps = clamp_minimum("walk_steps", steps, 0)
    bias = clamp_unit_interval("walk_bias", bias)

    current = TilePos(start.x, start.y)
    path = [current]
    for _ in range(steps):
        direction = None
        if generator.random() < bias:
            direction = _step_toward(current, target)
        if direction is None:
            direction = generator.choice(CARDINAL_DIRECTIONS)
        current = TilePos(
            _clamp(current.x + direction.dx, width),
            _clamp(current.y + direction.dy, height),
        )
        path.append(current)
    return path


class RandomWalkPainter(CorridorPainter):
    """Paints a thick trail along a biased random walk instead of a straight line."""

    def __init__(
        self,
        walk_steps: int = DEFAULT_WALK_STEPS,
        bias: float = DEFAULT_WALK_BIAS,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.walk_steps = clamp_minimum("walk_steps", walk_steps, 0)
        self.bias = clamp_unit_interval("walk_bias", bias)
        self.rng = rng

    def paint(
        self,
        builder: GridBuilder,
        start: TilePos,
        end: TilePos,
        cell_type: int,
        thickness: int,
    ) -> None:
        path = random_walk_path(
            start,
            end,
            self.walk_steps,
            self.bias,
            builder.width,
            builder.height,
            rng=self.rng,
        )
        for point in path:
            paint_square(builder, point, thickness, cell_type)


class RandomWalkSelector(SequentialSelector):
    """Walks run between consecutive regions in discovery order."""


def connect_random_walk(
    regions: Iterable[Region],
    corridor_thickness: int,
    cell_type: int,
    grid: Grid,
    walk_steps: int = DEFAULT_WALK_STEPS,
    bias: float = DEFAULT_WALK_BIAS,
    rng: Optional[random.Random] = None,
) -> Grid:
    connector = RegionConnector(
        "random_walk",
        RandomWalkSelector(),
        RandomWalkPainter(walk_steps=walk_steps, bias=bias, rng=rng),
    )
    return connector.connect(regions, corridor_thickness, cell_type, grid)
