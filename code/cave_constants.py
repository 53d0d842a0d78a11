"""Shared constants for the cave segmentation and connectivity engine."""

from __future__ import annotations

# Cell type codes. The engine only compares them for equality.
WALL = 0
FLOOR = 1
POINT_OF_INTEREST = 2

OUT_OF_BOUNDS = -1  # Returned when reading outside the grid.

DEFAULT_CORRIDOR_THICKNESS = 0
DEFAULT_MAX_CONNECTIONS = 1
DEFAULT_WALK_STEPS = 40
DEFAULT_WALK_BIAS = 0.6  # Probability that a random-walk step heads toward its target.
DEFAULT_WALL_THRESHOLD = 5  # Walls in a 3x3 neighbourhood needed for a cell to become wall when smoothing.
