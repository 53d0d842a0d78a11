"""Geometry helpers for working with tile coordinates and rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

PointLike = Union["TilePos", Tuple[int, int]]


class Direction(Enum):
    """Cardinal directions with unit vectors on the tile grid."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


CARDINAL_DIRECTIONS = tuple(Direction)


@dataclass(frozen=True, order=True)
class TilePos:
    """Integer tile coordinate."""

    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> int:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("TilePos only supports two coordinates")

    def offset(self, dx: int, dy: int) -> TilePos:
        return TilePos(self.x + dx, self.y + dy)

    def step(self, direction: Direction) -> TilePos:
        return self.offset(direction.dx, direction.dy)

    def neighbors(self) -> Tuple[TilePos, ...]:
        """Return the four edge-adjacent tiles."""
        return tuple(self.step(direction) for direction in CARDINAL_DIRECTIONS)

    @classmethod
    def from_tuple(cls, value: PointLike) -> TilePos:
        if isinstance(value, TilePos):
            return value
        x, y = value
        return cls(int(x), int(y))


INVALID_POS = TilePos(-1, -1)


@dataclass(frozen=True)
class Rect:
    """Immutable axis-aligned rectangle using integer tile coordinates."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> Optional[Rect]:
        """Return the tight rect covering ``points``, or None when there are none."""
        xs = []
        ys = []
        for px, py in points:
            xs.append(px)
            ys.append(py)
        if not xs:
            return None
        min_x, min_y = min(xs), min(ys)
        return cls(min_x, min_y, max(xs) - min_x + 1, max(ys) - min_y + 1)


def distance(a: PointLike, b: PointLike) -> float:
    """Euclidean distance between two tile coordinates."""
    ax, ay = a
    bx, by = b
    return math.hypot(ax - bx, ay - by)
