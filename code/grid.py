"""Immutable cell grid plus the bounds-safe accessors the engine builds on.

Every transformation produces a new ``Grid``. Code that needs to write many
cells in one pass takes a ``GridBuilder``, which owns a private mutable copy
until ``freeze`` hands back an immutable result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from cave_constants import OUT_OF_BOUNDS, WALL
from geometry import PointLike, TilePos


@dataclass(frozen=True)
class Grid:
    """Rectangular row-major grid of integer cell codes."""

    rows: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]], fill: int = WALL) -> Grid:
        """Build a grid, using the first row's width for every row.

        Longer rows are truncated and shorter rows padded with ``fill``.
        """
        materialized = [tuple(int(cell) for cell in row) for row in rows]
        if not materialized:
            return cls(rows=())
        width = len(materialized[0])
        normalized = []
        for row in materialized:
            if len(row) >= width:
                normalized.append(row[:width])
            else:
                normalized.append(row + (fill,) * (width - len(row)))
        return cls(rows=tuple(normalized))

    @classmethod
    def filled(cls, width: int, height: int, cell_type: int = WALL) -> Grid:
        width = max(0, width)
        height = max(0, height)
        if width == 0:
            return cls(rows=())
        return cls(rows=tuple((cell_type,) * width for _ in range(height)))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def dimensions(self) -> Tuple[int, int]:
        """Return ``(height, width)``."""
        return self.height, self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return OUT_OF_BOUNDS
        return self.rows[y][x]

    def set(self, x: int, y: int, cell_type: int) -> Grid:
        """Return a copy with one cell replaced; out-of-bounds writes return ``self``."""
        if not self.in_bounds(x, y):
            return self
        row = self.rows[y]
        new_row = row[:x] + (cell_type,) + row[x + 1:]
        return Grid(rows=self.rows[:y] + (new_row,) + self.rows[y + 1:])

    def builder(self) -> GridBuilder:
        return GridBuilder(self)

    def positions(self) -> Iterator[TilePos]:
        """Yield every coordinate in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield TilePos(x, y)

    def count(self, cell_type: int) -> int:
        return sum(row.count(cell_type) for row in self.rows)

    def to_lists(self) -> List[List[int]]:
        return [list(row) for row in self.rows]


class GridBuilder:
    """Exclusive-write working copy of a grid for a single transformation."""

    def __init__(self, grid: Grid) -> None:
        self._height, self._width = grid.dimensions()
        self._cells: List[List[int]] = grid.to_lists()
        self.cells_written = 0

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return OUT_OF_BOUNDS
        return self._cells[y][x]

    def set(self, x: int, y: int, cell_type: int) -> bool:
        """Write one cell; return False when the coordinate was clipped."""
        if not self.in_bounds(x, y):
            return False
        self._cells[y][x] = cell_type
        self.cells_written += 1
        return True

    def freeze(self) -> Grid:
        return Grid(rows=tuple(tuple(row) for row in self._cells))


def get_cell(x: int, y: int, grid: Grid) -> int:
    """Read a cell, yielding ``OUT_OF_BOUNDS`` outside the grid."""
    return grid.get(x, y)


def get_cell_at(point: PointLike, grid: Grid) -> int:
    x, y = point
    return grid.get(x, y)


def set_cell(x: int, y: int, cell_type: int, grid: Grid) -> Grid:
    """Return a grid with one cell written; outside writes are dropped."""
    return grid.set(x, y, cell_type)


def dimensions(grid: Grid) -> Tuple[int, int]:
    return grid.dimensions()


def changed_cells(before: Grid, after: Grid) -> List[TilePos]:
    """List coordinates whose value differs between two same-sized grids."""
    return [
        TilePos(x, y)
        for y, (row_a, row_b) in enumerate(zip(before.rows, after.rows))
        for x, (cell_a, cell_b) in enumerate(zip(row_a, row_b))
        if cell_a != cell_b
    ]
