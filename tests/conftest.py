import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from cave_constants import FLOOR, WALL
from grid import Grid


def parse_grid(text: str) -> Grid:
    """Build a grid from rows of ``#`` (wall) and ``.`` (floor)."""
    rows = []
    for line in text.strip().splitlines():
        rows.append([WALL if char == "#" else FLOOR for char in line.strip()])
    return Grid.from_rows(rows)


@pytest.fixture
def cross_grid() -> Grid:
    return parse_grid(
        """
        ..#..
        ..#..
        #####
        ..#..
        ..#..
        """
    )


@pytest.fixture
def open_grid() -> Grid:
    return Grid.filled(8, 6, FLOOR)


@pytest.fixture
def walled_grid() -> Callable[..., Grid]:
    def _walled_grid(*, width: int = 20, height: int = 20) -> Grid:
        return Grid.filled(width, height, WALL)

    return _walled_grid


@pytest.fixture
def make_grid() -> Callable[[str], Grid]:
    return parse_grid
