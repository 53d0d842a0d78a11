import math

import pytest

from geometry import Direction, Rect, TilePos, distance


def test_tile_pos_neighbors_are_the_four_edge_adjacent_tiles():
    neighbors = set(TilePos(3, 4).neighbors())

    assert neighbors == {TilePos(3, 3), TilePos(4, 4), TilePos(3, 5), TilePos(2, 4)}


def test_tile_pos_step_follows_direction_vector():
    assert TilePos(2, 2).step(Direction.NORTH) == TilePos(2, 1)
    assert TilePos(2, 2).step(Direction.WEST) == TilePos(1, 2)
    assert TilePos(2, 2).offset(-3, 4) == TilePos(-1, 6)


def test_tile_pos_unpacks_and_converts_from_tuple():
    x, y = TilePos(2, 7)

    assert (x, y) == (2, 7)
    assert TilePos.from_tuple((2, 7)) == TilePos(2, 7)
    assert TilePos(2, 7)[1] == 7
    with pytest.raises(IndexError):
        TilePos(2, 7)[2]


def test_rect_from_points_is_tight_and_inclusive():
    rect = Rect.from_points([(2, 3), (5, 3), (4, 8)])

    assert rect == Rect(2, 3, 4, 6)
    assert Rect.from_points([(7, 7)]) == Rect(7, 7, 1, 1)
    assert Rect.from_points([]) is None


def test_distance_is_euclidean():
    assert distance((0, 0), (3, 4)) == 5
    assert distance(TilePos(5, 10), TilePos(0, 0)) == pytest.approx(math.sqrt(125))
