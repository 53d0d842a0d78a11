import pytest

from cave_config import STRATEGY_NAMES, CaveConfig
from cave_constants import FLOOR, POINT_OF_INTEREST
from cave_generator import CaveGenerator


def _config(**overrides) -> CaveConfig:
    settings = dict(
        width=48,
        height=32,
        fill_probability=0.42,
        smoothing_iterations=4,
        random_seed=1234,
    )
    settings.update(overrides)
    return CaveConfig(**settings)


def _fragmented_config(**overrides) -> CaveConfig:
    # Unsmoothed noise at 40% floor stays well below the percolation threshold,
    # so the floor breaks into many separate pockets.
    settings = dict(fill_probability=0.6, smoothing_iterations=0, collect_metrics=True)
    settings.update(overrides)
    return _config(**settings)


def test_generation_is_reproducible_for_a_seed():
    first = CaveGenerator(_fragmented_config()).generate()
    second = CaveGenerator(_fragmented_config()).generate()

    assert first == second
    assert first.dimensions() == (32, 48)


def test_missing_seed_is_chosen_and_recorded():
    config = _config(random_seed=None)

    CaveGenerator(config)

    assert isinstance(config.random_seed, int)


@pytest.mark.parametrize("thickness", [0, 1])
def test_spanning_tree_generation_joins_all_kept_regions(thickness):
    generator = CaveGenerator(
        _fragmented_config(strategy="minimum_spanning_tree", corridor_thickness=thickness)
    )

    generator.generate()
    region_count = len(generator.regions)
    stage = generator.metrics.snapshot()["minimum_spanning_tree"]

    assert region_count >= 2
    assert generator.connectivity.region_count == region_count
    assert generator.connectivity.edge_count == region_count - 1
    assert generator.connectivity.component_count == 1
    assert generator.connectivity.cycle_count == 0
    assert stage["total_corridors_painted"] == region_count - 1
    assert stage["total_cells_changed"] > 0


@pytest.mark.parametrize("strategy", STRATEGY_NAMES)
def test_every_strategy_carves_corridors_through_the_pipeline(strategy):
    generator = CaveGenerator(
        _fragmented_config(strategy=strategy, max_connections=2, walk_steps=30)
    )

    grid = generator.generate()
    stage = generator.metrics.snapshot()[strategy]

    assert len(generator.regions) >= 2
    assert grid.dimensions() == (32, 48)
    assert generator.grid is grid
    assert stage["invocations"] == 1
    assert stage["total_corridors_painted"] >= 1
    assert stage["total_cells_changed"] > 0


def test_metrics_are_recorded_per_stage():
    generator = CaveGenerator(_fragmented_config(poi_per_region=1, poi_min_wall_distance=1.0))

    generator.generate()
    snapshot = generator.metrics.snapshot()

    assert len(generator.regions) >= 2
    assert {"random_fill", "smooth_cellular", "minimum_spanning_tree", "points_of_interest"} <= set(snapshot)
    assert snapshot["random_fill"]["invocations"] == 1
    assert snapshot["random_fill"]["total_cells_changed"] == 48 * 32
    assert snapshot["smooth_cellular"]["total_cells_changed"] == 0
    assert snapshot["minimum_spanning_tree"]["total_corridors_painted"] == len(generator.regions) - 1
    assert snapshot["points_of_interest"]["total_cells_changed"] > 0


def test_metrics_are_off_by_default():
    generator = CaveGenerator(_config())

    generator.generate()

    assert generator.metrics is None


def test_points_of_interest_are_placed_when_requested():
    grid = CaveGenerator(
        _config(fill_probability=0.35, poi_per_region=2, poi_min_wall_distance=1.0)
    ).generate()

    assert grid.count(FLOOR) > 0
    assert grid.count(POINT_OF_INTEREST) > 0
