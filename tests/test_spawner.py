import random

import pytest

from flappy_core.profiles import STANDARD_PROFILE, compact_profile
from flappy_core.spawner import ObstacleSpawner


@pytest.fixture
def spawner():
    return ObstacleSpawner(STANDARD_PROFILE, rng=random.Random(7))


def test_gap_center_at_upper_boundary_places_edges(spawner):
    pair = spawner.make_pair(450)
    assert pair.bottom_rect.top == 510
    assert pair.top_rect.bottom == 390
    assert pair.top_rect.top == 0
    assert pair.bottom_rect.bottom == 600


def test_out_of_range_center_is_clamped(spawner):
    assert spawner.make_pair(10).gap_y == 150
    assert spawner.make_pair(590).gap_y == 450


def test_spawns_just_past_right_edge(spawner):
    pair = spawner.make_pair(300)
    assert pair.x == 800 + 52 / 2
    assert pair.top_rect.left == 800


def test_no_spawn_before_interval(spawner):
    assert spawner.step(1000, 1400) is None
    assert spawner.step(399, 1400) is None
    assert spawner.step(1, 1400) is not None


def test_accumulator_resets_to_zero_after_long_frame(spawner):
    assert spawner.step(5000, 1400) is not None
    assert spawner.accumulator_ms == 0
    assert spawner.step(16, 1400) is None


def test_ids_are_sequential(spawner):
    ids = [spawner.step(1400, 1400).id for _ in range(3)]
    assert ids == [1, 2, 3]


@pytest.mark.parametrize("profile", [STANDARD_PROFILE, compact_profile(True), compact_profile(False)])
def test_random_pairs_respect_margin_and_gap(profile):
    spawner = ObstacleSpawner(profile, rng=random.Random(99))
    for _ in range(200):
        pair = spawner.step(profile.base_spawn_interval, profile.base_spawn_interval)
        assert 150 <= pair.gap_y <= profile.field_height - 150
        assert pair.bottom_rect.top - pair.top_rect.bottom == pytest.approx(profile.pipe_gap)
