import random

import pytest

from flappy_core.data_models import ObstaclePair
from flappy_core.game_loop import GameLoop
from flappy_core.profiles import STANDARD_PROFILE
from flappy_core.score_store import Database


class RecordingHooks:
    def __init__(self):
        self.scores = []
        self.pauses = []
        self.summaries = []

    def on_score_changed(self, score):
        self.scores.append(score)

    def on_pause_changed(self, paused):
        self.pauses.append(paused)

    def on_round_over(self, summary):
        self.summaries.append(summary)


class BrokenStore:
    def load_best_score(self):
        raise OSError("disk gone")

    def save_best_score(self, score):
        raise OSError("disk gone")


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def hooks():
    return RecordingHooks()


@pytest.fixture
def store():
    db = Database(":memory:")
    yield db
    db.close()


@pytest.fixture
def game(hooks, store, rng):
    return GameLoop(STANDARD_PROFILE, store=store, hooks=hooks, rng=rng)


def make_pair(pair_id, x, gap_y, profile=STANDARD_PROFILE):
    return ObstaclePair(id=pair_id, x=x, gap_y=gap_y, gap=profile.pipe_gap,
                        width=profile.pipe_width, field_height=profile.field_height)


def run_until_over(game, dt_ms=16, max_ticks=1000):
    for _ in range(max_ticks):
        result = game.advance(dt_ms)
        if game.is_over:
            return result
    raise AssertionError("round never ended")
