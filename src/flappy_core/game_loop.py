"""
game_loop.py: One round of play, advanced by an external frame callback.
"""

import logging
import random
from typing import List, Optional, Protocol

from .collision import CollisionAndScoreEvaluator
from .constants import PLAYER_X_FRACTION
from .data_models import (
    Continue, DifficultyState, ObstaclePair, PlayerBody, RoundOver, RoundState,
    RoundSummary, ScoreChanged, ScoreState, TickResult,
)
from .difficulty import DifficultyController
from .errors import RoundStateError
from .physics_core import PhysicsCore
from .profiles import DeviceProfile
from .score_store import ScoreStore, load_best_score, save_best_score
from .spawner import ObstacleSpawner

logger = logging.getLogger(__name__)


class PresentationHooks(Protocol):
    """Callbacks into whatever draws the round."""

    def on_score_changed(self, score: int) -> None:
        ...

    def on_pause_changed(self, paused: bool) -> None:
        ...

    def on_round_over(self, summary: RoundSummary) -> None:
        ...


class NullPresentation:
    def on_score_changed(self, score: int) -> None:
        pass

    def on_pause_changed(self, paused: bool) -> None:
        pass

    def on_round_over(self, summary: RoundSummary) -> None:
        pass


class GameLoop:
    """
    Owns the player body, score, difficulty clock, obstacle list and round
    state of a single round. A new round means a new GameLoop.

    Tick order: gravity, difficulty, spawn, scroll, score, collision and
    bounds, reap. Input (flap, pause) is applied at the moment it arrives.
    """

    def __init__(self, profile: DeviceProfile, store: Optional[ScoreStore] = None,
                 hooks: Optional[PresentationHooks] = None,
                 rng: Optional[random.Random] = None,
                 physics: Optional[PhysicsCore] = None,
                 best_score: Optional[int] = None):
        # Raises ConfigurationError before any round state exists.
        self.profile = profile.validate()
        self.store = store
        self.hooks = hooks or NullPresentation()
        self.physics = physics or PhysicsCore()

        self.state = RoundState.NOT_STARTED
        self.player = PlayerBody(
            x=profile.field_width / PLAYER_X_FRACTION,
            y=profile.field_height / 2,
        )
        if best_score is None:
            best_score = load_best_score(store)
        self.scores = ScoreState(best_score=best_score)
        self.difficulty = DifficultyState()
        self.pairs: List[ObstaclePair] = []

        self.controller = DifficultyController(profile.base_speed, profile.base_spawn_interval)
        self.spawner = ObstacleSpawner(profile, rng=rng or random.Random())
        self.evaluator = CollisionAndScoreEvaluator(profile.field_height)
        self.summary: Optional[RoundSummary] = None

    # ---------- Derived values ----------

    @property
    def current_speed(self) -> float:
        return self.controller.current_speed(self.difficulty.elapsed_ms)

    @property
    def current_spawn_interval(self) -> float:
        return self.controller.current_spawn_interval(self.difficulty.elapsed_ms)

    @property
    def score(self) -> int:
        return self.scores.score

    @property
    def best_score(self) -> int:
        return self.scores.best_score

    @property
    def is_over(self) -> bool:
        return self.state is RoundState.OVER

    # ---------- Input ----------

    def flap(self):
        """First flap starts the round and also lifts the player."""
        if self.state is RoundState.NOT_STARTED:
            self.state = RoundState.RUNNING
            logger.info("Round started on %s profile", self.profile.name)
        elif self.state is not RoundState.RUNNING:
            return
        self.player.velocity = self.physics.flap(self.player.velocity)

    def toggle_pause(self):
        if self.state is RoundState.RUNNING:
            self.state = RoundState.PAUSED
            logger.info("Round paused at %.0f ms", self.difficulty.elapsed_ms)
            self.hooks.on_pause_changed(True)
        elif self.state is RoundState.PAUSED:
            self.state = RoundState.RUNNING
            logger.info("Round resumed at %.0f ms", self.difficulty.elapsed_ms)
            self.hooks.on_pause_changed(False)

    # ---------- Tick ----------

    def advance(self, dt_ms: float) -> TickResult:
        """Runs one frame of dt_ms. Only a Running round changes state."""
        if dt_ms < 0:
            raise RoundStateError(f"delta time must not be negative, got {dt_ms}")
        if self.state is RoundState.OVER:
            return RoundOver(self.summary)
        if self.state is not RoundState.RUNNING:
            return Continue()

        self.difficulty.elapsed_ms += dt_ms

        # 1. Player physics
        self.physics.step_player(self.player, dt_ms)

        # 2. Difficulty and spawning
        speed = self.current_speed
        spawned = self.spawner.step(dt_ms, self.current_spawn_interval)

        # 3. Scroll existing pairs; a new pair starts at its spawn x
        delta_x = speed * dt_ms / 1000.0
        for pair in self.pairs:
            pair.x -= delta_x
        if spawned is not None:
            self.pairs.append(spawned)

        # 4. Score, then terminal checks
        evaluation = self.evaluator.evaluate(self.player, self.pairs, self.scores)
        if evaluation.scored:
            self.hooks.on_score_changed(self.scores.score)
        if evaluation.is_terminal:
            logger.info("Round over (%s) with score %d", evaluation.terminal, self.scores.score)
            return self._end_round()

        # 5. Reap
        self.pairs = self.evaluator.reap(self.pairs, self.scores)

        if evaluation.scored:
            return ScoreChanged(self.scores.score)
        return Continue()

    # ---------- Round end & persistence ----------

    def _end_round(self) -> RoundOver:
        self.state = RoundState.OVER
        score = self.scores.score
        best = self.scores.best_score
        self.summary = RoundSummary(
            score=score,
            best_score=best,
            new_record=score > 0 and score >= best,
            best_saved=save_best_score(self.store, best),
        )
        self.hooks.on_round_over(self.summary)
        return RoundOver(self.summary)

