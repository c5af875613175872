"""
session.py: Menu, round and game-over flow around successive rounds.
"""

import random
from enum import Enum
from typing import Optional

from .data_models import Continue, RoundOver, RoundSummary, TickResult
from .game_loop import GameLoop, PresentationHooks
from .profiles import DeviceProfile
from .score_store import ScoreStore, load_best_score


class Phase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameSession:
    """
    Holds what survives between rounds: the profile, the best score and the
    store. Every round is a fresh GameLoop.
    """

    def __init__(self, profile: DeviceProfile, store: Optional[ScoreStore] = None,
                 hooks: Optional[PresentationHooks] = None,
                 rng: Optional[random.Random] = None):
        self.profile = profile.validate()
        self.store = store
        self.hooks = hooks
        self.rng = rng or random.Random()
        self.phase = Phase.MENU
        self.round: Optional[GameLoop] = None
        self.last_summary: Optional[RoundSummary] = None
        self.rounds_played = 0
        self.best_score = load_best_score(store)

    def new_round(self) -> GameLoop:
        self.round = GameLoop(self.profile, store=self.store, hooks=self.hooks,
                              rng=self.rng, best_score=self.best_score)
        self.phase = Phase.PLAYING
        self.rounds_played += 1
        return self.round

    def flap(self):
        """From the menu or game-over screen a flap sets up a new round."""
        if self.phase is Phase.PLAYING:
            self.round.flap()
        else:
            self.new_round()

    def toggle_pause(self):
        if self.phase is Phase.PLAYING:
            self.round.toggle_pause()

    def to_menu(self):
        if self.phase is Phase.GAME_OVER:
            self.phase = Phase.MENU
            self.round = None

    def advance(self, dt_ms: float) -> TickResult:
        if self.phase is not Phase.PLAYING:
            return Continue()
        result = self.round.advance(dt_ms)
        if isinstance(result, RoundOver):
            self.phase = Phase.GAME_OVER
            self.last_summary = result.summary
            self.best_score = max(self.best_score, result.best_score)
        return result
