"""
collision.py: Scoring, collision and out-of-bounds checks for one tick.
"""

from dataclasses import dataclass
from typing import List, Optional

from .constants import OUT_OF_BOUNDS_MARGIN
from .data_models import ObstaclePair, PlayerBody, ScoreState
from .physics_core import any_overlap


@dataclass(frozen=True)
class Evaluation:
    """What one evaluation pass found."""
    scored: int = 0
    terminal: Optional[str] = None  # "collision" | "out_of_bounds"

    @property
    def is_terminal(self) -> bool:
        return self.terminal is not None


class CollisionAndScoreEvaluator:
    """
    Reads player and obstacle geometry; the only state it writes is the
    ScoreState passed in. Scoring always runs before the terminal checks.
    """

    def __init__(self, field_height: float, margin: float = OUT_OF_BOUNDS_MARGIN):
        self.field_height = field_height
        self.margin = margin

    def score(self, player: PlayerBody, pairs: List[ObstaclePair], scores: ScoreState) -> int:
        """Credits every pair whose bottom obstacle the player has passed."""
        gained = 0
        for pair in pairs:
            bottom = pair.bottom_rect
            center_x = bottom.left + bottom.width / 2
            if player.leading_edge > center_x and scores.credit(pair.id):
                gained += 1
        return gained

    def collides(self, player: PlayerBody, pairs: List[ObstaclePair]) -> bool:
        bounds = player.bounds
        return any(any_overlap(bounds, pair.rects()) for pair in pairs)

    def out_of_bounds(self, player: PlayerBody) -> bool:
        bounds = player.bounds
        return (bounds.bottom >= self.field_height + self.margin
                or bounds.top <= -self.margin)

    def evaluate(self, player: PlayerBody, pairs: List[ObstaclePair], scores: ScoreState) -> Evaluation:
        scored = self.score(player, pairs, scores)
        if self.collides(player, pairs):
            return Evaluation(scored, "collision")
        if self.out_of_bounds(player):
            return Evaluation(scored, "out_of_bounds")
        return Evaluation(scored)

    @staticmethod
    def reap(pairs: List[ObstaclePair], scores: ScoreState) -> List[ObstaclePair]:
        """Drops pairs scrolled past the left edge, with their credited ids."""
        live = []
        for pair in pairs:
            if pair.x < -pair.width:
                scores.retire(pair.id)
            else:
                live.append(pair)
        return live
