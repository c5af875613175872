"""
data_models.py: Data structures for the round state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Set, Union

from .constants import PLAYER_HEIGHT, PLAYER_WIDTH


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box in field coordinates (y grows downward)."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def overlaps(self, other: "Rect") -> bool:
        """Strict overlap; boxes that only share an edge do not collide."""
        return (self.left < other.right and other.left < self.right
                and self.top < other.bottom and other.top < self.bottom)


@dataclass
class PlayerBody:
    """The player's body. x is fixed for the round, y is the box center."""
    x: float
    y: float
    velocity: float = 0.0
    angle: float = 0.0
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT

    @property
    def bounds(self) -> Rect:
        return Rect(self.x - self.width / 2, self.y - self.height / 2,
                    self.width, self.height)

    @property
    def leading_edge(self) -> float:
        return self.x + self.width / 2


@dataclass
class ObstaclePair:
    """
    A top and bottom obstacle sharing one x (center) and one gap.
    The top one reaches up to the field's top edge, the bottom one down to
    the field's bottom edge.
    """
    id: int
    x: float
    gap_y: float
    gap: float
    width: float
    field_height: float

    @property
    def gap_top(self) -> float:
        return self.gap_y - self.gap / 2

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap / 2

    @property
    def top_rect(self) -> Rect:
        return Rect(self.x - self.width / 2, 0.0, self.width, self.gap_top)

    @property
    def bottom_rect(self) -> Rect:
        return Rect(self.x - self.width / 2, self.gap_bottom,
                    self.width, self.field_height - self.gap_bottom)

    def rects(self) -> tuple[Rect, Rect]:
        return self.top_rect, self.bottom_rect


@dataclass
class ScoreState:
    """Score for the current round plus the best score carried across rounds."""
    score: int = 0
    best_score: int = 0
    credited: Set[int] = field(default_factory=set)
    retired: int = 0    # credited pairs already reaped from the field

    @property
    def credited_count(self) -> int:
        """Always equal to score."""
        return len(self.credited) + self.retired

    def credit(self, pair_id: int) -> bool:
        """Counts a pair once. Returns False if it was already credited."""
        if pair_id in self.credited:
            return False
        self.credited.add(pair_id)
        self.score += 1
        if self.score > self.best_score:
            self.best_score = self.score
        return True

    def retire(self, pair_id: int):
        if pair_id in self.credited:
            self.credited.remove(pair_id)
            self.retired += 1


@dataclass
class DifficultyState:
    """Active play time. Speed and spawn interval are derived from it."""
    elapsed_ms: float = 0.0


class RoundState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass(frozen=True)
class RoundSummary:
    """Frozen result of a finished round, handed to the game-over screen."""
    score: int
    best_score: int
    new_record: bool = False
    best_saved: bool = True


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class ScoreChanged:
    new_score: int


@dataclass(frozen=True)
class RoundOver:
    summary: RoundSummary

    @property
    def score(self) -> int:
        return self.summary.score

    @property
    def best_score(self) -> int:
        return self.summary.best_score


TickResult = Union[Continue, ScoreChanged, RoundOver]
