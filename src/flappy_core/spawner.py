"""
spawner.py: Timed creation of obstacle pairs.
"""

import itertools
import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .constants import MIN_GAP_Y
from .data_models import ObstaclePair
from .profiles import DeviceProfile

logger = logging.getLogger(__name__)


@dataclass
class ObstacleSpawner:
    """
    Emits one obstacle pair whenever the accumulated time reaches the
    current spawn interval. The accumulator is reset to zero on spawn, not
    decremented, so a long frame never produces a backlog of pairs.
    """
    profile: DeviceProfile
    rng: random.Random = field(default_factory=random.Random)
    min_gap_y: float = MIN_GAP_Y
    accumulator_ms: float = 0.0
    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), repr=False)

    @property
    def spawn_x(self) -> float:
        """Just past the right edge so nothing pops in half-visible."""
        return self.profile.field_width + self.profile.pipe_width / 2

    def gap_range(self) -> tuple[float, float]:
        return self.min_gap_y, self.profile.field_height - self.min_gap_y

    def make_pair(self, gap_y: float) -> ObstaclePair:
        low, high = self.gap_range()
        gap_y = min(max(gap_y, low), high)
        return ObstaclePair(
            id=next(self._ids),
            x=self.spawn_x,
            gap_y=gap_y,
            gap=self.profile.pipe_gap,
            width=self.profile.pipe_width,
            field_height=self.profile.field_height,
        )

    def _spawn_pair(self) -> ObstaclePair:
        """Generates a new pair off-screen to the right."""
        pair = self.make_pair(self.rng.uniform(*self.gap_range()))
        self.accumulator_ms = 0.0
        logger.debug("Spawned pair %d with gap center %.1f", pair.id, pair.gap_y)
        return pair

    def step(self, dt_ms: float, interval_ms: float) -> Optional[ObstaclePair]:
        self.accumulator_ms += dt_ms
        if self.accumulator_ms >= interval_ms:
            return self._spawn_pair()
        return None
