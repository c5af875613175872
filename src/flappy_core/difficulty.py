"""
difficulty.py: Scroll speed and spawn interval as functions of active play time.
"""

import math

from .constants import SPEED_INCREASE_FACTOR, SPEED_INCREASE_INTERVAL


class DifficultyController:
    """
    Stateless step curve. Speed and spawn interval are scaled by the same
    factor and exponent, recomputed from elapsed time on every call.
    """

    def __init__(self, base_speed: float, base_interval: float,
                 factor: float = SPEED_INCREASE_FACTOR,
                 step_ms: float = SPEED_INCREASE_INTERVAL):
        self.base_speed = base_speed
        self.base_interval = base_interval
        self.factor = factor
        self.step_ms = step_ms

    def steps(self, elapsed_ms: float) -> int:
        return math.floor(max(elapsed_ms, 0.0) / self.step_ms)

    def multiplier(self, elapsed_ms: float) -> float:
        return self.factor ** self.steps(elapsed_ms)

    def current_speed(self, elapsed_ms: float) -> float:
        return self.base_speed * self.multiplier(elapsed_ms)

    def current_spawn_interval(self, elapsed_ms: float) -> float:
        return self.base_interval * self.multiplier(elapsed_ms)
