"""
physics_core.py: Kinematics for the player body and the AABB overlap test.
"""

from typing import Iterable

from .constants import (
    DIVE_ANGLE, FLAP_VELOCITY, GRAVITY_Y, MAX_VELOCITY, RISE_ANGLE,
    ROTATION_FRAME_MS, ROTATION_SPEED,
)
from .data_models import PlayerBody, Rect


class PhysicsCore:
    """
    Player kinematics. Times are milliseconds, velocities pixels/second.
    """

    def __init__(self, gravity: float = GRAVITY_Y, flap_velocity: float = FLAP_VELOCITY,
                 max_velocity: float = MAX_VELOCITY, rotation_speed: float = ROTATION_SPEED):
        self.gravity = gravity
        self.flap_velocity = flap_velocity
        self.max_velocity = max_velocity
        self.rotation_speed = rotation_speed

    def clamp_velocity(self, velocity: float) -> float:
        return max(-self.max_velocity, min(velocity, self.max_velocity))

    def apply_gravity_and_movement(self, y: float, velocity: float, dt_ms: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after dt_ms.
        """
        dt = dt_ms / 1000.0
        velocity = self.clamp_velocity(velocity + self.gravity * dt)
        y += velocity * dt
        return y, velocity

    def flap(self, velocity: float) -> float:
        """
        Returns the velocity after a flap impulse.

        Downward motion is cancelled before the impulse is added, so a flap
        always lifts; stacked flaps add up until the clamp.
        """
        return self.clamp_velocity(min(velocity, 0.0) + self.flap_velocity)

    def target_angle(self, velocity: float) -> float:
        if velocity < 0:
            return RISE_ANGLE
        return DIVE_ANGLE * min(velocity / self.max_velocity, 1.0)

    def ease_rotation(self, angle: float, velocity: float, dt_ms: float) -> float:
        # Easing is defined per 60 Hz frame; scale it to the actual dt.
        blend = min(1.0, self.rotation_speed * dt_ms / ROTATION_FRAME_MS)
        return angle + (self.target_angle(velocity) - angle) * blend

    def step_player(self, player: PlayerBody, dt_ms: float):
        """Advances one player body by dt_ms. Mutates the player."""
        player.y, player.velocity = self.apply_gravity_and_movement(
            player.y, player.velocity, dt_ms)
        player.angle = self.ease_rotation(player.angle, player.velocity, dt_ms)


def any_overlap(subject: Rect, others: Iterable[Rect]) -> bool:
    return any(subject.overlaps(other) for other in others)
