"""
profiles.py: Device profiles selecting field size, speed and gap for a round.
"""

from dataclasses import dataclass

from .constants import (
    COMPACT_LONG_SIDE, COMPACT_PIPE_GAP, COMPACT_PIPE_SPEED, COMPACT_SHORT_SIDE,
    GAME_HEIGHT, GAME_WIDTH, INITIAL_PIPE_SPAWN_INTERVAL, MIN_GAP_Y, PIPE_GAP,
    PIPE_SPEED, PIPE_WIDTH,
)
from .errors import ConfigurationError


@dataclass(frozen=True)
class DeviceProfile:
    """Read-only round configuration, chosen once at round setup."""
    name: str
    field_width: float
    field_height: float
    base_speed: float = PIPE_SPEED
    base_spawn_interval: float = INITIAL_PIPE_SPAWN_INTERVAL
    pipe_gap: float = PIPE_GAP
    pipe_width: float = PIPE_WIDTH

    def validate(self, min_gap_y: float = MIN_GAP_Y) -> "DeviceProfile":
        """Raises ConfigurationError if a round cannot run with this profile."""
        positive = {
            "field_width": self.field_width,
            "field_height": self.field_height,
            "base_speed": self.base_speed,
            "base_spawn_interval": self.base_spawn_interval,
            "pipe_gap": self.pipe_gap,
            "pipe_width": self.pipe_width,
        }
        for key, value in positive.items():
            if not value > 0:
                raise ConfigurationError(
                    f"{self.name}: {key} must be positive, got {value!r}")

        if self.field_height < 2 * min_gap_y:
            raise ConfigurationError(
                f"{self.name}: field_height {self.field_height} leaves no room "
                f"for gap centers with margin {min_gap_y}")
        if self.pipe_gap / 2 > min_gap_y:
            raise ConfigurationError(
                f"{self.name}: pipe_gap {self.pipe_gap} does not fit inside "
                f"margin {min_gap_y}")
        return self


STANDARD_PROFILE = DeviceProfile(
    name="standard",
    field_width=GAME_WIDTH,
    field_height=GAME_HEIGHT,
)


def compact_profile(portrait: bool = True) -> DeviceProfile:
    """Smaller gap and slower base speed for compact (touch) displays."""
    if portrait:
        width, height = COMPACT_SHORT_SIDE, COMPACT_LONG_SIDE
    else:
        width, height = COMPACT_LONG_SIDE, COMPACT_SHORT_SIDE
    return DeviceProfile(
        name="compact-portrait" if portrait else "compact-landscape",
        field_width=width,
        field_height=height,
        base_speed=COMPACT_PIPE_SPEED,
        pipe_gap=COMPACT_PIPE_GAP,
    )


def select_profile(compact: bool, portrait: bool = True) -> DeviceProfile:
    return compact_profile(portrait) if compact else STANDARD_PROFILE
