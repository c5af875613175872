"""Gameplay core for a side-scrolling flap-and-dodge game."""

from .collision import CollisionAndScoreEvaluator, Evaluation
from .data_models import (
    Continue, DifficultyState, ObstaclePair, PlayerBody, Rect, RoundOver,
    RoundState, RoundSummary, ScoreChanged, ScoreState, TickResult,
)
from .difficulty import DifficultyController
from .errors import ConfigurationError, FlappyError, RoundStateError
from .game_loop import GameLoop, NullPresentation, PresentationHooks
from .physics_core import PhysicsCore
from .profiles import STANDARD_PROFILE, DeviceProfile, compact_profile, select_profile
from .score_store import Database, ScoreStore
from .session import GameSession, Phase
from .spawner import ObstacleSpawner

__all__ = [
    "CollisionAndScoreEvaluator",
    "Evaluation",
    "Continue",
    "DifficultyState",
    "ObstaclePair",
    "PlayerBody",
    "Rect",
    "RoundOver",
    "RoundState",
    "RoundSummary",
    "ScoreChanged",
    "ScoreState",
    "TickResult",
    "DifficultyController",
    "ConfigurationError",
    "FlappyError",
    "RoundStateError",
    "GameLoop",
    "NullPresentation",
    "PresentationHooks",
    "PhysicsCore",
    "STANDARD_PROFILE",
    "DeviceProfile",
    "compact_profile",
    "select_profile",
    "Database",
    "ScoreStore",
    "GameSession",
    "Phase",
    "ObstacleSpawner",
]
