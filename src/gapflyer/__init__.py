"""Frame-rate independent obstacle-avoidance simulation."""

from .config import ConfigError, GameConfig, load_config
from .data_models import GameEvent, GameSnapshot, GameState
from .game_loop import GameLoop, ManualFrameScheduler
from .game_state import GameStateMachine
from .score_store import MemoryScoreStore, ScoreStoreError, SqliteScoreStore

__all__ = [
    "ConfigError",
    "GameConfig",
    "GameEvent",
    "GameLoop",
    "GameSnapshot",
    "GameState",
    "GameStateMachine",
    "ManualFrameScheduler",
    "MemoryScoreStore",
    "ScoreStoreError",
    "SqliteScoreStore",
    "load_config",
]
