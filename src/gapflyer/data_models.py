"""
data_models.py: Data structures for the simulation state and its read-only views.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import GameConfig
from .constants import FRAME_NORMALIZATION


class GameState(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameEvent(str, Enum):
    """Notifications for observers such as sound and particle effects."""
    STARTED = "started"
    FLAPPED = "flapped"
    SCORED = "scored"
    GAME_OVER = "game_over"
    NEW_HIGH_SCORE = "new_high_score"
    MENU_OPENED = "menu_opened"
    MENU_CLOSED = "menu_closed"


@dataclass
class Actor:
    """The flyer. Its x never changes; the world scrolls past it."""
    x: float
    y: float
    width: float
    height: float
    gravity: float
    flap_impulse: float
    velocity: float = 0.0

    @classmethod
    def from_config(cls, config: GameConfig) -> "Actor":
        return cls(
            x=config.actor_x,
            y=config.actor_y,
            width=config.actor_width,
            height=config.actor_height,
            gravity=config.gravity,
            flap_impulse=config.flap_impulse,
        )

    def integrate(self, dt: float):
        """Advances velocity and position by dt seconds."""
        self.velocity += self.gravity * dt * FRAME_NORMALIZATION
        self.y += self.velocity * dt * FRAME_NORMALIZATION

    def flap(self):
        """Sets (never adds to) the upward velocity."""
        self.velocity = self.flap_impulse

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    def to_view(self) -> "ActorView":
        return ActorView(self.x, self.y, self.width, self.height, self.velocity)


@dataclass
class Obstacle:
    """A scrolling barrier with one passable gap."""
    x: float
    gap_top: float
    gap_height: float
    width: float
    speed: float                # Captured at spawn time
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.gap_height

    def advance(self, dt: float):
        self.x -= self.speed * dt * FRAME_NORMALIZATION

    def is_off_screen(self) -> bool:
        return self.right < 0

    def to_view(self) -> "ObstacleView":
        return ObstacleView(self.x, self.gap_top, self.gap_height, self.width)


@dataclass(frozen=True)
class ActorView:
    x: float
    y: float
    width: float
    height: float
    velocity: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_top: float
    gap_height: float
    width: float


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a render pass may read. Built fresh for every frame."""
    state: GameState
    score: int
    high_score: int
    menu_open: bool
    difficulty_level: int
    actor: ActorView
    obstacles: Tuple[ObstacleView, ...]

    def to_dict(self) -> dict:
        """Prepares a plain dictionary for serialization."""
        return {
            "state": self.state.value,
            "score": self.score,
            "highScore": self.high_score,
            "menuOpen": self.menu_open,
            "level": self.difficulty_level,
            "actor": {
                "x": round(self.actor.x, 2),
                "y": round(self.actor.y, 2),
                "width": self.actor.width,
                "height": self.actor.height,
                "velocity": round(self.actor.velocity, 2),
            },
            "obstacles": [
                {"x": round(o.x, 2), "gapTop": o.gap_top,
                 "gapHeight": o.gap_height, "width": o.width}
                for o in self.obstacles
            ],
        }
