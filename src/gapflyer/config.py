"""
config.py: Immutable per-session game configuration and its validation.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import List, Optional

from .constants import (
    DEFAULT_PROFILE, MAX_LEVEL, MIN_GAP_HEIGHT, POINTS_PER_LEVEL,
    PROFILE_ENV_VAR, PROFILES
)

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised at startup when a configuration cannot produce a playable game."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("invalid game configuration: " + "; ".join(problems))


@dataclass(frozen=True)
class GameConfig:
    """One device profile, chosen once at startup."""
    gravity: float
    flap_impulse: float
    actor_x: float
    actor_y: float
    actor_width: float
    actor_height: float
    min_obstacle_width: int
    max_obstacle_width: int
    gap_height: float
    min_obstacle_height: float
    obstacle_spacing: float
    base_speed: float
    speed_increment: float
    playfield_width: float
    playfield_height: float
    ground_height: float
    spawn_inset: float = 0.0
    min_gap_height: float = MIN_GAP_HEIGHT
    points_per_level: int = POINTS_PER_LEVEL
    max_level: int = MAX_LEVEL

    @property
    def effective_gap_height(self) -> float:
        return max(self.gap_height, self.min_gap_height)

    @property
    def floor_y(self) -> float:
        """Top of the ground band."""
        return self.playfield_height - self.ground_height

    @property
    def spawn_x(self) -> float:
        return self.playfield_width - self.spawn_inset

    @property
    def min_gap_top(self) -> float:
        return self.min_obstacle_height

    @property
    def max_gap_top(self) -> float:
        return self.floor_y - self.effective_gap_height - self.min_obstacle_height

    def validate(self) -> "GameConfig":
        """Returns self, or raises ConfigError naming every problem found."""
        problems = []

        for name in ("actor_width", "actor_height", "min_obstacle_width",
                     "playfield_width", "playfield_height", "obstacle_spacing",
                     "gap_height"):
            if getattr(self, name) <= 0:
                problems.append(f"{name} must be positive")
        if self.ground_height < 0:
            problems.append("ground_height must not be negative")
        if self.min_obstacle_height <= 0:
            problems.append("min_obstacle_height must be positive")
        if self.min_obstacle_width > self.max_obstacle_width:
            problems.append("min_obstacle_width exceeds max_obstacle_width")
        if self.gravity < 0:
            problems.append("gravity must not be negative")
        if self.flap_impulse >= 0:
            problems.append("flap_impulse must be negative (upward)")
        if self.base_speed <= 0:
            problems.append("base_speed must be positive")
        if self.speed_increment < 0:
            problems.append("speed_increment must not be negative")
        if self.points_per_level < 1:
            problems.append("points_per_level must be at least 1")
        if self.max_level < 1:
            problems.append("max_level must be at least 1")
        if not 0 <= self.spawn_inset < self.playfield_width:
            problems.append("spawn_inset must lie inside the playfield")

        if self.max_gap_top < self.min_gap_top:
            problems.append(
                f"gap of {self.effective_gap_height:g} leaves no room for placement "
                f"(max gap top {self.max_gap_top:g} < min gap top {self.min_gap_top:g})")

        # The actor has to start fully inside the playable band
        if self.actor_y < 0 or self.actor_y + self.actor_height > self.floor_y:
            problems.append("actor start position is out of bounds")
        if not 0 <= self.actor_x < self.playfield_width:
            problems.append("actor_x must lie inside the playfield")

        if problems:
            raise ConfigError(problems)
        return self

    def with_viewport(self, width: Optional[float] = None,
                      height: Optional[float] = None) -> "GameConfig":
        """Returns a validated copy sized to the current canvas."""
        changes = {}
        if width is not None:
            changes["playfield_width"] = float(width)
        if height is not None:
            changes["playfield_height"] = float(height)
        return replace(self, **changes).validate()

    @classmethod
    def from_profile(cls, profile: dict) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(profile) - known
        if unknown:
            raise ConfigError([f"unknown setting '{name}'" for name in sorted(unknown)])
        return cls(**profile).validate()


def load_config(profile: Optional[str] = None, width: Optional[float] = None,
                height: Optional[float] = None) -> GameConfig:
    """Select a device profile, optionally resized to the viewport."""
    name = profile or os.environ.get(PROFILE_ENV_VAR, DEFAULT_PROFILE)
    if name not in PROFILES:
        raise ConfigError([f"unknown profile '{name}' (expected one of {', '.join(PROFILES)})"])

    config = GameConfig.from_profile(PROFILES[name])
    if width is not None or height is not None:
        config = config.with_viewport(width, height)

    logger.info("Loaded %s profile (%gx%g playfield)", name,
                config.playfield_width, config.playfield_height)
    return config
