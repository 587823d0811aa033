"""
difficulty.py: Score-driven speed scaling for newly spawned obstacles.
"""

import logging

from .config import GameConfig

logger = logging.getLogger(__name__)


class DifficultyController:
    """Level starts at 1 and only ever climbs within a session."""

    def __init__(self, config: GameConfig):
        self.base_speed = config.base_speed
        self.speed_increment = config.speed_increment
        self.points_per_level = config.points_per_level
        self.max_level = config.max_level
        self.level = 1

    def reset(self):
        self.level = 1

    def level_for(self, score: int) -> int:
        return min(self.max_level, 1 + score // self.points_per_level)

    def update(self, score: int) -> int:
        """Raises the level if the score earned one; returns the current level."""
        target = self.level_for(score)
        if target > self.level:
            logger.debug("Difficulty level %d -> %d at score %d", self.level, target, score)
            self.level = target
        return self.level

    def current_speed(self) -> float:
        return self.base_speed + (self.level - 1) * self.speed_increment
