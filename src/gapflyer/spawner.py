"""
spawner.py: Procedural obstacle generation and the live obstacle collection.
"""

import math
import random
from typing import List, Optional, Tuple

from .config import GameConfig
from .data_models import Obstacle


class ObstacleSpawner:
    """
    Owns the ordered obstacle list. Insertion order is spawn order is screen
    order, so the head of the list is always the nearest obstacle.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random()
        self.obstacles: List[Obstacle] = []

    def gap_top_range(self) -> Tuple[float, float]:
        """Half-open [min, max) interval for a new obstacle's gap top."""
        return self.config.min_gap_top, self.config.max_gap_top

    def _roll_gap_top(self) -> float:
        min_top, max_top = self.gap_top_range()
        return math.floor(self.rng.random() * (max_top - min_top)) + min_top

    def _roll_width(self) -> int:
        return self.rng.randint(self.config.min_obstacle_width, self.config.max_obstacle_width)

    def spawn(self, speed: float) -> Obstacle:
        """Places a new obstacle at the spawn edge."""
        obstacle = Obstacle(
            x=self.config.spawn_x,
            gap_top=self._roll_gap_top(),
            gap_height=self.config.effective_gap_height,
            width=self._roll_width(),
            speed=speed,
        )
        self.obstacles.append(obstacle)
        return obstacle

    def should_spawn(self) -> bool:
        if not self.obstacles:
            return True
        last = self.obstacles[-1]
        return self.config.spawn_x - last.x >= self.config.obstacle_spacing

    def maybe_spawn(self, speed: float) -> Optional[Obstacle]:
        if self.should_spawn():
            return self.spawn(speed)
        return None

    def advance(self, dt: float):
        for obstacle in self.obstacles:
            obstacle.advance(dt)

    def retire(self) -> int:
        """Drops obstacles that have fully left the screen; returns how many."""
        before = len(self.obstacles)
        self.obstacles = [o for o in self.obstacles if not o.is_off_screen()]
        return before - len(self.obstacles)

    def clear(self):
        self.obstacles = []
