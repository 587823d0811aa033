"""
physics_core.py: Per-tick collision and scoring sweep.
"""

from dataclasses import dataclass
from typing import List

from .config import GameConfig
from .data_models import Actor, Obstacle


@dataclass
class Outcome:
    """Result of one sweep over the live obstacles."""
    points: int = 0
    collided: bool = False
    out_of_bounds: bool = False

    @property
    def game_over(self) -> bool:
        return self.collided or self.out_of_bounds


class PhysicsCore:
    """
    Collision and scoring checks against the actor's box.
    Reads the actor; only mutates an obstacle's `passed` flag.
    """

    def __init__(self, config: GameConfig):
        self.floor_y = config.floor_y

    def is_out_of_bounds(self, actor: Actor) -> bool:
        """Above the ceiling or touching the ground band."""
        return actor.y < 0 or actor.bottom > self.floor_y

    def overlaps(self, actor: Actor, obstacle: Obstacle) -> bool:
        return actor.right > obstacle.x and actor.x < obstacle.right

    def misses_gap(self, actor: Actor, obstacle: Obstacle) -> bool:
        return actor.y < obstacle.gap_top or actor.bottom > obstacle.gap_bottom

    def evaluate(self, actor: Actor, obstacles: List[Obstacle]) -> Outcome:
        outcome = Outcome()

        for obstacle in obstacles:
            # 1. Pass check, credited once per obstacle
            if not obstacle.passed and obstacle.right < actor.x:
                obstacle.passed = True
                outcome.points += 1

            # 2. Obstacle collision
            if self.overlaps(actor, obstacle) and self.misses_gap(actor, obstacle):
                outcome.collided = True

        # 3. Floor/Ceiling
        if self.is_out_of_bounds(actor):
            outcome.out_of_bounds = True

        return outcome
