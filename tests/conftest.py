import random
from dataclasses import replace

import pytest

from gapflyer.config import GameConfig
from gapflyer.score_store import MemoryScoreStore

SCENARIO = {
    "gravity": 0.3,
    "flap_impulse": -7.5,
    "actor_x": 50.0,
    "actor_y": 150.0,
    "actor_width": 60.0,
    "actor_height": 45.0,
    "min_obstacle_width": 80,
    "max_obstacle_width": 110,
    "gap_height": 260.0,
    "min_obstacle_height": 60.0,
    "obstacle_spacing": 380.0,
    "base_speed": 3.0,
    "speed_increment": 1.0,
    "playfield_width": 800.0,
    "playfield_height": 600.0,
    "ground_height": 20.0,
    "spawn_inset": 150.0,
}


@pytest.fixture
def config():
    return GameConfig.from_profile(SCENARIO)


@pytest.fixture
def hover_config(config):
    """No gravity and a gap wide enough that the actor always fits through."""
    return replace(config, gravity=0.0, gap_height=400.0).validate()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryScoreStore()
