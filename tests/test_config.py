from dataclasses import replace

import pytest

from gapflyer.config import ConfigError, GameConfig, load_config
from gapflyer.constants import PROFILES


@pytest.mark.parametrize("name", sorted(PROFILES))
def test_builtin_profiles_are_valid(name):
    config = load_config(name)
    assert config.max_gap_top >= config.min_gap_top


def test_profile_from_environment(monkeypatch):
    monkeypatch.setenv("GAPFLYER_PROFILE", "mobile")
    assert load_config().playfield_width == 320.0


def test_unknown_profile_rejected():
    with pytest.raises(ConfigError, match="unknown profile"):
        load_config("toaster")


def test_unknown_setting_rejected(config):
    with pytest.raises(ConfigError, match="unknown setting 'wind'"):
        GameConfig.from_profile({"wind": 1.0})


def test_scenario_gap_range(config):
    assert config.effective_gap_height == 260.0
    assert (config.min_gap_top, config.max_gap_top) == (60.0, 260.0)


def test_gap_floor_applies(config):
    narrow = replace(config, gap_height=100.0)
    assert narrow.effective_gap_height == config.min_gap_height


def test_degenerate_gap_rejected_at_startup(config):
    with pytest.raises(ConfigError, match="no room for placement"):
        replace(config, gap_height=500.0).validate()


def test_all_problems_reported(config):
    broken = replace(config, flap_impulse=2.0, min_obstacle_width=200, points_per_level=0)
    with pytest.raises(ConfigError) as info:
        broken.validate()
    assert len(info.value.problems) == 3


def test_actor_must_start_in_bounds(config):
    with pytest.raises(ConfigError, match="out of bounds"):
        replace(config, actor_y=560.0).validate()


def test_with_viewport_resizes_and_validates(config):
    resized = config.with_viewport(1280, 720)
    assert (resized.playfield_width, resized.playfield_height) == (1280.0, 720.0)
    assert resized.spawn_x == 1130.0
    with pytest.raises(ConfigError):
        config.with_viewport(height=300)


def test_config_is_immutable(config):
    with pytest.raises(AttributeError):
        config.gravity = 1.0
