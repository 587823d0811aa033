import pytest

from gapflyer.data_models import (
    Actor, ActorView, GameSnapshot, GameState, Obstacle, ObstacleView
)


def make_actor(config, **overrides):
    actor = Actor.from_config(config)
    for name, value in overrides.items():
        setattr(actor, name, value)
    return actor


def test_actor_starts_at_canonical_position(config):
    actor = Actor.from_config(config)
    assert (actor.x, actor.y, actor.velocity) == (50.0, 150.0, 0.0)


def test_one_tick_matches_scenario(config):
    actor = Actor.from_config(config)
    actor.integrate(1 / 60)
    assert actor.velocity == pytest.approx(0.3)
    assert actor.y == pytest.approx(150.3)


def test_flap_overrides_integrated_velocity(config):
    actor = Actor.from_config(config)
    actor.integrate(1 / 60)
    actor.flap()
    assert actor.velocity == -7.5


@pytest.mark.parametrize("velocity", [-20.0, -7.5, 0.0, 3.3, 42.0])
def test_flap_does_not_accumulate(config, velocity):
    actor = make_actor(config, velocity=velocity)
    actor.flap()
    assert actor.velocity == config.flap_impulse


def test_frame_rate_independent_velocity(config):
    coarse = Actor.from_config(config)
    fine = Actor.from_config(config)
    coarse.integrate(1 / 30)
    fine.integrate(1 / 60)
    fine.integrate(1 / 60)
    assert coarse.velocity == pytest.approx(fine.velocity)
    # Semi-implicit Euler: position drifts by at most one frame of gravity
    assert abs(coarse.y - fine.y) <= config.gravity + 1e-9


def test_frame_rate_independent_without_gravity(hover_config):
    coarse = make_actor(hover_config, velocity=-4.0)
    fine = make_actor(hover_config, velocity=-4.0)
    coarse.integrate(1 / 30)
    fine.integrate(1 / 60)
    fine.integrate(1 / 60)
    assert coarse.y == pytest.approx(fine.y)
    assert coarse.velocity == pytest.approx(fine.velocity)


def test_zero_dt_changes_nothing(config):
    actor = make_actor(config, velocity=5.0)
    actor.integrate(0.0)
    assert (actor.y, actor.velocity) == (150.0, 5.0)


def test_x_never_moves(config):
    actor = Actor.from_config(config)
    for _ in range(30):
        actor.integrate(1 / 60)
    actor.flap()
    actor.integrate(1 / 45)
    assert actor.x == config.actor_x


def test_obstacle_advance_and_off_screen():
    obstacle = Obstacle(x=10.0, gap_top=100.0, gap_height=200.0, width=80.0, speed=3.0)
    obstacle.advance(1 / 60)
    assert obstacle.x == pytest.approx(7.0)
    assert not obstacle.is_off_screen()
    obstacle.x = -80.0
    assert not obstacle.is_off_screen()
    obstacle.x = -80.5
    assert obstacle.is_off_screen()


def test_snapshot_to_dict():
    snapshot = GameSnapshot(
        state=GameState.PLAYING,
        score=3,
        high_score=7,
        menu_open=False,
        difficulty_level=1,
        actor=ActorView(50.0, 151.234, 60.0, 45.0, 0.456),
        obstacles=(ObstacleView(400.0, 120.0, 260.0, 90.0),),
    )
    data = snapshot.to_dict()
    assert data["state"] == "playing"
    assert data["highScore"] == 7
    assert data["actor"]["y"] == 151.23
    assert data["obstacles"] == [{"x": 400.0, "gapTop": 120.0, "gapHeight": 260.0, "width": 90.0}]


def test_snapshot_is_read_only(config):
    view = Actor.from_config(config).to_view()
    with pytest.raises(AttributeError):
        view.y = 0.0
