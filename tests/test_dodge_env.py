import numpy as np
import pytest

from game.dodge import DodgeEnv
from game.dodge.dodge_env import ACTION_DIRECTIONS
from game.dodge.entities import Projectile


@pytest.fixture
def env():
    env = DodgeEnv(width=2000, height=2000, max_steps=50)
    yield env
    env.close()


def test_spaces(env):
    assert env.action_space.n == len(ACTION_DIRECTIONS) == 9
    assert env.observation_space.shape == (6 + 8 * 4,)


def test_reset_observation(env):
    obs, info = env.reset(seed=0)
    assert obs.dtype == np.float32
    assert obs.shape == env.observation_space.shape
    assert env.observation_space.contains(obs)
    assert obs[0] == pytest.approx(0.0)
    assert obs[1] == pytest.approx(0.0)
    assert info["elapsed"] == 0.0
    assert info["num_projectiles"] == 0


def test_step_rewards_survival(env):
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(0)
    assert reward == pytest.approx(env.dt)
    assert not terminated
    assert not truncated
    assert info["num_projectiles"] == 1
    assert env.observation_space.contains(obs)


def test_truncates_at_max_steps(env):
    env.reset(seed=0)
    truncated = False
    steps = 0
    while not truncated:
        _, _, terminated, truncated, info = env.step(4)
        assert not terminated
        steps += 1
    assert steps == 50
    assert info["elapsed"] == pytest.approx(50 * env.dt)


def test_terminates_on_hit(env):
    env.reset(seed=0)
    p = env.session.player
    env.session.projectiles.append(Projectile(x=p.x, y=p.y, vx=0.0, vy=0.0, speed=0.0))
    _, reward, terminated, _, info = env.step(0)
    assert terminated
    assert info["collided"]
    assert reward == pytest.approx(-5.0)


def test_movement_actions(env):
    env.reset(seed=0)
    x0 = env.session.player.x
    env.step(4)  # right
    assert env.session.player.x > x0
    y0 = env.session.player.y
    env.step(1)  # up
    assert env.session.player.y < y0


def test_proximity_penalty():
    env = DodgeEnv(reward_config={"R_PROXIMITY": 1.0, "name": "ignored"})
    env.reset(seed=0)
    p = env.session.player
    env.session.spawn_timer = 1e9
    env.session.projectiles.append(Projectile(x=p.x + 40.0, y=p.y, vx=0.0, vy=0.0, speed=0.0))
    _, reward, terminated, _, _ = env.step(0)
    assert not terminated
    assert reward < 0


def test_seeded_resets_are_reproducible():
    a = DodgeEnv()
    b = DodgeEnv()
    a.reset(seed=5)
    b.reset(seed=5)
    for action in [0, 1, 2, 3, 4, 5, 6, 7, 8] * 5:
        obs_a, *_ = a.step(action)
        obs_b, *_ = b.step(action)
        np.testing.assert_array_equal(obs_a, obs_b)


def test_unknown_render_mode():
    with pytest.raises(AssertionError):
        DodgeEnv(render_mode="ascii")


def test_render_without_mode_returns_none(env):
    env.reset(seed=0)
    assert env.render() is None
