import pytest

from game.dodge.entities import Projectile
from game.dodge.session import GameState, InputState, Session, render_session, step

import random


def make_session(**kwargs):
    kwargs.setdefault("rng", random.Random(0))
    return Session(**kwargs)


def still(session):
    """Stop the spawner so a test controls every projectile"""
    session.spawn_timer = 1e9


def test_new_session_is_idle_and_centered():
    s = make_session(width=800, height=600)
    assert s.state is GameState.IDLE
    assert (s.player.x, s.player.y) == (400.0, 300.0)
    assert s.projectiles == []
    assert s.difficulty == 1.0
    assert s.spawn_timer == 0.0


def test_rejects_empty_surface():
    with pytest.raises(ValueError):
        Session(width=0, height=600)


def test_input_direction_normalizes_diagonals():
    inputs = InputState()
    inputs.press("w")
    inputs.press("d")
    dx, dy = inputs.direction()
    assert dx == pytest.approx(2 ** -0.5)
    assert dy == pytest.approx(-(2 ** -0.5))


def test_input_opposite_keys_cancel():
    inputs = InputState()
    inputs.press("ArrowLeft")
    inputs.press("d")
    assert inputs.direction() == (0.0, 0.0)
    inputs.release("arrowleft")
    assert inputs.direction() == (1.0, 0.0)


def test_input_aliases():
    inputs = InputState()
    inputs.press("arrowdown")
    assert inputs.direction() == (0.0, 1.0)
    inputs.clear()
    inputs.press("S")
    assert inputs.direction() == (0.0, 1.0)


def test_player_moves_with_speed_and_dt():
    s = make_session()
    still(s)
    step(s, (1.0, 0.0), 0.1)
    assert s.player.x == pytest.approx(400.0 + 38.0)
    assert s.player.y == pytest.approx(300.0)


@pytest.mark.parametrize("x, y", [(-50.0, 10000.0), (5000.0, -3.0), (0.0, 0.0), (800.0, 600.0)])
def test_player_is_clamped_inside_the_surface(x, y):
    s = make_session(width=800, height=600)
    still(s)
    s.player.x, s.player.y = x, y
    step(s, (0.0, 0.0), 0.0)
    r = s.player.radius
    assert r <= s.player.x <= 800 - r
    assert r <= s.player.y <= 600 - r


def test_player_stops_at_the_wall():
    s = make_session(width=800, height=600)
    still(s)
    for _ in range(100):
        step(s, (-1.0, 0.0), 0.1)
    assert s.player.x == 12.0


def test_first_step_spawns_and_resets_timer():
    s = make_session()
    step(s, (0.0, 0.0), 0.01)
    assert len(s.projectiles) == 1
    assert s.spawn_timer == pytest.approx(0.95)


def test_spawn_timer_counts_down():
    s = make_session()
    step(s, (0.0, 0.0), 0.01)
    step(s, (0.0, 0.0), 0.5)
    assert len(s.projectiles) == 1
    step(s, (0.0, 0.0), 0.5)
    assert len(s.projectiles) == 2


def test_projectiles_are_never_culled():
    s = make_session(width=100, height=100)
    s.projectiles.append(Projectile(x=-500.0, y=-500.0, vx=-1.0, vy=0.0, speed=100.0))
    still(s)
    for _ in range(10):
        step(s, (0.0, 0.0), 0.1)
    assert len(s.projectiles) == 1
    assert s.projectiles[0].x == pytest.approx(-600.0)


def test_collision_stops_the_frame_early():
    s = make_session()
    still(s)
    p = s.player
    far = Projectile(x=0.0, y=0.0, vx=1.0, vy=0.0, speed=100.0)
    hit = Projectile(x=p.x + 10.0, y=p.y, vx=0.0, vy=0.0, speed=0.0)
    s.projectiles += [far, hit]

    assert step(s, (0.0, 0.0), 0.1) is True
    # The newest projectile was checked first, the older one never moved
    assert far.x == 0.0
    assert s.elapsed == 0.0
    assert s.difficulty == 1.0


def test_touching_projectile_is_not_a_hit():
    s = make_session()
    still(s)
    p = s.player
    s.projectiles.append(Projectile(x=p.x + 18.0, y=p.y, vx=0.0, vy=0.0, speed=0.0))
    assert step(s, (0.0, 0.0), 0.1) is False


def test_projectile_flies_into_player():
    s = make_session()
    still(s)
    p = s.player
    s.projectiles.append(Projectile(x=p.x - 100.0, y=p.y, vx=1.0, vy=0.0, speed=200.0))
    hits = [step(s, (0.0, 0.0), 0.1) for _ in range(5)]
    # 20px gap after four frames is still clear of the 18px combined radius
    assert hits == [False, False, False, False, True]


def test_elapsed_and_auto_difficulty_advance():
    s = make_session()
    still(s)
    step(s, (0.0, 0.0), 0.5)
    assert s.elapsed == pytest.approx(0.5)
    assert s.difficulty == pytest.approx(1.04)


def test_auto_difficulty_ignores_initial_difficulty():
    s = make_session(initial_difficulty=4.0)
    assert s.difficulty == 1.0
    still(s)
    step(s, (0.0, 0.0), 1.0)
    assert s.difficulty == pytest.approx(1.08)


def test_initial_difficulty_starts_manual_play():
    s = make_session(auto_difficulty=False, initial_difficulty=4.0)
    assert s.difficulty == 4.0
    s.reset()
    assert s.difficulty == 4.0


@pytest.mark.parametrize("initial, expected", [(0.0, 1.0), (-2.0, 1.0), (25.0, 10.0)])
def test_initial_difficulty_is_clamped(initial, expected):
    s = make_session(auto_difficulty=False, initial_difficulty=initial)
    assert s.initial_difficulty == expected
    assert s.difficulty == expected


def test_manual_difficulty_is_held():
    s = make_session(auto_difficulty=False)
    still(s)
    s.difficulty = 3.0
    for _ in range(10):
        step(s, (0.0, 0.0), 0.5)
    assert s.elapsed == pytest.approx(5.0)
    assert s.difficulty == 3.0


def test_reset_clears_play_and_restores_preferences():
    s = make_session(width=800, height=600)
    s.auto_difficulty = False
    s.sound_on = False
    step(s, (1.0, 1.0), 0.2)
    s.reset()
    assert (s.player.x, s.player.y) == (400.0, 300.0)
    assert s.projectiles == []
    assert s.elapsed == 0.0
    assert s.spawn_timer == 0.0
    assert s.auto_difficulty is True
    assert s.sound_on is True
    assert s.difficulty == 1.0


def test_render_draws_projectiles_then_player(renderer):
    s = make_session()
    s.projectiles.append(Projectile(x=1.0, y=2.0, vx=0.0, vy=1.0, speed=1.0, color=(1, 2, 3)))
    render_session(s, renderer)
    assert renderer.calls[0] == ("clear",)
    assert renderer.calls[1] == ("circle", 1.0, 2.0, 6.0, (1, 2, 3))
    assert renderer.calls[2][0:4] == ("circle", 400.0, 300.0, 12.0)
    assert len(renderer.calls) == 3
