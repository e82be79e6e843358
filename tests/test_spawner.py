import math
import random

import pytest

from game.dodge.entities import Player
from game.dodge.spawner import (
    auto_difficulty,
    hsl_to_rgb,
    projectile_color,
    projectile_speed,
    spawn_interval,
    spawn_point,
    spawn_projectile,
)


class FixedRng:
    """Always picks the given edge and the middle of it"""

    def __init__(self, edge, fraction=0.5):
        self.edge = edge
        self.fraction = fraction

    def randrange(self, n):
        return self.edge

    def random(self):
        return self.fraction


def test_auto_difficulty_is_linear_in_elapsed_time():
    assert auto_difficulty(0.0) == 1.0
    assert auto_difficulty(10.0) == pytest.approx(1.8)
    values = [auto_difficulty(t / 10) for t in range(0, 1000)]
    assert values == sorted(values)


def test_spawn_interval_shrinks_to_floor():
    assert spawn_interval(1.0) == pytest.approx(0.95)
    assert spawn_interval(10.0) == pytest.approx(0.5)
    assert spawn_interval(16.0) == pytest.approx(0.2)
    assert spawn_interval(1000.0) == 0.2
    intervals = [spawn_interval(d / 4) for d in range(0, 200)]
    assert min(intervals) >= 0.2
    assert intervals == sorted(intervals, reverse=True)


def test_projectile_speed():
    assert projectile_speed(1.0) == 160.0
    assert projectile_speed(2.5) == 220.0


@pytest.mark.parametrize(
    "edge, expected",
    [
        (0, (400.0, -10.0)),
        (1, (810.0, 300.0)),
        (2, (400.0, 610.0)),
        (3, (-10.0, 300.0)),
    ],
)
def test_spawn_point_edges(edge, expected):
    assert spawn_point(800, 600, rng=FixedRng(edge)) == expected


def test_spawn_points_start_just_off_screen():
    rng = random.Random(3)
    for _ in range(200):
        x, y = spawn_point(800, 600, rng=rng)
        on_vertical_edge = x in (-10.0, 810.0) and 0 <= y <= 600
        on_horizontal_edge = y in (-10.0, 610.0) and 0 <= x <= 800
        assert on_vertical_edge or on_horizontal_edge


def test_projectile_aims_at_player():
    player = Player(x=300.0, y=200.0)
    rng = random.Random(11)
    for _ in range(50):
        b = spawn_projectile(player, 800, 600, difficulty=2.0, rng=rng)
        assert math.hypot(b.vx, b.vy) == pytest.approx(1.0)
        to_x, to_y = player.x - b.x, player.y - b.y
        # Parallel and pointing the same way
        assert b.vx * to_y - b.vy * to_x == pytest.approx(0.0, abs=1e-6)
        assert b.vx * to_x + b.vy * to_y > 0
        assert b.speed == pytest.approx(200.0)
        assert b.radius == 6.0


def test_projectile_at_player_position_gets_zero_direction():
    player = Player(x=400.0, y=-10.0)
    b = spawn_projectile(player, 800, 600, difficulty=1.0, rng=FixedRng(0))
    assert (b.x, b.y) == (400.0, -10.0)
    assert (b.vx, b.vy) == (0.0, 0.0)


def test_projectile_color_follows_difficulty_hue():
    # hsl(30, 80%, 60%)
    assert projectile_color(1.0) == (235, 153, 71)
    assert projectile_color(1.0) != projectile_color(5.0)


def test_hue_wraps_around():
    assert hsl_to_rgb(370.0, 0.8, 0.6) == hsl_to_rgb(10.0, 0.8, 0.6)
    assert hsl_to_rgb(0.0, 1.0, 0.5) == (255, 0, 0)
