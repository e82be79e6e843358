"""
Projectile spawning and difficulty curves.

Projectiles appear just outside a random screen edge and are aimed at the
player's position at spawn time. They are never retargeted afterwards.
"""

from __future__ import annotations

import colorsys
import math
import random
from typing import Optional

from .entities import Color, Player, Projectile


def auto_difficulty(elapsed: float, base: float = 1.0, rate: float = 0.08) -> float:
    """Difficulty as a linear function of survival time"""
    return base + elapsed * rate


def spawn_interval(
    difficulty: float,
    base: float = 1.0,
    rate: float = 0.05,
    floor: float = 0.2,
) -> float:
    """Seconds until the next spawn; shrinks with difficulty down to ``floor``"""
    return max(floor, base - difficulty * rate)


def projectile_speed(difficulty: float, base: float = 120.0, scale: float = 40.0) -> float:
    return base + difficulty * scale


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Color:
    """Convert CSS-style HSL (hue in degrees, s/l in [0, 1]) to an RGB tuple"""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return (round(r * 255), round(g * 255), round(b * 255))


def projectile_color(difficulty: float) -> Color:
    """Hue moves from orange towards green/blue as difficulty rises"""
    return hsl_to_rgb(20.0 + difficulty * 10.0, 0.8, 0.6)


def spawn_point(
    width: float,
    height: float,
    rng: Optional[random.Random] = None,
    padding: float = 10.0,
):
    """Pick a point just outside one of the four edges (top, right, bottom, left)"""
    rng = rng or random
    edge = rng.randrange(4)
    if edge == 0:
        return rng.random() * width, -padding
    if edge == 1:
        return width + padding, rng.random() * height
    if edge == 2:
        return rng.random() * width, height + padding
    return -padding, rng.random() * height


def spawn_projectile(
    player: Player,
    width: float,
    height: float,
    difficulty: float,
    rng: Optional[random.Random] = None,
    radius: float = 6.0,
    padding: float = 10.0,
    base_speed: float = 120.0,
    speed_scale: float = 40.0,
) -> Projectile:
    """Create one projectile aimed at the player's current position"""
    x, y = spawn_point(width, height, rng=rng, padding=padding)

    dx = player.x - x
    dy = player.y - y
    dist = math.hypot(dx, dy) or 1.0

    return Projectile(
        x=x,
        y=y,
        vx=dx / dist,
        vy=dy / dist,
        speed=projectile_speed(difficulty, base_speed, speed_scale),
        radius=radius,
        color=projectile_color(difficulty),
    )
