"""
Game entity dataclasses
"""

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass
class Player:
    """Player-controlled circle"""
    x: float
    y: float
    radius: float = 12.0
    speed: float = 380.0  # px/s


@dataclass
class Projectile:
    """Projectile flying in a straight line along a unit direction"""
    x: float
    y: float
    vx: float  # unit direction, fixed at spawn
    vy: float
    speed: float  # px/s
    radius: float = 6.0
    color: Color = (255, 153, 102)

    def update(self, dt: float):
        self.x += self.vx * self.speed * dt
        self.y += self.vy * self.speed * dt
