"""
Session state and the per-frame simulation step.

A ``Session`` owns everything that changes during play. ``step`` advances it
by one frame and reports whether the player was hit; it does not change the
run state itself, that is the controller's job.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from .entities import Player, Projectile
from .ports import Renderer
from .spawner import auto_difficulty, spawn_interval, spawn_projectile
from .utils import clamp, circle_collide, normalize


PLAYER_COLOR = (134, 240, 200)


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


# logical direction -> key names that drive it
KEY_BINDINGS: Dict[str, Tuple[str, ...]] = {
    "up": ("arrowup", "w"),
    "down": ("arrowdown", "s"),
    "left": ("arrowleft", "a"),
    "right": ("arrowright", "d"),
}


class InputState:
    """Currently held keys, sampled once per frame"""

    def __init__(self):
        self.pressed: Set[str] = set()

    def press(self, key: str):
        self.pressed.add(key.lower())

    def release(self, key: str):
        self.pressed.discard(key.lower())

    def clear(self):
        self.pressed.clear()

    def is_down(self, direction: str) -> bool:
        return any(k in self.pressed for k in KEY_BINDINGS[direction])

    def direction(self) -> Tuple[float, float]:
        """Unit movement direction; opposite keys cancel out"""
        dx, dy = 0.0, 0.0
        if self.is_down("up"):
            dy -= 1.0
        if self.is_down("down"):
            dy += 1.0
        if self.is_down("left"):
            dx -= 1.0
        if self.is_down("right"):
            dx += 1.0
        return normalize(dx, dy)


class Session:
    """Mutable state of one play-through plus the tunables that shape it"""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        player_radius: float = 12.0,
        player_speed: float = 380.0,
        projectile_radius: float = 6.0,
        projectile_base_speed: float = 120.0,
        projectile_speed_scale: float = 40.0,
        spawn_padding: float = 10.0,
        spawn_interval_base: float = 1.0,
        spawn_interval_rate: float = 0.05,
        spawn_interval_floor: float = 0.2,
        initial_difficulty: float = 1.0,
        difficulty_base: float = 1.0,
        difficulty_rate: float = 0.08,
        min_difficulty: float = 1.0,
        max_difficulty: float = 10.0,
        auto_difficulty: bool = True,
        sound_on: bool = True,
        rng: Optional[random.Random] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface must have a positive size, got {width}x{height}")

        # Surface
        self.width = width
        self.height = height

        # Tunables
        self.player_radius = player_radius
        self.player_speed = player_speed
        self.projectile_radius = projectile_radius
        self.projectile_base_speed = projectile_base_speed
        self.projectile_speed_scale = projectile_speed_scale
        self.spawn_padding = spawn_padding
        self.spawn_interval_base = spawn_interval_base
        self.spawn_interval_rate = spawn_interval_rate
        self.spawn_interval_floor = spawn_interval_floor
        self.initial_difficulty = clamp(initial_difficulty, min_difficulty, max_difficulty)
        self.difficulty_base = difficulty_base
        self.difficulty_rate = difficulty_rate
        self.min_difficulty = min_difficulty
        self.max_difficulty = max_difficulty

        # Preferences, restored on every reset
        self.default_auto_difficulty = auto_difficulty
        self.default_sound_on = sound_on
        self.auto_difficulty = auto_difficulty
        self.sound_on = sound_on

        self.rng = rng or random.Random()
        self.best = 0.0

        self.player: Player = None  # type: ignore
        self.projectiles: List[Projectile] = []
        self.state = GameState.IDLE
        self.elapsed = 0.0
        self.difficulty = self.initial_difficulty
        self.spawn_timer = 0.0
        self.last_time = 0.0
        self.reset()

    def reset(self):
        """Back to a fresh idle session; only the best score is kept"""
        self.player = Player(
            x=self.width / 2,
            y=self.height / 2,
            radius=self.player_radius,
            speed=self.player_speed,
        )
        self.projectiles = []
        self.state = GameState.IDLE
        self.elapsed = 0.0
        self.auto_difficulty = self.default_auto_difficulty
        self.sound_on = self.default_sound_on
        # initial_difficulty is the held value for manual play
        self.difficulty = self.difficulty_base if self.auto_difficulty else self.initial_difficulty
        self.spawn_timer = 0.0
        self.last_time = 0.0

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    def next_spawn_interval(self) -> float:
        return spawn_interval(
            self.difficulty,
            base=self.spawn_interval_base,
            rate=self.spawn_interval_rate,
            floor=self.spawn_interval_floor,
        )

    def spawn(self) -> Projectile:
        p = spawn_projectile(
            self.player,
            self.width,
            self.height,
            self.difficulty,
            rng=self.rng,
            radius=self.projectile_radius,
            padding=self.spawn_padding,
            base_speed=self.projectile_base_speed,
            speed_scale=self.projectile_speed_scale,
        )
        self.projectiles.append(p)
        return p

    @property
    def max_projectile_speed(self) -> float:
        return self.projectile_base_speed + self.max_difficulty * self.projectile_speed_scale


def move_player(session: Session, direction: Tuple[float, float], dt: float):
    p = session.player
    dx, dy = direction
    if dx or dy:
        p.x += dx * p.speed * dt
        p.y += dy * p.speed * dt

    # Hard boundary, no bounce
    r = p.radius
    p.x = clamp(p.x, r, session.width - r)
    p.y = clamp(p.y, r, session.height - r)


def step(session: Session, direction: Tuple[float, float], dt: float) -> bool:
    """Advance the session by ``dt`` seconds.

    Returns True as soon as a projectile touches the player. In that case the
    remaining projectiles are left where they are and neither the elapsed time
    nor the difficulty is advanced for this frame.
    """
    move_player(session, direction, dt)

    session.spawn_timer -= dt
    if session.spawn_timer <= 0:
        session.spawn()
        session.spawn_timer = session.next_spawn_interval()

    p = session.player
    # Newest first
    for b in reversed(session.projectiles):
        b.update(dt)
        if circle_collide(p.x, p.y, p.radius, b.x, b.y, b.radius):
            return True

    session.elapsed += dt
    if session.auto_difficulty:
        session.difficulty = auto_difficulty(
            session.elapsed, base=session.difficulty_base, rate=session.difficulty_rate
        )
    return False


def render_session(session: Session, renderer: Renderer):
    """Clear the surface and draw projectiles, then the player on top"""
    renderer.clear()
    for b in session.projectiles:
        renderer.draw_circle(b.x, b.y, b.radius, b.color)
    p = session.player
    renderer.draw_circle(p.x, p.y, p.radius, PLAYER_COLOR)
