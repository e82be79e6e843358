"""
DodgeEnv - Bullet Dodge as a Gymnasium environment
--------------------------------------------------
- Same session and step function as the playable game
- Gymnasium API
- 1 agent that only moves (8 directions or stay)
- Projectiles spawn at the edges, aimed at the agent, faster over time
- Vector observation: agent state + top-K nearest projectiles
- Discrete(9) action space

Quick test:
    python -m game.dodge.dodge_env
"""

from __future__ import annotations

import math
import random
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .session import Session, step
from .utils import clamp, normalize, seed_everything

# 0 stay, 1 up, 2 down, 3 left, 4 right, 5 up-left, 6 up-right, 7 down-left, 8 down-right
ACTION_DIRECTIONS = [
    (0.0, 0.0),
    (0.0, -1.0),
    (0.0, 1.0),
    (-1.0, 0.0),
    (1.0, 0.0),
    (-1.0, -1.0),
    (1.0, -1.0),
    (-1.0, 1.0),
    (1.0, 1.0),
]

DEFAULT_REWARD = {
    "R_ALIVE": 1.0,      # per second survived
    "R_DEATH": 5.0,      # on collision
    "R_PROXIMITY": 0.0,  # per step, scaled by closeness of the nearest projectile
}


class DodgeEnv(gym.Env):
    """Bullet Dodge environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        dt: float = 1 / 30,
        max_steps: int = 1800,  # 60s at 30 FPS
        k_projectiles: int = 8,
        auto_difficulty: bool = True,
        initial_difficulty: float = 1.0,
        danger_radius: float = 120.0,
        reward_config: Optional[Dict[str, float]] = None,
        **session_kwargs,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unknown render_mode: {render_mode}"
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps
        self.k_projectiles = k_projectiles
        self.danger_radius = danger_radius

        self.reward_config = dict(DEFAULT_REWARD)
        if reward_config:
            self.reward_config.update(
                {k: v for k, v in reward_config.items() if k in DEFAULT_REWARD}
            )

        self.session = Session(
            width=width,
            height=height,
            auto_difficulty=auto_difficulty,
            initial_difficulty=initial_difficulty,
            sound_on=False,
            rng=random.Random(),
            **session_kwargs,
        )

        self.action_space = spaces.Discrete(len(ACTION_DIRECTIONS))

        # Agent: pos(2) difficulty(1) spawn timer(1) episode progress(1) projectile load(1)
        # Each projectile: rel pos(2) velocity(2)
        obs_dim = 6 + self.k_projectiles * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._collided = False

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self.session.rng.seed(seed)

        self.session.reset()
        self._step_count = 0
        self._collided = False

        return self._get_obs(), self._get_info()

    def step(self, action):
        dx, dy = ACTION_DIRECTIONS[int(action)]
        direction = normalize(dx, dy)

        self._collided = step(self.session, direction, self.dt)

        reward = self._compute_reward()

        terminated = self._collided
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _nearest(self):
        p = self.session.player
        return sorted(
            self.session.projectiles,
            key=lambda b: (b.x - p.x) ** 2 + (b.y - p.y) ** 2,
        )

    def _get_obs(self) -> np.ndarray:
        s = self.session
        p = s.player

        max_speed = max(1e-6, s.max_projectile_speed)
        max_interval = max(1e-6, s.spawn_interval_base)
        max_time = self.max_steps * self.dt

        obs_parts = [
            (p.x / self.width) * 2 - 1,
            (p.y / self.height) * 2 - 1,
            clamp(s.difficulty / s.max_difficulty, -1, 1),
            clamp(s.spawn_timer / max_interval, -1, 1),
            clamp(s.elapsed / max_time * 2 - 1, -1, 1),
            clamp(len(s.projectiles) / max(1, self.max_steps // 10), -1, 1),
        ]

        nearest = self._nearest()
        for i in range(self.k_projectiles):
            if i < len(nearest):
                b = nearest[i]
                obs_parts += [
                    clamp((b.x - p.x) / self.width, -1, 1),
                    clamp((b.y - p.y) / self.height, -1, 1),
                    clamp(b.vx * b.speed / max_speed, -1, 1),
                    clamp(b.vy * b.speed / max_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _closeness(self) -> float:
        """0 when nothing is within the danger radius, 1 when touching"""
        nearest = self._nearest()
        if not nearest:
            return 0.0
        p = self.session.player
        b = nearest[0]
        gap = math.hypot(b.x - p.x, b.y - p.y) - (b.radius + p.radius)
        return clamp(1.0 - gap / self.danger_radius, 0.0, 1.0)

    def _compute_reward(self) -> float:
        rc = self.reward_config
        reward = 0.0

        if self._collided:
            reward -= rc["R_DEATH"]
        else:
            reward += rc["R_ALIVE"] * self.dt

        if rc["R_PROXIMITY"]:
            reward -= rc["R_PROXIMITY"] * self._closeness()

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        s = self.session
        return {
            "elapsed": s.elapsed,
            "difficulty": s.difficulty,
            "num_projectiles": len(s.projectiles),
            "step": self._step_count,
            "collided": self._collided,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # Imported here so headless training never needs a display
            from .window import SessionWindow
            self._window = SessionWindow(
                self.session,
                "Bullet Dodge - DodgeEnv",
                visible=self.render_mode == "human",
            )

        if self.render_mode == "human":
            self._window.dispatch_events()
            self._window.on_draw()
            self._window.flip()
            return None
        return self._render_rgb_array()

    def _render_rgb_array(self) -> np.ndarray:
        import arcade

        self._window.switch_to()
        self._window.on_draw()
        image = arcade.get_image(0, 0, self.width, self.height)
        return np.asarray(image.convert("RGB"), dtype=np.uint8)

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> Tuple[float, float]:
    """Run a random episode; returns (total reward, seconds survived)"""
    env = DodgeEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f}, survived {info['elapsed']:.2f} s")
    env.close()
    return total, info["elapsed"]


if __name__ == "__main__":
    run_random_episode(render=True)
