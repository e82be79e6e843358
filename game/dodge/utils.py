"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def normalize(x: float, y: float, fallback: float = 1.0) -> Tuple[float, float]:
    """Normalize a vector to unit length.

    A zero-length vector is divided by ``fallback`` instead of its length,
    so (0, 0) stays (0, 0) rather than raising.
    """
    l = math.hypot(x, y) or fallback
    return x / l, y / l


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching circles do not count)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) < (rr * rr)


def format_seconds(seconds: float) -> str:
    """Format a survival time the way the HUD shows it"""
    return f"{seconds:.2f} s"


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
