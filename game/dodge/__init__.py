"""Bullet Dodge - survive projectiles homing in from the screen edges"""

from .controller import Command, DodgeGame
from .dodge_env import DodgeEnv, run_random_episode
from .ports import JsonFileStore, MemoryStore
from .session import GameState, InputState, Session, step

__all__ = [
    'Command',
    'DodgeGame',
    'DodgeEnv',
    'run_random_episode',
    'JsonFileStore',
    'MemoryStore',
    'GameState',
    'InputState',
    'Session',
    'step',
]
