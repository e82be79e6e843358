import pytest

from game.dodge import DodgeGame, MemoryStore
from game.dodge.config import BEST_SCORE_KEY


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))


class RecordingTone:
    def __init__(self):
        self.tones = []

    def play_tone(self, frequency, duration, volume):
        self.tones.append((frequency, duration, volume))


class BrokenTone:
    def play_tone(self, frequency, duration, volume):
        raise RuntimeError("no audio device")


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def tone():
    return RecordingTone()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def game(store, tone):
    # Large surface so nothing spawned in the first seconds can reach the centre
    return DodgeGame(store=store, tone=tone, seed=7, width=2000, height=2000)


@pytest.fixture
def best_key():
    return BEST_SCORE_KEY
