"""
DodgeGame - owner of the Bullet Dodge session
----------------------------------------------
- Idle -> Running on start, Running -> Over on a hit, anything -> Idle on reset
- Drives the simulation one frame at a time from wall-clock timestamps
- Talks to drawing, audio and best-score storage only through injected ports
- HUD strings for whatever front end displays them
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from .config import BEST_SCORE_KEY, GAME_OVER_TONE, START_TONE
from .ports import KeyValueStore, MemoryStore, Renderer, ToneSink, load_best, save_best
from .session import GameState, InputState, Session, render_session, step
from .utils import clamp, format_seconds


class Command(Enum):
    START = "start"
    RESET = "reset"
    TOGGLE_SOUND = "toggle_sound"
    TOGGLE_AUTO = "toggle_auto"


STATUS_TEXT = {
    GameState.IDLE: "Ready",
    GameState.RUNNING: "Surviving",
    GameState.OVER: "Game over",
}


class DodgeGame:
    """Bullet Dodge game controller"""

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        tone: Optional[ToneSink] = None,
        inputs: Optional[InputState] = None,
        max_frame_dt: float = 0.25,
        best_key: str = BEST_SCORE_KEY,
        seed: Optional[int] = None,
        verbose: int = 0,
        **session_kwargs,
    ):
        self.store = store if store is not None else MemoryStore()
        self.tone = tone
        self.inputs = inputs if inputs is not None else InputState()
        self.max_frame_dt = max_frame_dt
        self.best_key = best_key
        self.verbose = verbose

        self.session = Session(rng=random.Random(seed), **session_kwargs)
        self.new_record = False
        self.reset()

    # ----------------------------
    # Commands
    # ----------------------------

    def reset(self):
        """Any state -> Idle, with the best score reloaded from the store"""
        self.session.reset()
        self.session.best = load_best(self.store, self.best_key)
        self.new_record = False
        if self.verbose > 0:
            print(f"[DodgeGame] Reset (best {format_seconds(self.session.best)})")

    def start(self, now: float) -> bool:
        """Idle -> Running. ``now`` is the frame clock in seconds.

        Returns False and changes nothing unless the game is idle.
        """
        s = self.session
        if s.state is not GameState.IDLE:
            return False
        s.state = GameState.RUNNING
        s.elapsed = 0.0
        s.last_time = now
        self.beep(*START_TONE)
        if self.verbose > 0:
            print("[DodgeGame] Started")
        return True

    def toggle_sound(self) -> bool:
        self.session.sound_on = not self.session.sound_on
        return self.session.sound_on

    def toggle_auto_difficulty(self) -> bool:
        self.session.auto_difficulty = not self.session.auto_difficulty
        return self.session.auto_difficulty

    def set_difficulty(self, value: float) -> float:
        """Set difficulty by hand; auto mode overwrites it on the next frame"""
        s = self.session
        s.difficulty = clamp(value, s.min_difficulty, s.max_difficulty)
        return s.difficulty

    def dispatch(self, command: Command, now: Optional[float] = None):
        if command is Command.START:
            if now is None:
                raise ValueError("START needs the current frame time")
            return self.start(now)
        if command is Command.RESET:
            return self.reset()
        if command is Command.TOGGLE_SOUND:
            return self.toggle_sound()
        if command is Command.TOGGLE_AUTO:
            return self.toggle_auto_difficulty()
        raise ValueError(f"Unknown command: {command}")

    # ----------------------------
    # Frame loop
    # ----------------------------

    def frame(self, now: float) -> bool:
        """Advance one frame. Returns whether another frame should follow."""
        s = self.session
        if s.state is not GameState.RUNNING:
            return False

        dt = now - s.last_time
        s.last_time = now
        dt = clamp(dt, 0.0, self.max_frame_dt)

        if step(s, self.inputs.direction(), dt):
            self.game_over()
            return False
        return True

    def game_over(self):
        s = self.session
        s.state = GameState.OVER
        self.beep(*GAME_OVER_TONE)

        if s.elapsed > s.best:
            s.best = s.elapsed
            self.new_record = True
            try:
                save_best(self.store, self.best_key, s.best)
            except OSError as e:
                if self.verbose > 0:
                    print(f"[BestScore] Could not save best score: {e}")

        if self.verbose > 0:
            record = " (new best)" if self.new_record else ""
            print(f"[DodgeGame] Game over after {format_seconds(s.elapsed)}{record}")

    def beep(self, frequency: float, duration: float, volume: float):
        """Best effort: audio problems never reach the game"""
        if not self.session.sound_on or self.tone is None:
            return
        try:
            self.tone.play_tone(frequency, duration, volume)
        except Exception as e:
            if self.verbose > 0:
                print(f"[Audio] Tone failed: {e}")

    def draw(self, renderer: Renderer):
        render_session(self.session, renderer)

    # ----------------------------
    # HUD
    # ----------------------------

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def running(self) -> bool:
        return self.session.running

    @property
    def score_text(self) -> str:
        return format_seconds(self.session.elapsed)

    @property
    def best_text(self) -> str:
        return format_seconds(self.session.best)

    @property
    def status_text(self) -> str:
        return STATUS_TEXT[self.session.state]

    @property
    def sound_label(self) -> str:
        return f"Sound: {'ON' if self.session.sound_on else 'OFF'}"

    @property
    def auto_label(self) -> str:
        return f"Auto difficulty: {'ON' if self.session.auto_difficulty else 'OFF'}"
