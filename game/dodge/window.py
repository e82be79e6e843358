"""
Arcade front end: drawing, keyboard input and the HUD
"""

from __future__ import annotations

import time
import arcade

from .config import BG_COLOR, DIFFICULTY_STEP, HUD_COLOR, HUD_DIM_COLOR
from .controller import DodgeGame
from .entities import Color
from .session import Session, render_session

# Arcade key -> logical key name used by InputState
KEY_NAMES = {
    arcade.key.UP: "arrowup",
    arcade.key.DOWN: "arrowdown",
    arcade.key.LEFT: "arrowleft",
    arcade.key.RIGHT: "arrowright",
    arcade.key.W: "w",
    arcade.key.A: "a",
    arcade.key.S: "s",
    arcade.key.D: "d",
}

HELP_TEXT = "Enter: start   R: reset   M: sound   T: auto difficulty   +/-: difficulty   Esc: quit"


class ArcadeRenderer:
    """Renderer port on top of an Arcade window.

    The simulation uses screen coordinates with y growing downwards, Arcade
    draws with y growing upwards, so y is flipped here.
    """

    def __init__(self, window: arcade.Window, glow: bool = True):
        self.window = window
        self.glow = glow

    def clear(self) -> None:
        self.window.clear(color=BG_COLOR)

    def draw_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        sy = self.window.height - y
        if self.glow:
            arcade.draw_circle_filled(x, sy, radius * 1.8, (*color[:3], 40))
        arcade.draw_circle_filled(x, sy, radius, color)


class SessionWindow(arcade.Window):
    """Window that draws a session; used directly for environment rendering"""

    def __init__(self, session: Session, title: str = "Bullet Dodge", visible: bool = True):
        super().__init__(session.width, session.height, title, visible=visible)
        self.session = session
        self.renderer = ArcadeRenderer(self)

    def on_draw(self):
        render_session(self.session, self.renderer)
        self.draw_hud()

    def draw_hud(self):
        s = self.session
        arcade.draw_text(
            f"Time {s.elapsed:.2f} s   Difficulty {s.difficulty:.2f}   "
            f"Projectiles {len(s.projectiles)}",
            12, self.height - 24, HUD_COLOR, 14,
        )


class DodgeWindow(SessionWindow):
    """Playable Bullet Dodge window"""

    def __init__(self, game: DodgeGame, title: str = "Bullet Dodge"):
        super().__init__(game.session, title)
        self.game = game

    def now(self) -> float:
        return time.perf_counter()

    def on_update(self, delta_time: float):
        # Measured from the timestamp captured in start(), not Arcade's delta_time
        self.game.frame(self.now())

    def on_key_press(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.game.inputs.press(name)
            return

        if symbol in (arcade.key.ENTER, arcade.key.RETURN, arcade.key.SPACE):
            self.game.start(self.now())
        elif symbol == arcade.key.R:
            self.game.reset()
        elif symbol == arcade.key.M:
            self.game.toggle_sound()
        elif symbol == arcade.key.T:
            self.game.toggle_auto_difficulty()
        elif symbol in (arcade.key.PLUS, arcade.key.EQUAL, arcade.key.NUM_ADD):
            self.change_difficulty(DIFFICULTY_STEP)
        elif symbol in (arcade.key.MINUS, arcade.key.NUM_SUBTRACT):
            self.change_difficulty(-DIFFICULTY_STEP)
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.game.inputs.release(name)

    def on_deactivate(self):
        # Keys released while unfocused never reach us
        self.game.inputs.clear()

    def change_difficulty(self, delta: float):
        if self.session.auto_difficulty:
            return
        self.game.set_difficulty(self.session.difficulty + delta)

    def draw_hud(self):
        g = self.game
        top = self.height - 24
        arcade.draw_text(f"Time {g.score_text}", 12, top, HUD_COLOR, 16)
        arcade.draw_text(f"Best {g.best_text}", 180, top, HUD_COLOR, 16)
        arcade.draw_text(g.status_text, self.width - 12, top, HUD_COLOR, 16, anchor_x="right")
        arcade.draw_text(
            f"Difficulty {self.session.difficulty:.2f}   {g.auto_label}   {g.sound_label}",
            12, top - 24, HUD_DIM_COLOR, 12,
        )
        if not g.running:
            arcade.draw_text(HELP_TEXT, self.width / 2, 16, HUD_DIM_COLOR, 11, anchor_x="center")
        if g.new_record and not g.running:
            arcade.draw_text(
                "New best!", self.width / 2, self.height / 2 + 40, HUD_COLOR, 24, anchor_x="center"
            )


def run_game(game: DodgeGame, title: str = "Bullet Dodge"):
    """Open the window and block in Arcade's event loop until it closes"""
    DodgeWindow(game, title)
    arcade.run()
