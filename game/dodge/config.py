"""
Game configuration for Bullet Dodge
"""

# Key the best score is stored under
BEST_SCORE_KEY = "bullet-dodge-best"

# Where the desktop game keeps its best score
DEFAULT_BEST_FILE = "~/.bullet_dodge.json"

# Gameplay parameters, passed as **GAME_CONFIG to DodgeGame
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "player_radius": 12.0,
    "player_speed": 380.0,           # px/s
    "projectile_radius": 6.0,
    "projectile_base_speed": 120.0,  # px/s at difficulty 0
    "projectile_speed_scale": 40.0,  # px/s added per difficulty point
    "spawn_padding": 10.0,           # spawn this far outside the edge
    "spawn_interval_base": 1.0,      # seconds
    "spawn_interval_rate": 0.05,     # seconds removed per difficulty point
    "spawn_interval_floor": 0.2,     # never spawn faster than this
    "initial_difficulty": 1.0,       # held value while auto difficulty is off
    "difficulty_base": 1.0,          # auto difficulty at 0 s
    "difficulty_rate": 0.08,         # difficulty gained per second survived
    "min_difficulty": 1.0,
    "max_difficulty": 10.0,
    "max_frame_dt": 0.25,            # longest frame simulated in one step
}

# Sound effects: (frequency Hz, duration s, volume)
START_TONE = (800.0, 0.05, 0.06)
GAME_OVER_TONE = (120.0, 0.2, 0.15)

# Manual difficulty change per key press
DIFFICULTY_STEP = 0.5

# Colors
BG_COLOR = (11, 13, 20)
HUD_COLOR = (220, 220, 220)
HUD_DIM_COLOR = (140, 140, 160)
