"""
constants.py: Centralized configuration for the playfield, physics and difficulty tiers.
"""

# -------- Playfield Config --------
CANVAS_WIDTH = 320
CANVAS_HEIGHT = 480
RENDER_FPS = 60                 # One simulation step per rendered frame

# -------- Bird Config --------
BIRD_X = 60                     # Fixed bird X position (left edge)
BIRD_WIDTH = 34
BIRD_HEIGHT = 24
RESPAWN_Y = CANVAS_HEIGHT / 2   # Canonical start position (top edge)

# -------- Physics Config (pixels / tick) --------
# Fixed-step constants: the driver delivers one tick per display refresh
GRAVITY = 0.5                   # Added to velocity every tick
JUMP_FORCE = -8.0               # Velocity after a flap (replaces current velocity)

# -------- Pipe Config --------
PIPE_WIDTH = 52
PIPE_SPAWN_X = CANVAS_WIDTH     # New pipes appear at the right edge
PIPE_SPAWN_MARGIN = 50          # Minimum top/bottom segment height

# -------- Difficulty Presets --------
# name: (gap height, horizontal speed per tick, spawn interval in ms)
DIFFICULTY_PRESETS = {
    "easy": (150, -1.2, 2200),
    "medium": (120, -1.5, 1800),
    "hard": (120, -2.0, 1500),
}
DEFAULT_DIFFICULTY = "hard"

# -------- Profiles --------
PROFILE_STORE_KEY = "skyHopperProfiles"
PROFILE_NAME_MAX_LEN = 12
DB_FILE = "sky_hopper.db"
