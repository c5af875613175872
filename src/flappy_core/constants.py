"""
constants.py: Centralized tuning for physics, pipes, difficulty and input.

All distances are pixels, velocities pixels/second, times milliseconds.
"""

# -------- Field Config --------
GAME_WIDTH = 800
GAME_HEIGHT = 600

# Compact displays flip between 360x640 (portrait) and 640x360 (landscape)
COMPACT_SHORT_SIDE = 360
COMPACT_LONG_SIDE = 640

PLAYER_X_FRACTION = 10          # Player x is field_width / PLAYER_X_FRACTION
PLAYER_WIDTH = 34
PLAYER_HEIGHT = 24

# -------- Physics Config --------
GRAVITY_Y = 1000.0              # Vertical acceleration (pixels/s^2)
FLAP_VELOCITY = -350.0          # Upward impulse (pixels/s)
MAX_VELOCITY = 400.0            # |velocity.y| clamp (pixels/s)
ROTATION_SPEED = 0.1            # Easing fraction per reference frame
ROTATION_FRAME_MS = 1000.0 / 60.0
RISE_ANGLE = -20.0              # degrees, nose up
DIVE_ANGLE = 90.0               # degrees, nose down

# -------- Pipe Config --------
PIPE_SPEED = 220.0
INITIAL_PIPE_SPAWN_INTERVAL = 1400.0
PIPE_GAP = 120.0
PIPE_WIDTH = 52.0
MIN_GAP_Y = 150.0               # Margin keeping the gap center off the edges

COMPACT_PIPE_GAP = 100.0
COMPACT_PIPE_SPEED = 200.0

# -------- Difficulty Progression --------
SPEED_INCREASE_INTERVAL = 30000.0
SPEED_INCREASE_FACTOR = 0.92

# -------- Bounds --------
OUT_OF_BOUNDS_MARGIN = 50.0

# -------- Input --------
TOUCH_COOLDOWN = 100            # ms between pointer/touch flaps

# -------- Persistence --------
DB_FILE = "flappy_scores.db"
