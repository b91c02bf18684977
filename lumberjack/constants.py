"""Gameplay and tuning constants.

All values are per-frame at the nominal 60 FPS unless noted otherwise.
"""

# Screen
DEFAULT_SCREEN_W = 800
DEFAULT_SCREEN_H = 400
TARGET_FPS = 60

# Player
PLAYER_W = 20
PLAYER_H = 30
PLAYER_SPEED = 3
PLAYER_JUMP_POWER = 12
PLAYER_GRAVITY = 0.5
PLAYER_START_X = 30
PLAYER_START_Y_FROM_BOTTOM = 160  # spawn y = screen height - this

# River / terrain
RIVER_TOP_FROM_BOTTOM = 120
RIVER_BOTTOM_FROM_BOTTOM = 40
GROUND_HEIGHT = 40
BANK_WIDTH = 80  # start and end platforms
ISLAND_W = 80
ISLAND_H = 20
ISLAND_RAISE = 10  # island top sits this far above river top
FLAG_W = 20
FLAG_H = 30
FLAG_FROM_RIGHT = 60
FLAG_RAISE = 40

# Landing tolerances (px below a surface still counted as landed)
ISLAND_LAND_TOLERANCE = 8
ISLAND_OCCUPY_TOLERANCE = 5
LOG_LAND_ABOVE = 5
LOG_LAND_BELOW = 8

# Logs
LOG_H = 15
LOG_COLOR = "#8B4513"
LOG_L1_MIN_SPEED = 0.8
LOG_L1_MAX_SPEED = 1.8
LOG_L1_MIN_W = 60
LOG_L1_W_RANGE = 80
LOG_BASE_SPEED = 1.0
LOG_SPEED_PER_LEVEL = 0.3
LOG_SPEED_RANGE = 2.0
LOG_MIN_W = 40
LOG_W_RANGE = 60
LOG_Y_OFFSETS = (-10, -5, 0)  # relative to river top
LOG_SPAWN_INTERVAL = 120
LOG_SPAWN_INTERVAL_L1 = 110
LOG_SPAWN_INTERVAL_MIN = 50
LOG_SPAWN_INTERVAL_STEP = 5

# Alligators
ALLIGATOR_MIN_LEVEL = 3
ALLIGATOR_W = 40
ALLIGATOR_H = 12
ALLIGATOR_COLOR = "#2F4F2F"
ALLIGATOR_BASE_SPEED = 0.5
ALLIGATOR_SPEED_PER_LEVEL = 0.2
ALLIGATOR_SPEED_RANGE = 1.0
ALLIGATOR_Y_OFFSETS = (-5, 0, 5)
ALLIGATOR_SPAWN_INTERVAL = 180
ALLIGATOR_SPAWN_INTERVAL_MIN = 120
ALLIGATOR_SPAWN_INTERVAL_STEP = 15

# Clouds
CLOUD_SPAWN_INTERVAL_INITIAL = 300
CLOUD_SPAWN_INTERVAL_MIN = 200
CLOUD_SPAWN_INTERVAL_RANGE = 400
CLOUD_SPAWN_MARGIN = 50
CLOUD_PRUNE_X = -150

# Particles
LOG_SPLASH_CHANCE = 0.1
LOG_SPLASH_INTENSITY = 0.5
ALLIGATOR_RIPPLE_CHANCE = 0.08
ALLIGATOR_SPLASH_CHANCE = 0.05
ALLIGATOR_SPLASH_INTENSITY = 0.3
SPLASH_GRAVITY = 0.1
SPLASH_DAMPING = 0.98
RIPPLE_EASE = 0.1
RIPPLE_LIFE = 30
RIPPLE_ALPHA = 0.4
RIPPLE_FADE = 0.8

# Progression
LEVEL_SCORE_STEP = 100
FINAL_LEVEL = 10
DEBUG_JUMP_LEVEL = 3
DEBUG_JUMP_SCORE = 200
PINNED_CHECKPOINT_LEVEL = 3
CHECKPOINT_POLICIES = ("exact", "pin_level_3")

# Timers (milliseconds)
STATUS_CLEAR_MS = 2000
ANNOUNCEMENT_MS = 2000
LOADING_MS = 4000

__all__ = [name for name in globals().keys() if name.isupper()]
