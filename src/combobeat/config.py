"""Global constants and default settings."""

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
FPS = 60
WINDOW_TITLE = "combobeat"

# Hit judgement thresholds (milliseconds)
PERFECT_WINDOW_MS = 80
GOOD_WINDOW_MS = 150
MISS_WINDOW_MS = 250

# Per-grade tuning: (score, recovery multiplier, attack multiplier)
PERFECT_TUNING = (500, 3.0, 2.0)
GOOD_TUNING = (250, 1.0, 1.3)
MISS_TUNING = (0, 0.0, 0.3)

# Command recognizer
COMMAND_BUFFER_CAPACITY = 4
COMMAND_WINDOW_MS = 4000
COMMAND_DISPLAY_MS = 1800

# Note lane
LANE_HEIGHT = 120
TRIGGER_X = 120
NOTE_SPEED = 240  # pixels per second
NOTE_SIZE = 24
SPAWN_INTERVAL_MS = 1000

# Player defaults
PLAYER_HP_MAX = 1000
PLAYER_HP_REGEN = 10
PLAYER_ATTACK = 10
PLAYER_SPEED = 5
MAP_LENGTH = 1000
