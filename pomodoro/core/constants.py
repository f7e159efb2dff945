"""
Application-wide constants for the Pomodoro timer.
"""

# App info
APP_NAME = "pomodoro-timer"
WINDOW_TITLE = "Pomodoro Timer"
WINDOW_SIZE = (400, 600)

# Timer defaults (25/5 method)
WORK_DURATION_SEC = 25 * 60
BREAK_DURATION_SEC = 5 * 60

# Frame clock while the countdown runs
FRAME_INTERVAL_MS = 16

# Progress dial
CIRCLE_RADIUS = 120.0
ARC_POINTS = 100
INDICATOR_SLOTS = 4

# Logging
LOG_LEVEL_ENV = "POMODORO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Palette (RGB)
WORK_BACKGROUND = (230, 210, 200)
BREAK_BACKGROUND = (200, 230, 210)
WORK_COLOR = (231, 76, 60)
BREAK_COLOR = (46, 204, 113)
PAUSE_COLOR = (230, 126, 34)
TRACK_GRAY = 100
FACE_GRAY = 240
TEXT_GRAY = 60
EMPTY_DOT_GRAY = 200
