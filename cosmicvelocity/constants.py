"""Fixed game constants.

All distances are screen units (pixels) and all rates are per tick; the
simulation runs at :data:`FPS` ticks per second.
"""
import math

GAME_NAME = "cosmic-velocity"
WINDOW_TITLE = "Cosmic Velocity"

# --- Screen ---
WIDTH = 640
HEIGHT = 480
FPS = 60
BOUNDS_MARGIN = 50  # expanded box beyond each screen edge

# --- Attractor ---
ATTRACTOR_X = WIDTH / 2
ATTRACTOR_Y = HEIGHT / 2
ATTRACTOR_MASS = 100.0
ATTRACTOR_RADIUS = 20.0

# --- Rocket ---
ROCKET_ALTITUDE = 30.0
ROCKET_RADIUS = 10.0
ROCKET_MASS = 1.0
THRUST_IMPULSE = 0.01

# --- Meteoroids ---
METEOROID_SPEED = 0.5
METEOROID_RADIUS = 10.0
ORBIT_HISTORY_LENGTH = 300
SPAWN_INTERVAL_TICKS = 60
SPAWN_MIN_DEVIATION = math.pi / 8
SPAWN_MAX_DEVIATION = math.pi / 2

# --- Scoring / effects ---
SCORE_BANDS = ((100.0, 1), (150.0, 2))
SCORE_FALLBACK = 3
EFFECT_LIFETIME_TICKS = 60
EFFECT_PARTICLES = 6

# --- Misc ---
STAR_COUNT = 100
TELEMETRY_INTERVAL_TICKS = 600

# --- Title screen demo meteoroids (offset from attractor, speed, heading) ---
DEMO_METEOROIDS = (
    (-180.0, -51.0, 0.6, -math.pi / 4),
    (180.0, 51.0, 0.6, math.pi * 3 / 4),
)

# --- Colours ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
OCEAN_BLUE = (0x01, 0x5F, 0xEB)
LAND_GREEN = (0x01, 0xEB, 0x01)
METEOROID_GRAY = (0xBC, 0xB0, 0xA9)
METEOROID_HIGHLIGHT = (0xFC, 0xEB, 0xDD)
SCORE_GOLD = (0xF5, 0xC0, 0x01)
DEBUG_GRAY = (160, 160, 160)
TRAIL_COLORS = (
    (0xFF, 0x32, 0x2E),
    (0xE0, 0x50, 0x19),
    (0xFF, 0x8A, 0x00),
    (0xFF, 0xC2, 0x1F),
    (0xFF, 0xE9, 0x1A),
    WHITE,
)
TRAIL_SAMPLE_STEP = 10
TRAIL_STRAIGHT_STEP = 30

# --- Audio ---
SAMPLE_RATE = 48000
