#!/usr/bin/env python3
"""
Shared constants for Gravity Simulator (SI units unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Physical constants
G = 6.6743e-11  # m^3 kg^-1 s^-2

# Solar system catalog (radius in m, mass in kg, distance to primary in m)
SUN_RADIUS = 696_340_000.0
SUN_MASS = 1.9884e30

MERCURY_RADIUS = 2_439_700.0
MERCURY_MASS = 3.3011e23
SUN_MERCURY_DISTANCE = 5.790905e10

VENUS_RADIUS = 6_051_800.0
VENUS_MASS = 4.8675e24
SUN_VENUS_DISTANCE = 1.08208e11

EARTH_RADIUS = 6_371_000.0
EARTH_MASS = 5.9722e24
SUN_EARTH_DISTANCE = 1.496e11

MOON_RADIUS = 1_737_400.0
MOON_MASS = 7.342e22
EARTH_MOON_DISTANCE = 384_399_000.0

MARS_RADIUS = 3_389_500.0
MARS_MASS = 6.4171e23
SUN_MARS_DISTANCE = 2.27939366e11

JUPITER_RADIUS = 69_911_000.0
JUPITER_MASS = 1.8982e27
SUN_JUPITER_DISTANCE = 7.78479e11

# Time controls
DEFAULT_TIME_SCALE = 1_000_000.0  # simulated seconds per wall second
MIN_TIME_SCALE = 1_000.0
MAX_TIME_SCALE = 1_000_000_000.0
TIME_FACTOR = 1.5  # multiplier applied by one speed-up/slow-down key press
MAX_DELTA_TIME = 24 * 3600.0  # s; ceiling of a single Euler step
MAX_SUBSTEPS = 1000  # model steps per frame

# Rendering (viewport)
VIEW_WIDTH = 1600
VIEW_HEIGHT = 900
FPS = 60
FRAME_DURATION = 1.0 / FPS  # wall seconds simulated per frame
BACKGROUND_COLOR = (0, 0, 0)
HUD_COLOR = (200, 200, 200)
DEFAULT_BODY_COLOR = (200, 200, 255)

# Body colors
YELLOW = (255, 255, 0)
DARKGRAY = (169, 169, 169)
ORANGE = (255, 165, 0)
BLUE = (0, 0, 255)
GRAY = (128, 128, 128)
RED = (255, 0, 0)
BROWN = (165, 42, 42)

# Camera zoom bounds (meters-per-pixel)
DEFAULT_METERS_PER_PIXEL = 1e10
MIN_METERS_PER_PIXEL = 1e3
MAX_METERS_PER_PIXEL = 1e13
ZOOM_FACTOR = 1.01  # per scroll unit
MIN_DISPLAY_RADIUS = 2.0  # pixels, radius of the smallest body

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
