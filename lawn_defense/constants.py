"""Layout, gameplay and palette constants shared by the whole game."""

from __future__ import annotations

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Color = tuple[float, float, float]

# ---------------------------------------------------------------------------
# Window and scene
# ---------------------------------------------------------------------------

CORNER: Vec3 = (0.0, 0.0, 0.0)

CX = 0.0
CY = 0.0

NUM_ROWS = 5
NUM_COLS = 4
NUM_SQUARES = NUM_ROWS * NUM_COLS

# Colors used by plants, zombies, projectiles and inventory plants.
COLORS: tuple[Color, ...] = (
    (0.0, 0.0, 1.0),  # blue
    (0.0, 1.0, 0.5),  # cyan
    (0.5, 1.0, 1.0),  # green
    (1.0, 0.8, 0.0),  # yellow
    (1.0, 0.0, 0.8),  # purple
    (1.0, 0.0, 0.0),  # red
    (1.0, 1.0, 1.0),  # white
    (0.0, 0.0, 0.0),  # black
)

SQUARE_SIDE = 85.0
SQUARE_SPACING = SQUARE_SIDE / NUM_COLS

BASE_WIDTH = SQUARE_SIDE
BASE_HEIGHT = SQUARE_SIDE * (NUM_ROWS + 1)

MIN_SPEED = 30.0
MAX_SPEED = 60.0

# Maximum distance between the mouse and a square's center for a drop to land.
DROP_TOLERANCE = 15.0

# ---------------------------------------------------------------------------
# Zombies
# ---------------------------------------------------------------------------

MAX_SPAWN_ZOMBIES = 4
ZOMBIE_FADE_OUT_SPEED = 0.25
ZOMBIE_INNER_RADIUS = 25.0
ZOMBIE_OUTER_RADIUS = 35.0

ZOMBIE_MIN_SPEED = 25.0
ZOMBIE_MAX_SPEED = 50.0
ZOMBIE_SPAWN_PROBABILITY = 0.1
ZOMBIE_SPAWN_DELAY = 8.0

# ---------------------------------------------------------------------------
# Plants
# ---------------------------------------------------------------------------

PLANT_FADE_OUT_SPEED = 0.25
PLANT_SLOTS = 8
PLANT_RADIUS = 55.0
PLANT_TRIANGLES = 8
PLANT_INNER_LENGTH = 25.0
PLANT_OUTER_LENGTH = 40.0

# Cost of each inventory plant, left to right.
PLANT_COSTS: tuple[int, ...] = (1, 1, 1, 1, 2, 2, 3, 3)

# ---------------------------------------------------------------------------
# Projectiles
# ---------------------------------------------------------------------------

PROJECTILE_SEGMENTS = 8
PROJECTILE_LONGER_SIDE = 25.0
PROJECTILE_SHORTER_SIDE = 15.0

# ---------------------------------------------------------------------------
# Point scores
# ---------------------------------------------------------------------------

POINT_SCORE_RADIUS = 20.0
POINT_SCORE_SEGMENTS = 30
POINT_SCORE_RAY_SEGMENTS = 75
POINT_SCORE_RAY_BIGGER = 20.0
POINT_SCORE_RAY_SMALLER = 10.0

# ---------------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------------

INVENTORY_SLOTS = 9
INVENTORY_PADDING = SQUARE_SPACING

SLOT_WIDTH = 100.0
SLOT_HEIGHT = 100.0
LAST_SLOT_WIDTH = 250.0
LAST_SLOT_HEIGHT = 100.0

INVENTORY_START_X = 0.0
INVENTORY_START_Y = 720.0 - SLOT_HEIGHT - INVENTORY_PADDING

INVENTORY_LAST_X = INVENTORY_START_X + (INVENTORY_SLOTS - 1) * (SLOT_WIDTH + INVENTORY_PADDING)
INVENTORY_LAST_Y = INVENTORY_START_Y

INVENTORY_SCALE = 0.8

SLOT_FILL_COLOR: Color = (0.3, 0.3, 0.3)
SLOT_OUTLINE_COLOR: Color = (0.0, 0.0, 0.0)

HEART_SCALE_IN_INVENTORY = 0.65
PLANT_SCALE_IN_INVENTORY = 0.7
SUN_SCALE_IN_INVENTORY = 0.5

SUNS_PER_SLOT: tuple[int, ...] = (1, 1, 1, 1, 2, 2, 3, 3)

# ---------------------------------------------------------------------------
# Hearts (lives)
# ---------------------------------------------------------------------------

MAX_COST = 3
NUM_LIVES = 3

HEART_SCALE = 2.0
HEART_SEGMENTS = 200

HEART_SPACING = SQUARE_SPACING * 0.7

HEARTS_START_X = INVENTORY_START_X + (SLOT_WIDTH + INVENTORY_PADDING) * (INVENTORY_SLOTS - 1)
HEARTS_START_Y = INVENTORY_START_Y + (SLOT_WIDTH - INVENTORY_PADDING) / 1.75

HEARTS_AVAILABLE_WIDTH = LAST_SLOT_WIDTH - 2 * HEART_SPACING * 0.7
HEARTS_TOTAL_WIDTH = 3 * HEART_SCALE * SQUARE_SPACING + 2 * HEART_SPACING * 1.5

# ---------------------------------------------------------------------------
# Suns (plant cost icons)
# ---------------------------------------------------------------------------

SUN_RADIUS = 10.0
SUN_SEGMENTS = 20
SUN_RAYS = 27
SUN_RAY_BIGGER = 20.0
SUN_RAY_SMALLER = 10.0

SUN_HORIZONTAL_OFFSET = SLOT_WIDTH / 2 + 1.35 * (POINT_SCORE_RADIUS * SUN_SCALE_IN_INVENTORY)
SUN_VERTICAL_OFFSET = SLOT_WIDTH - SLOT_WIDTH / 6
SUN_HORIZONTAL_GAP = 20.0

# ---------------------------------------------------------------------------
# Debug report widths
# ---------------------------------------------------------------------------

NAME_WIDTH = 20
NUMBER_WIDTH = 5

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

RED: Color = (1.0, 0.0, 0.0)
GREEN: Color = (0.0, 0.5, 0.5)
BLUE: Color = (0.0, 0.0, 1.0)
ORANGE: Color = (1.0, 0.5, 0.0)
PURPLE: Color = (0.5, 0.0, 0.5)
YELLOW: Color = (1.0, 1.0, 0.0)
BACKGROUND: Color = (0.6, 0.6, 0.6)