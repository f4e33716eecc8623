"""Game-wide constants for Block Dodge.

Screen dimensions, colors, font sizes, tuning knobs for the player, blocks
and spawn cadence, and file paths for logging and configuration. These are
the defaults; ``GameConfig`` copies them and can override any of them.
"""
import os

WIDTH, HEIGHT = 500, 900           # portrait playfield
FPS = 60                           # target frame rate
BG_COLOR = (25, 28, 33)            # dark background
TEXT_COLOR = (235, 235, 235)       # light text
HITBOX_COLOR = (255, 235, 90)      # debug outline
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 22

# Player Settings
PLAYER_SIZE = (40, 40)
PLAYER_SPEED = 600.0               # units per second
PLAYER_TELEPORT_DISTANCE = 150.0
PLAYER_COLOR = (128, 128, 255)
WRAP_AFTER_TELEPORT = False        # wrap is only checked after continuous motion

# Block Settings
BLOCK_SIZE = (80, 80)
BLOCK_SPEED = 300.0                # units per second
INITIAL_BLOCK_COLOR = (255, 128, 255)
RUNTIME_BLOCK_COLOR = (51, 128, 255)

# Spawning
INITIAL_BLOCK_COUNT = 5
SPAWN_INTERVAL_SECONDS = 120 / 60  # once every two seconds
MAX_SPAWNS_PER_TICK = 8            # catch-up bound after a long frame
SPAWN_MODE = "pool"                # "pool" or "uniform"
MARK_SPAWNED = False               # slots are reusable unless enabled

# Log file settings
PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOG_FILE = os.path.join(PROJECT_DIR, "log.md")
CONFIG_FILE = os.path.join(PROJECT_DIR, "dodge.toml")
