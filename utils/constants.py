"""
Global constants for Growing Maze
"""

# Wall bit flags
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8

ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

# Direction vectors with wall bits.
# Order is left, right, top, bottom: the generator builds its candidate
# list in this order, so a scripted random source reproduces the same maze.
DIRS = [
    (-1, 0, LEFT, RIGHT),    # left
    (1, 0, RIGHT, LEFT),     # right
    (0, -1, TOP, BOTTOM),    # up
    (0, 1, BOTTOM, TOP),     # down
]

# Direction to bit mapping
DIR_TO_BITS = {
    (0, -1): (TOP, BOTTOM),
    (1, 0): (RIGHT, LEFT),
    (0, 1): (BOTTOM, TOP),
    (-1, 0): (LEFT, RIGHT),
}

# Maze size
START_COLS = 5
START_ROWS = 5
START_CELL = (0, 0)

# Screen settings
WINDOW_WIDTH = 720
WINDOW_HEIGHT = 800
MIN_WINDOW_WIDTH = 240
MIN_WINDOW_HEIGHT = 240
FPS = 60
WALL_THICK = 4

# HUD panel height
PANEL_H = 48

# Player settings
PLAYER_MOVE_COOLDOWN_MS = 90  # Movement delay for held keys
