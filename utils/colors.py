"""
Color palette for Growing Maze
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_MAZE_BG = (16, 18, 24)      # Maze area background
COLOR_PANEL_BG = (12, 14, 18)     # Panel background

# UI colors
COLOR_WALL = (230, 230, 230)      # Maze walls
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text

# Entity colors
COLOR_PLAYER = (70, 140, 255)     # Player
COLOR_GOAL = (60, 200, 120)       # Goal/Exit
COLOR_SOLUTION = (90, 90, 130)    # Solution path hint
