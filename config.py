"""
Game metadata
"""

GAME_TITLE = "Growing Maze"
GAME_VERSION = "1.0.0"

# Default log level when --log-level is not given
DEFAULT_LOG_LEVEL = "WARNING"
