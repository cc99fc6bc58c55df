"""
Game State - player movement, exit detection and maze growth
"""

import logging

from game.controls import Direction
from maze.generator import MazeGenerator
from maze.maze_core import bfs_shortest_path
from utils.constants import START_COLS, START_ROWS, START_CELL


logger = logging.getLogger(__name__)


class GameState:
    """
    Holds the current maze, the player and the exit.

    Reaching the exit grows the maze by one column and one row and
    generates a new one. There is no final level.
    """
    def __init__(self, cols=START_COLS, rows=START_ROWS, generator=None):
        """
        Args:
            cols, rows: Initial maze size
            generator: MazeGenerator to use (a fresh unseeded one by default)
        """
        self.generator = generator if generator is not None else MazeGenerator()
        self._cols = cols
        self._rows = rows
        self._level = 0
        self._grid = None
        self._player = START_CELL
        self._exit = START_CELL
        self._moves = 0
        self._regenerate()

    # ========== ACCESSORS ==========

    @property
    def cols(self):
        return self._cols

    @property
    def rows(self):
        return self._rows

    @property
    def grid(self):
        return self._grid

    @property
    def player(self):
        """Player cell as (column, row)"""
        return self._player

    @property
    def exit(self):
        """Exit cell as (column, row)"""
        return self._exit

    @property
    def moves(self):
        """Successful moves in the current maze"""
        return self._moves

    @property
    def level(self):
        """Number of exits reached so far"""
        return self._level

    def wall_flags(self, cell):
        return self._grid.wall_flags(cell)

    # ========== ACTIONS ==========

    def request_move(self, direction):
        """
        Try to move the player one cell

        A wall on the player's side makes the move a no-op. The exit check
        runs after every attempt.

        Returns:
            True if the player moved
        """
        if not isinstance(direction, Direction):
            raise TypeError(f"Expected a Direction, got {direction!r}")

        moved = False
        if not self._grid.has_wall(self._player, direction.wall_bit):
            dx, dy = direction.delta
            x, y = self._player
            self._player = (x + dx, y + dy)
            self._moves += 1
            moved = True
        else:
            logger.debug("Move %s blocked at %s", direction.name, self._player)

        self._check_exit()
        return moved

    def restart(self):
        """Generate a new maze of the current size"""
        logger.info("Restarting %dx%d maze", self._cols, self._rows)
        self._regenerate()

    def solution(self):
        """Shortest path from the player to the exit"""
        return bfs_shortest_path(self._grid, self._player, self._exit)

    # ========== INTERNALS ==========

    def _check_exit(self):
        if self._player == self._exit:
            self._level += 1
            self._cols += 1
            self._rows += 1
            logger.info("Exit reached after %d moves, growing maze to %dx%d",
                        self._moves, self._cols, self._rows)
            self._regenerate()

    def _regenerate(self):
        # Build the new grid before touching any visible state
        grid = self.generator.generate(self._cols, self._rows, START_CELL)
        self._grid = grid
        self._player = START_CELL
        self._exit = (self._cols - 1, self._rows - 1)
        self._moves = 0

    def __repr__(self):
        return (f"GameState(size={self._cols}x{self._rows}, player={self._player}, "
                f"exit={self._exit}, level={self._level})")
