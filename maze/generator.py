"""
Maze generation - randomized depth-first backtracking
"""

import logging
import random

from maze.maze_core import Grid
from utils.constants import START_CELL


logger = logging.getLogger(__name__)


class MazeGenerator:
    """
    Depth-First Search with backtracking over an explicit stack.

    Produces a perfect maze: every cell visited once, exactly
    cols * rows - 1 walls removed.
    """
    def __init__(self, rng=None, seed=None):
        """
        Args:
            rng: Random source with a randrange(n) method. Tests may pass a
                scripted source to fix the sequence of neighbor choices.
            seed: Seed for the default random.Random source (ignored if rng given)
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, cols, rows, start=START_CELL):
        """
        Build a fresh grid and carve a complete maze into it

        Returns:
            Grid with the finished maze
        """
        grid = Grid(cols, rows)
        carved = 0
        for step in self.steps(grid, start):
            if step["carved"] is not None:
                carved += 1

        logger.debug("Generated %dx%d maze from %s (%d passages)", cols, rows, start, carved)
        return grid

    def steps(self, grid, start=START_CELL):
        """
        Run the backtracker one step at a time.

        Yields a dict after every carve or backtrack:
            {"current": cell, "carved": (from, to) or None, "done": bool}
        The final yield has done=True.
        """
        if not grid.in_bounds(*start):
            raise ValueError(f"Start cell {start} is outside {grid!r}")

        grid.reset_visited()
        grid.mark_visited(start)
        stack = [start]

        yield {"current": start, "carved": None, "done": False}

        while stack:
            current = stack[-1]
            neighbors = [n for n in grid.neighbors_of(current) if not grid.is_visited(n)]

            if neighbors:
                nxt = neighbors[self.rng.randrange(len(neighbors))]
                grid.remove_wall_between(current, nxt)
                grid.mark_visited(nxt)
                stack.append(nxt)
                yield {"current": nxt, "carved": (current, nxt), "done": False}
            else:
                stack.pop()
                yield {"current": stack[-1] if stack else current, "carved": None, "done": False}

        yield {"current": start, "carved": None, "done": True}

