"""
Core maze data model - cells, walls, neighbor queries and pathfinding
"""

from collections import deque, namedtuple

from utils.constants import TOP, RIGHT, BOTTOM, LEFT, ALL_WALLS, DIRS, DIR_TO_BITS


WallFlags = namedtuple("WallFlags", ["top", "bottom", "left", "right"])


class Grid:
    """
    Maze grid with wall-based representation
    Each cell has 4 possible walls: TOP, RIGHT, BOTTOM, LEFT.
    Cells are addressed by (column, row) tuples.
    """
    def __init__(self, cols, rows):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        # Initialize all walls closed
        self.walls = [ALL_WALLS for _ in range(cols * rows)]
        self.visited = [False] * (cols * rows)

    def idx(self, x, y):
        """Convert 2D coordinates to 1D index"""
        return y * self.cols + x

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cells(self):
        """Iterate over all cells in row-major order"""
        for y in range(self.rows):
            for x in range(self.cols):
                yield (x, y)

    # ========== VISITED FLAGS ==========

    def reset_visited(self):
        """Clear visited flags before a generation pass"""
        for i in range(len(self.visited)):
            self.visited[i] = False

    def mark_visited(self, cell):
        x, y = cell
        self.visited[self.idx(x, y)] = True

    def is_visited(self, cell):
        x, y = cell
        return self.visited[self.idx(x, y)]

    # ========== NEIGHBORS & WALLS ==========

    def neighbors_of(self, cell):
        """
        Get in-bounds adjacent cells, in the order left, right, top, bottom.
        Visited state is not considered.
        """
        x, y = cell
        res = []
        for dx, dy, _, _ in DIRS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                res.append((nx, ny))
        return res

    def remove_wall_between(self, a, b):
        """Carve a passage between two adjacent cells (clears both sides)"""
        (ax, ay), (bx, by) = a, b
        bits = DIR_TO_BITS.get((bx - ax, by - ay))
        assert bits is not None, f"cells {a} and {b} are not adjacent"
        assert self.in_bounds(ax, ay) and self.in_bounds(bx, by), f"cells {a} and {b} must be in bounds"
        wall_bit, opp_bit = bits
        self.walls[self.idx(ax, ay)] &= ~wall_bit
        self.walls[self.idx(bx, by)] &= ~opp_bit

    def has_wall(self, cell, wall_bit):
        """Check if a cell has the given wall"""
        x, y = cell
        return (self.walls[self.idx(x, y)] & wall_bit) != 0

    def wall_flags(self, cell):
        """Get the four wall flags of a cell"""
        x, y = cell
        w = self.walls[self.idx(x, y)]
        return WallFlags(
            top=bool(w & TOP),
            bottom=bool(w & BOTTOM),
            left=bool(w & LEFT),
            right=bool(w & RIGHT),
        )

    def is_open_between(self, a, b):
        """Check if passage is open between two adjacent cells"""
        (ax, ay), (bx, by) = a, b
        bits = DIR_TO_BITS.get((bx - ax, by - ay))
        if bits is None or not self.in_bounds(bx, by):
            return False
        wall_bit, _ = bits
        return not self.has_wall(a, wall_bit)

    def open_neighbors(self, cell):
        """Get list of neighbor cells reachable without crossing a wall"""
        return [n for n in self.neighbors_of(cell) if self.is_open_between(cell, n)]

    def __repr__(self):
        return f"Grid({self.cols}x{self.rows})"


# ========== ANALYSIS ==========

def count_passages(grid):
    """Count open walls between adjacent cells (each passage counted once)"""
    total = 0
    for x, y in grid.cells():
        if x + 1 < grid.cols and grid.is_open_between((x, y), (x + 1, y)):
            total += 1
        if y + 1 < grid.rows and grid.is_open_between((x, y), (x, y + 1)):
            total += 1
    return total


def reachable_cells(grid, start):
    """BFS flood fill over open passages"""
    q = deque([start])
    seen = {start}
    while q:
        cur = q.popleft()
        for n in grid.open_neighbors(cur):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def is_perfect(grid):
    """
    Check the perfect-maze property: every cell reachable and
    exactly cols * rows - 1 passages (a spanning tree, so no loops)
    """
    total = grid.cols * grid.rows
    if count_passages(grid) != total - 1:
        return False
    return len(reachable_cells(grid, (0, 0))) == total


# ========== PATHFINDING ==========

def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def bfs_shortest_path(grid, start, goal):
    """BFS shortest path finder"""
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        cur = q.popleft()
        for n in grid.open_neighbors(cur):
            if n not in prev:
                prev[n] = cur
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []
