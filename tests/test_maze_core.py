import pytest

from maze.maze_core import (
    Grid, WallFlags, bfs_shortest_path, count_passages, is_perfect, reachable_cells,
)
from utils.constants import TOP, RIGHT, BOTTOM, LEFT, ALL_WALLS


def test_new_grid_has_all_walls_and_no_visited_cells():
    grid = Grid(4, 3)

    assert grid.cols == 4
    assert grid.rows == 3
    assert len(grid.walls) == 12
    assert all(w == ALL_WALLS for w in grid.walls)
    assert not any(grid.visited)
    assert grid.wall_flags((3, 2)) == WallFlags(top=True, bottom=True, left=True, right=True)


@pytest.mark.parametrize("cols, rows", [(0, 5), (5, 0), (-1, 3)])
def test_grid_rejects_non_positive_dimensions(cols, rows):
    with pytest.raises(ValueError):
        Grid(cols, rows)


def test_neighbors_of_uses_left_right_top_bottom_order():
    grid = Grid(3, 3)

    assert grid.neighbors_of((1, 1)) == [(0, 1), (2, 1), (1, 0), (1, 2)]
    assert grid.neighbors_of((0, 0)) == [(1, 0), (0, 1)]
    assert grid.neighbors_of((2, 2)) == [(1, 2), (2, 1)]


def test_neighbors_of_ignores_visited_flags():
    grid = Grid(2, 2)
    grid.mark_visited((1, 0))

    assert (1, 0) in grid.neighbors_of((0, 0))


def test_single_cell_grid_has_no_neighbors():
    assert Grid(1, 1).neighbors_of((0, 0)) == []


@pytest.mark.parametrize(
    "a, b, a_bit, b_bit",
    [
        ((1, 1), (2, 1), RIGHT, LEFT),
        ((1, 1), (0, 1), LEFT, RIGHT),
        ((1, 1), (1, 0), TOP, BOTTOM),
        ((1, 1), (1, 2), BOTTOM, TOP),
    ],
)
def test_remove_wall_between_clears_both_sides(a, b, a_bit, b_bit):
    grid = Grid(3, 3)
    grid.remove_wall_between(a, b)

    assert not grid.has_wall(a, a_bit)
    assert not grid.has_wall(b, b_bit)
    assert grid.is_open_between(a, b)
    assert grid.is_open_between(b, a)
    # Every other wall is untouched
    assert count_passages(grid) == 1


def test_remove_wall_between_rejects_non_adjacent_cells():
    grid = Grid(3, 3)

    with pytest.raises(AssertionError):
        grid.remove_wall_between((0, 0), (1, 1))
    with pytest.raises(AssertionError):
        grid.remove_wall_between((0, 0), (2, 0))


def test_open_neighbors_follow_passages():
    grid = Grid(3, 1)
    grid.remove_wall_between((0, 0), (1, 0))

    assert grid.open_neighbors((1, 0)) == [(0, 0)]
    assert grid.open_neighbors((2, 0)) == []


def test_reset_visited_clears_all_flags():
    grid = Grid(2, 2)
    for cell in grid.cells():
        grid.mark_visited(cell)

    grid.reset_visited()

    assert not any(grid.is_visited(cell) for cell in grid.cells())


def test_is_perfect_detects_disconnected_and_looped_grids():
    grid = Grid(2, 2)
    grid.remove_wall_between((0, 0), (1, 0))
    grid.remove_wall_between((0, 0), (0, 1))
    assert not is_perfect(grid), "two passages cannot connect four cells"

    grid.remove_wall_between((1, 0), (1, 1))
    assert is_perfect(grid)

    grid.remove_wall_between((0, 1), (1, 1))
    assert not is_perfect(grid), "a fourth passage closes a loop"


def test_bfs_shortest_path_follows_open_passages():
    grid = Grid(2, 2)
    grid.remove_wall_between((0, 0), (1, 0))
    grid.remove_wall_between((1, 0), (1, 1))
    grid.remove_wall_between((1, 1), (0, 1))

    assert bfs_shortest_path(grid, (0, 0), (0, 1)) == [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert bfs_shortest_path(grid, (1, 1), (1, 1)) == [(1, 1)]


def test_bfs_shortest_path_returns_empty_when_unreachable():
    grid = Grid(2, 1)

    assert bfs_shortest_path(grid, (0, 0), (1, 0)) == []
    assert reachable_cells(grid, (0, 0)) == {(0, 0)}
