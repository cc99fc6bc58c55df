import pytest

from game.controls import Direction
from game.game_state import GameState
from maze.generator import MazeGenerator


class ScriptedRandom:
    """
    Random source that replays a fixed list of choices.

    Each value is reduced modulo the number of candidates, so any list of
    non-negative ints is a valid script. Calls are recorded for inspection.
    """

    def __init__(self, choices):
        self.choices = list(choices)
        self.calls = []

    def randrange(self, n):
        value = self.choices[len(self.calls) % len(self.choices)] % n
        self.calls.append(n)
        return value


def step_direction(a, b):
    """Direction that moves from cell a to the adjacent cell b."""
    delta = (b[0] - a[0], b[1] - a[1])
    for direction in Direction:
        if direction.delta == delta:
            return direction
    raise AssertionError(f"{a} and {b} are not adjacent")


def _walk_to_exit(state):
    """Follow the solution path from the player to the exit with request_move."""
    path = state.solution()
    assert path, "exit must be reachable from the player"
    for a, b in zip(path, path[1:]):
        assert state.request_move(step_direction(a, b)), f"move {a} -> {b} was blocked"


@pytest.fixture
def walk_to_exit():
    return _walk_to_exit


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def seeded_generator():
    return MazeGenerator(seed=1234)


@pytest.fixture
def game_state(seeded_generator):
    return GameState(generator=seeded_generator)
