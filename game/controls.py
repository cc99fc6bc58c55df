"""
Player directions and input translation (drag gestures, keyboard)
"""

from enum import Enum

from utils.constants import TOP, RIGHT, BOTTOM, LEFT


class Direction(Enum):
    """Move direction as (dx, dy, wall_bit)"""
    UP = (0, -1, TOP)
    DOWN = (0, 1, BOTTOM)
    LEFT = (-1, 0, LEFT)
    RIGHT = (1, 0, RIGHT)

    @property
    def delta(self):
        return self.value[0], self.value[1]

    @property
    def wall_bit(self):
        """Wall on the player's cell that blocks this direction"""
        return self.value[2]


def direction_from_drag(pointer_x, pointer_y, center_x, center_y, cell_size):
    """
    Translate a drag into a direction

    The pointer must be more than one cell away from the player's cell center
    along either axis. The dominant axis picks horizontal or vertical, its
    sign picks the direction.

    Args:
        pointer_x, pointer_y: Pointer position in pixels
        center_x, center_y: Center of the player's cell in pixels
        cell_size: Cell size in pixels

    Returns:
        Direction or None if the drag is too short
    """
    dx = pointer_x - center_x
    dy = pointer_y - center_y
    abs_dx = abs(dx)
    abs_dy = abs(dy)

    if abs_dx <= cell_size and abs_dy <= cell_size:
        return None

    if abs_dx > abs_dy:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


def direction_from_keys(pressed, bindings):
    """
    Pick the first direction whose key is held

    Args:
        pressed: Sequence indexed by key code (pygame.key.get_pressed())
        bindings: List of (key_codes, Direction) in priority order

    Returns:
        Direction or None
    """
    for key_codes, direction in bindings:
        for key in key_codes:
            if pressed[key]:
                return direction
    return None
