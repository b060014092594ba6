"""
Base enumerations used throughout the data models.
"""

from enum import Enum


class StepAction(str, Enum):
    """What a ``reduce_while`` reducer asks for after an element."""

    CONT = "cont"  # Keep folding
    HALT = "halt"  # Stop, current accumulator is the result


class Direction(str, Enum):
    """Named unit moves on the grid. ``up`` is positive y."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DIRECTION_DELTAS[self]


_DIRECTION_DELTAS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
