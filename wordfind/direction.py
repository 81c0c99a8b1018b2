"""
Direction module for word search puzzles.
Defines the eight compass directions a word may run in.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Directions for word placement, in screen coordinates (y grows downward)."""
    RIGHT = "right"
    UP_RIGHT = "up_right"
    UP = "up"
    UP_LEFT = "up_left"
    LEFT = "left"
    DOWN_LEFT = "down_left"
    DOWN = "down"
    DOWN_RIGHT = "down_right"
    
    def incrementors(self) -> Tuple[int, int]:
        """Get the (dx, dy) step for this direction."""
        return _INCREMENTORS[self]
    
    @classmethod
    def from_string(cls, s: str) -> 'Direction':
        """Create Direction from string."""
        for direction in cls:
            if direction.value == s.strip().lower():
                return direction
        raise ValueError(f"Invalid direction: {s}")
    
    def __str__(self):
        return self.value


_INCREMENTORS = {
    Direction.RIGHT: (1, 0),
    Direction.UP_RIGHT: (1, -1),
    Direction.UP: (0, -1),
    Direction.UP_LEFT: (-1, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN_LEFT: (-1, 1),
    Direction.DOWN: (0, 1),
    Direction.DOWN_RIGHT: (1, 1),
}

# Easy mode leaves out UP_LEFT, LEFT and DOWN_LEFT
EASY_DIRECTIONS = (
    Direction.RIGHT,
    Direction.UP_RIGHT,
    Direction.UP,
    Direction.DOWN,
    Direction.DOWN_RIGHT,
)

HARD_DIRECTIONS = tuple(Direction)
