"""
The eight compass directions used to walk the board.
"""
from enum import Enum
from typing import Optional, Tuple

# (row delta, col delta), indexed clockwise from TOP
_OFFSETS = [
    (-1, 0),   # Top
    (-1, 1),   # Top-right
    (0, 1),    # Right
    (1, 1),    # Bottom-right
    (1, 0),    # Bottom
    (1, -1),   # Bottom-left
    (0, -1),   # Left
    (-1, -1),  # Top-left
]

_NAMES = [
    "Top", "Top-right", "Right", "Bottom-right",
    "Bottom", "Bottom-left", "Left", "Top-left",
]


class Direction(Enum):
    """
    A compass direction. Members are declared clockwise starting from TOP,
    so iterating over the enum visits them in that order.
    """

    TOP = 0
    TOP_RIGHT = 1
    RIGHT = 2
    BOTTOM_RIGHT = 3
    BOTTOM = 4
    BOTTOM_LEFT = 5
    LEFT = 6
    TOP_LEFT = 7

    def clockwise(self) -> 'Direction':
        """Return the direction 45 degrees clockwise from this one."""
        return Direction((self.value + 1) % 8)

    def counter_clockwise(self) -> 'Direction':
        """Return the direction 45 degrees counter-clockwise from this one."""
        return Direction((self.value - 1) % 8)

    @property
    def offset(self) -> Tuple[int, int]:
        """The (row, col) delta of a single step."""
        return _OFFSETS[self.value]

    def step(self, row: int, col: int, size: int) -> Optional[Tuple[int, int]]:
        """
        Move one square in this direction.

        Args:
            row: Starting row
            col: Starting column
            size: Side length of the board being walked

        Returns:
            The neighbouring (row, col), or None if it is off the board
        """
        dr, dc = self.offset
        row += dr
        col += dc
        if 0 <= row < size and 0 <= col < size:
            return (row, col)
        return None

    def __str__(self) -> str:
        return _NAMES[self.value]
