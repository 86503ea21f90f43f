"""
Stone colours.
"""
from enum import Enum


class Stone(Enum):
    """A stone colour. Black always moves first."""

    BLACK = 'B'
    WHITE = 'W'

    # Player order aliases
    FIRST = 'B'
    SECOND = 'W'

    def opposite(self) -> 'Stone':
        """Return the stone of the other colour."""
        return Stone.WHITE if self is Stone.BLACK else Stone.BLACK

    @property
    def symbol(self) -> str:
        """One-letter symbol used in text snapshots."""
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Stone':
        """Look up a stone by its snapshot symbol ('B' or 'W')."""
        return cls(symbol)

    def __str__(self) -> str:
        return self.name.capitalize()
