"""
Move history with undo/redo navigation.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .stone import Stone


@dataclass(frozen=True)
class MoveRecord:
    """
    A single turn: the stone that acted, where it was placed and what flipped.
    A pass has no location and no flipped stones.
    """
    stone: Stone
    location: Optional[Tuple[int, int]] = None
    flipped: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)

    @property
    def is_pass(self) -> bool:
        return self.location is None


class MoveHistory:
    """
    Records the changes made by each turn, not the resulting positions.

    Works like a stack with a movable cursor: stepping back and forth keeps
    the records, but pushing a new record drops everything after the cursor.
    A cursor of -1 means the view is at the position before the first move.
    """

    def __init__(self):
        self._records: List[MoveRecord] = []
        self._position = -1

    def push(self, record: MoveRecord) -> None:
        """Add a record after the cursor, discarding any undone records."""
        if not self.at_last_move():
            del self._records[self._position + 1:]
        self._records.append(record)
        self._position += 1

    def current(self) -> Optional[MoveRecord]:
        """The record that produced the current position, or None at the start."""
        if self.at_before_first_move():
            return None
        return self._records[self._position]

    def previous(self) -> Optional[MoveRecord]:
        """Return the current record and step the cursor back one."""
        record = self.current()
        if not self.at_before_first_move():
            self._position -= 1
        return record

    def next(self) -> Optional[MoveRecord]:
        """Step the cursor forward and return the record there, if any."""
        if self.at_last_move():
            return None
        self._position += 1
        return self._records[self._position]

    def peek_next(self) -> Optional[MoveRecord]:
        """Return the record after the cursor without moving."""
        if self.at_last_move():
            return None
        return self._records[self._position + 1]

    @property
    def position(self) -> int:
        return self._position

    def at_last_move(self) -> bool:
        return self._position == len(self._records) - 1

    def at_before_first_move(self) -> bool:
        return self._position == -1

    def records(self) -> List[MoveRecord]:
        """All records up to and including the cursor."""
        return self._records[:self._position + 1]

    def __len__(self) -> int:
        return len(self._records)
