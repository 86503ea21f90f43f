"""
Board module for Othello.
Holds a board position, resolves legal moves and stone flips, and reads and
writes the text snapshot format.
"""
from typing import List, Tuple, Optional
import numpy as np

from ..exceptions import BoardSizeError, SnapshotFormatError
from .direction import Direction
from .stone import Stone

Move = Tuple[int, int]


class BoardState:
    """
    A board position: a square grid of optional stones plus the side to move.

    The grid is stored as a numpy array of EMPTY/BLACK/WHITE cell codes. The
    position only changes through apply_move (or play) and pass_turn.
    """

    # Cell codes
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    EMPTY_SYMBOL = '*'

    _CELL = {Stone.BLACK: BLACK, Stone.WHITE: WHITE}
    _STONE = {BLACK: Stone.BLACK, WHITE: Stone.WHITE}

    def __init__(self, size: int = 8):
        """
        Create the canonical starting position.

        Args:
            size: Side length of the board. Must be even and at least 4.

        Raises:
            BoardSizeError: If the size is odd or smaller than 4
        """
        if size < 4 or size % 2 != 0:
            raise BoardSizeError(f"Board size must be an even number of at least 4, got {size}")

        self.size = size
        self._side_to_move = Stone.BLACK
        self._board = np.zeros((size, size), dtype=np.int8)

        mid = size // 2
        self._board[mid - 1, mid - 1] = self.WHITE
        self._board[mid, mid] = self.WHITE
        self._board[mid - 1, mid] = self.BLACK
        self._board[mid, mid - 1] = self.BLACK

    @classmethod
    def _from_grid(cls, grid: np.ndarray, side_to_move: Stone) -> 'BoardState':
        """Build a state around an existing grid without re-seeding the centre."""
        state = cls.__new__(cls)
        state.size = grid.shape[0]
        state._side_to_move = side_to_move
        state._board = grid
        return state

    @property
    def side_to_move(self) -> Stone:
        """The stone that the next apply_move call will place."""
        return self._side_to_move

    def copy(self) -> 'BoardState':
        """Create a deep copy of the position."""
        return BoardState._from_grid(self._board.copy(), self._side_to_move)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def stone_at(self, row: int, col: int) -> Optional[Stone]:
        """
        Get the stone on a square.

        Returns:
            The stone, or None if the square is empty or off the board
        """
        if not self.in_bounds(row, col):
            return None
        return self._STONE.get(int(self._board[row, col]))

    def flipping_directions(self, stone: Stone, row: int, col: int) -> List[Direction]:
        """
        Find every direction in which placing a stone would flip something.

        A direction qualifies when the squares next to (row, col) hold one or
        more stones of the opposite colour closed off by a stone of the same
        colour, with no gap in between.

        Args:
            stone: The stone that would be placed
            row: Row of the hypothetical placement
            col: Column of the hypothetical placement

        Returns:
            Qualifying directions, clockwise starting from TOP. May be empty.
        """
        own = self._CELL[stone]
        result = []

        for direction in Direction:
            pos = direction.step(row, col, self.size)
            opposite_seen = False
            while pos is not None:
                cell = self._board[pos]
                if cell == self.EMPTY:
                    break
                if cell == own:
                    if opposite_seen:
                        result.append(direction)
                    break
                opposite_seen = True
                pos = direction.step(pos[0], pos[1], self.size)

        return result

    def play(self, row: int, col: int) -> List[Move]:
        """
        Place the side to move's stone and flip the sandwiched stones.

        An illegal move (occupied square, or nothing to flip) leaves the
        position untouched.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            Coordinates of the flipped stones; empty if the move was illegal

        Raises:
            IndexError: If the coordinate is off the board
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Square ({row}, {col}) is outside the {self.size}x{self.size} board")

        if self._board[row, col] != self.EMPTY:
            return []

        stone = self._side_to_move
        directions = self.flipping_directions(stone, row, col)
        if not directions:
            return []

        own = self._CELL[stone]
        opponent = self._CELL[stone.opposite()]
        self._board[row, col] = own

        flipped = []
        for direction in directions:
            pos = direction.step(row, col, self.size)
            while pos is not None and self._board[pos] == opponent:
                self._board[pos] = own
                flipped.append(pos)
                pos = direction.step(pos[0], pos[1], self.size)

        self._side_to_move = stone.opposite()
        return flipped

    def apply_move(self, row: int, col: int) -> int:
        """
        Make a move for the side to move.

        Returns:
            The number of stones flipped, or 0 if the move was illegal
        """
        return len(self.play(row, col))

    def pass_turn(self) -> None:
        """Hand the move to the other player without touching the grid."""
        self._side_to_move = self._side_to_move.opposite()

    def legal_moves(self, stone: Optional[Stone] = None) -> List[Move]:
        """
        Get every legal move, scanning the board row by row.

        Args:
            stone: The stone to check for. If None, uses the side to move.

        Returns:
            List of (row, col) tuples
        """
        if stone is None:
            stone = self._side_to_move

        moves = []
        for row, col in np.argwhere(self._board == self.EMPTY):
            row, col = int(row), int(col)
            if self.flipping_directions(stone, row, col):
                moves.append((row, col))
        return moves

    def has_legal_move(self, stone: Optional[Stone] = None) -> bool:
        """Check if the given stone (default: side to move) can play anywhere."""
        if stone is None:
            stone = self._side_to_move
        for row, col in np.argwhere(self._board == self.EMPTY):
            if self.flipping_directions(stone, int(row), int(col)):
                return True
        return False

    def is_terminal(self) -> bool:
        """Check if neither player has a legal move."""
        return not self.has_legal_move(Stone.BLACK) and not self.has_legal_move(Stone.WHITE)

    def count(self, stone: Stone) -> int:
        """Count the squares holding the given stone."""
        return int(np.count_nonzero(self._board == self._CELL[stone]))

    def empty_count(self) -> int:
        """Count the empty squares."""
        return int(np.count_nonzero(self._board == self.EMPTY))

    def score(self) -> Tuple[int, int]:
        """
        Get the current score.

        Returns:
            Tuple of (black_count, white_count)
        """
        return (self.count(Stone.BLACK), self.count(Stone.WHITE))

    def winner(self) -> Optional[Stone]:
        """The stone with more squares, or None on a tie."""
        black, white = self.score()
        if black > white:
            return Stone.BLACK
        if white > black:
            return Stone.WHITE
        return None

    def get_board_state(self) -> np.ndarray:
        """
        Get the grid as a numpy array of cell codes.

        Returns:
            A copy of the size x size array (EMPTY, BLACK or WHITE)
        """
        return self._board.copy()

    def _set_cell(self, row: int, col: int, stone: Optional[Stone]) -> None:
        # Used by ReversiGame to revert a recorded move.
        self._board[row, col] = self.EMPTY if stone is None else self._CELL[stone]

    def _set_side_to_move(self, stone: Stone) -> None:
        self._side_to_move = stone

    def to_text(self) -> str:
        """
        Encode the position as a text snapshot.

        The first line is the side to move (B or W), the second line is the
        board size, then one line per row using B, W and * for empty.
        """
        return f"{self._side_to_move.symbol}\n{self.size}\n{self}"

    @classmethod
    def from_text(cls, text: str) -> 'BoardState':
        """
        Parse a text snapshot produced by to_text.

        Raises:
            SnapshotFormatError: If the text is not a well-formed snapshot
        """
        lines = text.splitlines()
        if len(lines) < 2:
            raise SnapshotFormatError("Snapshot must start with a side-to-move line and a size line")

        side_token = lines[0].strip()
        if side_token not in (Stone.BLACK.symbol, Stone.WHITE.symbol):
            raise SnapshotFormatError(f"Invalid side to move: {side_token!r}")
        side_to_move = Stone.from_symbol(side_token)

        try:
            size = int(lines[1].strip())
        except ValueError as e:
            raise SnapshotFormatError(f"Invalid board size: {lines[1]!r}") from e
        if size < 4 or size % 2 != 0:
            raise SnapshotFormatError(f"Board size must be an even number of at least 4, got {size}")

        rows = lines[2:2 + size]
        if len(rows) < size:
            raise SnapshotFormatError(f"Expected {size} board rows, found {len(rows)}")
        if any(line.strip() for line in lines[2 + size:]):
            raise SnapshotFormatError("Unexpected content after the last board row")

        symbols = {
            cls.EMPTY_SYMBOL: cls.EMPTY,
            Stone.BLACK.symbol: cls.BLACK,
            Stone.WHITE.symbol: cls.WHITE,
        }
        grid = np.zeros((size, size), dtype=np.int8)
        for row, line in enumerate(rows):
            if len(line) != size:
                raise SnapshotFormatError(f"Row {row} has {len(line)} squares, expected {size}")
            for col, char in enumerate(line):
                if char not in symbols:
                    raise SnapshotFormatError(f"Invalid square {char!r} at ({row}, {col})")
                grid[row, col] = symbols[char]

        return cls._from_grid(grid, side_to_move)

    def save(self, path: str) -> None:
        """Write the position to a snapshot file."""
        with open(path, 'w') as f:
            f.write(self.to_text() + "\n")

    @classmethod
    def load(cls, path: str) -> 'BoardState':
        """Read a position from a snapshot file."""
        with open(path, 'r') as f:
            return cls.from_text(f.read())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (self._side_to_move is other._side_to_move
                and np.array_equal(self._board, other._board))

    # Positions are mutable
    __hash__ = None

    def __str__(self) -> str:
        """Grid rows using B, W and * for empty squares."""
        symbols = {
            self.EMPTY: self.EMPTY_SYMBOL,
            self.BLACK: Stone.BLACK.symbol,
            self.WHITE: Stone.WHITE.symbol,
        }
        return "\n".join(
            "".join(symbols[int(cell)] for cell in row) for row in self._board
        )

    def __repr__(self) -> str:
        return f"BoardState(size={self.size}, side_to_move={self._side_to_move.name})"
