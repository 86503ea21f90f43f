"""
Othello game module.
Drives a single game: owns the board, tracks history and detects the end.
"""
import logging
from typing import List, Tuple, Optional
import numpy as np

from ..exceptions import GameOverError
from .board import BoardState
from .history import MoveHistory, MoveRecord
from .stone import Stone

logger = logging.getLogger(__name__)


class ReversiGame:
    """
    Main game class that owns a BoardState and manages the game flow.

    Callers (a UI, the arena, a test) place stones through make_move, pass
    through pass_turn, and can step back and forth with undo and redo.
    """

    def __init__(self, size: int = 8, board: Optional[BoardState] = None):
        """
        Initialize a new game.

        Args:
            size: Size of the board (default: 8 for standard Othello)
            board: Optional starting position; copied, and overrides size
        """
        if board is not None:
            self.board = board.copy()
            self.size = board.size
        else:
            self.board = BoardState(size)
            self.size = size
        self._initial = self.board.copy()
        self.history = MoveHistory()

    def reset(self) -> None:
        """Reset the game to its starting position."""
        self.board = self._initial.copy()
        self.history = MoveHistory()

    def make_move(self, row: int, col: int) -> bool:
        """
        Place a stone for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was legal and made, False otherwise

        Raises:
            GameOverError: If neither player can move any more
        """
        self._ensure_not_over()

        stone = self.board.side_to_move
        flipped = self.board.play(row, col)
        if not flipped:
            return False

        self.history.push(MoveRecord(stone, (row, col), tuple(flipped)))
        logger.debug("%s plays (%d, %d), flipping %d", stone, row, col, len(flipped))
        return True

    def pass_turn(self) -> bool:
        """
        Pass the turn. Only allowed when the current player has no legal move.

        Returns:
            bool: True if the turn was passed, False if a move was available
        """
        self._ensure_not_over()

        if self.board.has_legal_move():
            return False

        stone = self.board.side_to_move
        self.board.pass_turn()
        self.history.push(MoveRecord(stone))
        logger.debug("%s passes", stone)
        return True

    def undo(self) -> bool:
        """
        Revert the most recent turn.

        Returns:
            bool: True if a turn was reverted, False at the start of the game
        """
        record = self.history.previous()
        if record is None:
            return False

        if not record.is_pass:
            row, col = record.location
            self.board._set_cell(row, col, None)
            for r, c in record.flipped:
                self.board._set_cell(r, c, record.stone.opposite())
        self.board._set_side_to_move(record.stone)
        return True

    def redo(self) -> bool:
        """
        Re-apply the next undone turn.

        Returns:
            bool: True if a turn was re-applied, False if nothing was undone
        """
        record = self.history.next()
        if record is None:
            return False

        if record.is_pass:
            self.board.pass_turn()
        else:
            self.board.play(*record.location)
        return True

    def _ensure_not_over(self) -> None:
        if self.is_game_over():
            raise GameOverError("The game is over; no further moves can be made")

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) tuples representing valid moves
        """
        return self.board.legal_moves()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.board.is_terminal()

    def get_winner(self) -> Optional[Stone]:
        """
        Get the winner of the game.

        Returns:
            The winning stone, or None if the game is not over or drawn
        """
        if not self.is_game_over():
            return None
        return self.board.winner()

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.score()

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of BoardState cell codes
        """
        return self.board.get_board_state()

    def get_current_player(self) -> Stone:
        """Get the stone of the player about to move."""
        return self.board.side_to_move

    def get_move_history(self) -> List[MoveRecord]:
        """
        Get the turns played up to the current position.

        Returns:
            List of MoveRecord, oldest first
        """
        return self.history.records()

    def copy(self) -> 'ReversiGame':
        """Create a copy of the game at its current position, without history."""
        return ReversiGame(board=self.board)

    def __str__(self) -> str:
        """String representation of the game state."""
        rows = [" ".join(line) for line in str(self.board).splitlines()]
        status = ["\n".join(rows)]
        status.append(f"Current player: {self.board.side_to_move}")

        black, white = self.get_score()
        status.append(f"Score - Black: {black}, White: {white}")

        if self.is_game_over():
            winner = self.get_winner()
            if winner is None:
                status.append("Game over! It's a draw!")
            else:
                status.append(f"Game over! {winner} wins!")

        return "\n".join(status)
