"""
Automated players.

Every player answers choose_move(board) with a (row, col) for the side to move,
or None when that side has no legal move and has to pass. The board passed in
is never modified.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Type
import numpy as np

from ..game import BoardState
from .tree import GameTree

logger = logging.getLogger(__name__)

Move = Tuple[int, int]


class Player(ABC):
    """Base class for automated players."""

    name = "player"

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Seed for the player's random generator, used to break ties
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    @abstractmethod
    def choose_move(self, board: BoardState) -> Optional[Move]:
        """
        Pick a move for board.side_to_move.

        Returns:
            (row, col) of the chosen move, or None if there is no legal move
        """

    def _pick(self, moves: List[Move]) -> Move:
        return moves[int(self.rng.integers(len(moves)))]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seed={self.seed})"


class RandomPlayer(Player):
    """Plays a uniformly random legal move."""

    name = "random"

    def choose_move(self, board: BoardState) -> Optional[Move]:
        # Shuffle every square, then take the first legal one
        stone = board.side_to_move
        for index in self.rng.permutation(board.size * board.size):
            row, col = divmod(int(index), board.size)
            if board.stone_at(row, col) is None and board.flipping_directions(stone, row, col):
                return (row, col)
        return None


class GreedyPlayer(Player):
    """Plays the move that flips the most stones right now."""

    name = "greedy"

    def choose_move(self, board: BoardState) -> Optional[Move]:
        best = 0
        best_moves: List[Move] = []
        for move in board.legal_moves():
            flipped = board.copy().apply_move(*move)
            if flipped > best:
                best = flipped
                best_moves = [move]
            elif flipped == best:
                best_moves.append(move)

        if not best_moves:
            return None
        return self._pick(best_moves)


class LookaheadPlayer(Player):
    """
    Looks a fixed number of its own turns ahead and plays towards the future
    with the most stones on average.

    The search builds the full game tree to 2 * turns - 1 plies (its own
    turns plus the opponent's turns in between), scores each leaf by the
    player's stone count and each internal node by the mean of its children.
    This is an average over possible futures, not minimax.
    """

    name = "lookahead"

    def __init__(self, turns: int = 2, seed: Optional[int] = None):
        """
        Args:
            turns: Number of own turns to look ahead. The tree grows as
                branching ** (2 * turns - 1), so keep this small.
            seed: Seed for the tie-breaking random generator
        """
        if turns < 1:
            raise ValueError(f"turns must be at least 1, got {turns}")
        super().__init__(seed)
        self.turns = turns

    def choose_move(self, board: BoardState) -> Optional[Move]:
        tree = GameTree(board)
        if not tree.state.has_legal_move():
            return None

        depth = 2 * self.turns - 1
        for _ in range(depth):
            tree.expand_all_leaves()

        stone = board.side_to_move
        scores = tree.child_scores(stone)
        best_score = max(scores)
        best_moves = [child.previous_move for child, score in zip(tree, scores) if score == best_score]

        move = self._pick(best_moves)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Lookahead %s: %d nodes, best score %.3f over %d move(s), playing %s",
                         stone, tree.node_count(), best_score, len(best_moves), move)
        return move

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(turns={self.turns}, seed={self.seed})"


PLAYER_TYPES: Dict[str, Type[Player]] = {
    RandomPlayer.name: RandomPlayer,
    GreedyPlayer.name: GreedyPlayer,
    LookaheadPlayer.name: LookaheadPlayer,
}


def create_player(kind: str, seed: Optional[int] = None, **kwargs) -> Player:
    """
    Create a player by kind.

    Args:
        kind: One of 'random', 'greedy' or 'lookahead'
        seed: Seed for the player's random generator
        **kwargs: Extra constructor arguments (e.g. turns for 'lookahead')

    Raises:
        ValueError: If the kind is unknown
    """
    if kind not in PLAYER_TYPES:
        raise ValueError(f"Unknown player kind {kind!r}; expected one of {sorted(PLAYER_TYPES)}")
    return PLAYER_TYPES[kind](seed=seed, **kwargs)
